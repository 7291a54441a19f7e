"""
Unit Tests: Valuation Projection

- current value = last_price * quantity
- potential - current = current * signed horizon change
"""

import pytest

from portfolio_server.config import HORIZON_CHANGES, HORIZON_KEYS
from portfolio_server.models.valuation import PredictionResult, potential_change, project_value

EXPECTED_CHANGES = [
    ('day', 'Up', 0.01),
    ('day', 'Down', -0.01),
    ('week', 'Up', 0.03),
    ('week', 'Down', -0.03),
    ('month', 'Up', 0.05),
    ('month', 'Down', -0.05),
]


class TestPotentialChange:

    @pytest.mark.parametrize('horizon,direction,expected', EXPECTED_CHANGES)
    def test_table(self, horizon, direction, expected):
        assert potential_change(horizon, direction) == expected

    def test_unknown_horizon(self):
        with pytest.raises(ValueError):
            potential_change('year', 'Up')

    def test_unknown_direction(self):
        with pytest.raises(ValueError):
            potential_change('day', 'Sideways')

    def test_horizon_sets_match(self):
        assert set(HORIZON_CHANGES) == set(HORIZON_KEYS) == {'day', 'week', 'month'}


class TestProjectValue:

    def test_week_up_example(self, sample_holding):
        result = project_value(sample_holding, 'Up', 'week')
        assert result.prediction == 'Up'
        assert result.current_value == 10000
        assert result.potential_value == pytest.approx(10300)
        assert result.profit_loss == pytest.approx(300)

    @pytest.mark.parametrize('horizon,direction,expected', EXPECTED_CHANGES)
    def test_profit_loss_is_current_times_change(self, sample_holding, horizon, direction, expected):
        result = project_value(sample_holding, direction, horizon)
        assert result.profit_loss == pytest.approx(result.potential_value - result.current_value)
        assert result.profit_loss == pytest.approx(result.current_value * expected)

    def test_to_dict_keys(self, sample_holding):
        payload = project_value(sample_holding, 'Down', 'day').to_dict()
        assert payload == {
            'prediction': 'Down',
            'profitLoss': pytest.approx(-100),
            'currentValue': 10000,
            'potentialValue': pytest.approx(9900),
        }

    def test_result_is_immutable(self, sample_holding):
        result = project_value(sample_holding, 'Up', 'day')
        assert isinstance(result, PredictionResult)
        with pytest.raises(AttributeError):
            result.prediction = 'Down'
