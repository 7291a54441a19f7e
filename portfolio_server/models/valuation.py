"""
Valuation Projection

Turns a predicted direction into profit/loss estimates per horizon.
"""

from dataclasses import dataclass

from ..config import HORIZON_CHANGES
from ..data.portfolio import Holding

DIRECTIONS = ('Up', 'Down')


@dataclass(frozen=True)
class PredictionResult:
    prediction: str
    profit_loss: float
    current_value: float
    potential_value: float

    def to_dict(self):
        return {
            'prediction': self.prediction,
            'profitLoss': self.profit_loss,
            'currentValue': self.current_value,
            'potentialValue': self.potential_value,
        }


def potential_change(horizon: str, direction: str) -> float:
    """Signed fractional move for a horizon ('day', 'week', 'month')"""
    if horizon not in HORIZON_CHANGES:
        raise ValueError(f"Unknown horizon: {horizon}")
    if direction not in DIRECTIONS:
        raise ValueError(f"Unknown direction: {direction}")

    change = HORIZON_CHANGES[horizon]
    return change if direction == 'Up' else -change


def project_value(holding: Holding, direction: str, horizon: str) -> PredictionResult:
    current_value = holding.last_price * holding.quantity
    potential_value = current_value * (1 + potential_change(horizon, direction))

    return PredictionResult(
        prediction=direction,
        profit_loss=potential_value - current_value,
        current_value=current_value,
        potential_value=potential_value,
    )
