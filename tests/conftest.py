"""
Pytest Configuration and Shared Fixtures

Provides common fixtures for all tests.
"""

import pytest
from unittest.mock import MagicMock

from portfolio_server.app import create_app
from portfolio_server.data.gemini import GeminiClient
from portfolio_server.data.portfolio import Holding, parse_portfolio
from portfolio_server.models.loader import build_context
from portfolio_server.models.perceptron import DirectionModel

# Keep training fast in tests
TEST_MAX_ITERATIONS = 300


def make_record(symbol, last_price, average_price, day_change, day_change_percentage, quantity=10):
    """Minimal broker holding record with the required keys"""
    return {
        'tradingSymbol': symbol,
        'exchange': 'NSE',
        'quantity': quantity,
        'average_price': average_price,
        'last_price': last_price,
        'day_change': day_change,
        'day_change_percentage': day_change_percentage,
    }


@pytest.fixture
def sample_records():
    """Six holdings, three up and three down on the day"""
    return [
        make_record('INFY', 1517.2, 1385.4, 15.45, 1.028, quantity=12),
        make_record('TCS', 3774.35, 3985.9, -15.05, -0.397, quantity=5),
        make_record('HDFCBANK', 1621.15, 1512.6, 19.55, 1.221, quantity=20),
        make_record('RELIANCE', 2783.0, 2954.5, -5.75, -0.206, quantity=8),
        make_record('ITC', 440.55, 398.2, 2.2, 0.502, quantity=100),
        make_record('SBIN', 788.7, 812.4, -10.5, -1.314, quantity=30),
    ]


@pytest.fixture
def sample_portfolio(sample_records):
    return parse_portfolio(sample_records)


@pytest.fixture
def sample_holding():
    """Holding worth exactly 10,000"""
    return Holding(
        trading_symbol='ACME',
        exchange='NSE',
        quantity=100,
        average_price=80.0,
        last_price=100.0,
        day_change=1.5,
        day_change_percentage=1.5,
    )


@pytest.fixture
def mock_genai_client():
    """Stand-in for genai.Client"""
    client = MagicMock()
    client.models.generate_content.return_value = MagicMock(text='{"symbol": "INFY"}')
    return client


@pytest.fixture
def gemini_client(mock_genai_client):
    return GeminiClient(api_key='test-key', model_name='test-model', client=mock_genai_client)


@pytest.fixture
def server_context(sample_portfolio, gemini_client):
    return build_context(
        portfolio=sample_portfolio,
        model=DirectionModel(max_iterations=TEST_MAX_ITERATIONS),
        enrichment=gemini_client,
    )


@pytest.fixture
def client(server_context):
    app = create_app(server_context)
    app.config['TESTING'] = True
    return app.test_client()


@pytest.fixture
def record_factory():
    return make_record


@pytest.fixture
def untrained_model():
    return DirectionModel(max_iterations=TEST_MAX_ITERATIONS)
