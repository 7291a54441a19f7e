"""
Portfolio Store

Static holdings snapshot, loaded once at startup and read-only afterwards.
"""

import json
import logging
import math
from dataclasses import dataclass
from typing import Iterator, List, Optional

from ..errors import PortfolioError

logger = logging.getLogger(__name__)

NUMBER = (int, float)

# (json key, attribute, accepted types, default) - default None means required
HOLDING_FIELDS = [
    ('tradingSymbol', 'trading_symbol', (str,), None),
    ('exchange', 'exchange', (str,), None),
    ('quantity', 'quantity', NUMBER, None),
    ('average_price', 'average_price', NUMBER, None),
    ('last_price', 'last_price', NUMBER, None),
    ('day_change', 'day_change', NUMBER, None),
    ('day_change_percentage', 'day_change_percentage', NUMBER, None),
    ('id', 'id', (str,), ''),
    ('instrumentToken', 'instrument_token', (int,), 0),
    ('isin', 'isin', (str,), ''),
    ('product', 'product', (str,), ''),
    ('price', 'price', NUMBER, 0.0),
    ('usedQuantity', 'used_quantity', NUMBER, 0),
    ('t1Quantity', 't1_quantity', NUMBER, 0),
    ('realisedQuantity', 'realised_quantity', NUMBER, 0),
    ('authorisedQuantity', 'authorised_quantity', NUMBER, 0),
    ('openingQuantity', 'opening_quantity', NUMBER, 0),
    ('collateralQuantity', 'collateral_quantity', NUMBER, 0),
    ('collateralType', 'collateral_type', (str,), ''),
    ('discrepancy', 'discrepancy', (bool,), False),
    ('pnl', 'pnl', NUMBER, 0.0),
    ('userKiteId', 'user_kite_id', (str,), ''),
    ('authorised_date', 'authorised_date', (str,), ''),
    ('close_price', 'close_price', NUMBER, 0.0),
]


@dataclass(frozen=True)
class Holding:
    """One portfolio position as reported by the broker"""
    trading_symbol: str
    exchange: str
    quantity: float
    average_price: float
    last_price: float
    day_change: float
    day_change_percentage: float
    id: str = ''
    instrument_token: int = 0
    isin: str = ''
    product: str = ''
    price: float = 0.0
    used_quantity: float = 0
    t1_quantity: float = 0
    realised_quantity: float = 0
    authorised_quantity: float = 0
    opening_quantity: float = 0
    collateral_quantity: float = 0
    collateral_type: str = ''
    discrepancy: bool = False
    pnl: float = 0.0
    user_kite_id: str = ''
    authorised_date: str = ''
    close_price: float = 0.0

    @classmethod
    def from_record(cls, record: dict) -> 'Holding':
        """Build a Holding from one raw portfolio record

        Raises:
            PortfolioError: required key missing, value of the wrong type, or a
                non-finite number (json accepts NaN and Infinity)
        """
        if not isinstance(record, dict):
            raise PortfolioError(f"Holding record must be an object, got {type(record).__name__}")

        values = {}
        for key, attr, types, default in HOLDING_FIELDS:
            if key not in record:
                if default is None:
                    raise PortfolioError(f"Holding record missing required field '{key}'")
                values[attr] = default
                continue

            value = record[key]
            # bool is an int subclass; only accept it where a bool is expected
            if isinstance(value, bool) and bool not in types:
                raise PortfolioError(f"Field '{key}' must be numeric, got bool")
            if not isinstance(value, types):
                raise PortfolioError(
                    f"Field '{key}' has invalid type {type(value).__name__}"
                )
            if isinstance(value, float) and not math.isfinite(value):
                raise PortfolioError(f"Field '{key}' must be finite, got {value}")
            values[attr] = value

        return cls(**values)


class Portfolio:
    """Read-only collection of holdings, looked up by trading symbol"""

    def __init__(self, holdings: List[Holding]):
        self._holdings = tuple(holdings)

    def get(self, symbol: str) -> Optional[Holding]:
        """Exact, case-sensitive lookup; first match wins"""
        for holding in self._holdings:
            if holding.trading_symbol == symbol:
                return holding
        return None

    def __iter__(self) -> Iterator[Holding]:
        return iter(self._holdings)

    def __len__(self) -> int:
        return len(self._holdings)


def parse_portfolio(data) -> Portfolio:
    """Build a Portfolio from decoded JSON (a list of holding records)"""
    if not isinstance(data, list):
        raise PortfolioError("Portfolio must be a JSON array of holdings")

    holdings = []
    for index, record in enumerate(data):
        try:
            holdings.append(Holding.from_record(record))
        except PortfolioError as e:
            raise PortfolioError(f"Invalid holding at index {index}: {e}") from e

    return Portfolio(holdings)


def load_portfolio(path: str) -> Portfolio:
    """Read the static portfolio snapshot from disk

    Args:
        path: Path to a JSON file containing an array of holding records

    Returns:
        Portfolio

    Raises:
        PortfolioError: file unreadable, not JSON, or a record is malformed
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except OSError as e:
        raise PortfolioError(f"Cannot read portfolio file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise PortfolioError(f"Portfolio file {path} is not valid JSON: {e}") from e

    portfolio = parse_portfolio(data)
    logger.info("Loaded %d holdings from %s", len(portfolio), path)
    return portfolio
