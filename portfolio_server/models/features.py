"""
Feature Engineering

Maps a holding to the 2-feature input of the direction model.
"""

from typing import Iterable, Tuple

import numpy as np

from ..data.portfolio import Holding
from ..errors import InvalidInputError

FEATURE_COLS = ['day_change_ratio', 'cost_deviation']


def extract_features(holding: Holding) -> np.ndarray:
    """Build the feature vector for one holding

    Features:
        day_change_ratio: day_change_percentage scaled to unit (1.5% -> 0.015)
        cost_deviation: relative distance of last price from average cost

    Raises:
        InvalidInputError: average_price is zero
    """
    if holding.average_price == 0:
        raise InvalidInputError(
            f"{holding.trading_symbol}: average_price is 0, cannot compute cost deviation"
        )

    return np.array([
        holding.day_change_percentage / 100,
        (holding.last_price - holding.average_price) / holding.average_price,
    ], dtype=float)


def direction_label(holding: Holding) -> int:
    """1 if the holding closed the day up, else 0"""
    return 1 if holding.day_change > 0 else 0


def build_training_set(holdings: Iterable[Holding]) -> Tuple[np.ndarray, np.ndarray]:
    """Stack features and labels for every holding

    Returns:
        (X, y) with X of shape (n, 2) and y of shape (n,)
    """
    rows, labels = [], []
    for holding in holdings:
        rows.append(extract_features(holding))
        labels.append(direction_label(holding))

    X = np.array(rows, dtype=float).reshape(-1, len(FEATURE_COLS))
    y = np.array(labels, dtype=int)
    return X, y
