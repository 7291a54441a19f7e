"""
Direction Model

2-4-1 feed-forward network trained once on the whole portfolio, then frozen.
"""

import logging
from dataclasses import dataclass

import numpy as np
from scipy.special import expit
from sklearn.neural_network import MLPClassifier

from ..config import (
    HIDDEN_UNITS,
    LEARNING_RATE,
    MAX_ITERATIONS,
    ERROR_THRESHOLD,
    RANDOM_STATE,
    DECISION_THRESHOLD,
)
from ..errors import TrainingError

logger = logging.getLogger(__name__)

CLASSES = np.array([0, 1])


@dataclass(frozen=True)
class TrainingReport:
    iterations: int
    error: float
    converged: bool


class DirectionModel:
    """Binary up/down classifier over holding features

    Each training iteration is one plain gradient-descent pass over the full
    training set (no momentum, no weight penalty). sklearn runs the first pass
    and owns the weights; later passes update coefs_/intercepts_ in place.
    Training stops once the mean squared error of the output activation drops
    below error_threshold or after max_iterations passes, whichever comes first.
    """

    def __init__(
        self,
        hidden_units: int = HIDDEN_UNITS,
        learning_rate: float = LEARNING_RATE,
        max_iterations: int = MAX_ITERATIONS,
        error_threshold: float = ERROR_THRESHOLD,
        random_state: int = RANDOM_STATE,
    ):
        self.hidden_units = hidden_units
        self.learning_rate = learning_rate
        self.max_iterations = max_iterations
        self.error_threshold = error_threshold
        self.report = None
        self._network = MLPClassifier(
            hidden_layer_sizes=(hidden_units,),
            activation='logistic',
            solver='sgd',
            learning_rate='constant',
            learning_rate_init=learning_rate,
            momentum=0.0,
            nesterovs_momentum=False,
            alpha=0.0,
            shuffle=False,
            random_state=random_state,
        )

    @property
    def trained(self) -> bool:
        return self.report is not None

    def train(self, X: np.ndarray, y: np.ndarray) -> TrainingReport:
        """Fit the network once

        Args:
            X: Feature matrix, shape (n, 2)
            y: Labels in {0, 1}, shape (n,)

        Returns:
            TrainingReport (iterations run, final error, whether it converged)

        Raises:
            RuntimeError: model was already trained
            TrainingError: invalid training data or the fit itself failed
        """
        if self.trained:
            raise RuntimeError("DirectionModel is frozen; it can only be trained once")

        X = np.asarray(X, dtype=float)
        y = np.asarray(y)
        if X.ndim != 2 or X.shape[0] == 0:
            raise TrainingError(f"Training set must be a non-empty 2D array, got shape {X.shape}")
        if X.shape[0] != y.shape[0]:
            raise TrainingError(f"Got {X.shape[0]} feature rows but {y.shape[0]} labels")
        if not np.all(np.isfinite(X)):
            raise TrainingError("Training features contain NaN or infinite values")
        if not np.isin(y, CLASSES).all():
            raise TrainingError("Training labels must be 0 or 1")

        if self.max_iterations < 1:
            raise TrainingError("max_iterations must be at least 1")

        # First pass through sklearn initializes coefs_/intercepts_ from random_state
        try:
            self._network.partial_fit(X, y, classes=CLASSES)
        except ValueError as e:
            raise TrainingError(f"Training failed: {e}") from e

        iterations = 1
        hidden, output = self._forward(X)
        error = float(np.mean((output - y) ** 2))
        while error >= self.error_threshold and iterations < self.max_iterations:
            self._backprop(X, y, hidden, output)
            iterations += 1
            hidden, output = self._forward(X)
            error = float(np.mean((output - y) ** 2))

        self.report = TrainingReport(
            iterations=iterations,
            error=error,
            converged=bool(error < self.error_threshold),
        )

        if self.report.converged:
            logger.info("Direction model converged after %d iterations (error %.5f)",
                        iterations, error)
        else:
            # Unconverged weights are still used
            logger.warning("Direction model did not converge in %d iterations (error %.5f)",
                           iterations, error)
        return self.report

    def _forward(self, X):
        """Hidden and output activations computed straight from the network weights"""
        hidden = expit(X @ self._network.coefs_[0] + self._network.intercepts_[0])
        output = expit(hidden @ self._network.coefs_[1] + self._network.intercepts_[1])
        return hidden, output[:, 0]

    def _backprop(self, X, y, hidden, output):
        """One full-batch gradient step on the log-loss, applied in place"""
        coefs, intercepts = self._network.coefs_, self._network.intercepts_
        delta_out = ((output - y) / X.shape[0])[:, np.newaxis]
        delta_hidden = (delta_out @ coefs[1].T) * hidden * (1 - hidden)

        coefs[1] -= self.learning_rate * (hidden.T @ delta_out)
        intercepts[1] -= self.learning_rate * delta_out.sum(axis=0)
        coefs[0] -= self.learning_rate * (X.T @ delta_hidden)
        intercepts[0] -= self.learning_rate * delta_hidden.sum(axis=0)

    def activate(self, features: np.ndarray) -> float:
        """Output activation in [0, 1] for a single feature vector"""
        if not self.trained:
            raise RuntimeError("DirectionModel has not been trained")
        X = np.asarray(features, dtype=float).reshape(1, -1)
        return float(self._network.predict_proba(X)[0, 1])

    def predict_direction(self, features: np.ndarray) -> str:
        return 'Up' if self.activate(features) > DECISION_THRESHOLD else 'Down'
