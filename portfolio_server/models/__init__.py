"""Direction model, features and valuation"""

from .features import (
    extract_features,
    direction_label,
    build_training_set,
)
from .perceptron import DirectionModel, TrainingReport
from .valuation import PredictionResult, potential_change, project_value
from .store import ServerContext, CONTEXT_KEY
from .loader import build_context, train_model
