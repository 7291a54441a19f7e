"""
Model Storage

Application state built once at startup and handed to the Flask app.
"""

from dataclasses import dataclass

from ..data.gemini import GeminiClient
from ..data.portfolio import Portfolio
from .perceptron import DirectionModel, TrainingReport

CONTEXT_KEY = 'SERVER_CONTEXT'


@dataclass(frozen=True)
class ServerContext:
    portfolio: Portfolio        # read-only holdings snapshot
    model: DirectionModel       # trained, frozen direction model
    enrichment: GeminiClient    # per-symbol enrichment client
    training: TrainingReport
