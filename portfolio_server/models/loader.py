"""
Model Loader

Startup phase: load the portfolio and train the direction model. Must finish
(or raise) before the server binds.
"""

import logging
from typing import Optional

from ..config import PORTFOLIO_PATH, GEMINI_API_KEY, GEMINI_MODEL
from ..data.gemini import GeminiClient
from ..data.portfolio import Portfolio, load_portfolio
from .features import build_training_set
from .perceptron import DirectionModel
from .store import ServerContext

logger = logging.getLogger(__name__)


def train_model(portfolio: Portfolio, model: Optional[DirectionModel] = None) -> DirectionModel:
    """Train a direction model on every holding in the portfolio

    Raises:
        InvalidInputError: a holding cannot be featurized (zero average price)
        TrainingError: the fit failed
    """
    model = model or DirectionModel()
    X, y = build_training_set(portfolio)
    logger.info("Training direction model on %d holdings (%d up, %d down)",
                len(y), int(y.sum()), int(len(y) - y.sum()))
    model.train(X, y)
    return model


def build_context(
    portfolio: Optional[Portfolio] = None,
    model: Optional[DirectionModel] = None,
    enrichment: Optional[GeminiClient] = None,
    portfolio_path: str = PORTFOLIO_PATH,
) -> ServerContext:
    """Build everything the request handlers need

    Args:
        portfolio: Preloaded portfolio (default: read from portfolio_path)
        model: Untrained DirectionModel to use (default: one with config settings)
        enrichment: Enrichment client (default: GeminiClient from config)
        portfolio_path: Portfolio JSON file used when portfolio is None

    Returns:
        ServerContext with a trained, frozen model

    Raises:
        PortfolioError, InvalidInputError, TrainingError: startup must abort
    """
    if portfolio is None:
        portfolio = load_portfolio(portfolio_path)

    model = train_model(portfolio, model)

    if enrichment is None:
        if not GEMINI_API_KEY:
            logger.warning("GEMINI_API_KEY not set; /stock-data requests will fail")
        enrichment = GeminiClient(api_key=GEMINI_API_KEY, model_name=GEMINI_MODEL)

    return ServerContext(
        portfolio=portfolio,
        model=model,
        enrichment=enrichment,
        training=model.report,
    )
