"""
Prediction Endpoints

Direction and profit/loss projection for holdings in the portfolio.
"""

import logging

from flask import Blueprint, current_app, jsonify

from ..config import HORIZON_KEYS, NOT_FOUND_MESSAGE, INTERNAL_ERROR_MESSAGE
from ..models.features import extract_features
from ..models.store import CONTEXT_KEY
from ..models.valuation import project_value

logger = logging.getLogger(__name__)

bp = Blueprint('predictions', __name__)


def predict_stock_movement(model, holding, horizon: str):
    """Run the direction model for one holding and project it over a horizon"""
    features = extract_features(holding)
    direction = model.predict_direction(features)
    return project_value(holding, direction, horizon)


@bp.route('/predict/<symbol>', methods=['GET'])
def predict(symbol):
    """Predictions for the next day, week and month"""
    logger.info("Received request for stock symbol: %s", symbol)
    context = current_app.config[CONTEXT_KEY]

    holding = context.portfolio.get(symbol)
    if holding is None:
        logger.error("Stock not found: %s", symbol)
        return jsonify({'error': NOT_FOUND_MESSAGE}), 404

    try:
        response = {
            key: predict_stock_movement(context.model, holding, horizon).to_dict()
            for horizon, key in HORIZON_KEYS.items()
        }
    except Exception:
        logger.exception("Prediction failed for %s", symbol)
        return jsonify({'error': INTERNAL_ERROR_MESSAGE}), 500

    return jsonify(response)
