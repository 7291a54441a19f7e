"""
Stock Data Endpoints

Pass-through of model-generated enrichment data for any symbol.
"""

import logging

from flask import Blueprint, current_app, jsonify

from ..config import ENRICHMENT_ERROR_MESSAGE
from ..errors import EnrichmentError
from ..models.store import CONTEXT_KEY

logger = logging.getLogger(__name__)

bp = Blueprint('stock_data', __name__)


@bp.route('/stock-data/<symbol>', methods=['GET'])
def stock_data(symbol):
    logger.info("Received request for additional stock data: %s", symbol)
    context = current_app.config[CONTEXT_KEY]

    try:
        payload = context.enrichment.fetch_stock_data(symbol)
    except EnrichmentError as e:
        logger.error("Enrichment failed for %s: %s", symbol, e)
        return jsonify({'error': ENRICHMENT_ERROR_MESSAGE}), 500

    return jsonify(payload)
