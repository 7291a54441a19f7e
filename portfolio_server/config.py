"""
Server Configuration

Single source of truth for all server settings.
"""

import os

from dotenv import load_dotenv

load_dotenv()

# =============================================================================
# API KEYS
# =============================================================================
GEMINI_API_KEY = os.environ.get('GEMINI_API_KEY', '').strip()
GEMINI_MODEL = os.environ.get('GEMINI_MODEL', 'gemini-2.5-flash').strip()

# =============================================================================
# SERVER
# =============================================================================
HOST = os.environ.get('HOST', '0.0.0.0')
PORT = int(os.environ.get('PORT') or 5000)
LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()

# =============================================================================
# PATHS
# =============================================================================
BASE_DIR = os.path.dirname(__file__)
PORTFOLIO_PATH = os.environ.get(
    'PORTFOLIO_PATH', os.path.join(BASE_DIR, 'data', 'portfolio.json')
)

# =============================================================================
# MODEL SETTINGS
# =============================================================================
# 2 inputs -> HIDDEN_UNITS -> 1 output
HIDDEN_UNITS = 4
LEARNING_RATE = 0.1
MAX_ITERATIONS = 20000
ERROR_THRESHOLD = 0.005
RANDOM_STATE = 42

# Output activation above this is "Up"
DECISION_THRESHOLD = 0.5

# =============================================================================
# VALUATION
# =============================================================================
# Absolute percentage move assumed per horizon; signed by predicted direction
HORIZON_CHANGES = {
    'day': 0.01,
    'week': 0.03,
    'month': 0.05,
}

# Response key for each horizon
HORIZON_KEYS = {
    'day': 'nextDay',
    'week': 'nextWeek',
    'month': 'nextMonth',
}

# =============================================================================
# ERROR MESSAGES
# =============================================================================
NOT_FOUND_MESSAGE = 'Stock not found in portfolio'
INTERNAL_ERROR_MESSAGE = 'Internal server error'
ENRICHMENT_ERROR_MESSAGE = 'Failed to fetch additional stock data'
