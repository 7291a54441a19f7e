"""
Portfolio Prediction Server

Modular structure:
- data/     : Portfolio snapshot and Gemini enrichment client
- models/   : Features, direction model, valuation, startup loading
- routes/   : Flask endpoints
"""

from .app import create_app, main
from .models.loader import build_context
