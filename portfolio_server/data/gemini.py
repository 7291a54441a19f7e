"""
Gemini API Integration

Per-symbol enrichment data (fundamentals, performance, entry points) from a
hosted generative model. The reply is returned as untyped JSON.
"""

import json
import logging

from google import genai

from ..config import GEMINI_API_KEY, GEMINI_MODEL
from ..errors import EnrichmentError

logger = logging.getLogger(__name__)

PROMPT_TEMPLATE = (
    "Provide performance, fundamentals, growth, profitability, and entry point "
    "data for {symbol} stock. Format the response as JSON. "
    "I want only json data no other information or text."
)


def build_prompt(symbol: str) -> str:
    return PROMPT_TEMPLATE.format(symbol=symbol)


def strip_code_fences(text: str) -> str:
    """Remove markdown ```json / ``` markers and surrounding whitespace"""
    return text.replace('```json', '').replace('```', '').strip()


class GeminiClient:
    """Thin wrapper over a google-genai Client

    The SDK client is created on first use: genai.Client refuses an empty API
    key, and a missing key must only fail enrichment requests, not startup.
    """

    def __init__(self, api_key: str = GEMINI_API_KEY, model_name: str = GEMINI_MODEL, client=None):
        self.api_key = api_key
        self.model_name = model_name
        self._client = client

    @property
    def client(self):
        if self._client is None:
            if not self.api_key:
                raise EnrichmentError("GEMINI_API_KEY is not set")
            self._client = genai.Client(api_key=self.api_key)
        return self._client

    def fetch_stock_data(self, symbol: str):
        """Ask the model for enrichment data on a symbol

        Args:
            symbol: Trading symbol, passed into the prompt as-is

        Returns:
            Decoded JSON value (no schema is enforced)

        Raises:
            EnrichmentError: API call failed or the reply was not JSON
        """
        prompt = build_prompt(symbol)

        try:
            response = self.client.models.generate_content(model=self.model_name, contents=prompt)
            text = response.text
        except EnrichmentError:
            logger.error("Gemini client unavailable for %s: API key missing", symbol)
            raise
        except Exception as e:
            logger.exception("Error fetching data from Gemini API for %s", symbol)
            raise EnrichmentError(f"Gemini request failed for {symbol}: {e}") from e

        if not isinstance(text, str):
            logger.error("Gemini reply for %s has no text (%r)", symbol, text)
            raise EnrichmentError(f"Gemini reply for {symbol} has no text")

        try:
            return json.loads(strip_code_fences(text))
        except (json.JSONDecodeError, RecursionError) as e:
            logger.error("Gemini reply for %s is not usable JSON: %s | %.200s", symbol, e, text)
            raise EnrichmentError(f"Gemini reply for {symbol} is not valid JSON") from e
