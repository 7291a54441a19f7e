"""Portfolio data and external enrichment"""

from .portfolio import (
    Holding,
    Portfolio,
    load_portfolio,
    parse_portfolio,
)
from .gemini import (
    GeminiClient,
    build_prompt,
    strip_code_fences,
)
