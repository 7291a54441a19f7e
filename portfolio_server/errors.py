"""
Server Errors

Startup-fatal errors (PortfolioError, InvalidInputError, TrainingError) stop
the server before it binds. EnrichmentError is reported per request.
"""


class PortfolioServerError(Exception):
    """Base class for all server errors"""


class PortfolioError(PortfolioServerError):
    """Portfolio file is missing or malformed"""


class InvalidInputError(PortfolioServerError, ValueError):
    """Holding values cannot be turned into features"""


class TrainingError(PortfolioServerError):
    """Direction model could not be trained"""


class EnrichmentError(PortfolioServerError):
    """Upstream enrichment call failed or returned an unusable reply"""
