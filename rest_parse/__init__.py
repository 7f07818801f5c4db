"""
rest_parse
──────────
Stable top-level exports. Import from here, not from sub-modules directly.
"""
from rest_parse.client import AsyncRestParse, RestParse
from rest_parse.core.config import ParseSettings, get_settings
from rest_parse.core.errors import (
    AuthError,
    ConfigurationError,
    ForbiddenError,
    NotFoundError,
    ParseApiError,
    ParseError,
    ParseTransportError,
    RateLimitError,
)
from rest_parse.core.http import ParseRequest, ParseResult
from rest_parse.core.logging import configure_logging, get_logger

__version__ = "0.1.0"
__all__ = [
    # clients
    "RestParse", "AsyncRestParse",
    # config
    "ParseSettings", "get_settings",
    # errors
    "ParseError", "ParseApiError", "ParseTransportError", "ConfigurationError",
    "AuthError", "ForbiddenError", "NotFoundError", "RateLimitError",
    # http
    "ParseRequest", "ParseResult",
    # logging
    "get_logger", "configure_logging",
]
