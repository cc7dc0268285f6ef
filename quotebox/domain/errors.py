"""
errors.py - Exception taxonomy
Single responsibility: errors raised by the quote services.
"""


class QuoteboxError(Exception):
    """Base class for all application errors."""


class ValidationError(QuoteboxError):
    """A manually entered quote has an empty text or category."""


class ParseError(QuoteboxError):
    """Imported or persisted data is not a JSON array of quotes."""


class NetworkError(QuoteboxError):
    """Fetching from or posting to the remote collection failed."""
