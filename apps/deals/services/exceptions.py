"""
Domain-specific exceptions for deals app.

These exceptions represent business rule violations and should be
caught in views and converted to appropriate HTTP responses.
"""


class DealsServiceError(Exception):
    """Base exception for all deals service errors."""
    pass


class DealNotFoundError(DealsServiceError):
    """Raised when a deal does not exist or is not visible to the caller."""
    pass


class InvalidDealError(DealsServiceError):
    """Raised when deal fields break a publishing rule."""
    pass


class FavoriteNotFoundError(DealsServiceError):
    """Raised when removing a deal that is not a favorite."""
    pass
