"""
Domain-specific exceptions for businesses app.

These exceptions represent business rule violations and should be
caught in views and converted to appropriate HTTP responses.
"""


class BusinessesServiceError(Exception):
    """Base exception for all businesses service errors."""
    pass


class BusinessNotFoundError(BusinessesServiceError):
    """Raised when the owner has no business profile yet."""
    pass


class BusinessAlreadyExistsError(BusinessesServiceError):
    """Raised when an owner tries to create a second business."""
    pass


class NotBusinessAccountError(BusinessesServiceError):
    """Raised when a customer account tries to own a business."""
    pass
