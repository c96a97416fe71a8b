"""
Domain-specific exceptions for redemptions app.

Each outcome of the code lifecycle that is not a success has its own
exception. ``code`` is the machine-readable outcome returned to clients.
"""


class RedemptionsServiceError(Exception):
    """Base exception for all redemptions service errors."""
    code = 'redemption_error'


class RedemptionNotFoundError(RedemptionsServiceError):
    """Raised when no redemption matches for the acting business or customer."""
    code = 'not_found'


class AlreadyRedeemedError(RedemptionsServiceError):
    """Raised when a code has already been consumed."""
    code = 'already_redeemed'


class CodeExpiredError(RedemptionsServiceError):
    """Raised when a code is past its expiry. The expired status is persisted first."""
    code = 'expired'


class DealFullyRedeemedError(RedemptionsServiceError):
    """Raised when finalizing would exceed the deal's redemption cap."""
    code = 'deal_fully_redeemed'


class CodeGenerationError(RedemptionsServiceError):
    """Raised when a unique code could not be drawn."""
    code = 'code_generation_failed'
