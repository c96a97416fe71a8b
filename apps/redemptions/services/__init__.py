"""Services for redemptions business logic."""

from .exceptions import (
    RedemptionsServiceError,
    RedemptionNotFoundError,
    AlreadyRedeemedError,
    CodeExpiredError,
    DealFullyRedeemedError,
    CodeGenerationError,
)
from .code_lifecycle import (
    generate_redemption_code,
    build_qr_image_url,
    render_qr_png,
    request_code,
    verify_code,
    finalize_redemption,
    get_presentable_redemption,
)
from .history import list_redemption_history

__all__ = [
    # Exceptions
    'RedemptionsServiceError',
    'RedemptionNotFoundError',
    'AlreadyRedeemedError',
    'CodeExpiredError',
    'DealFullyRedeemedError',
    'CodeGenerationError',
    # Code lifecycle
    'generate_redemption_code',
    'build_qr_image_url',
    'render_qr_png',
    'request_code',
    'verify_code',
    'finalize_redemption',
    'get_presentable_redemption',
    # History
    'list_redemption_history',
]
