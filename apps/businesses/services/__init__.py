"""Services for businesses business logic."""

from .exceptions import (
    BusinessesServiceError,
    BusinessNotFoundError,
    BusinessAlreadyExistsError,
    NotBusinessAccountError,
)
from .business_management import (
    create_business,
    get_business_for_owner,
    update_business,
    get_business_categories,
)

__all__ = [
    # Exceptions
    'BusinessesServiceError',
    'BusinessNotFoundError',
    'BusinessAlreadyExistsError',
    'NotBusinessAccountError',
    # Services
    'create_business',
    'get_business_for_owner',
    'update_business',
    'get_business_categories',
]
