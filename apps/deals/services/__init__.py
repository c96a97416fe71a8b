"""Services for deals business logic."""

from .exceptions import (
    DealsServiceError,
    DealNotFoundError,
    InvalidDealError,
    FavoriteNotFoundError,
)
from .catalog import (
    visible_deals,
    list_active_deals,
    get_visible_deal,
)
from .deal_management import (
    create_deal,
    list_business_deals,
    set_deal_active,
)
from .favorite_management import (
    add_favorite,
    remove_favorite,
    toggle_favorite,
    list_favorite_deals,
    get_favorite_deal_ids,
)

__all__ = [
    # Exceptions
    'DealsServiceError',
    'DealNotFoundError',
    'InvalidDealError',
    'FavoriteNotFoundError',
    # Catalog
    'visible_deals',
    'list_active_deals',
    'get_visible_deal',
    # Deal manager
    'create_deal',
    'list_business_deals',
    'set_deal_active',
    # Favorites
    'add_favorite',
    'remove_favorite',
    'toggle_favorite',
    'list_favorite_deals',
    'get_favorite_deal_ids',
]
