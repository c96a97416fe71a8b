"""Favorites: a per-user set of deal ids."""

import logging
from uuid import UUID

from django.db import transaction, IntegrityError
from django.utils import timezone

from apps.accounts.models import User
from ..models import Deal, Favorite
from .exceptions import DealNotFoundError, FavoriteNotFoundError

logger = logging.getLogger(__name__)


def _ensure_deal_exists(deal_id: UUID) -> None:
    if not Deal.objects.filter(id=deal_id).exists():
        raise DealNotFoundError(f"Deal with ID {deal_id} not found")


def add_favorite(*, user: User, deal_id: UUID) -> Favorite:
    """
    Add a deal to the user's favorites. Adding twice is a no-op.

    Raises:
        DealNotFoundError: If the deal does not exist
    """
    _ensure_deal_exists(deal_id)

    try:
        with transaction.atomic():
            favorite, _ = Favorite.objects.get_or_create(user=user, deal_id=deal_id)
    except IntegrityError:
        # Lost a race against a concurrent add
        favorite = Favorite.objects.get(user=user, deal_id=deal_id)

    return favorite


def remove_favorite(*, user: User, deal_id: UUID) -> None:
    """
    Remove a deal from the user's favorites.

    Raises:
        FavoriteNotFoundError: If the deal is not a favorite
    """
    deleted, _ = Favorite.objects.filter(user=user, deal_id=deal_id).delete()
    if not deleted:
        raise FavoriteNotFoundError("Deal is not in your favorites")


@transaction.atomic
def toggle_favorite(*, user: User, deal_id: UUID) -> bool:
    """
    Flip favorite membership of a deal.

    Returns:
        True if the deal is a favorite after the call
    """
    deleted, _ = Favorite.objects.filter(user=user, deal_id=deal_id).delete()
    if deleted:
        return False

    _ensure_deal_exists(deal_id)
    Favorite.objects.create(user=user, deal_id=deal_id)
    return True


def list_favorite_deals(*, user: User) -> list[Deal]:
    """Favorited deals still visible in the catalog, most recently favorited first."""
    favorites = (
        Favorite.objects
        .select_related('deal__business')
        .filter(
            user=user,
            deal__is_active=True,
            deal__expiry_date__gt=timezone.now(),
        )
        .order_by('-created_at')
    )
    return [favorite.deal for favorite in favorites]


def get_favorite_deal_ids(*, user: User) -> list[UUID]:
    """Ids of every deal the user has favorited."""
    return list(
        Favorite.objects
        .filter(user=user)
        .values_list('deal_id', flat=True)
    )
