"""Deal catalog: what customers can browse."""

from typing import Optional
from uuid import UUID

from django.db.models import Q, QuerySet
from django.utils import timezone

from ..models import Deal
from .exceptions import DealNotFoundError


def visible_deals() -> QuerySet[Deal]:
    """
    Deals a customer may see: active and not yet expired.

    Business metadata is joined so list rendering needs a single query.
    """
    return (
        Deal.objects
        .select_related('business')
        .filter(is_active=True, expiry_date__gt=timezone.now())
    )


def list_active_deals(
    *,
    search: Optional[str] = None,
    category: Optional[str] = None
) -> QuerySet[Deal]:
    """
    Search and filter the public catalog.

    Args:
        search: Case-insensitive substring of deal title, deal description
            or business name
        category: Exact business category

    Returns:
        Visible deals, newest first
    """
    queryset = visible_deals()

    if search:
        queryset = queryset.filter(
            Q(title__icontains=search) |
            Q(description__icontains=search) |
            Q(business__name__icontains=search)
        )

    if category:
        queryset = queryset.filter(business__category=category)

    return queryset.order_by('-created_at')


def get_visible_deal(*, deal_id: UUID) -> Deal:
    """
    Get one deal from the public catalog.

    Raises:
        DealNotFoundError: If the deal does not exist, is inactive or expired
    """
    try:
        return visible_deals().get(id=deal_id)
    except Deal.DoesNotExist:
        raise DealNotFoundError(f"Deal with ID {deal_id} not found")
