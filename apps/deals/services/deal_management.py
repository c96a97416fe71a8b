"""
Business deal manager.

Every function takes the acting business explicitly and only touches
that business's deals.
"""

import logging
from datetime import datetime
from typing import Optional
from uuid import UUID

from django.db import transaction
from django.db.models import QuerySet
from django.utils import timezone

from apps.businesses.models import Business
from ..models import Deal
from .exceptions import DealNotFoundError, InvalidDealError

logger = logging.getLogger(__name__)


def create_deal(
    *,
    business: Business,
    title: str,
    description: str,
    discount_value: str,
    expiry_date: datetime,
    terms: str = '',
    max_redemptions: Optional[int] = None
) -> Deal:
    """
    Publish a new deal.

    The deal starts active with no redemptions.

    Raises:
        InvalidDealError: If a required field is blank, the expiry is not
            in the future or the cap is below 1
    """
    if not (title and title.strip()):
        raise InvalidDealError("Title is required")
    if not (description and description.strip()):
        raise InvalidDealError("Description is required")
    if not (discount_value and discount_value.strip()):
        raise InvalidDealError("Discount value is required")
    if expiry_date <= timezone.now():
        raise InvalidDealError("Expiry date must be in the future")
    if max_redemptions is not None and max_redemptions < 1:
        raise InvalidDealError("Max redemptions must be at least 1")

    deal = Deal.objects.create(
        business=business,
        title=title.strip(),
        description=description.strip(),
        discount_value=discount_value.strip(),
        terms=terms,
        expiry_date=expiry_date,
        max_redemptions=max_redemptions,
        is_active=True,
        current_redemptions=0,
    )

    logger.info("Deal %s published by business %s", deal.id, business.id)
    return deal


def list_business_deals(*, business: Business) -> QuerySet[Deal]:
    """All deals of a business, newest first, expired and inactive included."""
    return (
        Deal.objects
        .select_related('business')
        .filter(business=business)
        .order_by('-created_at')
    )


@transaction.atomic
def set_deal_active(*, deal_id: UUID, business: Business, is_active: bool) -> Deal:
    """
    Activate or deactivate one of the business's deals.

    Raises:
        DealNotFoundError: If the deal does not belong to the business
    """
    try:
        deal = (
            Deal.objects
            .select_for_update()
            .get(id=deal_id, business=business)
        )
    except Deal.DoesNotExist:
        raise DealNotFoundError(f"Deal with ID {deal_id} not found")

    if deal.is_active != is_active:
        deal.is_active = is_active
        deal.save(update_fields=['is_active', 'updated_at'])
        logger.info("Deal %s set active=%s", deal.id, is_active)

    return deal
