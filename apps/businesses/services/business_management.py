"""
Business profile management service.

One business per owner: creation is refused when a row already exists.
"""

import logging
from typing import Optional

from django.db import transaction, IntegrityError

from apps.accounts.models import User
from apps.businesses.models import Business, BusinessCategory

from .exceptions import (
    BusinessNotFoundError,
    BusinessAlreadyExistsError,
    NotBusinessAccountError,
)

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = (
    'name',
    'description',
    'address',
    'latitude',
    'longitude',
    'category',
    'logo_url',
)


def create_business(
    *,
    owner: User,
    name: str,
    address: str,
    description: str = '',
    category: str = BusinessCategory.RESTAURANT,
    latitude=None,
    longitude=None,
    logo_url: str = ''
) -> Business:
    """
    Create the business profile of a business account.

    Args:
        owner: Business account that will own the profile
        name: Display name
        address: Street address shown on deals
        description: Optional description
        category: One of BusinessCategory values
        latitude: Optional coordinate (stored only)
        longitude: Optional coordinate (stored only)
        logo_url: Optional logo image URL

    Returns:
        Created Business instance

    Raises:
        NotBusinessAccountError: If owner is a customer account
        BusinessAlreadyExistsError: If owner already has a business
    """
    if not owner.is_business:
        raise NotBusinessAccountError("Only business accounts can create a business")

    if Business.objects.filter(owner=owner).exists():
        raise BusinessAlreadyExistsError("You already have a business profile")

    try:
        with transaction.atomic():
            business = Business.objects.create(
                owner=owner,
                name=name,
                address=address,
                description=description,
                category=category,
                latitude=latitude,
                longitude=longitude,
                logo_url=logo_url,
            )
    except IntegrityError:
        # Concurrent create for the same owner
        raise BusinessAlreadyExistsError("You already have a business profile")

    logger.info("Business %s created by %s", business.id, owner.id)
    return business


def get_business_for_owner(*, owner: User) -> Business:
    """
    Get the business owned by a user.

    Raises:
        BusinessNotFoundError: If the user has no business
    """
    try:
        return Business.objects.select_related('owner').get(owner=owner)
    except Business.DoesNotExist:
        raise BusinessNotFoundError("No business found for this account")


@transaction.atomic
def update_business(*, owner: User, **fields) -> Business:
    """
    Update descriptive fields of the owner's business.

    Unknown keys are ignored; the owner link cannot be changed.
    """
    try:
        business = Business.objects.select_for_update().get(owner=owner)
    except Business.DoesNotExist:
        raise BusinessNotFoundError("No business found for this account")

    update_fields = []
    for field in EDITABLE_FIELDS:
        if field in fields:
            setattr(business, field, fields[field])
            update_fields.append(field)

    if update_fields:
        business.save(update_fields=update_fields + ['updated_at'])

    return business


def get_business_categories() -> list:
    """Return the selectable categories as value/label pairs."""
    return [
        {'value': value, 'label': label}
        for value, label in BusinessCategory.choices
    ]
