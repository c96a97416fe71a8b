"""Profile management service."""

from typing import Optional

from django.db import transaction
from django.contrib.auth import get_user_model

User = get_user_model()


@transaction.atomic
def update_profile(
    *,
    user: User,
    name: Optional[str] = None,
    phone: Optional[str] = None
) -> User:
    """
    Update the editable profile fields of the current user.

    Email and user type are identity keys and cannot be changed here.
    """
    update_fields = []

    if name is not None:
        user.name = name
        update_fields.append('name')

    if phone is not None:
        user.phone = phone
        update_fields.append('phone')

    if update_fields:
        user.save(update_fields=update_fields + ['updated_at'])

    return user
