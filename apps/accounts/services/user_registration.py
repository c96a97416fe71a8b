"""User registration service."""

import logging

from django.db import transaction, IntegrityError
from django.contrib.auth import get_user_model

from apps.accounts.models import UserType
from .exceptions import UserRegistrationError

User = get_user_model()
logger = logging.getLogger(__name__)


@transaction.atomic
def register_user(
    *,
    email: str,
    password: str,
    name: str = "",
    user_type: str = UserType.CUSTOMER,
    phone: str = ""
) -> User:
    """
    Register a new customer or business account.

    Args:
        email: User's email address
        password: User's password (will be hashed)
        name: Optional display name
        user_type: 'customer' or 'business', fixed for the account lifetime
        phone: Optional phone number

    Returns:
        Created User instance

    Raises:
        UserRegistrationError: If the email is taken or the type is unknown
    """
    if user_type not in UserType.values:
        raise UserRegistrationError(f"Unknown user type: {user_type}")

    try:
        user = User.objects.create_user(
            email=email,
            password=password,
            name=name,
            user_type=user_type,
            phone=phone,
        )
    except IntegrityError:
        raise UserRegistrationError("An account with this email already exists")

    logger.info("Registered %s account %s", user.user_type, user.id)
    return user
