"""Email/password sign-in."""

import logging

from django.contrib.auth import get_user_model
from django.db import transaction
from django.utils import timezone

from .exceptions import InvalidCredentialsError, InactiveAccountError

User = get_user_model()
logger = logging.getLogger(__name__)


@transaction.atomic
def authenticate_user(*, email: str, password: str) -> User:
    """
    Resolve a customer or business account from its credentials.

    The row is locked while ``last_login`` is stamped. Unknown email and
    wrong password raise the same error so callers cannot probe for
    registered addresses.

    Raises:
        InvalidCredentialsError: unknown email or wrong password
        InactiveAccountError: the account was deactivated by staff
    """
    user = User.objects.select_for_update().filter(email__iexact=email).first()
    if user is None or not user.check_password(password):
        logger.warning("Failed sign-in attempt for %s", email)
        raise InvalidCredentialsError("Invalid email or password")

    if not user.is_active:
        raise InactiveAccountError("Account is deactivated")

    user.last_login = timezone.now()
    user.save(update_fields=['last_login'])

    logger.info("%s account %s signed in", user.get_user_type_display(), user.id)
    return user
