"""Account services: sign-up, sign-in and profile edits."""

from .exceptions import (
    AccountsServiceError,
    UserRegistrationError,
    InvalidCredentialsError,
    InactiveAccountError,
)
from .user_registration import register_user
from .user_authentication import authenticate_user
from .profile_management import update_profile

__all__ = [
    'AccountsServiceError',
    'UserRegistrationError',
    'InvalidCredentialsError',
    'InactiveAccountError',
    'register_user',
    'authenticate_user',
    'update_profile',
]
