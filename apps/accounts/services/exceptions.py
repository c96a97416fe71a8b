"""Errors raised by the account services."""


class AccountsServiceError(Exception):
    """Base exception for accounts services."""


class UserRegistrationError(AccountsServiceError):
    """Email already taken or account type unknown."""


class InvalidCredentialsError(AccountsServiceError):
    """Email/password pair does not match an account."""


class InactiveAccountError(AccountsServiceError):
    """Account was deactivated by staff."""
