from rest_framework import permissions


class IsCustomer(permissions.BasePermission):
    """
    Permission: User must be signed in with a customer account.
    """

    message = 'Only customer accounts can perform this action.'

    def has_permission(self, request, view):
        return bool(
            request.user
            and request.user.is_authenticated
            and request.user.is_customer
        )


class IsBusinessUser(permissions.BasePermission):
    """
    Permission: User must be signed in with a business account.
    """

    message = 'Only business accounts can perform this action.'

    def has_permission(self, request, view):
        return bool(
            request.user
            and request.user.is_authenticated
            and request.user.is_business
        )
