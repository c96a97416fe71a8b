from rest_framework import permissions

from apps.businesses.models import Business


class HasBusiness(permissions.BasePermission):
    """
    Permission: User must be a business account that owns a business.
    """

    message = 'Create your business profile first.'

    def has_permission(self, request, view):
        user = request.user
        if not (user and user.is_authenticated and user.is_business):
            return False
        return Business.objects.filter(owner=user).exists()
