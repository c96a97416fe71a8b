"""Customer redemption history."""

from django.db.models import QuerySet

from apps.accounts.models import User
from ..models import Redemption


def list_redemption_history(*, user: User) -> QuerySet[Redemption]:
    """All redemptions of a customer, newest first, with deal and business joined."""
    return (
        Redemption.objects
        .select_related('deal', 'business')
        .filter(user=user)
        .order_by('-created_at')
    )
