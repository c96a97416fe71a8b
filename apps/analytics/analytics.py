"""
Analytics Module
=================

This module provides read-only query methods powering the business
dashboard. It aggregates deals and redemptions of a single business.

Classes:
    AnalyticsQueries: Static methods for analytics queries.

Example:
    Getting the dashboard numbers of a business::

        from apps.analytics.analytics import AnalyticsQueries

        overview = AnalyticsQueries.business_overview(business_id=business.id)
        print(f"{overview['active_deals']} of {overview['total_deals']} deals live")
        print(f"{overview['total_redemptions']} codes redeemed")

Note:
    This module doesn't modify any data. All methods are static and can be
    called without instantiation.
"""

from django.db.models import Count, Q
from apps.deals.models import Deal
from apps.redemptions.models import Redemption, RedemptionStatus
from .exceptions import InvalidLimitError


DEFAULT_RECENT_LIMIT = 10
MAX_RECENT_LIMIT = 50


class AnalyticsQueries:
    """
    Aggregate queries for analytics endpoints.

    All methods return plain dictionaries or lists, not Django objects,
    making them suitable for JSON serialization in API responses.

    Methods:
        business_overview: Deal counts, redemption count and recent feed.
        recent_redemptions: Newest redeemed codes of a business.
    """

    @staticmethod
    def business_overview(business_id, recent_limit=DEFAULT_RECENT_LIMIT):
        """
        Summarize deals and redemptions of a business.

        The deal counts come from one aggregate query; the redemption count
        and the recent feed are independent queries. Only redemptions in
        the ``redeemed`` state are counted; pending and expired codes are
        never a completed redemption.

        Args:
            business_id (UUID): Business to summarize.
            recent_limit (int, optional): Size of the recent feed.
                Defaults to 10.

        Returns:
            dict: Overview containing:
                - total_deals (int): Every deal ever published.
                - active_deals (int): Deals with is_active set,
                  expired ones included.
                - total_redemptions (int): Redeemed codes.
                - recent_redemptions (list): See recent_redemptions().

        Raises:
            InvalidLimitError: If recent_limit is outside 1..50.

        Example:
            >>> AnalyticsQueries.business_overview(business.id)
            {
                'total_deals': 4,
                'active_deals': 3,
                'total_redemptions': 27,
                'recent_redemptions': [...]
            }
        """
        deal_counts = Deal.objects.filter(business_id=business_id).aggregate(
            total=Count('id'),
            active=Count('id', filter=Q(is_active=True)),
        )

        total_redemptions = Redemption.objects.filter(
            business_id=business_id,
            status=RedemptionStatus.REDEEMED,
        ).count()

        return {
            'total_deals': deal_counts['total'],
            'active_deals': deal_counts['active'],
            'total_redemptions': total_redemptions,
            'recent_redemptions': AnalyticsQueries.recent_redemptions(
                business_id=business_id,
                limit=recent_limit,
            ),
        }

    @staticmethod
    def recent_redemptions(business_id, limit=DEFAULT_RECENT_LIMIT):
        """
        Get the newest redeemed codes of a business.

        Ordered by the time the code was issued (created_at), newest first.

        Args:
            business_id (UUID): Business whose feed to build.
            limit (int, optional): Maximum number of rows. Defaults to 10.

        Returns:
            list[dict]: Rows with keys id, deal_title, discount_value,
            customer_name, created_at and redeemed_at.

        Raises:
            InvalidLimitError: If limit is outside 1..50.
        """
        if not 1 <= limit <= MAX_RECENT_LIMIT:
            raise InvalidLimitError(
                f"Invalid limit: {limit}. Must be between 1 and {MAX_RECENT_LIMIT}"
            )

        redemptions = (
            Redemption.objects
            .filter(business_id=business_id, status=RedemptionStatus.REDEEMED)
            .select_related('deal', 'user')
            .order_by('-created_at')[:limit]
        )

        return [
            {
                'id': redemption.id,
                'deal_title': redemption.deal.title,
                'discount_value': redemption.deal.discount_value,
                'customer_name': redemption.user.get_display_name(),
                'created_at': redemption.created_at,
                'redeemed_at': redemption.redeemed_at,
            }
            for redemption in redemptions
        ]
