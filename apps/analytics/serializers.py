"""
Serializers for analytics app.

This module contains:
1. Input serializers - Query parameter validation
2. Response serializers - API documentation and output formatting

Input Serializers:
    OverviewQuerySerializer - Validates the recent feed size

Response Serializers:
    RecentRedemptionSerializer - One row of the recent redemption feed
    BusinessOverviewSerializer - Business dashboard summary
"""

from rest_framework import serializers


# =============================================================================
# Input Serializers (Query Parameter Validation)
# =============================================================================

class OverviewQuerySerializer(serializers.Serializer):
    """
    Validate business overview query parameters.

    Query Parameters:
        recent_limit (int): Size of the recent redemption feed (1-50)
    """

    recent_limit = serializers.IntegerField(
        required=False,
        default=10,
        min_value=1,
        max_value=50,
        help_text='Number of recent redemptions to return'
    )


# =============================================================================
# Response Serializers (API Documentation)
# =============================================================================

class RecentRedemptionSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    deal_title = serializers.CharField()
    discount_value = serializers.CharField()
    customer_name = serializers.CharField()
    created_at = serializers.DateTimeField()
    redeemed_at = serializers.DateTimeField(allow_null=True)


class BusinessOverviewSerializer(serializers.Serializer):
    """Business dashboard summary."""

    total_deals = serializers.IntegerField()
    active_deals = serializers.IntegerField()
    total_redemptions = serializers.IntegerField()
    recent_redemptions = RecentRedemptionSerializer(many=True)


class ErrorSerializer(serializers.Serializer):
    """Error response."""

    error = serializers.CharField()
