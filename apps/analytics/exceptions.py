"""
Domain exceptions for analytics app.

This module defines domain-specific exceptions that are raised by the
analytics query layer. These exceptions represent invalid requests,
separate from HTTP concerns.

Exception Hierarchy:
    AnalyticsServiceError (base)
    └── InvalidLimitError

Usage:
    from apps.analytics.exceptions import InvalidLimitError

    if not 1 <= limit <= MAX_RECENT_LIMIT:
        raise InvalidLimitError(f"Invalid limit: {limit}")
"""


class AnalyticsServiceError(Exception):
    """
    Base exception for all analytics service errors.

    All domain-specific exceptions in the analytics app inherit from this
    class, making it easy to catch all analytics errors in views:

        try:
            data = AnalyticsQueries.business_overview(business.id, recent_limit=0)
        except AnalyticsServiceError as e:
            return Response({'error': str(e)}, status=400)
    """

    pass


class InvalidLimitError(AnalyticsServiceError):
    """
    Raised when the size of the recent redemption feed is out of range.

    Example:
        raise InvalidLimitError("Invalid limit: 0. Must be between 1 and 50")
    """

    pass
