from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework import status
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes
from apps.businesses.permissions import HasBusiness
from apps.businesses.services import get_business_for_owner
from .analytics import AnalyticsQueries
from .serializers import (
    OverviewQuerySerializer,
    BusinessOverviewSerializer,
    ErrorSerializer,
)
from .exceptions import AnalyticsServiceError


@extend_schema(
    parameters=[
        OpenApiParameter('recent_limit', OpenApiTypes.INT, description='Number of recent redemptions', default=10),
    ],
    responses={
        200: BusinessOverviewSerializer,
        400: ErrorSerializer,
        403: ErrorSerializer,
    },
    description="Get deal and redemption statistics of the current user's business.",
    tags=['analytics'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated, HasBusiness])
def business_overview(request):
    """Get analytics of the current user's business - thin HTTP handler."""
    business = get_business_for_owner(owner=request.user)

    # Validate query parameters using input serializer
    query_serializer = OverviewQuerySerializer(data=request.query_params)
    query_serializer.is_valid(raise_exception=True)

    try:
        data = AnalyticsQueries.business_overview(
            business_id=business.id,
            recent_limit=query_serializer.validated_data['recent_limit'],
        )
    except AnalyticsServiceError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(BusinessOverviewSerializer(data).data)
