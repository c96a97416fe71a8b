import logging

from rest_framework import status, serializers
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from apps.accounts.permissions import IsBusinessUser
from .serializers import (
    BusinessSerializer,
    BusinessWriteSerializer,
    CategorySerializer,
)
from .services import (
    create_business as create_business_service,
    get_business_for_owner,
    update_business,
    get_business_categories,
    BusinessNotFoundError,
    BusinessAlreadyExistsError,
    NotBusinessAccountError,
)

logger = logging.getLogger(__name__)


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()


@extend_schema(
    responses={200: CategorySerializer(many=True)},
    description="List the categories a business can be filed under.",
    tags=['businesses'],
)
@api_view(['GET'])
@permission_classes([AllowAny])
def business_categories(request):
    """List business categories."""
    return Response(get_business_categories())


@extend_schema(
    request=BusinessWriteSerializer,
    responses={
        201: BusinessSerializer,
        400: ErrorResponseSerializer,
        403: ErrorResponseSerializer,
    },
    description="Create the business profile of the current business account.",
    tags=['businesses'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated, IsBusinessUser])
def create_business(request):
    """Create a business owned by the current user."""
    serializer = BusinessWriteSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        business = create_business_service(owner=request.user, **serializer.validated_data)
    except BusinessAlreadyExistsError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
    except NotBusinessAccountError as e:
        return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

    return Response(BusinessSerializer(business).data, status=status.HTTP_201_CREATED)


@extend_schema(
    methods=['GET'],
    responses={200: BusinessSerializer, 404: ErrorResponseSerializer},
    description="Get the business owned by the current user.",
    tags=['businesses'],
)
@extend_schema(
    methods=['PATCH'],
    request=BusinessWriteSerializer,
    responses={200: BusinessSerializer, 404: ErrorResponseSerializer},
    description="Update descriptive fields of the current user's business.",
    tags=['businesses'],
)
@api_view(['GET', 'PATCH'])
@permission_classes([IsAuthenticated, IsBusinessUser])
def my_business(request):
    """Get or update the current user's business."""
    if request.method == 'PATCH':
        serializer = BusinessWriteSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        try:
            business = update_business(owner=request.user, **serializer.validated_data)
        except BusinessNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        return Response(BusinessSerializer(business).data)

    try:
        business = get_business_for_owner(owner=request.user)
    except BusinessNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    return Response(BusinessSerializer(business).data)
