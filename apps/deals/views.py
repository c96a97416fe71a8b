from rest_framework import viewsets, mixins, status, serializers
from rest_framework.decorators import action, api_view, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination
from drf_spectacular.utils import extend_schema, OpenApiParameter

from .serializers import (
    DealSerializer,
    DealCreateSerializer,
    SetDealActiveSerializer,
    FavoriteInputSerializer,
    FavoriteToggleResponseSerializer,
    FavoriteIdsSerializer,
)
from apps.businesses.permissions import HasBusiness
from apps.businesses.services import get_business_for_owner
from apps.deals.services import (
    list_active_deals,
    create_deal,
    list_business_deals,
    set_deal_active,
    add_favorite,
    remove_favorite,
    toggle_favorite,
    list_favorite_deals,
    get_favorite_deal_ids,
    # Exceptions
    DealNotFoundError,
    InvalidDealError,
    FavoriteNotFoundError,
)


class DealPagination(PageNumberPagination):
    """Custom pagination for the deal catalog."""
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()


@extend_schema(
    parameters=[
        OpenApiParameter('search', str, description='Substring of title, description or business name'),
        OpenApiParameter('category', str, description='Exact business category'),
    ],
    tags=['deals'],
)
class DealViewSet(viewsets.ReadOnlyModelViewSet):
    """
    Public deal catalog.

    list: Active, non-expired deals, newest first
    retrieve: One visible deal with availability fields
    """

    serializer_class = DealSerializer
    permission_classes = [AllowAny]
    pagination_class = DealPagination

    def get_queryset(self):
        """
        Filter the catalog based on query parameters.

        Filters:
        - search: Search in title, description, business name
        - category: Business category
        """
        return list_active_deals(
            search=self.request.query_params.get('search'),
            category=self.request.query_params.get('category'),
        )


@extend_schema(tags=['deals'])
class BusinessDealViewSet(mixins.ListModelMixin,
                          mixins.CreateModelMixin,
                          viewsets.GenericViewSet):
    """
    Deal manager for the current user's business.

    list: All own deals, newest first
    create: Publish a deal
    set_active: Activate or deactivate a deal
    """

    serializer_class = DealSerializer
    permission_classes = [IsAuthenticated, HasBusiness]
    pagination_class = None

    def get_business(self):
        return get_business_for_owner(owner=self.request.user)

    def get_queryset(self):
        return list_business_deals(business=self.get_business())

    def get_serializer_class(self):
        if self.action == 'create':
            return DealCreateSerializer
        return DealSerializer

    @extend_schema(request=DealCreateSerializer, responses={201: DealSerializer, 400: ErrorResponseSerializer})
    def create(self, request, *args, **kwargs):
        """Publish a new deal."""
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            deal = create_deal(business=self.get_business(), **serializer.validated_data)
        except InvalidDealError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(DealSerializer(deal).data, status=status.HTTP_201_CREATED)

    @extend_schema(request=SetDealActiveSerializer, responses={200: DealSerializer, 404: ErrorResponseSerializer})
    @action(detail=True, methods=['post'])
    def set_active(self, request, pk=None):
        """Activate or deactivate one of the business's deals."""
        serializer = SetDealActiveSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            deal = set_deal_active(
                deal_id=pk,
                business=self.get_business(),
                is_active=serializer.validated_data['is_active'],
            )
        except DealNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response(DealSerializer(deal).data)


@extend_schema(
    methods=['GET'],
    responses={200: DealSerializer(many=True)},
    description="Favorited deals that are still visible, most recently favorited first.",
    tags=['favorites'],
)
@extend_schema(
    methods=['POST'],
    request=FavoriteInputSerializer,
    responses={201: FavoriteToggleResponseSerializer, 404: ErrorResponseSerializer},
    description="Add a deal to favorites. Adding an existing favorite is a no-op.",
    tags=['favorites'],
)
@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def favorites(request):
    """List or add favorites of the current user."""
    if request.method == 'POST':
        serializer = FavoriteInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        deal_id = serializer.validated_data['deal_id']

        try:
            add_favorite(user=request.user, deal_id=deal_id)
        except DealNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response(
            {'deal_id': deal_id, 'is_favorite': True},
            status=status.HTTP_201_CREATED
        )

    deals = list_favorite_deals(user=request.user)
    return Response(DealSerializer(deals, many=True).data)


@extend_schema(
    responses={200: FavoriteIdsSerializer},
    description="Ids of every deal the current user has favorited.",
    tags=['favorites'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def favorite_ids(request):
    """Get favorite deal ids of the current user."""
    return Response({'deal_ids': get_favorite_deal_ids(user=request.user)})


@extend_schema(
    request=FavoriteInputSerializer,
    responses={200: FavoriteToggleResponseSerializer, 404: ErrorResponseSerializer},
    description="Flip favorite membership of a deal.",
    tags=['favorites'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def toggle_favorite_view(request):
    """Toggle a deal in the current user's favorites."""
    serializer = FavoriteInputSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    deal_id = serializer.validated_data['deal_id']

    try:
        is_favorite = toggle_favorite(user=request.user, deal_id=deal_id)
    except DealNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    return Response({'deal_id': deal_id, 'is_favorite': is_favorite})


@extend_schema(
    responses={204: None, 404: ErrorResponseSerializer},
    description="Remove a deal from favorites.",
    tags=['favorites'],
)
@api_view(['DELETE'])
@permission_classes([IsAuthenticated])
def remove_favorite_view(request, deal_id):
    """Remove a deal from the current user's favorites."""
    try:
        remove_favorite(user=request.user, deal_id=deal_id)
    except FavoriteNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    return Response(status=status.HTTP_204_NO_CONTENT)
