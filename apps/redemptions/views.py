from django.http import HttpResponse
from rest_framework import status, serializers
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiResponse

from apps.accounts.permissions import IsCustomer
from apps.businesses.permissions import HasBusiness
from apps.businesses.services import get_business_for_owner
from apps.deals.services import get_visible_deal, DealNotFoundError
from .serializers import (
    RedemptionRequestSerializer,
    CodeVerifySerializer,
    IssuedCodeSerializer,
    RedemptionDetailsSerializer,
    RedemptionSerializer,
    RedemptionHistorySerializer,
)
from .services import (
    request_code as request_code_service,
    verify_code as verify_code_service,
    finalize_redemption as finalize_redemption_service,
    get_presentable_redemption,
    render_qr_png,
    list_redemption_history,
    # Exceptions
    RedemptionsServiceError,
    RedemptionNotFoundError,
    AlreadyRedeemedError,
    CodeExpiredError,
    DealFullyRedeemedError,
    CodeGenerationError,
)


class RedemptionErrorSerializer(serializers.Serializer):
    error = serializers.CharField()
    code = serializers.CharField()


ERROR_STATUS = {
    RedemptionNotFoundError: status.HTTP_404_NOT_FOUND,
    AlreadyRedeemedError: status.HTTP_409_CONFLICT,
    CodeExpiredError: status.HTTP_410_GONE,
    DealFullyRedeemedError: status.HTTP_409_CONFLICT,
    CodeGenerationError: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def _error_response(exc: RedemptionsServiceError) -> Response:
    return Response(
        {'error': str(exc), 'code': exc.code},
        status=ERROR_STATUS.get(type(exc), status.HTTP_400_BAD_REQUEST)
    )


LIFECYCLE_ERRORS = {
    404: RedemptionErrorSerializer,
    409: RedemptionErrorSerializer,
    410: RedemptionErrorSerializer,
}


@extend_schema(
    request=RedemptionRequestSerializer,
    responses={
        201: IssuedCodeSerializer,
        404: RedemptionErrorSerializer,
        503: RedemptionErrorSerializer,
    },
    description="Issue a one-time code for a visible deal. The code expires after a short TTL.",
    tags=['redemptions'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated, IsCustomer])
def request_code(request):
    """Request a redemption code for a deal."""
    serializer = RedemptionRequestSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        deal = get_visible_deal(deal_id=serializer.validated_data['deal_id'])
    except DealNotFoundError as e:
        return Response(
            {'error': str(e), 'code': 'not_found'},
            status=status.HTTP_404_NOT_FOUND
        )

    try:
        redemption = request_code_service(deal=deal, user=request.user)
    except RedemptionsServiceError as e:
        return _error_response(e)

    return Response(
        IssuedCodeSerializer(redemption).data,
        status=status.HTTP_201_CREATED
    )


@extend_schema(
    request=CodeVerifySerializer,
    responses={200: RedemptionDetailsSerializer, **LIFECYCLE_ERRORS},
    description="Check a code typed into the business scanner.",
    tags=['redemptions'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated, HasBusiness])
def verify_code(request):
    """Verify a redemption code for the current user's business."""
    serializer = CodeVerifySerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        redemption = verify_code_service(
            code=serializer.validated_data['code'],
            business=get_business_for_owner(owner=request.user),
        )
    except RedemptionsServiceError as e:
        return _error_response(e)

    return Response(RedemptionDetailsSerializer(redemption).data)


@extend_schema(
    request=None,
    responses={200: RedemptionSerializer, **LIFECYCLE_ERRORS},
    description="Mark a verified code as redeemed and count it against the deal.",
    tags=['redemptions'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated, HasBusiness])
def finalize_redemption(request, redemption_id):
    """Finalize a redemption for the current user's business."""
    try:
        redemption = finalize_redemption_service(
            redemption_id=redemption_id,
            business=get_business_for_owner(owner=request.user),
        )
    except RedemptionsServiceError as e:
        return _error_response(e)

    return Response(RedemptionSerializer(redemption).data)


@extend_schema(
    responses={
        (200, 'image/png'): OpenApiResponse(description='QR code image'),
        **LIFECYCLE_ERRORS,
    },
    description="Render the customer's pending code as a PNG QR image.",
    tags=['redemptions'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated, IsCustomer])
def redemption_qr(request, redemption_id):
    """Get the QR image of one of the current user's pending codes."""
    try:
        redemption = get_presentable_redemption(
            redemption_id=redemption_id,
            user=request.user,
        )
    except RedemptionsServiceError as e:
        return _error_response(e)

    return HttpResponse(render_qr_png(redemption.redemption_code), content_type='image/png')


@extend_schema(
    responses={200: RedemptionHistorySerializer(many=True)},
    description="The current user's redemptions, newest first.",
    tags=['redemptions'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def redemption_history(request):
    """Get redemption history of the current user."""
    redemptions = list_redemption_history(user=request.user)
    return Response(RedemptionHistorySerializer(redemptions, many=True).data)
