import logging

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework_simplejwt.tokens import RefreshToken
from rest_framework_simplejwt.exceptions import TokenError
from drf_spectacular.utils import extend_schema

from .serializers import (
    UserRegistrationSerializer,
    UserLoginSerializer,
    UserSerializer,
    ProfileUpdateSerializer,
    AuthResponseSerializer,
    LogoutRequestSerializer,
    MessageSerializer,
    ErrorSerializer,
)
from .services import (
    register_user,
    authenticate_user,
    update_profile as update_profile_service,
    UserRegistrationError,
    InvalidCredentialsError,
    InactiveAccountError,
)

logger = logging.getLogger(__name__)


def _session_payload(user, message):
    """Profile plus a fresh JWT pair, as returned by register and login."""
    refresh = RefreshToken.for_user(user)
    return {
        'message': message,
        'user': UserSerializer(user).data,
        'tokens': {
            'refresh': str(refresh),
            'access': str(refresh.access_token),
        },
    }


@extend_schema(
    request=UserRegistrationSerializer,
    responses={201: AuthResponseSerializer, 400: ErrorSerializer},
    description="Sign up as a customer or a business and receive JWT tokens.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def register(request):
    serializer = UserRegistrationSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    data = dict(serializer.validated_data)
    data.pop('password_confirm', None)

    try:
        user = register_user(**data)
    except UserRegistrationError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(
        _session_payload(user, 'Registration successful'),
        status=status.HTTP_201_CREATED
    )


@extend_schema(
    request=UserLoginSerializer,
    responses={
        200: AuthResponseSerializer,
        400: ErrorSerializer,
        401: ErrorSerializer,
        403: ErrorSerializer,
    },
    description="Sign in with email and password.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def login(request):
    serializer = UserLoginSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        user = authenticate_user(**serializer.validated_data)
    except InvalidCredentialsError as e:
        return Response({'error': str(e)}, status=status.HTTP_401_UNAUTHORIZED)
    except InactiveAccountError as e:
        return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

    return Response(_session_payload(user, 'Login successful'))


@extend_schema(
    request=LogoutRequestSerializer,
    responses={200: MessageSerializer, 400: ErrorSerializer},
    description=(
        "Sign out. Tokens are stateless, the client discards them; "
        "a supplied refresh token must still be well formed."
    ),
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def logout(request):
    refresh_token = request.data.get('refresh')
    if refresh_token:
        try:
            RefreshToken(refresh_token)
        except TokenError:
            return Response({'error': 'Invalid token'}, status=status.HTTP_400_BAD_REQUEST)

    logger.info("User %s signed out", request.user.id)
    return Response({'message': 'Logout successful'})


@extend_schema(
    responses={200: UserSerializer},
    description="Profile of the signed-in customer or business user.",
    tags=['auth'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_current_user(request):
    return Response(UserSerializer(request.user).data)


@extend_schema(
    request=ProfileUpdateSerializer,
    responses={200: UserSerializer, 400: ErrorSerializer},
    description="Edit name and phone. Email and account type are fixed.",
    tags=['auth'],
)
@api_view(['PATCH'])
@permission_classes([IsAuthenticated])
def update_profile(request):
    serializer = ProfileUpdateSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    user = update_profile_service(user=request.user, **serializer.validated_data)
    return Response(UserSerializer(user).data)
