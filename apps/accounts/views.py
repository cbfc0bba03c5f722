from rest_framework import status, serializers
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema
from apps.artists.serializers import ArtistSerializer
from .authentication import set_auth_cookie, clear_auth_cookie
from .serializers import (
    AccountSerializer,
    RegistrationSerializer,
    LoginSerializer,
)
from .services import (
    register_user,
    authenticate_user,
    issue_access_token,
    UserRegistrationError,
    InvalidCredentialsError,
    InactiveAccountError,
)


# Response serializers for API documentation
class AuthResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    token = serializers.CharField()
    user = AccountSerializer()


class MessageResponseSerializer(serializers.Serializer):
    message = serializers.CharField()


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()


def _auth_response(artist, message, status_code=status.HTTP_200_OK):
    token = issue_access_token(artist)
    response = Response({
        'message': message,
        'token': token,
        'user': AccountSerializer(artist).data,
    }, status=status_code)
    return set_auth_cookie(response, token)


@extend_schema(
    request=RegistrationSerializer,
    responses={
        201: AuthResponseSerializer,
        400: ErrorResponseSerializer,
    },
    description="Register a new artist account. Sets the auth cookie.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def register(request):
    """Register a new artist account."""
    serializer = RegistrationSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        artist = register_user(**serializer.validated_data)
    except UserRegistrationError as e:
        return Response(
            {'error': str(e)},
            status=status.HTTP_400_BAD_REQUEST
        )

    return _auth_response(artist, 'Registration successful', status.HTTP_201_CREATED)


@extend_schema(
    request=LoginSerializer,
    responses={
        200: AuthResponseSerializer,
        400: ErrorResponseSerializer,
        401: ErrorResponseSerializer,
        403: ErrorResponseSerializer,
    },
    description="Authenticate with email and password. Sets the auth cookie.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def login(request):
    """Login with email and password."""
    serializer = LoginSerializer(data=request.data)

    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    try:
        artist = authenticate_user(**serializer.validated_data)
    except InvalidCredentialsError as e:
        return Response(
            {'error': str(e)},
            status=status.HTTP_401_UNAUTHORIZED
        )
    except InactiveAccountError as e:
        return Response(
            {'error': str(e)},
            status=status.HTTP_403_FORBIDDEN
        )

    return _auth_response(artist, 'Login successful')


@extend_schema(
    request=None,
    responses={200: MessageResponseSerializer},
    description="Clear the auth cookie.",
    tags=['auth'],
)
@api_view(['GET', 'POST'])
@permission_classes([AllowAny])
def logout(request):
    """Logout by expiring the auth cookie."""
    response = Response({'message': 'Logged out successfully'})
    return clear_auth_cookie(response)


@extend_schema(
    responses={200: ArtistSerializer},
    description="Get the current authenticated artist's profile.",
    tags=['auth'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_current_user(request):
    """Get current authenticated artist profile."""
    return Response(ArtistSerializer(request.user).data)
