"""User authentication service."""

from django.db import transaction
from django.utils import timezone
from rest_framework_simplejwt.tokens import AccessToken

from apps.artists.models import Artist
from .exceptions import InvalidCredentialsError, InactiveAccountError


@transaction.atomic
def authenticate_user(*, email: str, password: str) -> Artist:
    """
    Authenticate an artist with email and password.

    Uses select_for_update() to prevent race conditions when updating last_login.

    Args:
        email: Login email
        password: Raw password

    Returns:
        Authenticated Artist instance

    Raises:
        InvalidCredentialsError: If credentials are invalid
        InactiveAccountError: If account is deactivated
    """
    try:
        artist = (
            Artist.objects
            .select_for_update()
            .get(email__iexact=email.strip())
        )
    except Artist.DoesNotExist:
        raise InvalidCredentialsError("Invalid credentials")

    if not artist.check_password(password):
        raise InvalidCredentialsError("Invalid credentials")

    if not artist.is_active:
        raise InactiveAccountError("Account is deactivated")

    artist.last_login = timezone.now()
    artist.save(update_fields=['last_login'])

    return artist


def issue_access_token(artist: Artist) -> str:
    """Return a signed JWT access token for the artist."""
    return str(AccessToken.for_user(artist))
