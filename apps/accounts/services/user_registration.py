"""Account registration service."""

import logging
from django.db import transaction

from apps.artists.models import Artist
from apps.artists.services import create_artist, DuplicateArtistEmailError
from .exceptions import UserRegistrationError

logger = logging.getLogger(__name__)


@transaction.atomic
def register_user(
    *,
    name: str,
    email: str,
    password: str
) -> Artist:
    """
    Register a new artist account.

    Args:
        name: Artist's display name
        email: Login email
        password: Raw password (hashed with bcrypt)

    Returns:
        Created Artist instance

    Raises:
        UserRegistrationError: If the email is already registered
    """
    try:
        artist = create_artist(name=name, email=email, password=password)
    except DuplicateArtistEmailError:
        raise UserRegistrationError("User already exists")

    logger.info("Account registered for artist %s", artist.id)
    return artist
