"""Services for artists business logic."""

from .exceptions import (
    ArtistsServiceError,
    ArtistNotFoundError,
    DuplicateArtistEmailError,
    ArtistHasArtworksError,
)
from .artist_management import (
    create_artist,
    update_artist,
    delete_artist,
    get_artist_by_id,
)
from .artist_search import search_artists

__all__ = [
    # Exceptions
    'ArtistsServiceError',
    'ArtistNotFoundError',
    'DuplicateArtistEmailError',
    'ArtistHasArtworksError',
    # Artist Management
    'create_artist',
    'update_artist',
    'delete_artist',
    'get_artist_by_id',
    # Artist Search
    'search_artists',
]
