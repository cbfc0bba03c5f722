"""Services for artworks business logic."""

from .exceptions import (
    ArtworksServiceError,
    ArtworkNotFoundError,
    InvalidStatusTransitionError,
    ArtworkNotAvailableError,
    ArtworkHasSalesError,
)
from .artwork_management import (
    create_artwork,
    update_artwork,
    delete_artwork,
    get_artwork_by_id,
)
from .artwork_search import (
    search_artworks,
    get_all_categories,
)
from .artwork_status import (
    set_artwork_status,
    mark_artwork_sold,
    mark_artwork_available,
)

__all__ = [
    # Exceptions
    'ArtworksServiceError',
    'ArtworkNotFoundError',
    'InvalidStatusTransitionError',
    'ArtworkNotAvailableError',
    'ArtworkHasSalesError',
    # Artwork Management
    'create_artwork',
    'update_artwork',
    'delete_artwork',
    'get_artwork_by_id',
    # Artwork Search
    'search_artworks',
    'get_all_categories',
    # Status Transitions
    'set_artwork_status',
    'mark_artwork_sold',
    'mark_artwork_available',
]
