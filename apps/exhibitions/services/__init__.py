"""Services for exhibitions business logic."""

from .exceptions import (
    ExhibitionsServiceError,
    ExhibitionNotFoundError,
    InvalidDateRangeError,
)
from .exhibition_management import (
    create_exhibition,
    update_exhibition,
    delete_exhibition,
    search_exhibitions,
)
from .artwork_assignment import (
    assign_artworks,
    release_artworks,
    sync_artworks,
)

__all__ = [
    # Exceptions
    'ExhibitionsServiceError',
    'ExhibitionNotFoundError',
    'InvalidDateRangeError',
    # Exhibition Management
    'create_exhibition',
    'update_exhibition',
    'delete_exhibition',
    'search_exhibitions',
    # Artwork Assignment
    'assign_artworks',
    'release_artworks',
    'sync_artworks',
]
