"""
Artwork status transitions.

An artwork is `sold` exactly when a completed sale references it, so only the
sales services move artworks into or out of `sold`. Exhibition assignment
toggles between `available` and `exhibition`.
"""

import logging

from ..models import Artwork, ArtworkStatus
from .exceptions import ArtworkNotAvailableError

logger = logging.getLogger(__name__)


def set_artwork_status(*, artwork: Artwork, status: str) -> Artwork:
    """Persist a status change on an artwork row (caller holds the lock)."""
    if artwork.status == status:
        return artwork

    previous = artwork.status
    artwork.status = status
    artwork.save(update_fields=['status', 'updated_at'])
    logger.info("Artwork %s status %s -> %s", artwork.id, previous, status)
    return artwork


def mark_artwork_sold(*, artwork: Artwork, require_available: bool = True) -> Artwork:
    """
    Move an artwork to `sold`.

    Args:
        artwork: Locked Artwork instance
        require_available: Only `available` artworks may be sold. When False,
            any status except `sold` is accepted.

    Raises:
        ArtworkNotAvailableError: If the artwork cannot be sold
    """
    if artwork.status == ArtworkStatus.SOLD:
        raise ArtworkNotAvailableError("Artwork is already sold")
    if require_available and artwork.status != ArtworkStatus.AVAILABLE:
        raise ArtworkNotAvailableError("Artwork is not available for sale")

    return set_artwork_status(artwork=artwork, status=ArtworkStatus.SOLD)


def mark_artwork_available(*, artwork: Artwork) -> Artwork:
    """
    Take a sold artwork off `sold`.

    It goes back to `exhibition` while an exhibition still lists it,
    otherwise to `available`.
    """
    if artwork.status != ArtworkStatus.SOLD:
        logger.warning(
            "Artwork %s released from sale while in status %s",
            artwork.id, artwork.status
        )
        return artwork

    if artwork.exhibitions.exists():
        return set_artwork_status(artwork=artwork, status=ArtworkStatus.EXHIBITION)
    return set_artwork_status(artwork=artwork, status=ArtworkStatus.AVAILABLE)
