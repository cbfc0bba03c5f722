"""
Exhibition artwork assignment.

Adding an available artwork to an exhibition puts it on show
(`exhibition`); removing it returns it to `available` once no other
exhibition lists it. Sold artworks keep their status.
"""

from typing import Iterable

from apps.artworks.models import Artwork, ArtworkStatus
from apps.artworks.services import set_artwork_status
from ..models import Exhibition


def assign_artworks(*, exhibition: Exhibition, artworks: Iterable[Artwork]) -> None:
    """Attach artworks to the exhibition and mark available ones as on show."""
    artwork_ids = [artwork.id for artwork in artworks]
    if not artwork_ids:
        return

    exhibition.artworks.add(*artwork_ids)
    for artwork in Artwork.objects.select_for_update().filter(
        id__in=artwork_ids,
        status=ArtworkStatus.AVAILABLE
    ):
        set_artwork_status(artwork=artwork, status=ArtworkStatus.EXHIBITION)


def release_artworks(*, exhibition: Exhibition, artworks: Iterable[Artwork]) -> None:
    """Detach artworks and return them to `available` when no longer shown."""
    artwork_ids = [artwork.id for artwork in artworks]
    if not artwork_ids:
        return

    exhibition.artworks.remove(*artwork_ids)
    still_shown = set(
        Exhibition.artworks.through.objects
        .filter(artwork_id__in=artwork_ids)
        .values_list('artwork_id', flat=True)
    )
    for artwork in Artwork.objects.select_for_update().filter(
        id__in=artwork_ids,
        status=ArtworkStatus.EXHIBITION
    ):
        if artwork.id not in still_shown:
            set_artwork_status(artwork=artwork, status=ArtworkStatus.AVAILABLE)


def sync_artworks(*, exhibition: Exhibition, artworks: Iterable[Artwork]) -> None:
    """Make the exhibition list exactly `artworks`."""
    wanted = {artwork.id: artwork for artwork in artworks}
    current = {artwork.id: artwork for artwork in exhibition.artworks.all()}

    release_artworks(
        exhibition=exhibition,
        artworks=[a for pk, a in current.items() if pk not in wanted]
    )
    assign_artworks(
        exhibition=exhibition,
        artworks=[a for pk, a in wanted.items() if pk not in current]
    )
