"""
Track catalog - the ordered, read-only list of tracks a session plays from.
"""

from typing import Iterable, Iterator, Optional, Sequence

from .exceptions import EmptyCatalog
from .models import Track


class TrackCatalog(Sequence[Track]):
    """Ordered list of tracks, fixed once loaded.

    Supports len() and indexed reads. There is no way to insert or remove
    tracks after construction.
    """

    __slots__ = ("_tracks",)

    def __init__(self, tracks: Iterable[Track] = ()):
        self._tracks: tuple[Track, ...] = tuple(tracks)

    @classmethod
    def load(
        cls, source: Iterable[Track], origin: Optional[str] = None
    ) -> "TrackCatalog":
        """Build a catalog from an ordered source of tracks.

        Args:
            source: Tracks in playback order (not reordered)
            origin: Where the tracks came from, for the error message

        Returns:
            A non-empty catalog

        Raises:
            EmptyCatalog: If the source yielded no tracks
        """
        catalog = cls(source)
        if not catalog:
            raise EmptyCatalog(origin)
        return catalog

    def __getitem__(self, index):
        return self._tracks[index]

    def __len__(self) -> int:
        return len(self._tracks)

    def __iter__(self) -> Iterator[Track]:
        return iter(self._tracks)

    def __repr__(self) -> str:
        return f"TrackCatalog({len(self._tracks)} tracks)"
