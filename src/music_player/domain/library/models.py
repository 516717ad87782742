"""
Music library domain models.

Contains data structures for representing playable tracks.
"""

from typing import NamedTuple, Optional


class Track(NamedTuple):
    """Represents one playable file.

    Tracks are immutable: the title is derived once from the filename and the
    duration, once probed, never changes.
    """
    path: str  # Filesystem location, opaque to the playback core
    title: str
    duration: Optional[float] = None  # in seconds, None when unknown
