"""
Sync source interface and an in-memory implementation.

A sync source delivers the full track set as an iterator: every yielded
Track is one item, raising ends the sync with an error, and exhaustion
ends it successfully.
"""

from typing import Iterable, Iterator, List, Optional, Protocol, runtime_checkable

from ..models.track import Track


@runtime_checkable
class SyncSource(Protocol):
    """Producer of the full track set."""

    def sync_tracks(self) -> Iterator[Track]:
        ...


class StaticSyncSource:
    """Sync source over a fixed list of tracks, optionally failing at the end."""

    def __init__(self, tracks: Iterable[Track], error: Optional[BaseException] = None):
        self.tracks: List[Track] = list(tracks)
        self.error = error

    def sync_tracks(self) -> Iterator[Track]:
        for track in self.tracks:
            yield track
        if self.error is not None:
            raise self.error
