"""
Track models for the music catalog.
"""

import hashlib
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict, Optional

from ..core.config import CATALOG_CONFIG
from ..core.exceptions import TrackFormatError


class SearchField(Enum):
    """Track attributes that can be searched."""
    TITLE = "title"
    ALBUM = "album"
    ARTIST = "artist"
    GENRE = "genre"


class LifecycleState(Enum):
    """Readiness of a catalog."""
    NOT_READY = "not_ready"
    LOADING = "loading"
    READY = "ready"


@dataclass(frozen=True)
class Track:
    """Immutable metadata for one audio item."""
    id: str
    title: str
    artist: str
    cover_image_url: str
    audio_url: str
    genre: str = ""
    album: str = ""
    art: Optional[bytes] = None
    icon: Optional[bytes] = None

    @classmethod
    def from_api(cls, record: Dict[str, Any]) -> "Track":
        """
        Build a Track from a remote catalog record.

        The remote API names fields after the player UI ("song", "artists",
        "cover_image", "url"). Records without an explicit id are keyed by a
        digest of their audio URL so repeated syncs produce the same id.

        Raises:
            TrackFormatError: If the record is not a mapping or carries
                neither an id nor an audio URL.
        """
        if not isinstance(record, dict):
            raise TrackFormatError(f"Track record must be an object, got {type(record).__name__}")

        audio_url = _text(record.get("url"))
        track_id = _text(record.get("id"))
        if not track_id:
            if not audio_url:
                raise TrackFormatError(f"Track record has neither id nor url: {record!r}")
            track_id = track_id_for_url(audio_url)

        return cls(
            id=track_id,
            title=_text(record.get("song") or record.get("title")),
            artist=_text(record.get("artists") or record.get("artist")),
            cover_image_url=_text(record.get("cover_image")),
            audio_url=audio_url,
            genre=_text(record.get("genre")),
            album=_text(record.get("album")),
        )

    def field_value(self, field: SearchField) -> str:
        """Get the text of a searchable attribute."""
        return getattr(self, field.value) or ""

    @property
    def has_artwork(self) -> bool:
        return self.art is not None and self.icon is not None


class CachedTrack:
    """Catalog slot for a track: fixed id, replaceable metadata."""

    __slots__ = ("_id", "metadata")

    def __init__(self, track_id: str, metadata: Track):
        self._id = track_id
        self.metadata = metadata

    @property
    def id(self) -> str:
        return self._id

    def __repr__(self) -> str:
        return f"CachedTrack(id={self._id!r}, metadata={self.metadata!r})"


def with_artwork(track: Track, art: Optional[bytes], icon: Optional[bytes]) -> Track:
    """Return a copy of track carrying the given art and icon images."""
    return replace(track, art=art, icon=icon)


def track_id_for_url(audio_url: str) -> str:
    """Derive a stable track id from an audio URL."""
    digest = hashlib.sha1(audio_url.encode("utf-8")).hexdigest()
    return digest[:CATALOG_CONFIG["TRACK_ID_LENGTH"]]


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()
