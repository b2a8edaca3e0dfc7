"""
Browse tree and playlist models.
"""

from dataclasses import dataclass, field
from enum import Flag
from typing import List


class MediaItemFlag(Flag):
    """Whether a browse node has children, can be played, or both."""
    BROWSABLE = 1
    PLAYABLE = 2


@dataclass(frozen=True)
class MediaItem:
    """One node of the browse tree."""
    media_id: str
    title: str
    flags: MediaItemFlag
    subtitle: str = ""
    icon_uri: str = ""

    @property
    def is_browsable(self) -> bool:
        return bool(self.flags & MediaItemFlag.BROWSABLE)

    @property
    def is_playable(self) -> bool:
        return bool(self.flags & MediaItemFlag.PLAYABLE)


@dataclass
class Playlist:
    """A named, ordered list of track ids."""
    id: str
    name: str
    media_ids: List[str] = field(default_factory=list)
