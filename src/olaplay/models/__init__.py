"""
Data models for olaplay.
"""

from .track import Track, CachedTrack, SearchField, LifecycleState, with_artwork, track_id_for_url
from .browse import MediaItem, MediaItemFlag, Playlist

__all__ = [
    'Track',
    'CachedTrack',
    'SearchField',
    'LifecycleState',
    'with_artwork',
    'track_id_for_url',
    'MediaItem',
    'MediaItemFlag',
    'Playlist'
]
