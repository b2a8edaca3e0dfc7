"""
Browse tree built from catalog snapshots.
"""

from typing import List, Optional

from ..core.config import BROWSE_CONFIG
from ..core.logger import get_logger
from ..models.browse import MediaItem, MediaItemFlag, Playlist
from ..models.track import Track
from ..utils.media_id import (
    MEDIA_ID_ALL,
    MEDIA_ID_MUSICS_BY_GENRE,
    MEDIA_ID_PLAYLIST,
    MEDIA_ID_ROOT,
    create_media_id,
    extract_browse_category_value,
    get_hierarchy,
    is_browseable,
    is_valid_category,
)
from .catalog import MusicCatalog

logger = get_logger("services.browse_tree")

PLAYLIST_CATEGORY_VALUE = "0"


class BrowseTreeBuilder:
    """Turns catalog queries into browsable and playable media items."""

    def __init__(self, catalog: MusicCatalog, playlist: Optional[Playlist] = None):
        self.catalog = catalog
        self.playlist = playlist

    def get_children(self, media_id: str) -> List[MediaItem]:
        """
        List the children of a browse node.

        Args:
            media_id: Media id of a browsable node

        Returns:
            Child items; empty for playable ids and unknown nodes
        """
        if not is_browseable(media_id):
            return []

        logger.debug(f"Children of {media_id}")

        if media_id == MEDIA_ID_ROOT:
            return self._root_items()
        if media_id == MEDIA_ID_ALL:
            return [create_media_item(track, MEDIA_ID_ALL) for track in self.catalog.get_all_tracks()]
        if media_id == MEDIA_ID_PLAYLIST:
            return [create_media_item(track, MEDIA_ID_PLAYLIST) for track in self._playlist_tracks()]
        if media_id == MEDIA_ID_MUSICS_BY_GENRE:
            return [self._genre_item(genre) for genre in self.catalog.get_genres()
                    if is_valid_category(genre)]

        hierarchy = get_hierarchy(media_id)
        if hierarchy[0] == MEDIA_ID_MUSICS_BY_GENRE:
            genre = extract_browse_category_value(media_id)
            if genre is not None:
                return [create_media_item(track, MEDIA_ID_MUSICS_BY_GENRE)
                        for track in self.catalog.get_all_tracks()
                        if track.genre == genre]

        logger.warning(f"Skipping unmatched mediaId: {media_id}")
        return []

    def _root_items(self) -> List[MediaItem]:
        return [
            MediaItem(
                media_id=MEDIA_ID_ALL,
                title=BROWSE_CONFIG["ALL_TITLE"],
                subtitle=BROWSE_CONFIG["ALL_SUBTITLE"],
                icon_uri=BROWSE_CONFIG["ICON_URI"],
                flags=MediaItemFlag.BROWSABLE,
            ),
            MediaItem(
                media_id=MEDIA_ID_MUSICS_BY_GENRE,
                title=BROWSE_CONFIG["GENRES_TITLE"],
                subtitle=BROWSE_CONFIG["GENRES_SUBTITLE"],
                icon_uri=BROWSE_CONFIG["ICON_URI"],
                flags=MediaItemFlag.BROWSABLE,
            ),
            MediaItem(
                media_id=MEDIA_ID_PLAYLIST,
                title=BROWSE_CONFIG["PLAYLIST_TITLE"],
                icon_uri=BROWSE_CONFIG["ICON_URI"],
                flags=MediaItemFlag.BROWSABLE,
            ),
        ]

    def _genre_item(self, genre: str) -> MediaItem:
        return MediaItem(
            media_id=create_media_id(None, MEDIA_ID_MUSICS_BY_GENRE, genre),
            title=genre,
            subtitle=BROWSE_CONFIG["GENRE_SUBTITLE"].format(genre=genre),
            flags=MediaItemFlag.BROWSABLE,
        )

    def _playlist_tracks(self) -> List[Track]:
        """Resolve the playlist ids (favorites by default) against the catalog."""
        media_ids = self.playlist.media_ids if self.playlist is not None else self.catalog.get_favorites()
        tracks = []
        for track_id in media_ids:
            if track_id is None:
                break
            track = self.catalog.get_track(track_id)
            if track is None:
                logger.debug(f"Playlist entry {track_id} is not in the catalog")
                continue
            tracks.append(track)
        return tracks


def create_media_item(track: Track, category: str) -> MediaItem:
    """
    Create a playable item whose media id records where it was browsed from.

    The hierarchy lets a player rebuild the right queue (all songs, one
    genre, the playlist) when the item is selected.
    """
    if category == MEDIA_ID_MUSICS_BY_GENRE:
        media_id = create_media_id(track.id, category, track.genre)
    elif category == MEDIA_ID_PLAYLIST:
        media_id = create_media_id(track.id, category, PLAYLIST_CATEGORY_VALUE)
    else:
        media_id = create_media_id(track.id, category, category)

    return MediaItem(
        media_id=media_id,
        title=track.title,
        subtitle=track.artist,
        icon_uri=track.cover_image_url,
        flags=MediaItemFlag.PLAYABLE,
    )
