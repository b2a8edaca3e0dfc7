"""
Artwork loading service: downloads cover images and attaches them to the catalog.
"""

from io import BytesIO
from typing import Dict, Optional, Tuple

import requests
from PIL import Image

from ..core.config import ARTWORK_CONFIG, SYNC_CONFIG
from ..core.logger import get_logger
from .catalog import MusicCatalog

logger = get_logger("services.artwork")


class ArtworkLoader:
    """Fetches cover art for catalog tracks and derives art and icon images."""

    def __init__(self, catalog: MusicCatalog, session: Optional[requests.Session] = None,
                 timeout: Optional[int] = None):
        self.catalog = catalog
        self.session = session or requests.Session()
        self.session.headers.update({'User-Agent': SYNC_CONFIG["USER_AGENT"]})
        self.timeout = timeout or ARTWORK_CONFIG["TIMEOUT"]
        # Key: cover image URL, Value: (art, icon) JPEG bytes
        self._cache: Dict[str, Tuple[bytes, bytes]] = {}

    def fetch(self, track_id: str) -> bool:
        """
        Attach artwork to a cached track.

        Args:
            track_id: Id of a track in the catalog

        Returns:
            True if the track carries artwork afterwards, False otherwise
        """
        track = self.catalog.get_track(track_id)
        if track is None:
            logger.debug(f"No track {track_id} in catalog, skipping artwork")
            return False
        if track.has_artwork:
            return True
        if not track.cover_image_url:
            return False

        images = self._cache.get(track.cover_image_url)
        if images is None:
            images = self._download(track.cover_image_url)
            if images is None:
                return False
            self._cache[track.cover_image_url] = images

        art, icon = images
        self.catalog.update_artwork(track_id, art, icon)
        return True

    def _download(self, url: str) -> Optional[Tuple[bytes, bytes]]:
        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            logger.warning(f"Error fetching artwork from {url}: {e}")
            return None

        try:
            return scale_artwork(response.content)
        except (OSError, ValueError) as e:
            logger.warning(f"Could not decode artwork from {url}: {e}")
            return None


def scale_artwork(raw_bytes: bytes) -> Tuple[bytes, bytes]:
    """
    Derive the full size art and the small icon from an encoded image.

    Both are re-encoded as JPEG and never upscaled.

    Raises:
        OSError: If the bytes are not a decodable image
    """
    with Image.open(BytesIO(raw_bytes)) as cover:
        cover.load()
        if cover.mode != "RGB":
            cover = cover.convert("RGB")
        art = _encode(cover, ARTWORK_CONFIG["MAX_ART_SIZE"])
        icon = _encode(cover, ARTWORK_CONFIG["ICON_SIZE"])
    return art, icon


def _encode(image: Image.Image, max_size: int) -> bytes:
    copy = image.copy()
    copy.thumbnail((max_size, max_size))
    buffer = BytesIO()
    copy.save(buffer, format="JPEG", quality=ARTWORK_CONFIG["JPEG_QUALITY"])
    return buffer.getvalue()
