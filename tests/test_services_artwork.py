"""
Tests for the artwork loader.
"""

import pytest
import requests
import sys
from io import BytesIO
from pathlib import Path
from unittest.mock import Mock

from PIL import Image

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from olaplay.services.artwork import ArtworkLoader, scale_artwork


def image_size(data: bytes):
    with Image.open(BytesIO(data)) as image:
        return image.size, image.format


class TestScaleArtwork:
    """Tests for scale_artwork."""

    def test_scales_art_and_icon(self, cover_bytes):
        art, icon = scale_artwork(cover_bytes)

        assert image_size(art) == ((800, 400), "JPEG")
        assert image_size(icon) == ((128, 64), "JPEG")

    def test_never_upscales(self):
        buffer = BytesIO()
        Image.new("RGBA", (64, 64), (0, 0, 255, 128)).save(buffer, format="PNG")

        art, icon = scale_artwork(buffer.getvalue())

        assert image_size(art)[0] == (64, 64)
        assert image_size(icon)[0] == (64, 64)

    def test_rejects_non_image(self):
        with pytest.raises(OSError):
            scale_artwork(b"not an image")


class TestArtworkLoader:
    """Tests for ArtworkLoader.fetch."""

    def test_fetch_attaches_artwork(self, ready_catalog, mock_session, cover_bytes):
        mock_session.get.return_value.content = cover_bytes
        loader = ArtworkLoader(ready_catalog, session=mock_session)

        assert loader.fetch("t1") is True

        track = ready_catalog.get_track("t1")
        assert track.has_artwork
        assert image_size(track.icon)[0] == (128, 64)
        mock_session.get.assert_called_once_with("http://img.test/t1.jpg", timeout=10)

    def test_fetch_skips_tracks_with_artwork(self, ready_catalog, mock_session):
        ready_catalog.update_artwork("t1", b"art", b"icon")
        loader = ArtworkLoader(ready_catalog, session=mock_session)

        assert loader.fetch("t1") is True
        mock_session.get.assert_not_called()

    def test_fetch_reuses_downloaded_images(self, ready_catalog, mock_session, cover_bytes):
        mock_session.get.return_value.content = cover_bytes
        loader = ArtworkLoader(ready_catalog, session=mock_session)

        loader.fetch("t1")
        ready_catalog.load_catalog(force=True)
        loader.fetch("t1")

        assert mock_session.get.call_count == 1
        assert ready_catalog.get_track("t1").has_artwork

    def test_fetch_unknown_track(self, ready_catalog, mock_session):
        loader = ArtworkLoader(ready_catalog, session=mock_session)

        assert loader.fetch("missing") is False
        mock_session.get.assert_not_called()

    def test_fetch_track_without_cover(self, ready_catalog, mock_session):
        loader = ArtworkLoader(ready_catalog, session=mock_session)

        assert loader.fetch("t3") is False
        mock_session.get.assert_not_called()

    def test_fetch_network_error(self, ready_catalog, mock_session):
        mock_session.get.side_effect = requests.exceptions.ConnectionError("offline")
        loader = ArtworkLoader(ready_catalog, session=mock_session)

        assert loader.fetch("t1") is False
        assert not ready_catalog.get_track("t1").has_artwork

    def test_fetch_http_error(self, ready_catalog, mock_session):
        mock_session.get.return_value.raise_for_status.side_effect = requests.exceptions.HTTPError("404")
        loader = ArtworkLoader(ready_catalog, session=mock_session)

        assert loader.fetch("t1") is False

    def test_fetch_undecodable_image(self, ready_catalog, mock_session):
        mock_session.get.return_value.content = b"<html>not found</html>"
        loader = ArtworkLoader(ready_catalog, session=mock_session)

        assert loader.fetch("t1") is False
        assert not ready_catalog.get_track("t1").has_artwork
