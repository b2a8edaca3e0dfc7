"""
Pytest configuration and shared fixtures.
"""

import pytest
import sys
from concurrent.futures import Executor, Future
from io import BytesIO
from pathlib import Path
from unittest.mock import Mock

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


class ImmediateExecutor(Executor):
    """Executor that runs submitted work in the calling thread."""

    def submit(self, fn, *args, **kwargs):
        future = Future()
        try:
            result = fn(*args, **kwargs)
        except BaseException as e:
            future.set_exception(e)
        else:
            future.set_result(result)
        return future


class ScriptedSource:
    """Sync source returning a different scripted run on every sync."""

    def __init__(self, *runs):
        self.runs = list(runs)
        self.calls = 0

    def sync_tracks(self):
        self.calls += 1
        run = self.runs.pop(0)
        if callable(run):
            return run()
        return iter(run)


@pytest.fixture
def immediate_executor() -> ImmediateExecutor:
    """Executor that makes catalog loads synchronous."""
    return ImmediateExecutor()


@pytest.fixture
def sample_tracks():
    """A small catalog."""
    from olaplay.models.track import Track
    return [
        Track(
            id="t1",
            title="Les Misérables",
            artist="Victor Hugo",
            cover_image_url="http://img.test/t1.jpg",
            audio_url="http://audio.test/t1.mp3",
            genre="Classical",
            album="Paris",
        ),
        Track(
            id="t2",
            title="Tokyo Drift",
            artist="Teriyaki Boyz",
            cover_image_url="http://img.test/t2.jpg",
            audio_url="http://audio.test/t2.mp3",
            genre="Hip Hop",
            album="Beef or Chicken",
        ),
        Track(
            id="t3",
            title="Paint It Black",
            artist="The Rolling Stones",
            cover_image_url="",
            audio_url="http://audio.test/t3.mp3",
            genre="Rock",
            album="Aftermath",
        ),
    ]


@pytest.fixture
def static_source(sample_tracks):
    """In-memory sync source over the sample tracks."""
    from olaplay.clients.sync_source import StaticSyncSource
    return StaticSyncSource(sample_tracks)


@pytest.fixture
def ready_catalog(static_source, immediate_executor):
    """Catalog already loaded with the sample tracks."""
    from olaplay.services.catalog import MusicCatalog
    catalog = MusicCatalog(static_source, executor=immediate_executor)
    catalog.load_catalog()
    assert catalog.is_ready()
    return catalog


@pytest.fixture
def api_records():
    """Track records as served by the remote API."""
    return [
        {
            "song": "Les Misérables",
            "url": "http://audio.test/t1.mp3",
            "artists": "Victor Hugo",
            "cover_image": "http://img.test/t1.jpg",
        },
        {
            "id": "t2",
            "song": "Tokyo Drift",
            "url": "http://audio.test/t2.mp3",
            "artists": "Teriyaki Boyz",
            "cover_image": "http://img.test/t2.jpg",
            "genre": "Hip Hop",
        },
    ]


@pytest.fixture
def mock_session():
    """Mock requests session with a successful empty response."""
    session = Mock()
    session.headers = {}
    response = Mock()
    response.status_code = 200
    response.raise_for_status = Mock(return_value=None)
    response.json = Mock(return_value=[])
    response.content = b""
    session.get = Mock(return_value=response)
    return session


@pytest.fixture
def cover_bytes() -> bytes:
    """PNG image larger than the maximum art size."""
    from PIL import Image
    buffer = BytesIO()
    Image.new("RGB", (1000, 500), "red").save(buffer, format="PNG")
    return buffer.getvalue()
