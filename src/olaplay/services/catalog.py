"""
In-memory music catalog populated asynchronously from a sync source.

The catalog keeps one slot per track id. A load streams the full track set
from the sync source on a worker thread; collection queries (list, shuffle,
search, genres) answer only once a load has completed and return an empty
list before that. Point lookups by id always serve whatever is cached.
"""

import random
import threading
import time
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from typing import Callable, Dict, Iterable, List, Optional, Set, Union

from ..clients.sync_source import SyncSource
from ..core.config import CATALOG_CONFIG
from ..core.exceptions import InvariantViolation
from ..core.logger import get_logger
from ..models.track import CachedTrack, LifecycleState, SearchField, Track, with_artwork

logger = get_logger("services.catalog")

CatalogCallback = Callable[[bool], None]


class _Load:
    """Bookkeeping for one load request."""

    def __init__(self, generation: int, callback: Optional[CatalogCallback]):
        self.generation = generation
        self.callback = callback
        self.future: Optional[Future] = None
        self.done = threading.Event()


class MusicCatalog:
    """
    Thread-safe cache of track metadata keyed by track id.

    At most one load is current at any time. Starting a load disposes the
    previous one: a disposed load stops at its next item, never mutates the
    catalog again and never invokes its callback.
    """

    def __init__(self, source: SyncSource, executor: Optional[Executor] = None,
                 shuffle: Callable[[List[Track]], None] = random.shuffle):
        self._source = source
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(
            max_workers=CATALOG_CONFIG["LOAD_WORKERS"],
            thread_name_prefix="catalog-load",
        )
        self._shuffle = shuffle

        self._tracks: Dict[str, CachedTrack] = {}
        self._favorites: Set[str] = set()

        self._lock = threading.RLock()
        self._artwork_lock = threading.Lock()
        self._state = LifecycleState.NOT_READY
        self._generation = 0
        self._current_load: Optional[_Load] = None

    # Lifecycle

    @property
    def state(self) -> LifecycleState:
        return self._state

    def is_ready(self) -> bool:
        return self._state is LifecycleState.READY

    def __len__(self) -> int:
        with self._lock:
            return len(self._tracks)

    def load_catalog(self, callback: Optional[CatalogCallback] = None, force: bool = False) -> None:
        """
        Populate the catalog from the sync source without blocking.

        If the catalog is already ready the callback is invoked immediately
        with True. Otherwise any in-flight load is disposed and a new one is
        scheduled; its callback receives True on completion or False when
        the sync source fails. Errors are logged, never raised.

        Args:
            callback: Called with the outcome of the load
            force: Reload even when the catalog is already ready
        """
        logger.debug("load_catalog called")
        with self._lock:
            if self._state is LifecycleState.READY and not force:
                load = None
            else:
                self._dispose_current_load()
                self._generation += 1
                load = _Load(self._generation, callback)
                self._current_load = load
                self._state = LifecycleState.LOADING

        if load is None:
            self._notify(callback, True)
            return

        try:
            load.future = self._executor.submit(self._run_load, load)
        except RuntimeError as e:
            # Executor already shut down
            logger.warning(f"Could not schedule catalog load: {e}")
            self._finish_load(load, success=False)

    def wait_until_loaded(self, timeout: Optional[float] = None) -> bool:
        """
        Block until no load is in flight, then report readiness.

        Args:
            timeout: Maximum seconds to wait, or None to wait indefinitely

        Returns:
            True if the catalog is ready, False on failure or timeout
        """
        deadline = None if timeout is None else time.monotonic() + timeout
        while True:
            with self._lock:
                load = self._current_load
            if load is None:
                return self.is_ready()
            remaining = None if deadline is None else deadline - time.monotonic()
            if remaining is not None and remaining <= 0:
                return False
            if not load.done.wait(remaining):
                return False

    def shutdown(self, wait: bool = False) -> None:
        """Dispose the in-flight load and release the owned worker pool."""
        with self._lock:
            self._dispose_current_load()
            if self._state is LifecycleState.LOADING:
                self._state = LifecycleState.NOT_READY
        if self._owns_executor:
            self._executor.shutdown(wait=wait)

    def _dispose_current_load(self) -> None:
        load = self._current_load
        if load is None:
            return
        logger.debug(f"Disposing catalog load #{load.generation}")
        self._current_load = None
        if load.future is not None:
            load.future.cancel()
        load.done.set()

    def _is_current(self, load: _Load) -> bool:
        return self._current_load is load

    def _run_load(self, load: _Load) -> None:
        delivered: Set[str] = set()
        tracks: Optional[Iterable[Track]] = None
        try:
            tracks = self._source.sync_tracks()
            for track in tracks:
                with self._lock:
                    if not self._is_current(load):
                        logger.debug(f"Catalog load #{load.generation} superseded, abandoning")
                        return
                    self._tracks[track.id] = CachedTrack(track.id, track)
                delivered.add(track.id)
        except Exception as e:
            logger.warning(f"Error syncing: {e}", exc_info=True)
            self._finish_load(load, success=False)
            return
        finally:
            close = getattr(tracks, "close", None)
            if close is not None:
                close()

        self._finish_load(load, success=True, delivered=delivered)

    def _finish_load(self, load: _Load, success: bool, delivered: Optional[Set[str]] = None) -> None:
        with self._lock:
            if not self._is_current(load):
                return
            if success:
                for stale_id in set(self._tracks) - delivered:
                    del self._tracks[stale_id]
                self._state = LifecycleState.READY
            else:
                self._state = LifecycleState.NOT_READY
            self._current_load = None

        if success:
            logger.info(f"Synced successfully! {len(delivered)} tracks in catalog")
        self._notify(load.callback, success)
        load.done.set()

    @staticmethod
    def _notify(callback: Optional[CatalogCallback], success: bool) -> None:
        if callback is None:
            return
        try:
            callback(success)
        except Exception:
            logger.exception("Catalog ready callback failed")

    # Queries

    def _snapshot(self) -> List[Track]:
        with self._lock:
            if self._state is not LifecycleState.READY:
                return []
            return [cached.metadata for cached in self._tracks.values()]

    def get_all_tracks(self) -> List[Track]:
        """All cached tracks, in no particular order."""
        return self._snapshot()

    def get_shuffled_tracks(self) -> List[Track]:
        """All cached tracks in a fresh random order."""
        tracks = self._snapshot()
        self._shuffle(tracks)
        return tracks

    def search(self, field: Union[SearchField, str], query: str) -> List[Track]:
        """
        Very basic search: tracks whose field contains the query, ignoring case.

        Args:
            field: Attribute to match, as a SearchField or its name
            query: Substring to look for; an empty query matches every track

        Returns:
            Matching tracks, in no particular order
        """
        if isinstance(field, str):
            field = SearchField(field.lower())
        needle = (query or "").casefold()
        return [track for track in self._snapshot()
                if needle in track.field_value(field).casefold()]

    def search_by_title(self, query: str) -> List[Track]:
        return self.search(SearchField.TITLE, query)

    def search_by_album(self, query: str) -> List[Track]:
        return self.search(SearchField.ALBUM, query)

    def search_by_artist(self, query: str) -> List[Track]:
        return self.search(SearchField.ARTIST, query)

    def search_by_genre(self, query: str) -> List[Track]:
        return self.search(SearchField.GENRE, query)

    def get_genres(self) -> List[str]:
        """Distinct genres of the cached tracks, sorted."""
        return sorted({track.genre for track in self._snapshot() if track.genre})

    def get_track(self, track_id: str) -> Optional[Track]:
        """
        Return the metadata for the given track id.

        Not gated on readiness: during a load this serves whatever has been
        cached so far.
        """
        with self._lock:
            cached = self._tracks.get(track_id)
        return cached.metadata if cached is not None else None

    def update_artwork(self, track_id: str, art: Optional[bytes], icon: Optional[bytes]) -> None:
        """
        Attach artwork to a cached track.

        Raises:
            InvariantViolation: If no track with this id is cached
        """
        with self._artwork_lock:
            with self._lock:
                cached = self._tracks.get(track_id)
            if cached is None:
                raise InvariantViolation(
                    f"Unexpected error: inconsistent data structures in MusicCatalog "
                    f"(no track with id {track_id!r})"
                )
            cached.metadata = with_artwork(cached.metadata, art, icon)

    # Favorites

    def set_favorite(self, track_id: str, favorite: bool) -> None:
        with self._lock:
            if favorite:
                self._favorites.add(track_id)
            else:
                self._favorites.discard(track_id)

    def is_favorite(self, track_id: str) -> bool:
        with self._lock:
            return track_id in self._favorites

    def get_favorites(self) -> List[str]:
        with self._lock:
            return sorted(self._favorites)
