"""
Ola Play API Client Module
Streams the remote track list for the music catalog.
"""

import requests
from typing import Iterator, Optional

from ..core.config import SYNC_CONFIG
from ..core.exceptions import APIError, NetworkError, SyncError
from ..core.logger import get_logger
from ..models.track import Track

logger = get_logger("clients.ola_api")


class OlaPlayClient:
    """HTTP sync source for the Ola Play track list."""

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[int] = None,
                 session: Optional[requests.Session] = None):
        self.base_url = (base_url or SYNC_CONFIG["BASE_URL"]).rstrip("/")
        self.tracks_url = f"{self.base_url}{SYNC_CONFIG['TRACKS_PATH']}"
        self.timeout = timeout or SYNC_CONFIG["TIMEOUT"]

        self.session = session or requests.Session()
        self.session.headers.update({
            'User-Agent': SYNC_CONFIG["USER_AGENT"],
            'Accept': 'application/json'
        })

    def _fetch_records(self) -> list:
        """
        Fetch the raw track records.

        Raises:
            NetworkError: If the server cannot be reached
            APIError: If the server answers with an error status
            SyncError: If the payload is not a JSON array
        """
        logger.debug(f"Requesting track list from {self.tracks_url}")
        try:
            response = self.session.get(self.tracks_url, timeout=self.timeout)
        except (requests.exceptions.ConnectionError, requests.exceptions.Timeout) as e:
            raise NetworkError(f"Could not reach {self.tracks_url}: {e}") from e
        except requests.exceptions.RequestException as e:
            raise SyncError(f"Request to {self.tracks_url} failed: {e}") from e

        try:
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            raise APIError(f"Track list request failed with HTTP {response.status_code}") from e

        try:
            payload = response.json()
        except ValueError as e:
            raise SyncError("Track list response is not valid JSON") from e

        if not isinstance(payload, list):
            raise SyncError(f"Expected a JSON array of tracks, got {type(payload).__name__}")
        return payload

    def sync_tracks(self) -> Iterator[Track]:
        """
        Yield every track of the remote catalog in server order.

        The request is made lazily, on the first call to next(), so building
        the iterator never blocks.
        """
        records = self._fetch_records()
        logger.debug(f"Received {len(records)} track records")
        for record in records:
            yield Track.from_api(record)

    def get_track(self, track_id: str) -> Optional[Track]:
        """Fetch a single track by id, or None if the catalog does not have it."""
        for track in self.sync_tracks():
            if track.id == track_id:
                return track
        return None
