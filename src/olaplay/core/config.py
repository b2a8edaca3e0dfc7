"""
Configuration for the Ola Play catalog.
Contains all constants, settings, and global parameters.
"""

import os

# Project Information
PROJECT_NAME = "olaplay"
PROJECT_VERSION = "1.0.0"
PROJECT_DESCRIPTION = "Ola Play music catalog - sync, search and browse a remote track list"

# Sync Source Configuration
SYNC_CONFIG = {
    "BASE_URL": os.environ.get("OLAPLAY_BASE_URL", "http://starlord.hackerearth.com"),
    "TRACKS_PATH": "/studio",
    "USER_AGENT": f"{PROJECT_NAME}/{PROJECT_VERSION}",
    "TIMEOUT": int(os.environ.get("OLAPLAY_TIMEOUT", "30")),
}

# Catalog Configuration
CATALOG_CONFIG = {
    "LOAD_WAIT_TIMEOUT": 60,  # seconds, used by the CLI only
    "LOAD_WORKERS": 2,        # a disposed load may still be draining its source
    "TRACK_ID_LENGTH": 16,    # length of ids derived from audio URLs
}

# Artwork Configuration
ARTWORK_CONFIG = {
    "MAX_ART_SIZE": 800,   # high resolution art, e.g. lock screen background
    "ICON_SIZE": 128,      # small icon for list entries
    "JPEG_QUALITY": 90,
    "TIMEOUT": 10,
}

# Browse Tree Configuration
BROWSE_CONFIG = {
    "ALL_TITLE": "All songs",
    "ALL_SUBTITLE": "Songs by Title",
    "GENRES_TITLE": "Genres",
    "GENRES_SUBTITLE": "Songs by Genre",
    "GENRE_SUBTITLE": "Songs in {genre}",
    "PLAYLIST_TITLE": "Playlist",
    "ICON_URI": "android.resource://com.shaleenjain.ola.play/drawable/ic_by_genre",
}

# Logging Configuration
LOGGING_CONFIG = {
    "LEVEL": os.environ.get("OLAPLAY_LOG_LEVEL", "INFO").upper(),
    "FORMAT": "%(levelname)s - %(name)s - %(message)s",
}

# Error Messages
ERROR_MESSAGES = {
    "SYNC_FAILED": "Could not load the music catalog.",
    "NO_RESULTS": "No tracks found.",
    "TRACK_NOT_FOUND": "No track with id {track_id}.",
    "LOAD_TIMEOUT": "Timed out waiting for the music catalog.",
}
