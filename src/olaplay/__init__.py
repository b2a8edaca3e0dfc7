"""
olaplay - music catalog with asynchronous sync, search and browse.
"""

from .core.config import PROJECT_VERSION as __version__
from .models.track import Track, SearchField, LifecycleState
from .services.catalog import MusicCatalog

__all__ = [
    '__version__',
    'Track',
    'SearchField',
    'LifecycleState',
    'MusicCatalog'
]
