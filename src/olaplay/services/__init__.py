"""
Core services for olaplay.
"""

from .catalog import MusicCatalog
from .browse_tree import BrowseTreeBuilder
from .artwork import ArtworkLoader

__all__ = [
    'MusicCatalog',
    'BrowseTreeBuilder',
    'ArtworkLoader'
]
