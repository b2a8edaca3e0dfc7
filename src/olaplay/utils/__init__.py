"""
Utility modules for olaplay.
"""

from .media_id import (
    create_media_id,
    extract_music_id,
    extract_browse_category_value,
    get_hierarchy,
    is_browseable,
)

__all__ = [
    'create_media_id',
    'extract_music_id',
    'extract_browse_category_value',
    'get_hierarchy',
    'is_browseable'
]
