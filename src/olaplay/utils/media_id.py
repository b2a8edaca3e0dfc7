"""
Hierarchical media id helpers.

A media id addresses a node of the browse tree. Categories are joined by
CATEGORY_SEPARATOR, and a playable leaf appends LEAF_SEPARATOR and the
track id, e.g. "__BY_GENRE__/Rock|a1b2c3".
"""

from typing import List, Optional

MEDIA_ID_ROOT = "__ROOT__"
MEDIA_ID_ALL = "__ALL__"
MEDIA_ID_MUSICS_BY_GENRE = "__BY_GENRE__"
MEDIA_ID_PLAYLIST = "__PLAYLIST__"

CATEGORY_SEPARATOR = "/"
LEAF_SEPARATOR = "|"


def create_media_id(music_id: Optional[str], *categories: str) -> str:
    """
    Create a media id from a list of categories and an optional track id.

    Args:
        music_id: Unique track id for playable items, or None for browse nodes
        categories: Hierarchy of categories, outermost first

    Returns:
        Hierarchy-aware media id

    Raises:
        ValueError: If a category contains a separator character
    """
    for category in categories:
        if not is_valid_category(category):
            raise ValueError(f"Invalid category: {category!r}")

    media_id = CATEGORY_SEPARATOR.join(categories)
    if music_id is not None:
        media_id += LEAF_SEPARATOR + music_id
    return media_id


def is_valid_category(category: str) -> bool:
    return (
        category is not None
        and CATEGORY_SEPARATOR not in category
        and LEAF_SEPARATOR not in category
    )


def extract_music_id(media_id: str) -> Optional[str]:
    """Extract the track id from a media id, or None for browse nodes."""
    position = media_id.find(LEAF_SEPARATOR)
    if position >= 0:
        return media_id[position + len(LEAF_SEPARATOR):]
    return None


def get_hierarchy(media_id: str) -> List[str]:
    """Extract the category hierarchy of a media id, ignoring any leaf."""
    position = media_id.find(LEAF_SEPARATOR)
    if position >= 0:
        media_id = media_id[:position]
    return media_id.split(CATEGORY_SEPARATOR)


def extract_browse_category_value(media_id: str) -> Optional[str]:
    """Return the category value (e.g. the genre name), if the id has one."""
    hierarchy = get_hierarchy(media_id)
    if len(hierarchy) == 2:
        return hierarchy[1]
    return None


def is_browseable(media_id: str) -> bool:
    return LEAF_SEPARATOR not in media_id

