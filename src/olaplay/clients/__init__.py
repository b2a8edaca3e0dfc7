"""
Client modules for track sources.
"""

from .ola_api import OlaPlayClient
from .sync_source import SyncSource, StaticSyncSource

__all__ = [
    'OlaPlayClient',
    'SyncSource',
    'StaticSyncSource'
]
