"""
User interface components for olaplay.
"""

from .cli import OlaPlayCLI
from .formatters import DisplayFormatters

__all__ = [
    'OlaPlayCLI',
    'DisplayFormatters'
]
