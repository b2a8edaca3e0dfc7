"""
Custom exceptions for olaplay.
"""


class OlaPlayError(Exception):
    """Base exception for olaplay."""
    pass


class CatalogError(OlaPlayError):
    """Exception raised when catalog operations fail."""
    pass


class SyncError(OlaPlayError):
    """Exception raised when the sync source cannot deliver tracks."""
    pass


class TrackFormatError(SyncError):
    """Exception raised when a remote track record is malformed."""
    pass


class ConfigurationError(OlaPlayError):
    """Exception raised when configuration is invalid."""
    pass


class APIError(OlaPlayError):
    """Exception raised when API calls fail."""
    pass


class NetworkError(OlaPlayError, ConnectionError):
    """Exception raised when network operations fail."""
    pass


class InvariantViolation(OlaPlayError, AssertionError):
    """
    Raised when internal data structures are inconsistent.

    This signals a caller bug, not an operational failure, and is kept
    outside the CatalogError branch so it is never handled as one.
    """
    pass
