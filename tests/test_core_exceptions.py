"""
Tests for custom exceptions.
"""

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from olaplay.core.exceptions import (
    OlaPlayError,
    CatalogError,
    SyncError,
    TrackFormatError,
    ConfigurationError,
    APIError,
    NetworkError,
    InvariantViolation
)


class TestExceptions:
    """Tests for custom exception classes."""

    @pytest.mark.parametrize("exc_class", [
        CatalogError, SyncError, TrackFormatError, ConfigurationError,
        APIError, NetworkError, InvariantViolation,
    ])
    def test_inherits_from_olaplay_error(self, exc_class):
        """Every custom exception shares the package base class."""
        assert issubclass(exc_class, OlaPlayError)
        with pytest.raises(OlaPlayError):
            raise exc_class("failed")

    def test_track_format_error_is_sync_error(self):
        """Malformed records are a kind of sync failure."""
        assert issubclass(TrackFormatError, SyncError)

    def test_network_error_inherits_from_connection_error(self):
        """Test that NetworkError inherits from ConnectionError."""
        assert issubclass(NetworkError, ConnectionError)

    def test_invariant_violation_is_not_catalog_error(self):
        """Invariant violations are distinct from ordinary catalog failures."""
        assert not issubclass(InvariantViolation, CatalogError)
        assert issubclass(InvariantViolation, AssertionError)

        with pytest.raises(InvariantViolation):
            try:
                raise InvariantViolation("broken")
            except CatalogError:
                pytest.fail("InvariantViolation must not be handled as CatalogError")

    def test_exception_message_preserved(self):
        """Test that exception messages are preserved."""
        error = SyncError("Custom message")
        assert str(error) == "Custom message"

    def test_exception_chaining(self):
        """Test that exceptions can be chained."""
        try:
            raise ValueError("Original error")
        except ValueError as e:
            with pytest.raises(APIError) as exc_info:
                raise APIError("Wrapped error") from e

            assert exc_info.value.__cause__ == e
