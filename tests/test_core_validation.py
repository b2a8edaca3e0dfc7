"""
Tests for configuration validation utilities.
"""

import pytest
import sys
from pathlib import Path
from unittest.mock import patch, MagicMock

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from olaplay.core.validation import check_dependencies, validate_configuration, validate_and_raise
from olaplay.core.exceptions import ConfigurationError


class TestCheckDependencies:
    """Tests for check_dependencies function."""

    @patch('importlib.import_module')
    def test_check_dependencies_all_installed(self, mock_import):
        """Test check_dependencies when all dependencies are installed."""
        mock_import.return_value = MagicMock()

        all_installed, missing = check_dependencies()

        assert all_installed is True
        assert missing == []

    @patch('importlib.import_module')
    def test_check_dependencies_missing_module(self, mock_import):
        """Missing modules are reported by their distribution name."""
        def side_effect(module_name):
            if module_name == "PIL":
                raise ImportError("No module named 'PIL'")
            return MagicMock()

        mock_import.side_effect = side_effect

        all_installed, missing = check_dependencies()

        assert all_installed is False
        assert missing == ["Pillow"]


class TestValidateConfiguration:
    """Tests for validate_configuration function."""

    @patch('olaplay.core.validation.check_dependencies', return_value=(True, []))
    def test_default_configuration_is_valid(self, mock_deps):
        """The shipped configuration validates."""
        is_valid, errors = validate_configuration()

        assert is_valid is True
        assert errors == []

    @patch('olaplay.core.validation.check_dependencies', return_value=(True, []))
    def test_invalid_base_url(self, mock_deps):
        """A non-http base URL is rejected."""
        with patch.dict('olaplay.core.validation.SYNC_CONFIG', {"BASE_URL": "ftp://tracks"}):
            is_valid, errors = validate_configuration()

        assert is_valid is False
        assert any("BASE_URL" in e for e in errors)

    @patch('olaplay.core.validation.check_dependencies', return_value=(True, []))
    def test_invalid_timeout_and_log_level(self, mock_deps):
        """Several problems are all reported."""
        with patch.dict('olaplay.core.validation.SYNC_CONFIG', {"TIMEOUT": 0}), \
                patch.dict('olaplay.core.validation.LOGGING_CONFIG', {"LEVEL": "LOUD"}):
            is_valid, errors = validate_configuration()

        assert is_valid is False
        assert any("TIMEOUT" in e for e in errors)
        assert any("LOG_LEVEL" in e for e in errors)

    @patch('olaplay.core.validation.check_dependencies', return_value=(True, []))
    def test_icon_larger_than_art(self, mock_deps):
        """The icon may not exceed the art size."""
        with patch.dict('olaplay.core.validation.ARTWORK_CONFIG', {"ICON_SIZE": 1000}):
            is_valid, errors = validate_configuration()

        assert is_valid is False
        assert any("ICON_SIZE" in e for e in errors)

    @patch('olaplay.core.validation.check_dependencies', return_value=(False, ["rich"]))
    def test_missing_dependencies_reported(self, mock_deps):
        """Missing dependencies make the configuration invalid."""
        is_valid, errors = validate_configuration()

        assert is_valid is False
        assert "rich" in errors[0]


class TestValidateAndRaise:
    """Tests for validate_and_raise function."""

    @patch('olaplay.core.validation.validate_configuration', return_value=(True, []))
    def test_valid_configuration_does_not_raise(self, mock_validate):
        validate_and_raise()

    @patch('olaplay.core.validation.validate_configuration',
           return_value=(False, ["Sync TIMEOUT must be >= 1"]))
    def test_invalid_configuration_raises(self, mock_validate):
        with pytest.raises(ConfigurationError) as exc_info:
            validate_and_raise()

        assert "Sync TIMEOUT must be >= 1" in str(exc_info.value)
