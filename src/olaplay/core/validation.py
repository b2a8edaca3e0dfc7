"""
Configuration validation utilities.
"""

import importlib
from typing import List, Tuple
from urllib.parse import urlparse
from .config import (
    SYNC_CONFIG,
    ARTWORK_CONFIG,
    CATALOG_CONFIG,
    LOGGING_CONFIG,
)
from .exceptions import ConfigurationError


def check_dependencies() -> Tuple[bool, List[str]]:
    """
    Check if all required dependencies are installed.

    Returns:
        Tuple of (all_installed, list_of_missing_dependencies)
    """
    required_packages = {
        "requests": "requests",
        "rich": "rich",
        "PIL": "Pillow",
    }

    missing = []
    for module_name, package_name in required_packages.items():
        try:
            importlib.import_module(module_name)
        except ImportError:
            missing.append(package_name)

    return len(missing) == 0, missing


def validate_configuration() -> Tuple[bool, List[str]]:
    """
    Validate application configuration.

    Returns:
        Tuple of (is_valid, list_of_errors)
    """
    errors = []

    deps_ok, missing_deps = check_dependencies()
    if not deps_ok:
        errors.append(
            f"Missing required dependencies: {', '.join(missing_deps)}. "
            f"Please install them with: pip install -e ."
        )

    parsed = urlparse(SYNC_CONFIG["BASE_URL"])
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        errors.append(f"Sync BASE_URL must be an http(s) URL, got {SYNC_CONFIG['BASE_URL']!r}")

    if SYNC_CONFIG["TIMEOUT"] < 1:
        errors.append("Sync TIMEOUT must be >= 1")

    if ARTWORK_CONFIG["ICON_SIZE"] < 1 or ARTWORK_CONFIG["MAX_ART_SIZE"] < ARTWORK_CONFIG["ICON_SIZE"]:
        errors.append("Artwork sizes must satisfy 1 <= ICON_SIZE <= MAX_ART_SIZE")

    if not 1 <= ARTWORK_CONFIG["JPEG_QUALITY"] <= 95:
        errors.append("Artwork JPEG_QUALITY must be between 1 and 95")

    if CATALOG_CONFIG["LOAD_WAIT_TIMEOUT"] <= 0:
        errors.append("Catalog LOAD_WAIT_TIMEOUT must be > 0")

    valid_log_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    if LOGGING_CONFIG["LEVEL"] not in valid_log_levels:
        errors.append(f"LOG_LEVEL must be one of: {', '.join(valid_log_levels)}")

    is_valid = len(errors) == 0
    return is_valid, errors


def validate_and_raise():
    """
    Validate configuration and raise ConfigurationError if invalid.
    """
    is_valid, errors = validate_configuration()
    if not is_valid:
        error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        raise ConfigurationError(error_msg)
