"""
olaplay - Music Catalog
Main entry point for the command line application.
"""

import sys
from pathlib import Path

try:
    _package = __package__
except NameError:
    _package = None

if not _package:
    _script_path = Path(__file__).resolve()
    src_path = _script_path.parent.parent
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))
    from olaplay.core import setup_logging
    from olaplay.core.validation import validate_and_raise
    from olaplay.ui.cli import OlaPlayCLI
else:
    from .core import setup_logging
    from .core.validation import validate_and_raise
    from .ui.cli import OlaPlayCLI

logger = setup_logging()


def main(args=None) -> int:
    """Main entry point."""
    logger.debug("Starting olaplay")
    try:
        try:
            validate_and_raise()
            logger.debug("Configuration validation passed")
        except Exception as e:
            logger.error(f"Configuration validation failed: {e}")
            raise

        cli = OlaPlayCLI()
        return cli.run(args)
    except KeyboardInterrupt:
        logger.debug("Application interrupted by user")
        raise
    except Exception:
        logger.exception("Unhandled exception occurred")
        raise
    finally:
        logger.debug("Application shutting down")


if __name__ == "__main__":
    sys.exit(main())
