"""PyRGE package initialization with version and common utilities.

The module provides:
- VERSION: Package version string
- logging_version(): Version logging utility
- entrypoint(): Decorator for main entry point exception handling
"""
import logging
import sys
import traceback
from functools import wraps
from typing import Any, Callable

from PyRGE.core.exceptions import RGEError

VERSION = "0.1.0"

logger = logging.getLogger(__name__)


def logging_version(logger: Any) -> None:
    """Log PyRGE and Python version information.

    Args:
        logger: Logger instance to use for version output
    """
    logger.info("PyRGE version {} with Python{}.{}.{}".format(
                *[VERSION] + list(sys.version_info[:3])))
    for line in sys.version.split('\n'):
        logger.debug(line)


def entrypoint(logger: Any) -> Callable[[Callable[[], None]], Callable[[], None]]:
    """Decorator for main entry point exception handling.

    PyRGE errors are logged as critical and end the process with exit
    status 1. KeyboardInterrupt is logged and the process ends quietly.

    Args:
        logger: Logger instance for status messages

    Example:
        @entrypoint(logger)
        def main():
            pass
    """
    def _entrypoint_wrapper_base(main_func: Callable[[], None]) -> Callable[[], None]:
        @wraps(main_func)
        def _inner() -> None:
            try:
                main_func()
                logger.info("PyRGE finished.")
            except RGEError as e:
                logger.critical(str(e))
                if 0 < logger.getEffectiveLevel() <= logging.DEBUG:
                    traceback.print_exc()
                sys.exit(1)
            except KeyboardInterrupt:
                sys.stderr.write("\r\033[K")
                sys.stderr.flush()
                logger.info("Got KeyboardInterrupt. bye")
                if 0 < logger.getEffectiveLevel() <= logging.DEBUG:
                    traceback.print_exc()
        return _inner
    return _entrypoint_wrapper_base
