"""
Logging setup for pkgresolve.

A single stderr sink for people at a terminal. Machine mode (the CLI default)
silences it so resolution output stays parseable. A rotating file sink under
~/.pkgresolve/logs can be switched on for long rewrite sessions.
"""

import os
import sys

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | "
    "<cyan>{name}</cyan> - <level>{message}</level>"
)

_configured = False


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").lower() in ("1", "true", "yes")


def setup_logging(level="INFO", suppress_console=None, enable_file_logging=None, force=False):
    """
    Install the loguru sinks.

    Runs once unless force=True; later calls are no-ops so importing modules
    can't stack duplicate sinks.

    Args:
        level: Console level
        suppress_console: Drop the stderr sink. None reads PKGRESOLVE_MACHINE_MODE.
        enable_file_logging: Add the rotating file sink. None reads PKGRESOLVE_FILE_LOGGING.
        force: Replace sinks installed by an earlier call
    """
    global _configured

    if _configured and not force:
        return
    _configured = True

    logger.remove()

    if suppress_console is None:
        suppress_console = _env_flag("PKGRESOLVE_MACHINE_MODE")
    if not suppress_console:
        logger.add(sys.stderr, level=level, format=CONSOLE_FORMAT, colorize=True)

    if enable_file_logging is None:
        enable_file_logging = _env_flag("PKGRESOLVE_FILE_LOGGING")
    if enable_file_logging:
        from pkgresolve.paths import get_paths
        paths = get_paths()
        paths.ensure_dirs()
        logger.add(
            paths.logs_dir / "pkgresolve.log",
            level="DEBUG",
            rotation="5 MB",
            retention=3,
            compression="gz",
            catch=True,
        )


setup_logging()
