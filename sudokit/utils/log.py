"""Logger factory shared by every sudokit module."""

import logging
import os
import sys
from typing import Optional

from sudokit.common.constants import LOG_LEVEL_ENV_VAR

_LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(filename)s:%(lineno)d] %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_ROOT_NAME = "sudokit"


def _resolve_level(level: Optional[str]) -> int:
    name = (level or os.environ.get(LOG_LEVEL_ENV_VAR) or "INFO").upper()
    resolved = logging.getLevelName(name)
    if not isinstance(resolved, int):
        raise ValueError(f"Invalid log level: {name}")
    return resolved


def get_logger(name: Optional[str] = None, level: Optional[str] = None) -> logging.Logger:
    """Get a logger under the `sudokit` hierarchy.

    Args:
        name (`str`): Logger name, usually `__name__`. Defaults to the package root.
        level (`str`): Log level. Falls back to `$SUDOKIT_LOG_LEVEL`, then INFO.

    Returns:
        `logging.Logger`: A logger writing to stderr.
    """
    if not name:
        name = _ROOT_NAME
    elif name != _ROOT_NAME and not name.startswith(_ROOT_NAME + "."):
        name = f"{_ROOT_NAME}.{name}"

    root = logging.getLogger(_ROOT_NAME)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt=_DATE_FORMAT))
        root.addHandler(handler)
        root.propagate = False
        root.setLevel(_resolve_level(None))

    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(_resolve_level(level))
    return logger


def set_log_level(level: str) -> None:
    """Change the level of every sudokit logger at once."""
    logging.getLogger(_ROOT_NAME).setLevel(_resolve_level(level))
