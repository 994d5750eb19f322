"""Runtime configuration read from the environment (or a ``.env`` file)."""

import logging
from typing import Optional

from charming.util import env

logger = logging.getLogger(__name__)

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_JSON_INDENT = 2

LOG_LEVEL_ENV = "CHARMING_LOGLEVEL"
JSON_INDENT_ENV = "CHARMING_JSON_INDENT"


def get_log_level() -> str:
    """Log level name for the ``charming`` logger."""
    level = (env.read_env(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL).upper()
    if not isinstance(logging.getLevelName(level), int):
        logger.warning("Ignoring %s=%r, not a logging level; using %s", LOG_LEVEL_ENV, level, DEFAULT_LOG_LEVEL)
        return DEFAULT_LOG_LEVEL
    return level


def get_json_indent() -> Optional[int]:
    """Indent used when a chart is displayed; ``None`` means compact output."""
    indent = env.read_int_env(JSON_INDENT_ENV, DEFAULT_JSON_INDENT)
    if indent is not None and indent <= 0:
        return None
    return indent
