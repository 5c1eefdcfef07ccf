"""Level-filtered diagnostic messages written to standard error."""

from __future__ import annotations

import os
import re
import sys
from collections.abc import Mapping

ENV_VAR = "VULKAN_WSI_DEBUG_LEVEL"
DEFAULT_LOG_LEVEL = 1

ERROR = 1
WARNING = 2
INFO = 3

_INT_PREFIX = re.compile(r"-?\d+")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

_TAGS = {0: "", ERROR: "ERROR", WARNING: "WARNING", INFO: "INFO"}


def current_log_level(environ: Mapping[str, str] | None = None) -> int:
    """Return the verbosity set in the environment, or the default.

    Only a leading integer is read; anything that does not start with one
    (or does not fit in a 32-bit int) leaves the default in place.
    """
    env = os.environ if environ is None else environ
    raw = env.get(ENV_VAR)
    if raw is None:
        return DEFAULT_LOG_LEVEL
    match = _INT_PREFIX.match(raw)
    if match is None:
        return DEFAULT_LOG_LEVEL
    value = int(match.group())
    if not _INT_MIN <= value <= _INT_MAX:
        return DEFAULT_LOG_LEVEL
    return value


def level_tag(level: int) -> str:
    """Return the prefix printed for a message of the given level."""
    return _TAGS.get(level, f"LEVEL_{level}")


def log_message(level: int, file: str, line: int, message: str, *args: object) -> bool:
    """Print a message if its level is enabled; return whether it was printed.

    The message is a printf-style format applied to ``args``. A newline is
    appended automatically.
    """
    if level > current_log_level():
        return False
    text = message % args if args else message
    sys.stderr.write(f"{level_tag(level)}({file}:{line}): {text}\n")
    return True


def _log_from_caller(level: int, message: str, args: tuple[object, ...]) -> bool:
    frame = sys._getframe(2)
    return log_message(level, frame.f_code.co_filename, frame.f_lineno, message, *args)


def log_error(message: str, *args: object) -> bool:
    """Log at error level, tagged with the caller's file and line."""
    return _log_from_caller(ERROR, message, args)


def log_warning(message: str, *args: object) -> bool:
    """Log at warning level, tagged with the caller's file and line."""
    return _log_from_caller(WARNING, message, args)


def log_info(message: str, *args: object) -> bool:
    """Log at info level, tagged with the caller's file and line."""
    return _log_from_caller(INFO, message, args)