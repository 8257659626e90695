from __future__ import annotations
import logging
import os


# Defaults
_DEFAULT_MAX_DEPTH = 250
_DEFAULT_LOG_LEVEL = "WARNING"
_DEFAULT_PROMPT = "> "


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        return default
    return value if value > 0 else default


def get_max_depth() -> int:
    """Maximum nesting of function calls before IotaStackOverflow is raised."""
    return int_from_env('IOTA_MAX_DEPTH', _DEFAULT_MAX_DEPTH)


def get_log_level() -> int:
    raw = os.environ.get('IOTA_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(raw)
    # getLevelName maps unknown names to the string "Level <name>"
    return level if isinstance(level, int) else logging.getLevelName(_DEFAULT_LOG_LEVEL)


def get_prompt() -> str:
    return os.environ.get('IOTA_PROMPT', _DEFAULT_PROMPT)
