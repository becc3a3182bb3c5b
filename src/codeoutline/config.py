"""Environment-driven configuration."""

import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_CONCURRENCY = 10
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_FORMAT = "ascii"


def _int_from_env(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


@dataclass
class OutlineConfig:
    """Settings read from CODE_OUTLINE_* environment variables."""
    concurrency: int = DEFAULT_CONCURRENCY
    log_level: str = DEFAULT_LOG_LEVEL
    default_format: str = DEFAULT_FORMAT

    @classmethod
    def from_env(cls) -> "OutlineConfig":
        return cls(
            concurrency=_int_from_env("CODE_OUTLINE_CONCURRENCY", DEFAULT_CONCURRENCY),
            log_level=os.environ.get("CODE_OUTLINE_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
            default_format=os.environ.get("CODE_OUTLINE_FORMAT", DEFAULT_FORMAT).lower(),
        )


_UNBOUNDED = {"infinity", "inf", "unlimited"}


def validate_depth_value(value) -> Optional[int]:
    """Parse a depth option.

    "Infinity" (any case) means unbounded and returns None; otherwise the
    value must be an integer >= 1.

    Raises:
        ValueError: for anything else
    """
    if value is None:
        return None
    if isinstance(value, str):
        text = value.strip()
        if text.lower() in _UNBOUNDED:
            return None
        try:
            depth = int(text)
        except ValueError:
            raise ValueError(f"Depth must be a positive integer or Infinity, got '{value}'") from None
    elif isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Depth must be a positive integer or Infinity, got {value!r}")
    else:
        depth = value

    if depth < 1:
        raise ValueError(f"Depth must be >= 1, got {depth}")
    return depth
