"""Configuration utilities for daycatalog.

This module resolves the process-wide cache settings from explicit
arguments, environment variables and defaults, in that order.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from daycatalog.core.exceptions import ConfigurationError
from daycatalog.core.models import DEFAULT_MAX_AGE_HOURS, CacheConfig


CACHE_DIR_ENV = "DAYCATALOG_CACHE_DIR"
CACHE_AGE_ENV = "DAYCATALOG_CACHE_AGE"

DEFAULT_CACHE_DIRNAME = ".daycatalog_cache"

_INFINITE_AGES = frozenset({"inf", "infinite", "none", "never"})

# Distinguishes "not given" from an explicit None (infinite age)
_UNSET: object = object()
def parse_max_age(value: str) -> int | None:
    """Parse a maximum cache age in hours.

    Args:
        value: Whole number of hours, or one of "inf", "infinite", "none",
            "never" (case-insensitive) for no expiry.

    Returns:
        Hours as int, or None for no expiry.

    Raises:
        ConfigurationError: If the value is not a non-negative integer.
    """
    text = value.strip().lower()
    if text in _INFINITE_AGES:
        return None
    try:
        hours = int(text)
    except ValueError:
        raise ConfigurationError(
            f"Invalid cache age {value!r}: expected hours or 'inf'"
        ) from None
    if hours < 0:
        raise ConfigurationError(f"Invalid cache age {value!r}: cannot be negative")
    return hours


def default_cache_dir() -> Path:
    """Default cache directory under the user's home directory."""
    return Path.home() / DEFAULT_CACHE_DIRNAME


def load_cache_config(
    cache_dir: Path | str | None = None,
    max_age_hours: int | None | object = _UNSET,
    env: Mapping[str, str] | None = None,
    default_max_age_hours: int | None = DEFAULT_MAX_AGE_HOURS,
) -> CacheConfig:
    """Resolve cache settings.

    Explicit arguments win over environment variables, which win over the
    defaults (``~/.daycatalog_cache`` and ``default_max_age_hours``).

    Args:
        cache_dir: Cache directory. Relative paths are resolved against cwd.
        max_age_hours: Maximum age in hours, or None for no expiry.
        env: Environment mapping. Defaults to os.environ.
        default_max_age_hours: Age used when neither the argument nor the
            environment sets one, typically the source's own default.

    Returns:
        Immutable CacheConfig.

    Raises:
        ConfigurationError: If an environment value is malformed.

    Example:
        >>> config = load_cache_config(env={"DAYCATALOG_CACHE_AGE": "inf"})
        >>> config.max_age_hours is None
        True
    """
    if env is None:
        env = os.environ

    if cache_dir is None:
        env_dir = env.get(CACHE_DIR_ENV)
        resolved_dir = Path(env_dir).expanduser() if env_dir else default_cache_dir()
    else:
        resolved_dir = Path(cache_dir).expanduser()

    if max_age_hours is _UNSET:
        env_age = env.get(CACHE_AGE_ENV)
        age = parse_max_age(env_age) if env_age else default_max_age_hours
    else:
        assert max_age_hours is None or isinstance(max_age_hours, int)
        age = max_age_hours

    try:
        return CacheConfig(cache_dir=resolved_dir.resolve(), max_age_hours=age)
    except ValueError as e:
        raise ConfigurationError(str(e)) from e
