"""Ambient configuration for the emitter: bundled defaults plus layered overrides."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from lib_layered_config import (
    DEFAULT_MAX_PROFILE_LENGTH,
    Config,
    read_config,
    validate_profile_name,
)

from config_generator import __init__conf__

_DEFAULT_CONFIG_PATH = Path(__file__).parent / "defaultconfig.toml"


def get_default_config_path() -> Path:
    """Return the path to the bundled ``defaultconfig.toml``.

    Example:
        >>> get_default_config_path().name
        'defaultconfig.toml'
    """
    return _DEFAULT_CONFIG_PATH


@lru_cache(maxsize=4)
def _read_layers(profile: str | None, start_dir: str | None) -> Config:
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=get_default_config_path(),
        start_dir=start_dir,
    )


def get_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Load the logging settings, merged defaults → app → host → user → dotenv → env.

    Each ``(profile, start_dir)`` pair is read once per process; call
    :func:`clear_config_cache` to force a fresh read.

    Raises:
        ValueError: If ``profile`` is empty, too long, or not a plain name.

    Example:
        >>> get_config().get("lib_log_rich.console_level", default=None)
        'WARNING'
    """
    if profile is not None:
        validate_profile_name(profile, max_length=DEFAULT_MAX_PROFILE_LENGTH)
    return _read_layers(profile, start_dir)


def clear_config_cache() -> None:
    """Forget every cached configuration."""
    _read_layers.cache_clear()


__all__ = [
    "clear_config_cache",
    "get_config",
    "get_default_config_path",
]
