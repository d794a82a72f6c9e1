"""Configuration adapter - layered loading and CLI overrides.

Provides adapters for ambient configuration using lib_layered_config.

Contents:
    * :mod:`.loader` - Configuration loading with caching
    * :mod:`.overrides` - CLI ``--set`` override parsing and application
"""

from __future__ import annotations

from .loader import clear_config_cache, get_config, get_default_config_path
from .overrides import apply_overrides

__all__ = [
    "apply_overrides",
    "clear_config_cache",
    "get_config",
    "get_default_config_path",
]
