"""Application layer - port definitions.

Contains the port protocols that define the interfaces for adapter
implementations.

Contents:
    * :mod:`.ports` - Callable Protocol definitions for adapter functions
"""

from __future__ import annotations

from .ports import EmitConfig, GetConfig, InitLogging

__all__ = [
    "EmitConfig",
    "GetConfig",
    "InitLogging",
]
