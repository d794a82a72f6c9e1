"""Public package surface exposing the emitter and its fixed payload.

Routes imports through the architectural layers:
- Domain exports: the fixed payload and its rendering, emitter errors
- Composition exports: wired adapter services (emit, configuration)
"""

from __future__ import annotations

# Composition exports (wired adapters)
from .composition import emit_config, get_config

# Domain exports
from .domain.errors import EmitError, OpenFailedError, UsageError
from .domain.payload import (
    CONFIG_HEADER,
    EMITTED_CONFIG,
    render_config,
)

__all__ = [
    "CONFIG_HEADER",
    "EMITTED_CONFIG",
    "EmitError",
    "OpenFailedError",
    "UsageError",
    "emit_config",
    "get_config",
    "render_config",
]
