"""Domain layer - pure business logic with no I/O or framework dependencies.

Contents:
    * :mod:`.payload` - The fixed emitted configuration and its rendering
    * :mod:`.errors` - Emitter exception types
"""

from __future__ import annotations

from .errors import EmitError, OpenFailedError, UsageError
from .payload import (
    CONFIG_HEADER,
    EMITTED_CONFIG,
    LINE_TERMINATOR,
    format_entry,
    render_config,
    render_lines,
)

__all__ = [
    # Payload
    "CONFIG_HEADER",
    "EMITTED_CONFIG",
    "LINE_TERMINATOR",
    "format_entry",
    "render_config",
    "render_lines",
    # Errors
    "EmitError",
    "OpenFailedError",
    "UsageError",
]
