"""In-memory adapter implementations for testing.

Provides lightweight implementations of all application ports that operate
entirely in memory -- no filesystem, no logging framework.

Contents:
    * :mod:`.config` - In-memory configuration adapter
    * :mod:`.emitter` - In-memory emitter (EmitterSpy class)
    * :mod:`.logging` - In-memory logging adapter
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import get_config_in_memory
from .emitter import EmitterSpy
from .logging import init_logging_in_memory

# Static conformance assertions
if TYPE_CHECKING:
    from config_generator.application.ports import EmitConfig, GetConfig, InitLogging

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory
    _assert_emit_config: EmitConfig = EmitterSpy().emit_config

__all__ = [
    "EmitterSpy",
    "get_config_in_memory",
    "init_logging_in_memory",
]
