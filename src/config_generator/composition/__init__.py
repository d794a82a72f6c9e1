"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

# Configuration services
from ..adapters.config.loader import get_config

# Emitter services
from ..adapters.emitter.writer import emit_config

# Logging services
from ..adapters.logging.setup import init_logging

# Static conformance assertions: pyright verifies that each adapter function
# structurally satisfies its corresponding Protocol at type-check time.
if TYPE_CHECKING:
    from ..adapters.memory.emitter import EmitterSpy
    from ..application.ports import EmitConfig, GetConfig, InitLogging

    _assert_get_config: GetConfig = get_config
    _assert_emit_config: EmitConfig = emit_config
    _assert_init_logging: InitLogging = init_logging


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_config: GetConfig
    emit_config: EmitConfig
    init_logging: InitLogging


def build_production() -> AppServices:
    """Wire production adapters into an AppServices container."""
    return AppServices(
        get_config=get_config,
        emit_config=emit_config,
        init_logging=init_logging,
    )


def build_testing(*, spy: EmitterSpy | None = None) -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Args:
        spy: Optional EmitterSpy capturing emit calls. When None, a fresh
            spy is created; pass your own to assert on what was emitted.

    Returns:
        AppServices container with in-memory adapters.
    """
    from ..adapters.memory import EmitterSpy, get_config_in_memory, init_logging_in_memory

    emitter_spy = spy if spy is not None else EmitterSpy()

    return AppServices(
        get_config=get_config_in_memory,
        emit_config=emitter_spy.emit_config,
        init_logging=init_logging_in_memory,
    )


__all__ = [
    # Configuration
    "get_config",
    # Emitter
    "emit_config",
    # Logging
    "init_logging",
    # Composition
    "AppServices",
    "build_production",
    "build_testing",
]
