"""Application ports: callable Protocol definitions for adapter functions.

Each Protocol class defines a ``__call__`` method whose signature exactly
matches the corresponding adapter function. Module-level functions satisfy
these protocols automatically via structural subtyping (PEP 544).

System Role:
    Sits between domain and adapters. Infrastructure types (``Config``) are
    imported under ``TYPE_CHECKING`` only so that layer contracts remain
    satisfied at runtime.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from lib_layered_config import Config


class GetConfig(Protocol):
    """Load layered configuration with application defaults."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


class EmitConfig(Protocol):
    """Write the fixed configuration payload to ``path``.

    Implementations raise :class:`~config_generator.domain.errors.OpenFailedError`
    when the path cannot be opened for writing.
    """

    def __call__(self, path: str | os.PathLike[str]) -> Path: ...


__all__ = [
    "EmitConfig",
    "GetConfig",
    "InitLogging",
]
