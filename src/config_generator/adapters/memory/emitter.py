"""In-memory emitter adapter for testing.

Contents:
    * :class:`EmitterSpy` - Records emit calls instead of writing files.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from ...domain.errors import OpenFailedError
from ...domain.payload import render_config


def _empty_path_list() -> list[str]:
    """Create an empty typed list for recorded paths."""
    return []


def _empty_content_map() -> dict[str, str]:
    """Create an empty typed mapping for recorded contents."""
    return {}


def _empty_path_set() -> set[str]:
    """Create an empty typed set for paths that should fail."""
    return set()


@dataclass
class EmitterSpy:
    """Captures emit operations for test assertions.

    ``emit_config`` matches the EmitConfig protocol. Content is stored per
    path, so emitting the same path twice keeps a single entry, mirroring the
    truncate semantics of the real writer.

    Attributes:
        emitted_paths: Every path passed to ``emit_config``, in call order.
        files: Rendered content keyed by path.
        fail_paths: Paths for which ``emit_config`` raises OpenFailedError.

    Example:
        >>> spy = EmitterSpy()
        >>> spy.emit_config("out.cfg").name
        'out.cfg'
        >>> spy.files["out.cfg"].splitlines()[-1]
        'log_level=info'
    """

    emitted_paths: list[str] = field(default_factory=_empty_path_list)
    files: dict[str, str] = field(default_factory=_empty_content_map)
    fail_paths: set[str] = field(default_factory=_empty_path_set)

    def clear(self) -> None:
        """Reset captured data for the next test."""
        self.emitted_paths.clear()
        self.files.clear()
        self.fail_paths.clear()

    def emit_config(self, path: str | os.PathLike[str]) -> Path:
        """Record the call and store the rendered payload under ``path``.

        Raises:
            OpenFailedError: If ``path`` is listed in :attr:`fail_paths`.
        """
        key = os.fspath(path)
        self.emitted_paths.append(key)
        if key in self.fail_paths:
            raise OpenFailedError(key)
        self.files[key] = render_config()
        return Path(key)


__all__ = ["EmitterSpy"]
