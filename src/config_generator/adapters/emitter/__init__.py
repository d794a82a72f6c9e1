"""Emitter adapter - writes the fixed configuration file.

Contents:
    * :func:`.writer.emit_config` - Create/truncate and write the payload
"""

from __future__ import annotations

from .writer import emit_config

__all__ = ["emit_config"]
