"""Adapters layer - infrastructure and framework integrations.

Contents:
    * :mod:`.emitter` - Writes the configuration file to disk
    * :mod:`.config` - Ambient configuration loading and overrides
    * :mod:`.logging` - Logging setup with lib_log_rich
    * :mod:`.memory` - In-memory doubles for tests
    * :mod:`.cli` - Click CLI framework integration
"""

from __future__ import annotations

__all__: list[str] = []
