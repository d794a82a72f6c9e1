"""Static package metadata consumed by the CLI and the configuration loader.

Values here must stay in sync with ``pyproject.toml``; the metadata sync
tests fail when they drift.

Contents:
    * :data:`name` - Distribution/import name.
    * :data:`title` - One-line description shown in ``--help``.
    * :data:`version` - Release version reported by ``--version``.
    * :data:`shell_command` - Console script name.
    * ``LAYEREDCONF_*`` - Identifiers that select platform config paths.
"""

from __future__ import annotations

from typing import Final

name: Final[str] = "config_generator"
title: Final[str] = "Write the auto-generated key=value configuration file to OUTPUT_FILE."
version: Final[str] = "1.0.0"
shell_command: Final[str] = "config-generator"

#: Vendor directory used on macOS/Windows (e.g. ``%APPDATA%/<vendor>/<app>``).
LAYEREDCONF_VENDOR: Final[str] = "config-generator"
#: Application directory used on macOS/Windows.
LAYEREDCONF_APP: Final[str] = "config-generator"
#: XDG slug used on Linux (``~/.config/<slug>/``) and as the env var prefix.
LAYEREDCONF_SLUG: Final[str] = "config-generator"

__all__ = [
    "LAYEREDCONF_APP",
    "LAYEREDCONF_SLUG",
    "LAYEREDCONF_VENDOR",
    "name",
    "shell_command",
    "title",
    "version",
]
