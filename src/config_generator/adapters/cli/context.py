"""Per-invocation CLI state and lib_cli_exit_tools traceback flags."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import lib_cli_exit_tools
import rich_click as click

if TYPE_CHECKING:
    from config_generator.composition import AppServices

TracebackState = tuple[bool, bool]
"""Captured traceback configuration: (traceback_enabled, force_color)."""


@dataclass(slots=True)
class CLIContext:
    """State the emit step needs once options are parsed and services are built."""

    traceback: bool
    services: AppServices
    profile: str | None = None


def store_cli_context(
    ctx: click.Context,
    *,
    traceback: bool,
    services: AppServices,
    profile: str | None = None,
) -> CLIContext:
    """Replace the services factory in ``ctx.obj`` with a typed CLIContext and return it."""
    cli_ctx = CLIContext(traceback=traceback, services=services, profile=profile)
    ctx.obj = cli_ctx
    return cli_ctx


def apply_traceback_preferences(enabled: bool) -> None:
    """Synchronise lib_cli_exit_tools traceback flags with ``enabled``.

    Example:
        >>> apply_traceback_preferences(True)
        >>> bool(lib_cli_exit_tools.config.traceback)
        True
    """
    lib_cli_exit_tools.config.traceback = bool(enabled)
    lib_cli_exit_tools.config.traceback_force_color = bool(enabled)


def snapshot_traceback_state() -> TracebackState:
    config = lib_cli_exit_tools.config
    return bool(config.traceback), bool(config.traceback_force_color)


def restore_traceback_state(state: TracebackState) -> None:
    lib_cli_exit_tools.config.traceback, lib_cli_exit_tools.config.traceback_force_color = state


__all__ = [
    "CLIContext",
    "TracebackState",
    "apply_traceback_preferences",
    "restore_traceback_state",
    "snapshot_traceback_state",
    "store_cli_context",
]
