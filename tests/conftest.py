"""Shared pytest fixtures for emitter, CLI and module-entry tests.

Fixtures use descriptive names that read as plain English; tests pick them
up implicitly through pytest's conftest discovery.
"""

from __future__ import annotations

import contextlib
import os
import re
import tempfile
from collections.abc import Callable, Iterator
from dataclasses import dataclass, fields
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

if TYPE_CHECKING:
    from config_generator.adapters.memory.emitter import EmitterSpy
    from config_generator.composition import AppServices

_COVERAGE_BASENAME = ".coverage.config_generator"


def _purge_stale_coverage_files(cov_path: Path) -> None:
    """Delete leftover SQLite database and journal files from crashed runs."""
    for suffix in ("", "-journal", "-wal", "-shm"):
        with contextlib.suppress(FileNotFoundError):
            Path(str(cov_path) + suffix).unlink()


def pytest_configure(config: pytest.Config) -> None:
    """Keep the coverage database on a local temp directory.

    Runs before ``pytest-cov`` creates its ``Coverage()`` object so the
    ``COVERAGE_FILE`` value is picked up however pytest is invoked.
    """
    if "COVERAGE_FILE" not in os.environ:
        cov_path = Path(tempfile.gettempdir()) / _COVERAGE_BASENAME
        _purge_stale_coverage_files(cov_path)
        os.environ["COVERAGE_FILE"] = str(cov_path)


def _load_dotenv() -> None:
    """Load a project-level .env file when present."""
    from dotenv import load_dotenv

    env_file = Path(__file__).parent.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)


_load_dotenv()

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))

EXPECTED_LINES: tuple[str, ...] = (
    "# Auto-generated configuration file",
    "project_name=CMakeLanguageModelToolsExample",
    "version=1.0.0",
    "debug_mode=true",
    "log_level=info",
)
"""The emitted file, line by line, exactly as users see it."""

EXPECTED_CONTENT = "".join(line + "\n" for line in EXPECTED_LINES)

QUIET_LOGGING: dict[str, Any] = {"lib_log_rich": {"console_level": "WARNING"}}
"""Logging section matching the bundled defaults: nothing below WARNING reaches the console."""


def _remove_ansi_codes(text: str) -> str:
    """Return *text* stripped of ANSI escape sequences."""
    return ANSI_ESCAPE_PATTERN.sub("", text)


def _snapshot_cli_config() -> dict[str, object]:
    """Capture every attribute from ``lib_cli_exit_tools.config``."""
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    """Reapply a configuration snapshot captured by ``_snapshot_cli_config``."""
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    ``result.stdout`` and ``result.stderr`` are captured separately, so the
    confirmation line and error messages can be asserted on their own streams.
    """
    return CliRunner()


@pytest.fixture
def expected_content() -> str:
    """Return the exact text every emitted file must contain."""
    return EXPECTED_CONTENT


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory (real writer, real config)."""
    from config_generator.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return _remove_ansi_codes(value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore after the test."""
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config lru_cache before the test.

    Only clears before, not after, because tests may monkeypatch the loader.
    """
    from config_generator.adapters.config import loader as config_mod

    config_mod.clear_config_cache()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from test data dicts without filesystem I/O."""

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@dataclass
class EmitterCliContext:
    """Services factory bundled with the spy that records emit calls.

    Attributes:
        factory: Callable returning wired AppServices for CLI invocation.
        spy: EmitterSpy recording what the CLI asked to emit.
        profiles: Profile argument of every ``get_config`` call.
    """

    factory: Callable[[], Any]
    spy: EmitterSpy
    profiles: list[str | None]


@pytest.fixture
def emitter_cli_context(
    clear_config_cache: None,
) -> Callable[..., EmitterCliContext]:
    """Create a CLI test context that records emits instead of writing files.

    The returned function accepts an optional config dict and returns an
    :class:`EmitterCliContext`. Logging stays production-wired so the CLI
    runs exactly as it does for users; only the filesystem write and the
    config discovery are replaced.

    Example:
        def test_emit(cli_runner, emitter_cli_context) -> None:
            ctx = emitter_cli_context()
            result = cli_runner.invoke(cli, ["out.cfg"], obj=ctx.factory)
            assert ctx.spy.emitted_paths == ["out.cfg"]
    """
    from config_generator.adapters.memory import EmitterSpy as EmitterSpyImpl
    from config_generator.composition import AppServices, build_production

    def _create(config_data: dict[str, Any] | None = None) -> EmitterCliContext:
        spy = EmitterSpyImpl()
        profiles: list[str | None] = []
        config = Config(config_data if config_data is not None else QUIET_LOGGING, {})

        def _fake_get_config(*, profile: str | None = None, **_kwargs: Any) -> Config:
            profiles.append(profile)
            return config

        services = AppServices(
            get_config=_fake_get_config,
            emit_config=spy.emit_config,
            init_logging=build_production().init_logging,
        )
        return EmitterCliContext(factory=lambda: services, spy=spy, profiles=profiles)

    return _create


@pytest.fixture
def inject_emit_config() -> Callable[[Callable[..., Path]], Callable[[], AppServices]]:
    """Return a factory that swaps in a custom ``emit_config`` implementation.

    Use it to drive error paths the real writer cannot easily reach.
    """
    from config_generator.composition import AppServices, build_production

    def _inject(emit_fn: Callable[..., Path]) -> Callable[[], AppServices]:
        prod = build_production()
        services = AppServices(
            get_config=prod.get_config,
            emit_config=emit_fn,
            init_logging=prod.init_logging,
        )
        return lambda: services

    return _inject
