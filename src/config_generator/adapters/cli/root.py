"""Root CLI command: global option handling and the emit operation.

The command takes exactly one positional ``OUTPUT_FILE``. Arguments are
collected with ``nargs=-1`` and counted here, before configuration or
logging is touched, so a wrong count produces the emitter's own usage
message and exit code instead of Click's.

Contents:
    * :func:`cli` - Root command with global options.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, NoReturn

import lib_log_rich.runtime
import rich_click as click
from lib_layered_config import Config

from config_generator import __init__conf__
from config_generator.adapters.config.overrides import apply_overrides
from config_generator.domain.errors import EmitError, UsageError

from .constants import CLICK_CONTEXT_SETTINGS
from .context import CLIContext, apply_traceback_preferences, store_cli_context
from .exit_codes import ExitCode

if TYPE_CHECKING:
    from config_generator.composition import AppServices

logger = logging.getLogger(__name__)

DASH_PATH_EPILOG = f"A path starting with a dash goes after --, e.g. {__init__conf__.shell_command} -- -out.cfg"


def _fail(exc: EmitError) -> NoReturn:
    """Print the error message alone on stderr and exit with GENERAL_ERROR."""
    click.echo(str(exc), err=True)
    raise SystemExit(ExitCode.GENERAL_ERROR) from exc


def _require_single_output(output_files: tuple[str, ...], program: str) -> str:
    """Return the only positional argument.

    Raises:
        UsageError: If zero or more than one argument was given.
    """
    if len(output_files) != 1:
        raise UsageError(program)
    return output_files[0]


def _load_config(services: AppServices, profile: str | None, set_overrides: tuple[str, ...]) -> Config:
    """Load ambient configuration and apply ``--set`` overrides.

    Raises:
        click.UsageError: If the profile name or any override is invalid.
    """
    try:
        config = services.get_config(profile=profile)
        return apply_overrides(config, set_overrides)
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc


def _emit(cli_ctx: CLIContext, output_file: str) -> None:
    """Write the file and report the outcome.

    Log records stay at info level so, under the default WARNING console
    threshold, stdout and stderr carry only the user-facing line.

    Raises:
        SystemExit: With GENERAL_ERROR (1) when the file cannot be opened.
    """
    extra = {"command": "emit", "profile": cli_ctx.profile}
    with lib_log_rich.runtime.bind(job_id="cli-emit", extra=extra):
        logger.info("Generating configuration file", extra={"path": output_file})
        try:
            cli_ctx.services.emit_config(output_file)
        except EmitError as exc:
            logger.info("Configuration file not generated", extra={"error": str(exc)})
            _fail(exc)

        logger.info("Configuration file generated", extra={"path": output_file})
        click.echo(f"Configuration file generated: {output_file}")


@click.command(
    __init__conf__.shell_command,
    help=__init__conf__.title,
    epilog=DASH_PATH_EPILOG,
    context_settings=CLICK_CONTEXT_SETTINGS,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.option(
    "--profile",
    type=str,
    default=None,
    help="Load configuration from a named profile (e.g., 'production', 'test')",
)
@click.option(
    "--set",
    "set_overrides",
    multiple=True,
    default=(),
    metavar="SECTION.KEY=VALUE",
    help="Override a configuration setting (repeatable), e.g. lib_log_rich.console_level=DEBUG.",
)
@click.argument("output_files", nargs=-1, metavar="OUTPUT_FILE")
@click.pass_context
def cli(
    ctx: click.Context,
    traceback: bool,
    profile: str | None,
    set_overrides: tuple[str, ...],
    output_files: tuple[str, ...],
) -> None:
    """Write the fixed configuration file to OUTPUT_FILE.

    Checks the argument count, loads ambient configuration (logging) with
    ``--set`` overrides, initialises logging, mirrors the traceback flag into
    ``lib_cli_exit_tools.config``, then emits the file.

    Example:
        >>> from click.testing import CliRunner
        >>> from config_generator.composition import build_production
        >>> runner = CliRunner()
        >>> with runner.isolated_filesystem():
        ...     result = runner.invoke(cli, ["out.cfg"], obj=build_production)
        >>> result.exit_code
        0
    """
    # ctx.obj is always the services factory (production or test)
    if not callable(ctx.obj):
        raise RuntimeError("Services factory not provided. This is a bug.")

    program = ctx.info_name or __init__conf__.shell_command
    try:
        output_file = _require_single_output(output_files, program)
    except UsageError as exc:
        _fail(exc)

    services: AppServices = ctx.obj()  # type: ignore[assignment]  # Click's obj is typed as Any
    config = _load_config(services, profile, set_overrides)
    services.init_logging(config)
    cli_ctx = store_cli_context(ctx, traceback=traceback, services=services, profile=profile)
    apply_traceback_preferences(cli_ctx.traceback)
    _emit(cli_ctx, output_file)


__all__ = ["cli"]
