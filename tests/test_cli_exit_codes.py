"""Exit code values and how CLI outcomes map onto them."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

import pytest
from click.testing import CliRunner, Result

from config_generator.adapters import cli as cli_mod
from config_generator.adapters.cli.exit_codes import ExitCode

if TYPE_CHECKING:
    from conftest import EmitterCliContext


@pytest.mark.os_agnostic
def test_exit_code_values_are_stable() -> None:
    """Scripts depend on these numbers; they must not move."""
    assert (int(ExitCode.SUCCESS), int(ExitCode.GENERAL_ERROR), int(ExitCode.CLI_USAGE)) == (0, 1, 2)


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("args", "expected"),
    [
        (["out.cfg"], ExitCode.SUCCESS),
        ([], ExitCode.GENERAL_ERROR),
        (["a.cfg", "b.cfg"], ExitCode.GENERAL_ERROR),
        (["fail.cfg"], ExitCode.GENERAL_ERROR),
        (["--set", "broken", "out.cfg"], ExitCode.CLI_USAGE),
    ],
)
def test_cli_outcomes_map_to_exit_codes(
    cli_runner: CliRunner,
    emitter_cli_context: Callable[..., EmitterCliContext],
    args: list[str],
    expected: ExitCode,
) -> None:
    """Success, usage errors, open failures, and Click errors each have one code."""
    ctx = emitter_cli_context()
    ctx.spy.fail_paths.add("fail.cfg")

    result: Result = cli_runner.invoke(cli_mod.cli, args, obj=ctx.factory)

    assert result.exit_code == expected
