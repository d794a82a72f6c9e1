"""Exit codes for CLI error paths.

Contents:
    * :class:`ExitCode`: IntEnum of all exit codes used by this application.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes returned by the ``config-generator`` command.

    * 0: configuration file written
    * 1: wrong argument count, or the output file could not be opened
    * 2: Click parse errors (unknown option, malformed ``--set``, bad ``--profile``)

    Example:
        >>> int(ExitCode.GENERAL_ERROR)
        1
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    CLI_USAGE = 2


__all__ = ["ExitCode"]
