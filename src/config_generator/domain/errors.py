"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations

import os

#: Placeholder shown in usage messages for the single positional argument.
OUTPUT_FILE_METAVAR = "<output_file>"


class EmitError(Exception):
    """Base class for every failure of the configuration emitter.

    ``str(exc)`` is the exact message reported to the user, so CLI
    boundaries can echo it without further formatting.
    """


class UsageError(EmitError):
    """The command was invoked with the wrong number of arguments.

    Raised before any I/O happens; no file is touched.

    Example:
        >>> err = UsageError("config-generator")
        >>> str(err)
        'Usage: config-generator <output_file>'
        >>> err.program
        'config-generator'
    """

    def __init__(self, program: str) -> None:
        self.program = program
        super().__init__(f"Usage: {program} {OUTPUT_FILE_METAVAR}")


class OpenFailedError(EmitError):
    """The output path could not be opened for writing.

    Carries the path exactly as the caller supplied it so the message
    matches what the user typed.

    Example:
        >>> err = OpenFailedError("/nonexistent_dir/out.cfg")
        >>> str(err)
        'Error: Could not open file /nonexistent_dir/out.cfg for writing'
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = os.fspath(path)
        super().__init__(f"Error: Could not open file {self.path} for writing")


__all__ = [
    "OUTPUT_FILE_METAVAR",
    "EmitError",
    "OpenFailedError",
    "UsageError",
]
