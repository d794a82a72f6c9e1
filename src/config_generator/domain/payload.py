"""Pure domain functions with no I/O or framework dependencies.

The emitted configuration is fixed at build time. It is never read from
user configuration, so the payload and its rendering live here as constants
and pure functions.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Final

#: Comment line written before the key/value entries.
CONFIG_HEADER: Final[str] = "# Auto-generated configuration file"

#: Ordered key/value pairs written after the header.
EMITTED_CONFIG: Final[tuple[tuple[str, str], ...]] = (
    ("project_name", "CMakeLanguageModelToolsExample"),
    ("version", "1.0.0"),
    ("debug_mode", "true"),
    ("log_level", "info"),
)

#: Line terminator used for every emitted line, independent of platform.
LINE_TERMINATOR: Final[str] = "\n"


def format_entry(key: str, value: str) -> str:
    """Return a single ``key=value`` line without terminator.

    Example:
        >>> format_entry("version", "1.0.0")
        'version=1.0.0'
    """
    return f"{key}={value}"


def render_lines(
    entries: Iterable[tuple[str, str]] = EMITTED_CONFIG,
    *,
    header: str = CONFIG_HEADER,
) -> list[str]:
    """Return the emitted lines in output order, header first.

    Args:
        entries: Ordered key/value pairs. Defaults to :data:`EMITTED_CONFIG`.
        header: Comment line placed before the entries.

    Returns:
        Lines without terminators.

    Example:
        >>> render_lines()[0]
        '# Auto-generated configuration file'
        >>> render_lines()[-1]
        'log_level=info'
    """
    return [header, *(format_entry(key, value) for key, value in entries)]


def render_config(
    entries: Iterable[tuple[str, str]] = EMITTED_CONFIG,
    *,
    header: str = CONFIG_HEADER,
) -> str:
    r"""Return the complete file text, every line terminated by ``\n``.

    Example:
        >>> render_config().splitlines()[1]
        'project_name=CMakeLanguageModelToolsExample'
        >>> render_config().endswith("log_level=info\n")
        True
    """
    return "".join(line + LINE_TERMINATOR for line in render_lines(entries, header=header))


__all__ = [
    "CONFIG_HEADER",
    "EMITTED_CONFIG",
    "LINE_TERMINATOR",
    "format_entry",
    "render_config",
    "render_lines",
]
