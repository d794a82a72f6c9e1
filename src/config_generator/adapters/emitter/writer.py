"""Filesystem adapter that writes the fixed configuration payload.

Contents:
    * :func:`emit_config` - Create or truncate a file and write the payload.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from config_generator.domain.errors import OpenFailedError
from config_generator.domain.payload import render_config

logger = logging.getLogger(__name__)

#: Encoding used for the emitted file.
OUTPUT_ENCODING = "utf-8"


def emit_config(path: str | os.PathLike[str]) -> Path:
    r"""Write the fixed configuration payload to ``path``.

    The file is created or truncated, so repeated calls leave identical
    content behind. Lines are always terminated with ``\n``; ``newline="\n"``
    disables platform newline translation.

    Only a failure to open the file is translated into
    :class:`OpenFailedError`. A single attempt is made and nothing is rolled
    back.

    Args:
        path: Destination path, used exactly as supplied.

    Returns:
        The path that was written.

    Raises:
        OpenFailedError: If the path cannot be opened for writing (missing
            parent directory, permission denied, path is a directory, ...).

    Example:
        >>> import tempfile
        >>> target = Path(tempfile.mkdtemp()) / "out.cfg"
        >>> emit_config(target).read_text(encoding="utf-8").splitlines()[0]
        '# Auto-generated configuration file'
    """
    content = render_config()
    try:
        handle = open(path, "w", encoding=OUTPUT_ENCODING, newline="\n")  # noqa: SIM115
    except OSError as exc:
        logger.debug("Opening %s for writing failed: %s", os.fspath(path), exc)
        raise OpenFailedError(path) from exc

    with handle:
        handle.write(content)

    logger.debug("Wrote %d characters to %s", len(content), os.fspath(path))
    return Path(path)


__all__ = ["OUTPUT_ENCODING", "emit_config"]
