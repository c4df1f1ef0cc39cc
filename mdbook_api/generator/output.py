"""Filesystem writes into the render destination."""

from __future__ import annotations

import shutil
from pathlib import Path, PurePosixPath

import structlog

from mdbook_api.errors import OutputIOError

logger = structlog.get_logger(__name__)


def reset_destination(destination: Path) -> None:
    """Remove ``destination`` if present and recreate it empty.

    Raises
    ------
    OutputIOError
        If the stale output cannot be removed or the directory created.
    """
    try:
        if destination.exists():
            logger.debug("REMOVING_STALE_OUTPUT", destination=str(destination))
            shutil.rmtree(destination)
        destination.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        msg = f"Unable to prepare output directory '{destination}': {exc}"
        raise OutputIOError(msg) from exc


def write_file(destination: Path, name: str, content: bytes) -> Path:
    """Write ``content`` to ``destination/name``, creating parent directories.

    Parameters
    ----------
    destination : Path
        Root of the rendered site.
    name : str
        Forward-slash path relative to ``destination``.
    content : bytes
        Bytes to write.

    Returns
    -------
    Path
        The written file.

    Raises
    ------
    OutputIOError
        If the directory cannot be created or the file cannot be written.
    """
    target = destination.joinpath(*PurePosixPath(name).parts)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(content)
    except OSError as exc:
        msg = f"Unable to write '{target}': {exc}"
        raise OutputIOError(msg) from exc
    return target


__all__ = ["reset_destination", "write_file"]
