"""Path helpers shared by the engine and the page templates."""

from __future__ import annotations

import posixpath
from pathlib import PurePath, PurePosixPath

from mdbook_api.errors import PathEncodingError


def path_to_text(path: str | bytes | PurePath) -> str:
    """Return ``path`` as a forward-slash string.

    Raises
    ------
    PathEncodingError
        If the path is undecodable bytes or holds characters (such as lone
        surrogates from ``os.fsdecode``) that cannot be encoded as UTF-8.

    Examples
    --------
    >>> path_to_text(b"api/auth.md")
    'api/auth.md'
    """
    try:
        match path:
            case bytes():
                text = path.decode("utf-8")
            case PurePath():
                text = path.as_posix()
            case _:
                text = str(path)
        text.encode("utf-8")
    except UnicodeError as exc:
        msg = f"Could not convert path {path!r} to str"
        raise PathEncodingError(msg) from exc
    return text


def path_to_root(path: str) -> str:
    """Return the relative prefix leading from ``path`` back to the site root.

    Examples
    --------
    >>> path_to_root("guide/api/auth.md")
    '../../'
    >>> path_to_root("intro.md")
    ''
    """
    parent = posixpath.dirname(posixpath.normpath(path))
    parts = [part for part in parent.split("/") if part not in ("", ".")]
    return "../" * len(parts)


def html_filename(path: str) -> str:
    """Return the output filename for a chapter source path.

    Examples
    --------
    >>> html_filename("guide/auth.md")
    'guide/auth.html'
    """
    return PurePosixPath(path).with_suffix(".html").as_posix()


__all__ = ["html_filename", "path_to_root", "path_to_text"]
