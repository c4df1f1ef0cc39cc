"""Error kinds raised while rendering a book.

Every error is fatal for the render pass: nothing here is retried, and the
CLI reports the first failure and exits non-zero.
"""

from __future__ import annotations


class BookRenderError(Exception):
    """Base class for failures that abort a render pass."""


class PathEncodingError(BookRenderError):
    """Raised when a chapter path cannot be represented as text."""


class TemplateError(BookRenderError):
    """Raised when the page template cannot be decoded, compiled, or rendered."""


class OutputIOError(BookRenderError):
    """Raised when creating, removing, or writing in the destination fails."""


class AssetLoadError(BookRenderError):
    """Raised when a theme override file exists but cannot be read."""


__all__ = [
    "AssetLoadError",
    "BookRenderError",
    "OutputIOError",
    "PathEncodingError",
    "TemplateError",
]
