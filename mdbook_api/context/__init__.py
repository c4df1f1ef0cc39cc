"""Decode the render context that mdBook hands to alternative backends.

This subpackage turns the JSON document mdBook writes to a backend's stdin
into typed dataclasses (:class:`RenderContext`, :class:`Book`,
:class:`Chapter`, :class:`BookConfig`) that the generator consumes. The
primary entry point is :func:`load_render_context`.

Examples
--------
>>> import sys
>>> from mdbook_api.context import load_render_context
>>> ctx = load_render_context(sys.stdin.buffer.read())  # doctest: +SKIP
>>> [item.name for item in ctx.book.iter()]  # doctest: +SKIP
['Introduction', 'Authentication', 'Errors']
"""

from .loader import load_render_context
from .models import (
    ApiConfig,
    Book,
    BookConfig,
    BookItem,
    Chapter,
    ContextError,
    Language,
    RenderContext,
    Separator,
    iter_items,
)

__all__ = [
    "ApiConfig",
    "Book",
    "BookConfig",
    "BookItem",
    "Chapter",
    "ContextError",
    "Language",
    "RenderContext",
    "Separator",
    "iter_items",
    "load_render_context",
]
