"""Typed dataclasses describing the render context supplied by mdBook."""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
from pathlib import Path

from mdbook_api._constants import DEFAULT_PYGMENTS_STYLE


class ContextError(ValueError):
    """Raised when the render context payload is malformed."""


@dc.dataclass(slots=True, frozen=True)
class Separator:
    """Structural marker between chapter groups; carries no content."""


@dc.dataclass(slots=True, frozen=True)
class Chapter:
    """One addressable unit of book content.

    Attributes
    ----------
    name : str
        Display name, also used as the navigation label.
    content : str
        Raw Markdown body.
    path : str | bytes | None
        Source path relative to the book's ``src`` directory. ``None`` marks
        a draft chapter, which is listed but never rendered.
    number : str | None
        Dotted section number (``"2.3."``); ``None`` for prefix/suffix
        chapters.
    sub_items : tuple[BookItem, ...]
        Nested chapters and separators.
    parent_names : tuple[str, ...]
        Names of the enclosing chapters, outermost first.
    """

    name: str
    content: str = ""
    path: str | bytes | None = None
    number: str | None = None
    sub_items: tuple[BookItem, ...] = ()
    parent_names: tuple[str, ...] = ()

    @property
    def is_draft(self) -> bool:
        """Return ``True`` when the chapter has no source file."""
        return self.path is None


BookItem = Chapter | Separator


@dc.dataclass(slots=True, frozen=True)
class Book:
    """Ordered chapter tree owned by the book host."""

    items: tuple[BookItem, ...] = ()

    def iter(self) -> cabc.Iterator[BookItem]:
        """Yield every item depth-first: a chapter, then its sub-items."""
        return iter_items(self.items)


def iter_items(items: cabc.Iterable[BookItem]) -> cabc.Iterator[BookItem]:
    """Flatten ``items`` into render order."""
    for item in items:
        yield item
        if isinstance(item, Chapter):
            yield from iter_items(item.sub_items)


@dc.dataclass(slots=True, frozen=True)
class Language:
    """An entry of the multi-language switcher."""

    id: str
    name: str | None = None


@dc.dataclass(slots=True, frozen=True)
class ApiConfig:
    """Renderer options read from the book's ``[output.api]`` table."""

    theme_dir: str | None = None
    lang: tuple[Language, ...] = ()
    single_page: bool = False
    pygments_style: str = DEFAULT_PYGMENTS_STYLE
    strict_labels: bool = False


@dc.dataclass(slots=True, frozen=True)
class BookConfig:
    """Book-wide configuration consumed by the render-data builder."""

    title: str = ""
    description: str = ""
    language: str = ""
    api: ApiConfig = dc.field(default_factory=ApiConfig)
    livereload_url: str | None = None


@dc.dataclass(slots=True, frozen=True)
class RenderContext:
    """Everything one render pass needs from the host."""

    root: Path
    destination: Path
    book: Book
    config: BookConfig
    version: str = ""


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
]
