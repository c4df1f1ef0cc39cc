"""Prepare the render data merged into every page template.

The book-wide data (title, language, favicon, language switcher, chapter
summaries) is built once by :func:`build_render_data`. :class:`HtmlEngine`
then clones it for each page and adds the page-specific keys, so nothing a
page adds can leak into another page.
"""

from __future__ import annotations

import collections.abc as cabc
import copy
import json
import typing as typ
from pathlib import PurePosixPath

import structlog

from mdbook_api._constants import FAVICON, INDEX_MD
from mdbook_api.context import BookConfig, BookItem, Chapter, Separator

from .models import ChapterSummary, RenderData, RenderState
from .paths import path_to_root, path_to_text
from .postprocess import normalize_id
from .renderer import MarkdownConverter

if typ.TYPE_CHECKING:
    from mdbook_api.context import RenderContext

logger = structlog.get_logger(__name__)


def summarize(item: BookItem) -> ChapterSummary:
    """Project a book item onto its navigation summary.

    Raises
    ------
    PathEncodingError
        If the chapter path cannot be represented as text.
    """
    if isinstance(item, Separator):
        return ChapterSummary(spacer=True)
    return ChapterSummary(
        name=item.name,
        path=None if item.path is None else path_to_text(item.path),
        section=item.number,
        has_sub_items=bool(item.sub_items),
    )


def build_render_data(
    config: BookConfig, items: cabc.Iterable[BookItem]
) -> RenderData:
    """Build the book-wide render data shared by every page.

    Parameters
    ----------
    config : BookConfig
        Book title, description, language, and renderer options.
    items : Iterable[BookItem]
        Every book item in traversal order (see :meth:`Book.iter`).

    Returns
    -------
    RenderData
        Mapping with ``language``, ``book_title``, ``description``,
        ``favicon``, ``lang_list``, ``languages``, ``chapters`` and, when
        serving, ``livereload``.

    Raises
    ------
    PathEncodingError
        If any chapter path cannot be represented as text.
    """
    data: RenderData = {
        "language": config.language,
        "book_title": config.title,
        "description": config.description,
        "favicon": FAVICON,
    }
    if config.livereload_url:
        data["livereload"] = config.livereload_url

    data["lang_list"] = json.dumps([lang.id for lang in config.api.lang])
    data["languages"] = [
        {"id": lang.id, "name": lang.name or lang.id} for lang in config.api.lang
    ]
    data["chapters"] = [summarize(item).to_data() for item in items]
    return data


class HtmlEngine:
    """Data-builder capability producing per-page render data."""

    name = "api"

    def __init__(
        self, data: RenderData, converter: MarkdownConverter | None = None
    ) -> None:
        self._data = data
        self.converter = converter or MarkdownConverter()

    @classmethod
    def from_context(
        cls, ctx: RenderContext, converter: MarkdownConverter | None = None
    ) -> HtmlEngine:
        """Build the engine and its book-wide data from a render context."""
        api = ctx.config.api
        converter = converter or MarkdownConverter(
            api.pygments_style, strip_label_html=api.strict_labels
        )
        return cls(build_render_data(ctx.config, ctx.book.iter()), converter)

    @property
    def data(self) -> RenderData:
        """Return a copy of the book-wide render data."""
        return copy.deepcopy(self._data)

    def process_chapter(self, state: RenderState) -> RenderData | None:
        """Return render data for ``state.book_item``.

        The chapter body is converted to HTML and appended to
        ``state.full_content``. Separators and draft chapters yield ``None``.
        """
        item = state.book_item
        if not isinstance(item, Chapter) or item.is_draft:
            return None

        data = self.data
        path = path_to_text(typ.cast("str | bytes", item.path))
        book_title = str(data.get("book_title") or "")
        title = f"{item.name} - {book_title}" if book_title else item.name

        content = self.converter.to_html(item.content, id_prefix=_id_prefix(path))
        state.append_content(content)

        data["path"] = path
        data["content"] = content
        data["chapter_title"] = item.name
        data["title"] = title
        data["path_to_root"] = path_to_root(path)
        if item.number is not None:
            data["section"] = item.number
        if state.is_index:
            _mark_index(data)

        logger.debug("CHAPTER_PROCESSED", path=path, is_index=state.is_index)
        return data

    def finalize_book(self, state: RenderState) -> RenderData:
        """Return render data for the whole-book page."""
        data = self.data
        data["content"] = state.book_content
        _mark_index(data)
        return data


def _id_prefix(path: str) -> str:
    """Return the anchor prefix for a chapter, e.g. ``intro-setup``."""
    return normalize_id(PurePosixPath(path).with_suffix("").as_posix())


def _mark_index(data: RenderData) -> None:
    data["path"] = INDEX_MD
    data["path_to_root"] = ""
    data["is_index"] = "true"


__all__ = ["HtmlEngine", "build_render_data", "summarize"]
