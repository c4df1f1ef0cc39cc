"""High-level orchestration of a book render pass.

:class:`BookRenderer` composes a data builder (:class:`HtmlEngine`), a page
template (:class:`MultiPageTemplate` or :class:`SinglePageTemplate`), and an
asset provider (:class:`HtmlTheme`), and drives them through one pass::

    clean destination -> compile template -> each chapter -> finalize -> assets

Any failure aborts the pass and propagates to the caller; the destination
may then hold a partial site.

Example
-------
>>> import sys
>>> from mdbook_api.context import load_render_context
>>> from mdbook_api.generator import BookRenderer
>>> ctx = load_render_context(sys.stdin.buffer.read())  # doctest: +SKIP
>>> BookRenderer.from_context(ctx).render()  # doctest: +SKIP
[PosixPath('book/api/index.html'), ...]
"""

from __future__ import annotations

import typing as typ

import structlog

from .engine import HtmlEngine
from .models import RenderState
from .output import reset_destination
from .renderer import MarkdownConverter
from .template import MultiPageTemplate, SinglePageTemplate
from .theme import HtmlTheme
from .toc import TocBuilder

if typ.TYPE_CHECKING:
    from pathlib import Path

    from mdbook_api.context import BookItem, RenderContext

    from .protocols import AssetProvider, DataBuilder, PageTemplate

logger = structlog.get_logger(__name__)


class BookRenderer:
    """Render a book tree into a themed static site."""

    def __init__(
        self,
        items: typ.Iterable[BookItem],
        destination: Path,
        *,
        engine: DataBuilder,
        template: PageTemplate,
        theme: AssetProvider,
    ) -> None:
        """Initialize the renderer with its three capabilities.

        Parameters
        ----------
        items : Iterable[BookItem]
            Book items in traversal order.
        destination : Path
            Output directory; it is removed and recreated by :meth:`render`.
        engine : DataBuilder
            Produces per-page render data.
        template : PageTemplate
            Renders and writes pages.
        theme : AssetProvider
            Supplies the page template and static assets.
        """
        self.items = list(items)
        self.destination = destination
        self.engine = engine
        self.template = template
        self.theme = theme

    @classmethod
    def from_context(
        cls,
        ctx: RenderContext,
        *,
        single_page: bool | None = None,
        theme_dir: Path | None = None,
        destination: Path | None = None,
    ) -> BookRenderer:
        """Build the default capability set for ``ctx``.

        Parameters
        ----------
        ctx : RenderContext
            Decoded host context.
        single_page : bool, optional
            Override ``output.api.single_page``.
        theme_dir : Path, optional
            Override the project theme directory.
        destination : Path, optional
            Override the host's destination directory.
        """
        api = ctx.config.api
        converter = MarkdownConverter(
            api.pygments_style, strip_label_html=api.strict_labels
        )
        use_single_page = api.single_page if single_page is None else single_page
        template_cls = SinglePageTemplate if use_single_page else MultiPageTemplate
        return cls(
            ctx.book.iter(),
            destination or ctx.destination,
            engine=HtmlEngine.from_context(ctx, converter),
            template=template_cls(TocBuilder(converter)),
            theme=HtmlTheme.from_context(ctx, converter=converter, theme_dir=theme_dir),
        )

    @property
    def name(self) -> str:
        """Return the backend name reported by the data builder."""
        return self.engine.name

    def render(self) -> list[Path]:
        """Run one render pass and return every written file, in write order.

        Raises
        ------
        BookRenderError
            Any path, template, asset, or filesystem failure.
        """
        logger.info(
            "RENDER_STARTED",
            renderer=self.name,
            destination=str(self.destination),
            items=len(self.items),
        )
        reset_destination(self.destination)
        self.template.initialize_book(self.theme)

        written: list[Path] = []
        state = RenderState(is_index=True)
        for item in self.items:
            state.book_item = item
            data = self.engine.process_chapter(state)
            if data is None:
                continue
            page = self.template.render_chapter(self.destination, state, data)
            if page is not None:
                written.append(page)
            state.is_index = False

        state.book_item = None
        page = self.template.finalize_book(
            self.destination, self.engine.finalize_book(state)
        )
        if page is not None:
            written.append(page)

        written.extend(self.theme.copy_static_files(self.destination))
        logger.info("RENDER_FINISHED", files=len(written))
        return written


__all__ = ["BookRenderer"]
