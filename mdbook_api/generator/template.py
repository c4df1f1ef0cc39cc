"""Jinja page templates for per-chapter and single-page sites.

Both templates compile the theme's ``index.jinja`` once per render pass,
expose the table of contents as the ``toc()`` global, and run every rendered
page through :func:`~mdbook_api.generator.postprocess.postprocess` before
writing it.
"""

from __future__ import annotations

import typing as typ

import jinja2
import structlog
from jinja2 import Environment, pass_context, select_autoescape
from markupsafe import Markup

from mdbook_api._constants import INDEX_HTML
from mdbook_api.errors import TemplateError

from .models import ChapterSummary
from .output import write_file
from .paths import html_filename
from .postprocess import postprocess
from .toc import TocBuilder

if typ.TYPE_CHECKING:
    from pathlib import Path

    from jinja2.runtime import Context

    from .models import RenderData, RenderState
    from .protocols import AssetProvider

logger = structlog.get_logger(__name__)


class HtmlPageTemplate:
    """Shared compile-and-render logic for the page templates."""

    def __init__(self, toc_builder: TocBuilder | None = None) -> None:
        self.toc_builder = toc_builder or TocBuilder()
        self.env = Environment(
            autoescape=select_autoescape(default_for_string=True, default=True),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.globals["toc"] = self._toc
        self._template: jinja2.Template | None = None

    def initialize_book(self, theme: AssetProvider) -> None:
        """Compile the theme's page template.

        Raises
        ------
        TemplateError
            If the template is not UTF-8 or fails to compile.
        """
        try:
            source = theme.template.decode("utf-8")
        except UnicodeDecodeError as exc:
            msg = f"Page template is not valid UTF-8: {exc}"
            raise TemplateError(msg) from exc
        try:
            self._template = self.env.from_string(source)
        except jinja2.TemplateSyntaxError as exc:
            msg = f"Page template failed to compile (line {exc.lineno}): {exc.message}"
            raise TemplateError(msg) from exc

    def render_page(self, data: RenderData) -> bytes:
        """Render ``data`` through the template and post-process the result.

        Raises
        ------
        TemplateError
            If the template was never compiled or fails while rendering.
        """
        if self._template is None:
            msg = "Page template used before initialize_book()."
            raise TemplateError(msg)
        try:
            rendered = self._template.render(**data)
        except (
            jinja2.TemplateError,
            TypeError,
            ValueError,
            ArithmeticError,
            LookupError,
        ) as exc:
            msg = f"Page template failed to render: {exc}"
            raise TemplateError(msg) from exc
        return postprocess(rendered).encode("utf-8")

    def write_page(self, destination: Path, name: str, data: RenderData) -> Path:
        """Render ``data`` and write it to ``destination/name``."""
        written = write_file(destination, name, self.render_page(data))
        logger.info("PAGE_WRITTEN", page=name)
        return written

    @pass_context
    def _toc(self, context: Context) -> Markup:
        chapters = context.get("chapters") or []
        summaries = [ChapterSummary.from_data(entry) for entry in chapters]
        return Markup(self.toc_builder.build(summaries))  # noqa: S704


class MultiPageTemplate(HtmlPageTemplate):
    """Write one page per chapter; the first chapter becomes ``index.html``."""

    def render_chapter(
        self, destination: Path, state: RenderState, data: RenderData
    ) -> Path | None:
        """Render and write the current chapter's page."""
        del state
        return self.write_page(destination, html_filename(str(data["path"])), data)

    def finalize_book(self, destination: Path, data: RenderData) -> Path | None:
        """Nothing to add once every chapter has its own page."""
        del destination, data
        return None


class SinglePageTemplate(HtmlPageTemplate):
    """Write the whole book as a single ``index.html``."""

    def render_chapter(
        self, destination: Path, state: RenderState, data: RenderData
    ) -> Path | None:
        """Defer writing; the chapter's HTML is already accumulated in ``state``."""
        del destination, state, data
        return None

    def finalize_book(self, destination: Path, data: RenderData) -> Path | None:
        """Render and write the whole-book page."""
        return self.write_page(destination, INDEX_HTML, data)


__all__ = ["HtmlPageTemplate", "MultiPageTemplate", "SinglePageTemplate"]
