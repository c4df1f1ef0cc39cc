"""Render data, Markdown conversion, templates, and theming for book pages."""

from .engine import HtmlEngine, build_render_data, summarize
from .models import ChapterSummary, RenderData, RenderState
from .page_generator import BookRenderer
from .postprocess import add_heading_ids, fix_code_blocks, normalize_id, postprocess
from .renderer import MarkdownConverter
from .template import HtmlPageTemplate, MultiPageTemplate, SinglePageTemplate
from .theme import HtmlTheme
from .toc import TocBuilder, build_toc

__all__ = [
    "BookRenderer",
    "ChapterSummary",
    "HtmlEngine",
    "HtmlPageTemplate",
    "HtmlTheme",
    "MarkdownConverter",
    "MultiPageTemplate",
    "RenderData",
    "RenderState",
    "SinglePageTemplate",
    "TocBuilder",
    "add_heading_ids",
    "build_render_data",
    "build_toc",
    "fix_code_blocks",
    "normalize_id",
    "postprocess",
    "summarize",
]
