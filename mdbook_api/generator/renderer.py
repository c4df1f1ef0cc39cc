"""Markdown-to-HTML conversion for chapter bodies and navigation labels."""

from __future__ import annotations

import typing as typ

from markdown import Markdown
from pygments.formatters.html import HtmlFormatter

from mdbook_api._constants import DEFAULT_PYGMENTS_STYLE

from .fenced_code import FencedCodeExtension
from .inline_label import InlineLabelExtension

if typ.TYPE_CHECKING:
    from markdown.extensions import Extension
else:  # pragma: no cover - type-checking fallback
    Extension = typ.Any

HIGHLIGHT_CSS_CLASS = "highlight"


class MarkdownConverter:
    """Render chapter Markdown and chapter-title labels into HTML.

    A fresh ``markdown.Markdown`` instance is built for every call, so the
    output depends on the input text alone.
    """

    def __init__(
        self,
        pygments_style: str = DEFAULT_PYGMENTS_STYLE,
        *,
        strip_label_html: bool = False,
    ) -> None:
        """Initialize the converter.

        Parameters
        ----------
        pygments_style : str, optional
            Pygments style used for :attr:`stylesheet`. Defaults to
            ``"monokai"``.
        strip_label_html : bool, optional
            Drop raw inline HTML from labels rendered by :meth:`to_label`;
            character entities are kept either way.
        """
        self.pygments_style = pygments_style
        self.strip_label_html = strip_label_html
        self._formatter = HtmlFormatter(style=pygments_style, nowrap=True)

    @property
    def stylesheet(self) -> str:
        """Return the CSS for blocks tagged ``highlight`` by the post-processor."""
        return HtmlFormatter(style=self.pygments_style).get_style_defs(
            f".{HIGHLIGHT_CSS_CLASS}"
        )

    def to_html(self, text: str, *, id_prefix: str = "") -> str:
        """Render a full chapter body (headings, lists, tables, code, raw HTML).

        Parameters
        ----------
        text : str
            Chapter Markdown.
        id_prefix : str, optional
            Inserted into footnote ids (``fn:<prefix>:1``) so chapters joined
            on a single page keep distinct anchors.
        """
        if not text.strip():
            return ""
        extensions: list[Extension | str] = [
            FencedCodeExtension(self._formatter),
            "tables",
            "footnotes",
            "sane_lists",
        ]
        separator = f":{id_prefix}:" if id_prefix else ":"
        md = Markdown(
            extensions=extensions,
            extension_configs={"footnotes": {"SEPARATOR": separator}},
            output_format="html",
        )
        return md.convert(text)

    def to_label(self, text: str) -> str:
        """Render ``text`` as inline label HTML without block wrappers.

        Examples
        --------
        >>> MarkdownConverter().to_label("Using `curl` *safely*")
        'Using <code>curl</code> safely'
        """
        if not text.strip():
            return ""
        md = Markdown(
            extensions=[InlineLabelExtension(strip_html=self.strip_label_html)],
            output_format="html",
        )
        return md.convert(text)


__all__ = ["HIGHLIGHT_CSS_CLASS", "MarkdownConverter"]
