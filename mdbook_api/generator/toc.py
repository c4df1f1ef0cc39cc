"""Build the nested table-of-contents list from chapter summaries.

The outline depth of an entry is derived from its section number
(``"1"`` -> 1, ``"1.1"`` -> 2, unnumbered -> 1). Entries are walked once in
book order; a nested ``<ul>`` is opened inside the current ``<li>`` for each
level of increase and closed again for each level of decrease, so the markup
mirrors the outline without lookahead or recursion.

Examples
--------
>>> from mdbook_api.generator.models import ChapterSummary
>>> build_toc([])
'<ul class="toc-list-h1"></ul>'
"""

from __future__ import annotations

import collections.abc as cabc
from html import escape

from mdbook_api._constants import TOC_LINK_CLASS, TOC_LIST_CLASS

from .models import ChapterSummary
from .postprocess import normalize_id
from .renderer import MarkdownConverter


class TocBuilder:
    """Render chapter summaries as nested ``<ul>``/``<li>`` markup."""

    def __init__(self, converter: MarkdownConverter | None = None) -> None:
        self.converter = converter or MarkdownConverter()

    def build(self, summaries: cabc.Iterable[ChapterSummary]) -> str:
        """Return the TOC markup for ``summaries`` in their given order.

        Parameters
        ----------
        summaries : Iterable[ChapterSummary]
            Book-order summaries; separators produce no output.

        Returns
        -------
        str
            A root ``<ul class="toc-list-h1">`` holding one ``<li>`` per
            chapter. Every ``<ul>`` opened is closed exactly once.
        """
        parts = [self._open_list(1)]
        level = 1
        item_open = False
        # one flag per nested list: whether it was opened inside an <li>
        nested_in_item: list[bool] = []

        for summary in summaries:
            if summary.spacer:
                continue
            depth = summary.depth
            if depth > level:
                while level < depth:
                    level += 1
                    nested_in_item.append(item_open)
                    parts.append(self._open_list(level))
                    item_open = False
            elif depth < level:
                if item_open:
                    parts.append("</li>")
                while level > depth:
                    level -= 1
                    parts.append("</ul>")
                    if nested_in_item.pop():
                        parts.append("</li>")
                item_open = False
            elif item_open:
                parts.append("</li>")

            parts.append("<li>")
            parts.append(self._anchor(summary, level))
            item_open = True

        if item_open:
            parts.append("</li>")
        while nested_in_item:
            parts.append("</ul>")
            if nested_in_item.pop():
                parts.append("</li>")
        parts.append("</ul>")
        return "".join(parts)

    def _anchor(self, summary: ChapterSummary, level: int) -> str:
        """Return the link for one entry, labelled with its rendered name."""
        href = f"#{normalize_id(summary.name)}"
        label = self.converter.to_label(summary.name)
        css_class = TOC_LINK_CLASS.format(level=level)
        return (
            f'<a href="{escape(href, quote=True)}" class="{css_class}" '
            f'data-title="{escape(summary.name, quote=True)}">{label}</a>'
        )

    @staticmethod
    def _open_list(level: int) -> str:
        return f'<ul class="{TOC_LIST_CLASS.format(level=level)}">'


def build_toc(
    summaries: cabc.Iterable[ChapterSummary],
    converter: MarkdownConverter | None = None,
) -> str:
    """Render ``summaries`` with a :class:`TocBuilder`."""
    return TocBuilder(converter).build(summaries)


__all__ = ["TocBuilder", "build_toc"]
