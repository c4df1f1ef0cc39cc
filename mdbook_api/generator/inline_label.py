"""Restricted Markdown rendering for navigation labels.

Chapter titles are Markdown too (``Using `curl` with *tokens*``), but a
label inside an anchor must not carry block wrappers such as ``<p>``. The
:class:`InlineLabelExtension` flattens the parsed tree down to plain text
and inline ``<code>`` spans. Raw inline HTML is kept unless the extension is
created with ``strip_html=True``, in which case only character entities
survive.
"""

from __future__ import annotations

import typing as typ
import xml.etree.ElementTree as etree

from markdown.extensions import Extension
from markdown.postprocessors import Postprocessor
from markdown.treeprocessors import Treeprocessor
from markdown.util import HTML_PLACEHOLDER_RE

if typ.TYPE_CHECKING:
    from xml.etree.ElementTree import Element

    from markdown import Markdown
else:  # pragma: no cover - type-checking fallback
    Markdown = typ.Any
    Element = typ.Any


class InlineLabelExtension(Extension):
    """Reduce converted Markdown to text, inline code, and (optionally) raw HTML."""

    def __init__(self, *, strip_html: bool = False) -> None:
        super().__init__()
        self.strip_html = strip_html

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]  # noqa: N802
        """Register the flattening treeprocessor and optional HTML stripper."""
        # after "inline" (20) and "prettify" (10), before "unescape" (0)
        md.treeprocessors.register(LabelTreeprocessor(md), "mdbook_inline_label", 5)
        if self.strip_html:
            # runs before "raw_html" (30) restores the stash
            md.postprocessors.register(
                StripRawHtmlPostprocessor(md), "mdbook_strip_raw_html", 35
            )


class LabelTreeprocessor(Treeprocessor):
    """Replace the document tree with a flat run of text and ``<code>`` spans."""

    def run(self, root: Element) -> Element:
        """Return a new root holding only text and inline code."""
        flat = etree.Element(root.tag)
        self._collect(root, flat)
        if flat.text:
            flat.text = flat.text.lstrip()
        if len(flat) and flat[-1].tail:
            flat[-1].tail = flat[-1].tail.rstrip()
        elif not len(flat) and flat.text:
            flat.text = flat.text.rstrip()
        return flat

    def _collect(self, element: Element, flat: Element) -> None:
        if element.text:
            _append_text(flat, element.text)
        for child in element:
            match child.tag:
                case "code":
                    code = etree.SubElement(flat, "code")
                    code.text = "".join(child.itertext())
                case "img":
                    _append_text(flat, child.get("alt", ""))
                case _:
                    self._collect(child, flat)
            if child.tail:
                _append_text(flat, child.tail)


class StripRawHtmlPostprocessor(Postprocessor):
    """Drop stashed raw HTML from label output while keeping entities."""

    def run(self, text: str) -> str:
        """Remove every raw-HTML placeholder that does not hold an entity."""
        blocks = self.md.htmlStash.rawHtmlBlocks

        def _repl(match: typ.Any) -> str:
            index = int(match.group(1))
            stored = str(blocks[index]) if index < len(blocks) else ""
            return match.group(0) if stored.startswith("&") else ""

        return HTML_PLACEHOLDER_RE.sub(_repl, text)


def _append_text(flat: Element, text: str) -> None:
    """Append ``text`` after the last node of ``flat``."""
    if len(flat):
        last = flat[-1]
        last.tail = (last.tail or "") + text
    else:
        flat.text = (flat.text or "") + text


__all__ = [
    "InlineLabelExtension",
    "LabelTreeprocessor",
    "StripRawHtmlPostprocessor",
]
