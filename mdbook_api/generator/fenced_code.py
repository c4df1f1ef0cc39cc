"""Fenced code block handling that preserves the full fence info string.

Python-Markdown's bundled ``fenced_code`` extension only accepts a single
word after the fence, so blocks written as ```` ```rust,no_run ```` would
not be recognized. This extension accepts any info string, emits it verbatim
as ``class="language-<info>"`` (for :func:`~mdbook_api.generator.postprocess.fix_code_blocks`
to normalize), and highlights the body with Pygments using the first word of
the info string as the lexer name.
"""

from __future__ import annotations

import re
import typing as typ
from html import escape

from markdown.extensions import Extension
from markdown.preprocessors import Preprocessor
from pygments import highlight
from pygments.formatters.html import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

if typ.TYPE_CHECKING:
    from markdown import Markdown
else:  # pragma: no cover - type-checking fallback
    Markdown = typ.Any

FENCE_OPEN_PATTERN = re.compile(
    r"^(?P<indent>[ ]*)(?P<fence>`{3,}|~{3,})[ ]*(?P<info>[^\n]*?)[ ]*$"
)
FENCE_CLOSE_PATTERN = re.compile(r"^(?P<indent>[ ]*)(?P<fence>`{3,}|~{3,})[ ]*$")
LIST_ITEM_PATTERN = re.compile(
    r"^(?P<indent>[ ]*)(?:[-*+]|\d{1,9}[.)])(?P<gap>[ ]{1,4})\S"
)
INFO_WORD_SPLIT = re.compile(r"[,\s]+")
MAX_FENCE_INDENT = 3


class FencedCodeExtension(Extension):
    """Register :class:`FencedCodePreprocessor` on a Markdown instance."""

    def __init__(self, formatter: HtmlFormatter | None = None) -> None:
        super().__init__()
        self.formatter = formatter or HtmlFormatter(nowrap=True)

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]  # noqa: N802
        """Register the fenced block preprocessor ahead of block parsing."""
        processor = FencedCodePreprocessor(md, self.formatter)
        md.preprocessors.register(processor, "mdbook_fenced_code", 25)


class FencedCodePreprocessor(Preprocessor):
    """Replace fenced blocks with stashed, highlighted ``<pre><code>`` HTML."""

    def __init__(self, md: Markdown, formatter: HtmlFormatter) -> None:
        super().__init__(md)
        self.formatter = formatter

    def run(self, lines: list[str]) -> list[str]:
        """Stash every fenced block and leave a placeholder in its place.

        A fence opens when it is indented at most three spaces past the
        content offset of the enclosing list item (zero outside lists), so
        fences inside indented code blocks stay literal. It closes on a line
        holding only a run of the same character at least as long as the
        opening run. Unclosed fences are left untouched.
        """
        output: list[str] = []
        offset = 0
        index = 0
        while index < len(lines):
            line = lines[index]
            offset = _content_offset(line, offset)
            opening = _match_opening(line, offset)
            closing_at = (
                None if opening is None else _find_closing(lines, index + 1, opening)
            )
            if opening is None or closing_at is None:
                output.append(line)
                index += 1
                continue

            indent = opening.group("indent")
            code = "".join(f"{body}\n" for body in lines[index + 1 : closing_at])
            block = self.render_block(
                _dedent(code, len(indent)), opening.group("info").strip()
            )
            output.append(f"{indent}{self.md.htmlStash.store(block)}")
            index = closing_at + 1
        return output

    def render_block(self, code: str, info: str) -> str:
        """Return the ``<pre><code>`` markup for one fenced block."""
        if not info:
            return f"<pre><code>{escape(code, quote=False)}</code></pre>"
        lang = INFO_WORD_SPLIT.split(info, maxsplit=1)[0]
        try:
            lexer = get_lexer_by_name(lang)
        except ClassNotFound:
            body = escape(code, quote=False)
        else:
            body = highlight(code, lexer, self.formatter)
        css_class = escape(f"language-{info}", quote=True)
        return f'<pre><code class="{css_class}">{body}</code></pre>'


def _content_offset(line: str, offset: int) -> int:
    """Return the list-item content offset in effect for ``line``."""
    if not line.strip():
        return offset
    item = LIST_ITEM_PATTERN.match(line)
    if item and len(item.group("indent")) <= offset + MAX_FENCE_INDENT:
        return item.end("gap")
    indent = len(line) - len(line.lstrip(" "))
    return offset if indent >= offset else 0


def _match_opening(line: str, offset: int) -> re.Match[str] | None:
    """Return the opening-fence match for ``line`` when it may start a block."""
    match = FENCE_OPEN_PATTERN.match(line)
    if match is None:
        return None
    relative = len(match.group("indent")) - offset
    if not 0 <= relative <= MAX_FENCE_INDENT:
        return None
    if match.group("fence")[0] == "`" and "`" in match.group("info"):
        return None
    return match


def _find_closing(lines: list[str], start: int, opening: re.Match[str]) -> int | None:
    """Return the index of the line closing ``opening``, if any."""
    fence = opening.group("fence")
    limit = len(opening.group("indent")) + MAX_FENCE_INDENT
    for index in range(start, len(lines)):
        match = FENCE_CLOSE_PATTERN.match(lines[index])
        if (
            match
            and len(match.group("indent")) <= limit
            and match.group("fence")[0] == fence[0]
            and len(match.group("fence")) >= len(fence)
        ):
            return index
    return None


def _dedent(code: str, width: int) -> str:
    """Remove up to ``width`` leading spaces from each line of ``code``."""
    if not width:
        return code
    lines = code.splitlines(keepends=True)
    return "".join(line[min(width, len(line) - len(line.lstrip(" "))) :] for line in lines)


__all__ = ["FENCE_OPEN_PATTERN", "FencedCodeExtension", "FencedCodePreprocessor"]
