"""Text-level transforms applied to rendered pages.

Two independent rewrites run on every page after template expansion:

* :func:`fix_code_blocks` moves the class list of ``<pre><code class=...>``
  onto the ``<pre>`` and expands ``language-<tag>`` into
  ``language-<tag> tab-<tag> highlight`` for the highlighter and the
  language tabs in ``app.js``.
* :func:`add_heading_ids` gives simple headings an ``id`` derived with
  :func:`normalize_id`, the same function the table of contents uses for its
  links.

Examples
--------
>>> fix_code_blocks('<pre><code class="language-rust,no_run">')
'<pre class="language-rust tab-rust highlight"><code>'
>>> add_heading_ids("<h2>Rate limits</h2>")
'<h2 id="rate-limits">Rate limits</h2>'
"""

from __future__ import annotations

import html
import re

CODE_BLOCK_OPEN_TAG = re.compile(r'<pre><code([^>]+)class="([^"]+)"([^>]*)>')
SIMPLE_HEADING = re.compile(r"<h([1-9])>([^<]*)</h\1>")
NON_ALNUM_RUN = re.compile(r"[\W_]+")
LANGUAGE_PREFIX = "language-"


def normalize_id(value: str) -> str:
    """Convert ``value`` into a lowercase hyphen-separated anchor id.

    Examples
    --------
    >>> normalize_id("  Errors & Retries! ")
    'errors-retries'
    """
    return NON_ALNUM_RUN.sub("-", value.lower()).strip("-")


def rewrite_code_classes(classes: str) -> str:
    """Normalize a code block class list.

    Commas become spaces. The first ``language-<tag>`` class is expanded to
    ``language-<tag> tab-<tag> highlight``; the words following it belong to
    the fence info string and are dropped. Classes before it are kept.

    Examples
    --------
    >>> rewrite_code_classes("numbered,language-shell session")
    'numbered language-shell tab-shell highlight'
    """
    kept: list[str] = []
    for token in classes.replace(",", " ").split():
        if token.startswith(LANGUAGE_PREFIX) and len(token) > len(LANGUAGE_PREFIX):
            lang = token[len(LANGUAGE_PREFIX) :]
            kept.append(f"{LANGUAGE_PREFIX}{lang} tab-{lang} highlight")
            break
        kept.append(token)
    return " ".join(kept)


def fix_code_blocks(page: str) -> str:
    """Rewrite every ``<pre><code class=...>`` opening tag in ``page``."""

    def _repl(match: re.Match[str]) -> str:
        before, classes, after = match.groups()
        attrs = f"{before.strip()} {after.strip()}".strip()
        code_tag = f"<code {attrs}>" if attrs else "<code>"
        return f'<pre class="{rewrite_code_classes(classes)}">{code_tag}'

    return CODE_BLOCK_OPEN_TAG.sub(_repl, page)


def add_heading_ids(page: str) -> str:
    """Inject ``id`` attributes into headings that contain only text.

    Headings carrying attributes or nested markup (``<h1><b>x</b></h1>``) are
    left byte-identical, as are headings whose text normalizes to nothing.
    """

    def _repl(match: re.Match[str]) -> str:
        level, text = match.groups()
        anchor = normalize_id(html.unescape(text))
        if not anchor:
            return match.group(0)
        return f'<h{level} id="{anchor}">{text}</h{level}>'

    return SIMPLE_HEADING.sub(_repl, page)


def postprocess(page: str) -> str:
    """Apply every page transform to rendered template output."""
    return add_heading_ids(fix_code_blocks(page))


__all__ = [
    "add_heading_ids",
    "fix_code_blocks",
    "normalize_id",
    "postprocess",
    "rewrite_code_classes",
]
