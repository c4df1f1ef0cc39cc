"""Unit tests for the table-of-contents builder.

These tests drive :class:`mdbook_api.generator.TocBuilder` with hand-built
chapter summaries and check both the exact markup for the common outline and
structural invariants (balanced lists, one item per chapter, no skipped
levels) across a range of outlines.

Usage
-----
Run ``pytest tests/test_toc.py -v``.
"""

from __future__ import annotations

import pytest
from bs4 import BeautifulSoup

from mdbook_api.generator import ChapterSummary, build_toc


def _summaries(*sections: str | None) -> list[ChapterSummary]:
    """Build summaries named after their section numbers."""
    return [
        ChapterSummary(name=f"Chapter {section or 'x'}", section=section)
        for section in sections
    ]


def test_empty_outline_yields_empty_root_list() -> None:
    """No summaries should still produce the root list shell."""
    assert build_toc([]) == '<ul class="toc-list-h1"></ul>'


def test_nested_section_markup() -> None:
    """A ``1``, ``1.1``, ``2`` outline nests the second entry under the first."""
    summaries = [
        ChapterSummary(name="Intro", section="1"),
        ChapterSummary(name="Setup", section="1.1"),
        ChapterSummary(name="Usage", section="2"),
    ]
    assert build_toc(summaries) == (
        '<ul class="toc-list-h1">'
        '<li><a href="#intro" class="toc-h1 toc-link" data-title="Intro">Intro</a>'
        '<ul class="toc-list-h2">'
        '<li><a href="#setup" class="toc-h2 toc-link" data-title="Setup">Setup</a></li>'
        "</ul></li>"
        '<li><a href="#usage" class="toc-h1 toc-link" data-title="Usage">Usage</a></li>'
        "</ul>"
    )


def test_trailing_dot_section_numbers_match_plain_numbers() -> None:
    """The host's ``"1.1."`` format must nest exactly like ``"1.1"``."""
    plain = build_toc(_summaries("1", "1.1", "2"))
    dotted = build_toc(
        [
            ChapterSummary(name="Chapter 1", section="1."),
            ChapterSummary(name="Chapter 1.1", section="1.1."),
            ChapterSummary(name="Chapter 2", section="2."),
        ]
    )
    assert BeautifulSoup(plain, "html.parser").get_text() == BeautifulSoup(
        dotted, "html.parser"
    ).get_text()
    assert dotted.count('<ul class="toc-list-h2">') == 1


@pytest.mark.parametrize(
    "sections",
    [
        ("1", "2", "3"),
        ("1", "1.1", "1.1.1", "2"),
        ("1", "1.1", "1.1.1", "1.1.1.1", "1.2", "2", "2.1"),
        (None, "1", "1.1", None),
        ("1.1.1", "1.2", "2"),
        ("1", "1.1.1", "1.1.2", "2"),
    ],
)
def test_lists_are_balanced_and_items_counted(sections: tuple[str | None, ...]) -> None:
    """Every opened list closes once and each chapter gets exactly one item."""
    html = build_toc(_summaries(*sections))
    assert html.count("<ul") == html.count("</ul>")
    assert html.count("<li>") == html.count("</li>") == len(sections)

    soup = BeautifulSoup(html, "html.parser")
    for summary in _summaries(*sections):
        link = soup.find("a", attrs={"data-title": summary.name})
        assert link is not None
        assert len(link.find_parents("ul")) == summary.depth


def test_deep_first_entry_opens_every_intermediate_level() -> None:
    """An outline starting at depth 3 opens the level 2 and 3 lists first."""
    html = build_toc(_summaries("1.2.3"))
    assert html.startswith(
        '<ul class="toc-list-h1"><ul class="toc-list-h2"><ul class="toc-list-h3"><li>'
    )
    assert html.endswith("</li></ul></ul></ul>")


def test_separators_are_skipped() -> None:
    """Separators contribute no items and do not disturb nesting."""
    summaries = [
        ChapterSummary(name="Intro", section="1"),
        ChapterSummary(spacer=True),
        ChapterSummary(name="Setup", section="1.1"),
    ]
    html = build_toc(summaries)
    assert html.count("<li>") == 2
    assert 'data-title=""' not in html


def test_label_renders_inline_markdown() -> None:
    """Titles with inline code keep the code span inside the anchor."""
    html = build_toc([ChapterSummary(name="The `api` object", section="1")])
    link = BeautifulSoup(html, "html.parser").select_one("a")
    assert link is not None
    assert link["href"] == "#the-api-object"
    assert link["data-title"] == "The `api` object"
    assert link.select_one("code").get_text() == "api"
    assert link.find("p") is None


def test_unnumbered_entries_sit_at_top_level() -> None:
    """Prefix chapters without numbers are rendered at depth 1."""
    summary = ChapterSummary(name="Foreword")
    assert summary.depth == 1
    html = build_toc([summary])
    assert 'class="toc-h1 toc-link"' in html
