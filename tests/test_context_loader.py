"""Tests for decoding the mdBook render context."""

from __future__ import annotations

import typing as typ
from pathlib import Path

import msgspec.json as msgspec_json
import pytest

from mdbook_api.context import (
    Chapter,
    ContextError,
    Language,
    Separator,
    load_render_context,
)


def _chapter(name: str, **fields: typ.Any) -> dict[str, typ.Any]:
    return {"Chapter": {"name": name, "content": f"# {name}\n", **fields}}


def _payload(**overrides: typ.Any) -> dict[str, typ.Any]:
    payload: dict[str, typ.Any] = {
        "version": "0.4.40",
        "root": "/srv/book",
        "destination": "/srv/book/book/api",
        "book": {
            "sections": [
                _chapter(
                    "Introduction",
                    path="intro.md",
                    number=[1],
                    sub_items=[_chapter("Setup", path="intro/setup.md", number=[1, 1])],
                ),
                "Separator",
                {"PartTitle": "Reference"},
                _chapter("Draft", path=None, number=[2]),
            ]
        },
        "config": {
            "book": {"title": "Guide", "language": "en", "description": "Docs"},
            "output": {
                "api": {
                    "theme-dir": "custom-theme",
                    "single_page": True,
                    "lang": [{"id": "shell"}, {"id": "rust", "name": "Rust"}],
                },
                "html": {"livereload-url": "ws://127.0.0.1:3000/__livereload"},
            },
        },
    }
    payload.update(overrides)
    return payload


def test_full_context_is_decoded() -> None:
    """Book items, section numbers, and renderer options are decoded."""
    ctx = load_render_context(msgspec_json.encode(_payload()))

    assert ctx.root == Path("/srv/book")
    assert ctx.destination == Path("/srv/book/book/api")
    assert ctx.version == "0.4.40"

    intro, sep, part, draft = ctx.book.items
    assert isinstance(intro, Chapter)
    assert intro.number == "1."
    assert intro.path == "intro.md"
    setup = intro.sub_items[0]
    assert isinstance(setup, Chapter)
    assert setup.number == "1.1."
    assert setup.parent_names == ("Introduction",)
    assert sep == Separator()
    assert part == Separator()
    assert isinstance(draft, Chapter)
    assert draft.is_draft

    api = ctx.config.api
    assert api.theme_dir == "custom-theme"
    assert api.single_page is True
    assert api.pygments_style == "monokai"
    assert api.lang == (Language("shell"), Language("rust", "Rust"))
    assert ctx.config.title == "Guide"
    assert ctx.config.livereload_url == "ws://127.0.0.1:3000/__livereload"


def test_book_iter_is_depth_first() -> None:
    """Traversal visits a chapter before its sub-items."""
    ctx = load_render_context(msgspec_json.encode(_payload()))
    names = [
        item.name if isinstance(item, Chapter) else "--" for item in ctx.book.iter()
    ]
    assert names == ["Introduction", "Setup", "--", "--", "Draft"]


def test_items_key_is_accepted() -> None:
    """Newer hosts name the item list ``items`` instead of ``sections``."""
    payload = _payload(book={"items": [_chapter("Only", path="only.md")]})
    ctx = load_render_context(msgspec_json.encode(payload))
    assert [item.name for item in ctx.book.iter()] == ["Only"]


def test_minimal_context_uses_defaults() -> None:
    """Missing config tables fall back to defaults."""
    ctx = load_render_context('{"root": "r", "destination": "d", "book": {}}')
    assert ctx.book.items == ()
    assert ctx.config.title == ""
    assert ctx.config.api.single_page is False
    assert ctx.config.livereload_url is None


@pytest.mark.parametrize(
    ("source", "message"),
    [
        ("{not json", "not valid JSON"),
        ("[]", "Expected a table"),
        ('{"root": "r", "book": {}}', "'root' and 'destination'"),
        (
            '{"root": "r", "destination": "d", "book": {"sections": "x"}}',
            "must be an array",
        ),
        (
            '{"root": "r", "destination": "d", "book": {"sections": [{"Other": 1}]}}',
            "Unsupported book item",
        ),
        (
            '{"root": "r", "destination": "d", "book": {"sections": '
            '[{"Chapter": {"name": "x", "number": ["a"]}}]}}',
            "Invalid section number",
        ),
        (
            '{"root": "r", "destination": "d", "book": {}, '
            '"config": {"output": {"api": {"lang": [{"name": "x"}]}}}}',
            "needs an 'id'",
        ),
    ],
)
def test_malformed_context_raises(source: str, message: str) -> None:
    """Malformed payloads raise ``ContextError`` with a useful message."""
    with pytest.raises(ContextError, match=message):
        load_render_context(source)
