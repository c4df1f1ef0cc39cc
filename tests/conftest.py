"""Shared fixtures for the mdbook-api test suite.

The fixtures describe a small three-chapter API book (``1``, ``1.1`` and
``2``) with a separator, built directly from the context dataclasses so that
generator tests do not depend on the JSON loader.
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

import pytest
import structlog

from mdbook_api.context import (
    ApiConfig,
    Book,
    BookConfig,
    Chapter,
    RenderContext,
    Separator,
)

if typ.TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture(autouse=True)
def reset_structlog() -> typ.Iterator[None]:
    """Restore structlog defaults so no test logs to a stale stream."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def sample_book() -> Book:
    """Return a book with a nested chapter and a trailing separator."""
    setup = Chapter(
        name="Setup",
        content="## Install\n\nRun the installer.\n",
        path="intro/setup.md",
        number="1.1.",
        parent_names=("Introduction",),
    )
    intro = Chapter(
        name="Introduction",
        content="# Introduction\n\nWelcome to the API.\n",
        path="intro.md",
        number="1.",
        sub_items=(setup,),
    )
    usage = Chapter(
        name="Usage",
        content=(
            "# Usage\n\n"
            "```shell,session\n"
            "curl https://api.example.invalid\n"
            "```\n"
        ),
        path="usage.md",
        number="2.",
    )
    return Book(items=(intro, usage, Separator()))


@pytest.fixture
def make_context(
    tmp_path: Path, sample_book: Book
) -> typ.Callable[..., RenderContext]:
    """Return a factory building render contexts rooted in ``tmp_path``."""

    def _make(
        *,
        title: str = "Guide",
        book: Book | None = None,
        **api_options: typ.Any,
    ) -> RenderContext:
        config = BookConfig(
            title=title,
            description="Sample API reference",
            language="en",
            api=dc.replace(ApiConfig(), **api_options),
        )
        return RenderContext(
            root=tmp_path / "book",
            destination=tmp_path / "book" / "book" / "api",
            book=book or sample_book,
            config=config,
        )

    return _make
