"""Shared steps for the behaviour scenarios.

Scenarios describe a book through its JSON render context, exactly as mdBook
would pipe it to the backend, and render it through the CLI entrypoint.
"""

from __future__ import annotations

import typing as typ

import msgspec.json as msgspec_json
import pytest
from pytest_bdd import given, when

from mdbook_api.cli import render

if typ.TYPE_CHECKING:
    from pathlib import Path


def chapter(
    name: str,
    path: str,
    number: list[int],
    content: str,
    sub_items: list[dict[str, typ.Any]] | None = None,
) -> dict[str, typ.Any]:
    """Return a host-format chapter item."""
    return {
        "Chapter": {
            "name": name,
            "content": content,
            "path": path,
            "number": number,
            "sub_items": sub_items or [],
        }
    }


@pytest.fixture
def scenario_state() -> dict[str, typ.Any]:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


@given("a render context for a book with nested chapters")
def given_nested_book(tmp_path: Path, scenario_state: dict[str, typ.Any]) -> None:
    """Describe a two-level book rooted in ``tmp_path``."""
    scenario_state["context"] = {
        "root": str(tmp_path / "book"),
        "destination": str(tmp_path / "book" / "book" / "api"),
        "config": {"book": {"title": "Payments API"}, "output": {"api": {}}},
        "book": {
            "sections": [
                chapter(
                    "Introduction",
                    "intro.md",
                    [1],
                    "# Introduction\n\nWelcome.\n",
                    [
                        chapter(
                            "Authentication",
                            "intro/auth.md",
                            [1, 1],
                            "# Authentication\n\nUse a token.\n",
                        )
                    ],
                ),
                "Separator",
                chapter("Errors", "errors.md", [2], "# Errors\n\nThey happen.\n"),
            ]
        },
    }


@when("I run the mdbook-api renderer")
def when_render(tmp_path: Path, scenario_state: dict[str, typ.Any]) -> None:
    """Write the context to disk and render it through the CLI."""
    context_path = tmp_path / "context.json"
    context_path.write_bytes(msgspec_json.encode(scenario_state["context"]))
    render(context=context_path)
    scenario_state["destination"] = tmp_path / "book" / "book" / "api"
