"""Tests for the ``mdbook-api`` command entrypoint."""

from __future__ import annotations

import io
import typing as typ

import msgspec.json as msgspec_json
import pytest

from mdbook_api.cli import render

if typ.TYPE_CHECKING:
    from pathlib import Path


def _context(tmp_path: Path) -> dict[str, typ.Any]:
    return {
        "root": str(tmp_path / "book"),
        "destination": str(tmp_path / "book" / "book" / "api"),
        "config": {"book": {"title": "CLI Book"}},
        "book": {
            "sections": [
                {
                    "Chapter": {
                        "name": "Start",
                        "content": "# Start\n",
                        "path": "start.md",
                        "number": [1],
                        "sub_items": [],
                    }
                }
            ]
        },
    }


def test_render_from_context_file(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """A saved context renders into the overridden destination."""
    context = tmp_path / "ctx.json"
    context.write_bytes(msgspec_json.encode(_context(tmp_path)))
    destination = tmp_path / "dist"

    render(context=context, destination=destination)

    assert (destination / "index.html").exists()
    assert (destination / ".nojekyll").exists()
    out = capsys.readouterr().out
    assert "index.html" in out
    assert out.startswith("wrote ")


def test_render_reads_stdin(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Without ``--context`` the payload is read from stdin as mdBook sends it."""
    payload = msgspec_json.encode(_context(tmp_path))
    monkeypatch.setattr("sys.stdin", io.TextIOWrapper(io.BytesIO(payload)))

    render(single_page=True)

    destination = tmp_path / "book" / "book" / "api"
    assert (destination / "index.html").exists()
    assert "CLI Book" in (destination / "index.html").read_text(encoding="utf-8")


def test_invalid_context_exits_non_zero(tmp_path: Path) -> None:
    """Malformed context JSON exits with status 1."""
    context = tmp_path / "ctx.json"
    context.write_text("{broken", encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        render(context=context)

    assert excinfo.value.code == 1


def test_missing_context_file_exits_non_zero(tmp_path: Path) -> None:
    """A context path that does not exist is reported, not raised."""
    with pytest.raises(SystemExit) as excinfo:
        render(context=tmp_path / "missing.json")

    assert excinfo.value.code == 1
