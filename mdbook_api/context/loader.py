"""Decode the JSON render context mdBook pipes to alternative backends."""

from __future__ import annotations

import typing as typ
from pathlib import Path

import msgspec
import msgspec.json as msgspec_json

from mdbook_api._constants import DEFAULT_PYGMENTS_STYLE

from .helpers import (
    _build_languages,
    _format_section_number,
    _mapping,
    _optional_str,
)
from .models import (
    ApiConfig,
    Book,
    BookConfig,
    BookItem,
    Chapter,
    ContextError,
    RenderContext,
    Separator,
)


def load_render_context(source: bytes | str) -> RenderContext:
    """Build a :class:`RenderContext` from mdBook's JSON payload.

    Parameters
    ----------
    source : bytes or str
        The JSON document mdBook writes to the backend's stdin.

    Returns
    -------
    RenderContext
        Book tree, configuration, and destination for one render pass.

    Raises
    ------
    ContextError
        If the payload is not valid JSON or is missing required members.

    Examples
    --------
    >>> ctx = load_render_context(
    ...     '{"root": "/b", "destination": "/b/book/api", "config": {},'
    ...     ' "book": {"sections": ["Separator"]}}'
    ... )
    >>> ctx.book.items
    (Separator(),)
    """
    try:
        loaded = msgspec_json.decode(source)
    except msgspec.DecodeError as exc:
        msg = f"Render context is not valid JSON: {exc}"
        raise ContextError(msg) from exc
    raw = _mapping(loaded, where="render context")

    root = _optional_str(raw.get("root"))
    destination = _optional_str(raw.get("destination"))
    if not root or not destination:
        msg = "Render context must define 'root' and 'destination'."
        raise ContextError(msg)

    book_raw = _mapping(raw.get("book"), where="book")
    sections = book_raw.get("sections", book_raw.get("items")) or []
    if not isinstance(sections, list):
        msg = "'book.sections' must be an array."
        raise ContextError(msg)

    return RenderContext(
        root=Path(root),
        destination=Path(destination),
        book=Book(items=_build_items(sections, parents=())),
        config=_build_book_config(_mapping(raw.get("config"), where="config")),
        version=str(raw.get("version") or ""),
    )


def _build_items(
    payload: list[typ.Any], *, parents: tuple[str, ...]
) -> tuple[BookItem, ...]:
    """Convert the host's externally tagged book items."""
    items: list[BookItem] = []
    for entry in payload:
        match entry:
            case "Separator" | {"PartTitle": _}:
                items.append(Separator())
            case {"Chapter": dict() as chapter}:
                items.append(_build_chapter(chapter, parents=parents))
            case _:
                msg = f"Unsupported book item: {entry!r}."
                raise ContextError(msg)
    return tuple(items)


def _build_chapter(
    payload: typ.Mapping[str, typ.Any], *, parents: tuple[str, ...]
) -> Chapter:
    """Build a Chapter, recursing into its sub-items."""
    name = payload.get("name")
    if not isinstance(name, str):
        msg = "Every chapter needs a 'name'."
        raise ContextError(msg)
    sub_items = payload.get("sub_items") or []
    if not isinstance(sub_items, list):
        msg = f"'sub_items' of chapter '{name}' must be an array."
        raise ContextError(msg)
    parent_names = tuple(payload.get("parent_names") or parents)
    return Chapter(
        name=name,
        content=str(payload.get("content") or ""),
        path=payload.get("path"),
        number=_format_section_number(payload.get("number")),
        sub_items=_build_items(sub_items, parents=(*parent_names, name)),
        parent_names=parent_names,
    )


def _option(table: typ.Mapping[str, typ.Any], key: str) -> typ.Any:
    """Look up ``key`` accepting both snake_case and kebab-case spellings."""
    if key in table:
        return table[key]
    return table.get(key.replace("_", "-"))


def _build_book_config(config: typ.Mapping[str, typ.Any]) -> BookConfig:
    """Build the book-wide configuration from ``book`` and ``output`` tables."""
    book = _mapping(config.get("book"), where="config.book")
    output = _mapping(config.get("output"), where="config.output")
    api = _mapping(output.get("api"), where="config.output.api")
    html = _mapping(output.get("html"), where="config.output.html")

    api_config = ApiConfig(
        theme_dir=_optional_str(_option(api, "theme_dir")),
        lang=_build_languages(api.get("lang")),
        single_page=bool(_option(api, "single_page") or False),
        pygments_style=(
            _optional_str(_option(api, "pygments_style")) or DEFAULT_PYGMENTS_STYLE
        ),
        strict_labels=bool(_option(api, "strict_labels") or False),
    )
    return BookConfig(
        title=str(book.get("title") or ""),
        description=str(book.get("description") or ""),
        language=str(book.get("language") or ""),
        api=api_config,
        livereload_url=_optional_str(_option(html, "livereload_url")),
    )


__all__ = ["load_render_context"]
