"""Utility helpers shared by the render context loader."""

from __future__ import annotations

import typing as typ

from .models import ContextError, Language


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _mapping(value: object, *, where: str) -> typ.Mapping[str, typ.Any]:
    """Return ``value`` as a mapping, treating ``None`` as empty."""
    if value is None:
        return {}
    if not isinstance(value, dict):
        msg = f"Expected a table for '{where}', got {type(value).__name__}."
        raise ContextError(msg)
    return value


def _format_section_number(value: object) -> str | None:
    """Render the host's section number list as a dotted string.

    Examples
    --------
    >>> _format_section_number([2, 3])
    '2.3.'
    >>> _format_section_number(None) is None
    True
    """
    match value:
        case None | []:
            return None
        case list() if all(isinstance(part, int) for part in value):
            return "".join(f"{part}." for part in value)
        case str() if value.strip():
            return value.strip()
        case _:
            msg = f"Invalid section number: {value!r}."
            raise ContextError(msg)


def _build_languages(payload: object) -> tuple[Language, ...]:
    """Build language switcher entries from the ``lang`` array."""
    if payload is None:
        return ()
    if not isinstance(payload, list):
        msg = "'output.api.lang' must be an array of tables."
        raise ContextError(msg)
    languages: list[Language] = []
    for entry in payload:
        table = _mapping(entry, where="output.api.lang")
        lang_id = _optional_str(table.get("id"))
        if not lang_id:
            msg = "Every 'output.api.lang' entry needs an 'id'."
            raise ContextError(msg)
        languages.append(Language(id=lang_id, name=_optional_str(table.get("name"))))
    return tuple(languages)


__all__ = [
    "_build_languages",
    "_format_section_number",
    "_mapping",
    "_optional_str",
]
