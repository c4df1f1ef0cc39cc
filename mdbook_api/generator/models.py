"""Shared dataclasses and aliases used by the page generation pipeline."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from mdbook_api._constants import SPACER

if typ.TYPE_CHECKING:
    from mdbook_api.context import BookItem

RenderData = dict[str, typ.Any]
"""Template input: string keys mapped to strings, booleans, lists, and dicts."""


@dc.dataclass(slots=True, frozen=True)
class ChapterSummary:
    """Read-only projection of a book item used for navigation.

    Attributes
    ----------
    name : str
        Chapter display name; empty for separators.
    path : str | None
        Chapter path as text; ``None`` for separators and draft chapters.
    section : str | None
        Dotted section number, when the chapter is numbered.
    has_sub_items : bool
        Whether the chapter has nested items.
    spacer : bool
        ``True`` when this entry stands for a separator.
    """

    name: str = ""
    path: str | None = None
    section: str | None = None
    has_sub_items: bool = False
    spacer: bool = False

    @property
    def depth(self) -> int:
        """Return the outline depth encoded by the section number.

        A trailing dot is ignored, so ``"1."`` and ``"1"`` are both depth 1
        and ``"2.3."`` is depth 2. Unnumbered entries sit at depth 1.
        """
        if not self.section:
            return 1
        return 1 + self.section.rstrip(".").count(".")

    def to_data(self) -> dict[str, str]:
        """Return the render-data mapping stored under ``chapters``."""
        if self.spacer:
            return {"spacer": SPACER}
        data = {
            "has_sub_items": "true" if self.has_sub_items else "false",
            "name": self.name,
        }
        if self.section is not None:
            data["section"] = self.section
        if self.path is not None:
            data["path"] = self.path
        return data

    @classmethod
    def from_data(cls, data: typ.Mapping[str, typ.Any]) -> ChapterSummary:
        """Rebuild a summary from a ``chapters`` entry of render data."""
        if "spacer" in data:
            return cls(spacer=True)
        section = data.get("section")
        path = data.get("path")
        return cls(
            name=str(data.get("name", "")),
            path=None if path is None else str(path),
            section=None if section is None else str(section),
            has_sub_items=str(data.get("has_sub_items", "false")) == "true",
        )


@dc.dataclass(slots=True)
class RenderState:
    """Mutable state threaded through one render pass.

    Attributes
    ----------
    book_item : BookItem | None
        The item currently being rendered.
    is_index : bool
        ``True`` while rendering the first chapter, which becomes the index.
    full_content : list[str]
        Converted HTML of every chapter in traversal order (append-only).
    """

    book_item: BookItem | None = None
    is_index: bool = True
    full_content: list[str] = dc.field(default_factory=list)

    def append_content(self, html: str) -> None:
        """Record a chapter's converted HTML for the single-page view."""
        self.full_content.append(html)

    @property
    def book_content(self) -> str:
        """Return the concatenated HTML of every chapter seen so far."""
        return "".join(self.full_content)


__all__ = ["ChapterSummary", "RenderData", "RenderState"]
