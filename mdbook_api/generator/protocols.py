"""Capabilities composed by :class:`~mdbook_api.generator.BookRenderer`.

The renderer holds one data builder, one page template, and one asset
provider, and calls them in a fixed order. Any object satisfying these
protocols can be swapped in.
"""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .models import RenderData, RenderState


class DataBuilder(typ.Protocol):
    """Produces render data for chapters and for the whole book."""

    name: str

    def process_chapter(self, state: RenderState) -> RenderData | None: ...

    def finalize_book(self, state: RenderState) -> RenderData: ...


class AssetProvider(typ.Protocol):
    """Supplies the page template and copies static assets."""

    @property
    def template(self) -> bytes: ...

    def copy_static_files(self, destination: Path) -> list[Path]: ...


class PageTemplate(typ.Protocol):
    """Turns render data into written pages."""

    def initialize_book(self, theme: AssetProvider) -> None: ...

    def render_chapter(
        self, destination: Path, state: RenderState, data: RenderData
    ) -> Path | None: ...

    def finalize_book(self, destination: Path, data: RenderData) -> Path | None: ...


__all__ = ["AssetProvider", "DataBuilder", "PageTemplate"]
