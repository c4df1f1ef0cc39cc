"""Theme assets and page template, with per-project overrides.

The default theme ships inside the package (``mdbook_api/theme``). A project
may override any default asset, and the page template, by placing a file
with the same relative name in its theme directory (``<root>/theme`` unless
``output.api.theme_dir`` says otherwise). Files that do not shadow a default
asset are ignored.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import structlog

from mdbook_api._constants import (
    DEFAULT_THEME_DIR,
    FAVICON,
    HIGHLIGHT_CSS,
    INDEX_TEMPLATE,
    NOJEKYLL,
    NOJEKYLL_CONTENT,
)
from mdbook_api.errors import AssetLoadError

from .output import write_file
from .renderer import MarkdownConverter

if typ.TYPE_CHECKING:
    from mdbook_api.context import RenderContext

logger = structlog.get_logger(__name__)

DEFAULT_THEME_ROOT = Path(__file__).resolve().parents[1] / "theme"
STATIC_ASSETS = (FAVICON, "app.css", "app.js")


def load_default_assets(
    theme_root: Path = DEFAULT_THEME_ROOT,
    converter: MarkdownConverter | None = None,
) -> dict[str, bytes]:
    """Return the built-in assets keyed by their output path.

    ``highlight.css`` is generated from the converter's Pygments style so
    highlighted code blocks are coloured out of the box.
    """
    assets = {name: _read_asset(theme_root / name) for name in STATIC_ASSETS}
    converter = converter or MarkdownConverter()
    assets[HIGHLIGHT_CSS] = converter.stylesheet.encode("utf-8")
    return assets


class HtmlTheme:
    """Asset-provider capability: static files plus the page template."""

    def __init__(self, template: bytes, assets: dict[str, bytes]) -> None:
        self._template = template
        self.assets = assets

    @classmethod
    def load(
        cls,
        theme_dir: Path | None,
        *,
        converter: MarkdownConverter | None = None,
        default_root: Path = DEFAULT_THEME_ROOT,
    ) -> HtmlTheme:
        """Load the default theme and apply overrides from ``theme_dir``.

        Parameters
        ----------
        theme_dir : Path or None
            Project theme directory; ignored when ``None`` or not a directory.
        converter : MarkdownConverter, optional
            Supplies the Pygments style for ``highlight.css``.
        default_root : Path, optional
            Directory holding the built-in theme.

        Raises
        ------
        AssetLoadError
            If an override file exists but cannot be read.
        """
        assets = load_default_assets(default_root, converter)
        template = _read_asset(default_root / INDEX_TEMPLATE)

        if theme_dir is not None and theme_dir.is_dir():
            for name in assets:
                candidate = theme_dir / name
                if candidate.exists():
                    assets[name] = _read_asset(candidate)
                    logger.debug("THEME_ASSET_OVERRIDDEN", asset=name, source=str(candidate))
            candidate = theme_dir / INDEX_TEMPLATE
            if candidate.exists():
                template = _read_asset(candidate)
                logger.debug("THEME_TEMPLATE_OVERRIDDEN", source=str(candidate))

        return cls(template, assets)

    @classmethod
    def from_context(
        cls,
        ctx: RenderContext,
        *,
        converter: MarkdownConverter | None = None,
        theme_dir: Path | None = None,
    ) -> HtmlTheme:
        """Load the theme configured for the book in ``ctx``."""
        configured = ctx.config.api.theme_dir or DEFAULT_THEME_DIR
        resolved = theme_dir or ctx.root / configured
        return cls.load(resolved, converter=converter)

    @property
    def template(self) -> bytes:
        """Return the page template source."""
        return self._template

    def copy_static_files(self, destination: Path) -> list[Path]:
        """Write ``.nojekyll`` and every asset into ``destination``."""
        written = [write_file(destination, NOJEKYLL, NOJEKYLL_CONTENT)]
        written.extend(
            write_file(destination, name, content)
            for name, content in sorted(self.assets.items())
        )
        logger.info("THEME_ASSETS_COPIED", count=len(self.assets))
        return written


def _read_asset(path: Path) -> bytes:
    """Return the bytes of ``path``.

    Raises
    ------
    AssetLoadError
        If the file cannot be read.
    """
    try:
        return path.read_bytes()
    except OSError as exc:
        msg = f"Unable to load theme asset '{path}': {exc}"
        raise AssetLoadError(msg) from exc


__all__ = ["DEFAULT_THEME_ROOT", "HtmlTheme", "load_default_assets"]
