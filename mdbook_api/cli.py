"""Cyclopts CLI entrypoint for the mdbook-api backend.

mdBook runs an alternative backend by spawning its command and writing the
JSON render context to the process's stdin. Registering this package in a
book's ``book.toml``::

    [output.api]
    command = "mdbook-api"
    single_page = true

makes ``mdbook build`` render the book into ``book/api``. The command can
also be run by hand against a saved context, which is handy when iterating
on a theme.

Examples
--------
Render from a saved context into a scratch directory:

>>> from mdbook_api.cli import app
>>> app(
...     ["--context", "ctx.json", "--destination", "dist", "--single-page"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import sys
import typing as typ
from pathlib import Path

import cyclopts
import structlog
from cyclopts import App, Parameter

from ._logging import configure_logging
from .context import ContextError, load_render_context
from .errors import BookRenderError
from .generator import BookRenderer

app = App(name="mdbook-api", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]
logger = structlog.get_logger(__name__)


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _read_context(context: Path | None) -> bytes:
    """Return the raw render context from ``context`` or stdin."""
    if context is None:
        return sys.stdin.buffer.read()
    return context.read_bytes()


@app.default
def render(
    *,
    context: typ.Annotated[
        Path | None,
        Parameter(help="Read the render context from a file instead of stdin"),
    ] = None,
    destination: typ.Annotated[
        Path | None, Parameter(help="Override the output folder")
    ] = None,
    single_page: typ.Annotated[
        bool | None,
        Parameter(help="Render the whole book into a single index.html"),
    ] = None,
    theme_dir: typ.Annotated[
        Path | None, Parameter(help="Override the project theme directory")
    ] = None,
    verbose: typ.Annotated[bool, Parameter(help="Log debug events")] = False,
) -> None:
    """Render the book described by an mdBook render context.

    Parameters
    ----------
    context : Path or None, optional
        JSON render context to read; stdin is used when ``None``.
    destination : Path or None, optional
        Output directory overriding the context's ``destination``.
    single_page : bool or None, optional
        Override ``output.api.single_page``.
    theme_dir : Path or None, optional
        Theme directory overriding ``output.api.theme_dir``.
    verbose : bool, optional
        Emit debug-level log events.

    Raises
    ------
    SystemExit
        With status 1 when the context is invalid or rendering fails.
    """
    configure_logging(verbose=verbose)
    try:
        ctx = load_render_context(_read_context(context))
        renderer = BookRenderer.from_context(
            ctx,
            single_page=single_page,
            theme_dir=theme_dir,
            destination=destination,
        )
        written = renderer.render()
    except (BookRenderError, ContextError, OSError) as exc:
        logger.error("RENDER_FAILED", error=str(exc), kind=type(exc).__name__)
        raise SystemExit(1) from exc
    for path in written:
        print(f"wrote {_format_path(path)}")


def main() -> None:
    """Invoke the Cyclopts application behind the ``mdbook-api`` command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
