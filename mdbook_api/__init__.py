"""Render an mdBook book into a themed static HTML site.

This package implements an alternative mdBook backend: mdBook pipes a JSON
render context to the ``mdbook-api`` console script, which renders every
chapter (or the whole book as a single page) through a Jinja page template
and writes the site plus its theme assets to the destination directory.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from mdbook_api import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
