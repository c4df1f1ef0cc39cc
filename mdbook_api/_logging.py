"""structlog configuration for the mdbook-api console script."""

from __future__ import annotations

import logging
import sys

import structlog


def configure_logging(*, verbose: bool = False) -> None:
    """Route structlog events to stderr with a console renderer.

    mdBook shows a backend's stderr to the user, while stdout is reserved for
    the ``wrote <path>`` summary, so log events never mix with it.

    Parameters
    ----------
    verbose : bool, optional
        Emit ``DEBUG`` events (per-chapter processing, asset overrides) in
        addition to the default ``INFO`` level.
    """
    level = logging.DEBUG if verbose else logging.INFO
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


__all__ = ["configure_logging"]
