"""Logging setup for the command-line entry points."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(verbose: bool = False) -> None:
    """Route package logs to stderr through rich.

    Library modules only create loggers; handlers are installed here, once
    per CLI invocation.
    """
    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    root = logging.getLogger("slidesolver")
    for old in list(root.handlers):
        root.removeHandler(old)
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)
    root.propagate = False
