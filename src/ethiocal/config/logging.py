"""Logging setup for the command line entry point."""

from __future__ import annotations

import logging
import sys
from typing import Final

LOG_FORMAT: Final[str] = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
LOG_DATE_FORMAT: Final[str] = "%H:%M:%S"


def verbosity_level(*, verbose: bool) -> int:
    """Map the ``--verbose`` switch onto a root logger level."""
    return logging.DEBUG if verbose else logging.WARNING


def configure_logging(*, level: int = logging.WARNING, force: bool = False) -> None:
    """Send log records to stderr so converted dates on stdout stay machine readable.

    Only warnings are shown by default. Pass ``force=True`` to replace handlers installed by
    an earlier call, as the CLI does on every invocation.
    """

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stderr,
        force=force,
    )
