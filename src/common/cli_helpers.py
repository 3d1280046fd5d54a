"""Common CLI helper utilities."""

from __future__ import annotations

import logging
import sys


def setup_logging(level: str = "INFO") -> None:
    """Configure standard logging format for CLI tools.

    Logs go to stderr so that stdout only carries command output.

    Args:
        level: Logging level name (e.g. "INFO", "debug"), validated by the caller.
    """
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
        force=True,
    )
