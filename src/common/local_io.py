"""Local file I/O utilities."""

from __future__ import annotations

import gzip
import logging
import sys
from pathlib import Path

logger = logging.getLogger(__name__)


def read_text_local(path: str) -> str:
    """
    Read a UTF-8 text document from a local file, or stdin for "-".

    Files ending in .gz are decompressed.

    Args:
        path: Path to the file, or "-" for stdin

    Returns:
        The file contents

    Raises:
        FileNotFoundError: If the file doesn't exist
    """
    if path == "-":
        text = sys.stdin.read()
        logger.info("Read %d characters from stdin", len(text))
        return text

    filepath = Path(path)
    if not filepath.exists():
        raise FileNotFoundError(f"Input file not found: {filepath}")

    opener = gzip.open if filepath.suffix == ".gz" else open
    with opener(filepath, "rt", encoding="utf-8") as f:
        text = f.read()

    logger.info("Read %d characters from %s", len(text), filepath)
    return text
