"""Helper functions for enrich_articles CLI."""

from __future__ import annotations

import argparse


def parse_indent(value: str) -> int:
    """Parse a non-negative indent for argparse arguments.

    Raises:
        argparse.ArgumentTypeError: If the value is not a non-negative integer.
    """
    try:
        indent = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError("indent must be an integer") from exc
    if indent < 0:
        raise argparse.ArgumentTypeError("indent must not be negative")
    return indent


def parse_enrich_articles_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments for enrich_articles."""

    parser = argparse.ArgumentParser(
        description="Resolve image and tag references on article records and print JSON."
    )

    # Input options
    parser.add_argument(
        "--input",
        default=None,
        help="Path to a JSON document of article records ('-' for stdin, default: built-in sample)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Config name or YAML path (default: $ENRICH_ARTICLES_CONFIG or 'default')",
    )

    # Output options
    parser.add_argument(
        "--indent",
        type=parse_indent,
        default=None,
        help="Indent output JSON by this many spaces (overrides config)",
    )

    return parser.parse_args(argv)
