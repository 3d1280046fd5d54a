"""CLI for enriching article records with image and tag references."""

from __future__ import annotations

import json
import logging
import sys

import yaml
from dotenv import load_dotenv

from common.cli_helpers import setup_logging
from common.local_io import read_text_local
from enrich_articles.config import load_config
from enrich_articles.enrich_articles import InvalidDocumentError, enrich_document
from enrich_articles.helpers import parse_enrich_articles_args
from enrich_articles.lookups import MAIN_IMAGE, SAMPLE_DOCUMENT, TAGS_BY_ID

load_dotenv()

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    args = parse_enrich_articles_args(argv)

    try:
        config = load_config(args.config)
    except (FileNotFoundError, ValueError, yaml.YAMLError) as exc:
        # logging isn't configured yet, the last-resort handler writes to stderr
        logger.error("Could not load config: %s", exc)
        sys.exit(1)
    setup_logging(config.log_level)

    indent = args.indent if args.indent is not None else config.output.indent

    try:
        text = read_text_local(args.input) if args.input else SAMPLE_DOCUMENT
        output = enrich_document(
            text,
            MAIN_IMAGE,
            TAGS_BY_ID,
            indent=indent,
            sort_keys=config.output.sort_keys,
        )
    except FileNotFoundError as exc:
        logger.error("%s", exc)
        sys.exit(1)
    except UnicodeDecodeError as exc:
        logger.error("Input is not valid UTF-8: %s", exc)
        sys.exit(1)
    except json.JSONDecodeError as exc:
        logger.error("Input is not valid JSON: %s", exc)
        sys.exit(1)
    except InvalidDocumentError as exc:
        logger.error("Invalid article document: %s", exc)
        sys.exit(1)

    print(output)


if __name__ == "__main__":
    main()
