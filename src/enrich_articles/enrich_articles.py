"""Resolve image and tag identifiers on article records."""

from __future__ import annotations

import json
import logging
from typing import Any

from common.serialization import dumps_json, serialize_dataclass
from enrich_articles.models import Article, EnrichedArticle, ImageRef, TagRef

logger = logging.getLogger(__name__)

MAIN_IMAGE_KEY = "mainImage"
TAGS_KEY = "tags"


class InvalidDocumentError(ValueError):
    """Raised when parsed JSON is not a list of article objects."""


def parse_articles(text: str) -> list[Article]:
    """
    Parse a JSON document into article records.

    Args:
        text: JSON text holding a list of article objects

    Returns:
        One Article per element, in document order

    Raises:
        json.JSONDecodeError: If the text is not valid JSON
        InvalidDocumentError: If the document is not a list of objects
    """
    data = json.loads(text)

    if not isinstance(data, list):
        raise InvalidDocumentError(
            f"Expected a JSON array of article records, got {type(data).__name__}"
        )

    articles = []
    for index, record in enumerate(data):
        if not isinstance(record, dict):
            raise InvalidDocumentError(
                f"Article record at index {index} is {type(record).__name__}, not an object"
            )
        articles.append(Article(fields=record))

    logger.info("Parsed %d articles", len(articles))
    return articles


def enrich_articles(
    articles: list[Article],
    main_image: ImageRef,
    tags_by_id: dict[str, TagRef],
) -> list[EnrichedArticle]:
    """
    Resolve mainImage and tags on every article.

    Args:
        articles: Parsed article records
        main_image: Image reference that replaces any set mainImage
        tags_by_id: {TAG_ID: TagRef}

    Returns:
        Enriched articles, in input order
    """
    enriched = [enrich_article(article, main_image, tags_by_id) for article in articles]

    tag_count = sum(len(article.tags or []) for article in enriched)
    logger.info("Enriched %d articles with %d resolved tags", len(enriched), tag_count)
    return enriched


def enrich_article(
    article: Article,
    main_image: ImageRef,
    tags_by_id: dict[str, TagRef],
) -> EnrichedArticle:
    """Resolve a single article's mainImage and tags."""
    image = main_image if _is_set(article.main_image_id) else None

    tag_ids = article.tag_ids
    if not isinstance(tag_ids, list):
        logger.warning(
            "Article %s has non-list tags (%s), treating as empty",
            article.id,
            type(tag_ids).__name__,
        )
        tag_ids = []

    tags = resolve_tags(tag_ids, tags_by_id)

    return EnrichedArticle(
        fields=article.fields,
        main_image=image,
        tags=tags or None,
    )


def resolve_tags(tag_ids: list[Any], tags_by_id: dict[str, TagRef]) -> list[TagRef]:
    """Look up tag ids in order, dropping ids with no entry."""
    resolved: list[TagRef] = []
    for tag_id in tag_ids:
        tag = tags_by_id.get(tag_id) if isinstance(tag_id, str) else None
        if tag is None:
            logger.debug("Dropping unresolved tag: %r", tag_id)
            continue
        resolved.append(tag)
    return resolved


def article_to_record(article: EnrichedArticle) -> dict[str, Any]:
    """
    Build the output mapping for an enriched article.

    Keys keep their input order. mainImage is replaced only when it was
    resolved; tags is written only when at least one tag resolved.
    """
    record: dict[str, Any] = {}
    for key, value in article.fields.items():
        if key == TAGS_KEY:
            if article.tags:
                record[key] = [serialize_dataclass(tag) for tag in article.tags]
        elif key == MAIN_IMAGE_KEY and article.main_image is not None:
            record[key] = serialize_dataclass(article.main_image)
        else:
            record[key] = value
    return record


def render_articles(
    articles: list[EnrichedArticle],
    indent: int | None = None,
    sort_keys: bool = False,
) -> str:
    """Serialize enriched articles to a JSON array."""
    records = [article_to_record(article) for article in articles]
    return dumps_json(records, indent=indent, sort_keys=sort_keys)


def enrich_document(
    text: str,
    main_image: ImageRef,
    tags_by_id: dict[str, TagRef],
    indent: int | None = None,
    sort_keys: bool = False,
) -> str:
    """Parse, enrich and re-serialize a JSON document of article records."""
    articles = parse_articles(text)
    enriched = enrich_articles(articles, main_image, tags_by_id)
    return render_articles(enriched, indent=indent, sort_keys=sort_keys)


def _is_set(value: Any) -> bool:
    """Only null and false count as unset; empty strings and zero are set."""
    return value is not None and value is not False
