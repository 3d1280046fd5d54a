from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ImageRef:
    id: str
    filename: str


@dataclass(frozen=True)
class TagRef:
    id: str
    name: str


@dataclass
class Article:
    # the record as parsed, key order preserved
    fields: dict[str, Any]

    @property
    def id(self) -> Any:
        return self.fields.get("id")

    @property
    def main_image_id(self) -> Any:
        return self.fields.get("mainImage")

    @property
    def tag_ids(self) -> Any:
        return self.fields.get("tags", [])


@dataclass
class EnrichedArticle:
    fields: dict[str, Any]
    main_image: ImageRef | None = None
    tags: list[TagRef] | None = None  # None when nothing resolved, never empty

    @property
    def id(self) -> Any:
        return self.fields.get("id")
