"""Fixed lookup tables and the built-in sample document."""

from enrich_articles.models import ImageRef, TagRef

MAIN_IMAGE = ImageRef(id="image234", filename="234.png")

TAGS_BY_ID: dict[str, TagRef] = {
    "tag345": TagRef(id="tag345", name="news"),
    "tag789": TagRef(id="tag789", name="sport"),
}

SAMPLE_DOCUMENT = """
[{
  "id": 123,
  "title": "News article",
  "body": "The body",
  "mainImage": "image234",
  "tags": [ "tag345", "tag456", "tag789" ]
},
{
  "id": 999,
  "title": "Another news article",
  "body": "The other body",
  "tags": [ ]
}]
"""
