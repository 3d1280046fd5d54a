"""Serialization utilities."""

import json
from dataclasses import asdict
from typing import Any


def serialize_dataclass(obj) -> dict:
    """Serialize a dataclass to dict, dropping fields that are None."""
    return {key: value for key, value in asdict(obj).items() if value is not None}


def dumps_json(data: Any, indent: int | None = None, sort_keys: bool = False) -> str:
    """Dump data to JSON text.

    Compact separators are used unless an indent is given. Non-ASCII
    characters are written as is.
    """
    separators = (",", ":") if indent is None else (",", ": ")
    return json.dumps(
        data,
        indent=indent,
        sort_keys=sort_keys,
        separators=separators,
        ensure_ascii=False,
    )
