"""
Helpers for pulling idea records out of a model's free-text answer.
"""

import json
from typing import Any, Dict, Iterator, List

from ideaspark.exceptions import ResponseFormatError

_decoder = json.JSONDecoder()


def extract_text(envelope: Dict[str, Any]) -> str:
    """Return the generated text from a Messages API response body."""
    content = envelope.get("content") if isinstance(envelope, dict) else None
    if not isinstance(content, list):
        raise ResponseFormatError("Response has no content blocks")

    for block in content:
        if not isinstance(block, dict) or block.get("type", "text") != "text":
            continue
        text = block.get("text")
        if isinstance(text, str) and text:
            return text

    raise ResponseFormatError("Response has no text content")


def iter_json_arrays(text: str) -> Iterator[List[Any]]:
    """
    Yield every well-formed JSON array in text, left to right.

    The model may wrap the array in commentary or a markdown fence, so each
    '[' is tried in turn. An array nested inside one already yielded is
    skipped.
    """
    start = text.find("[")
    while start != -1:
        try:
            value, end = _decoder.raw_decode(text, start)
        except (json.JSONDecodeError, RecursionError):
            start = text.find("[", start + 1)
            continue
        if isinstance(value, list):
            yield value
            start = text.find("[", end)
        else:
            start = text.find("[", start + 1)


def _object_entries(items: List[Any]) -> List[Dict[str, Any]]:
    records = [item for item in items if isinstance(item, dict)]
    if records:
        return records

    # The answer may wrap the real array in another one
    for item in items:
        if isinstance(item, list):
            records = _object_entries(item)
            if records:
                return records
    return []


def parse_idea_records(text: str) -> List[Dict[str, Any]]:
    """
    Return the object entries of the first JSON array in text that has any.

    Raises:
        ResponseFormatError: if no array with at least one object is found
    """
    found_array = False
    for items in iter_json_arrays(text):
        found_array = True
        records = _object_entries(items)
        if records:
            return records

    if found_array:
        raise ResponseFormatError("Model response contained no idea records")
    raise ResponseFormatError("No valid JSON array found in model response")
