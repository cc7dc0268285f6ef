"""
codec.py - JSON encoding of quote collections
Single responsibility: convert between list[Quote] and the JSON array format
shared by persistence and export files.
"""
import json

from quotebox.domain.errors import ParseError
from quotebox.domain.models import Quote


def encode_quotes(quotes: list[Quote], indent: int | None = None) -> str:
    return json.dumps(
        [q.to_dict() for q in quotes], ensure_ascii=False, indent=indent
    )


def decode_quotes(data: str | bytes) -> list[Quote]:
    """
    Parse a JSON array of {"text": str, "category": str} records.

    Only the shape is checked; empty strings are accepted as they come.
    Raises ParseError on anything else.
    """
    if isinstance(data, bytes):
        try:
            data = data.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise ParseError(f"Not UTF-8 text: {e}") from e
    try:
        payload = json.loads(data)
    except json.JSONDecodeError as e:
        raise ParseError(f"Malformed JSON: {e}") from e

    if not isinstance(payload, list):
        raise ParseError("Expected a JSON array of quotes")

    quotes: list[Quote] = []
    for index, record in enumerate(payload):
        if not isinstance(record, dict):
            raise ParseError(f"Item {index} is not an object")
        text = record.get("text")
        category = record.get("category")
        if not isinstance(text, str) or not isinstance(category, str):
            raise ParseError(f"Item {index} needs string 'text' and 'category'")
        quotes.append(Quote(text=text, category=category))
    return quotes
