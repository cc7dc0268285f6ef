"""
transfer_service.py - JSON export / import
Single responsibility: turn the collection into a downloadable file and
merge uploaded files back into the store.
"""
import logging
import os

from quotebox.config import EXPORT_FILENAME, EXPORT_INDENT
from quotebox.domain.codec import decode_quotes, encode_quotes
from quotebox.domain.models import Quote
from quotebox.services.quote_store import QuoteStore

logger = logging.getLogger(__name__)


def export_json(quotes: list[Quote]) -> bytes:
    return encode_quotes(quotes, indent=EXPORT_INDENT).encode("utf-8")


def import_json(data: bytes | str) -> list[Quote]:
    """Raises ParseError on malformed input."""
    return decode_quotes(data)


def import_into(store: QuoteStore, data: bytes | str) -> list[Quote]:
    quotes = import_json(data)
    store.import_merge(quotes)
    return quotes


def write_export(quotes: list[Quote], path: str) -> str:
    """Write the export file; a directory path gets the default file name."""
    if os.path.isdir(path):
        path = os.path.join(path, EXPORT_FILENAME)
    with open(path, "wb") as f:
        f.write(export_json(quotes))
    logger.info("Exported %d quotes to %s", len(quotes), path)
    return path


def read_import(path: str) -> bytes:
    with open(path, "rb") as f:
        return f.read()
