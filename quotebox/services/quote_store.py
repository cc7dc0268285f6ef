"""
quote_store.py - Quote collection owner
Single responsibility: hold the quote list in memory and mirror every
mutation to durable storage.
"""
import logging
import threading

from quotebox.config import QUOTES_KEY
from quotebox.domain.codec import decode_quotes, encode_quotes
from quotebox.domain.errors import ParseError, ValidationError
from quotebox.domain.models import SEED_QUOTES, Quote
from quotebox.storage.kv import KeyValueStore

logger = logging.getLogger(__name__)


class QuoteStore:
    def __init__(self, storage: KeyValueStore):
        self.storage = storage
        self._lock = threading.RLock()
        self._quotes: list[Quote] = self.load()

    # ------------------------------------------------------------------
    # 読み込み / 保存
    # ------------------------------------------------------------------

    def load_strict(self) -> list[Quote]:
        """Persisted quotes, or the seed when nothing is stored. Raises ParseError."""
        raw = self.storage.get(QUOTES_KEY)
        if raw is None:
            return list(SEED_QUOTES)
        return decode_quotes(raw)

    def load(self) -> list[Quote]:
        """
        Like load_strict, but malformed data falls back to the seed.
        The stored value is left as is until the next save.
        """
        try:
            return self.load_strict()
        except ParseError as e:
            logger.warning("Persisted quotes are malformed, using seed: %s", e)
            return list(SEED_QUOTES)

    def save(self, quotes: list[Quote]) -> None:
        self.storage.set(QUOTES_KEY, encode_quotes(quotes))

    # ------------------------------------------------------------------
    # 参照
    # ------------------------------------------------------------------

    @property
    def quotes(self) -> list[Quote]:
        with self._lock:
            return list(self._quotes)

    def __len__(self) -> int:
        with self._lock:
            return len(self._quotes)

    # ------------------------------------------------------------------
    # 変更
    # ------------------------------------------------------------------

    def add(self, text: str, category: str) -> Quote:
        text = (text or "").strip()
        category = (category or "").strip()
        if not text or not category:
            raise ValidationError("Please enter both a quote and a category.")

        quote = Quote(text=text, category=category)
        with self._lock:
            updated = self._quotes + [quote]
            self.save(updated)
            self._quotes = updated
        logger.info("Quote added (category=%s)", category)
        return quote

    def replace_all(self, quotes: list[Quote]) -> None:
        with self._lock:
            updated = list(quotes)
            self.save(updated)
            self._quotes = updated
        logger.info("Quote collection replaced (%d quotes)", len(quotes))

    def import_merge(self, quotes: list[Quote]) -> None:
        with self._lock:
            updated = self._quotes + list(quotes)
            self.save(updated)
            self._quotes = updated
        logger.info("Imported %d quotes", len(quotes))
