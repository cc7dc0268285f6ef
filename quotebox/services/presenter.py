"""
presenter.py - Quote selection and display
Single responsibility: pick a quote, push it to the display surface and
remember it for the session.
"""
import json
import logging
import random
from typing import Protocol

from quotebox.config import ALL_CATEGORIES, LAST_QUOTE_KEY, NO_QUOTE_MESSAGE
from quotebox.domain.models import Quote
from quotebox.storage.kv import KeyValueStore

logger = logging.getLogger(__name__)


class DisplaySurface(Protocol):
    def show_quote(self, text: str, category: str) -> None: ...

    def show_empty(self, message: str) -> None: ...


def format_quote(quote: Quote) -> str:
    return f'"{quote.text}"'


class Presenter:
    def __init__(
        self,
        surface: DisplaySurface,
        session: KeyValueStore,
        rng: random.Random | None = None,
    ):
        self.surface = surface
        self.session = session
        self.rng = rng or random.Random()

    def pick_random(self, quotes: list[Quote]) -> Quote | None:
        if not quotes:
            return None
        return self.rng.choice(quotes)

    def pick_random_in_category(self, quotes: list[Quote], category: str) -> Quote | None:
        if category == ALL_CATEGORIES:
            return self.pick_random(quotes)
        return self.pick_random([q for q in quotes if q.category == category])

    def render(self, quote: Quote) -> None:
        self.surface.show_quote(format_quote(quote), quote.category)
        self.session.set(LAST_QUOTE_KEY, json.dumps(quote.to_dict(), ensure_ascii=False))

    def show_random(self, quotes: list[Quote], category: str = ALL_CATEGORIES) -> Quote | None:
        quote = self.pick_random_in_category(quotes, category)
        if quote is None:
            self.surface.show_empty(NO_QUOTE_MESSAGE)
            return None
        self.render(quote)
        return quote

    def last_viewed(self) -> Quote | None:
        raw = self.session.get(LAST_QUOTE_KEY)
        if not raw:
            return None
        try:
            return Quote.from_dict(json.loads(raw))
        except (ValueError, KeyError, TypeError):
            logger.debug("Ignoring malformed last viewed quote: %r", raw)
            return None
