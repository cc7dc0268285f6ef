"""
category_index.py - Category helpers and the remembered filter
Single responsibility: derive categories and persist the last selection.
"""
from quotebox.config import ALL_CATEGORIES, SELECTED_CATEGORY_KEY
from quotebox.domain.models import Quote
from quotebox.storage.kv import KeyValueStore


class CategoryIndex:
    def __init__(self, storage: KeyValueStore):
        self.storage = storage

    @staticmethod
    def categories(quotes: list[Quote]) -> list[str]:
        """Distinct categories in first-seen order."""
        seen = set()
        result: list[str] = []
        for quote in quotes:
            if quote.category in seen:
                continue
            seen.add(quote.category)
            result.append(quote.category)
        return result

    def options(self, quotes: list[Quote]) -> list[str]:
        return [ALL_CATEGORIES] + self.categories(quotes)

    def selected_filter(self) -> str:
        return self.storage.get(SELECTED_CATEGORY_KEY) or ALL_CATEGORIES

    def set_filter(self, value: str | None) -> None:
        self.storage.set(SELECTED_CATEGORY_KEY, value or ALL_CATEGORIES)
