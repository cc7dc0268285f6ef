"""
models.py - Domain models
Single responsibility: typed containers for quotes and sync outcomes.
"""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Quote:
    text: str
    category: str

    def to_dict(self) -> dict:
        return {"text": self.text, "category": self.category}

    @classmethod
    def from_dict(cls, data: dict) -> "Quote":
        return cls(text=data["text"], category=data["category"])


@dataclass
class SyncReport:
    fetched: int = 0
    pushed: int = 0
    failed: int = 0
    skipped: bool = False
    error: Optional[str] = None
    finished_at: str | None = None

    @property
    def ok(self) -> bool:
        return not self.skipped and self.error is None


SEED_QUOTES: list[Quote] = [
    Quote("The only way to do great work is to love what you do.", "Inspiration"),
    Quote("Life is what happens when you're busy making other plans.", "Life"),
    Quote("Get busy living or get busy dying.", "Motivation"),
]
