"""
time.py - time utilities
Single responsibility: common time helpers.
"""
from datetime import datetime


def now_iso() -> str:
    return datetime.now().isoformat(timespec="seconds")


def format_datetime(iso_str: str | None) -> str:
    """ISO 8601 string to "YYYY-MM-DD HH:MM"; fallback to raw on error."""
    try:
        dt = datetime.fromisoformat(iso_str)
        return dt.strftime("%Y-%m-%d %H:%M")
    except (ValueError, TypeError):
        return iso_str or ""
