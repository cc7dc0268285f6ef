"""
helpers.py - UI helper functions
Single responsibility: small formatting helpers used across UI.
"""
from quotebox.config import ALL_CATEGORIES, COLOR_DANGER, COLOR_SUCCESS, COLOR_TEXT_MUTED
from quotebox.domain.models import SyncReport
from quotebox.utils.time import format_datetime


def category_label(category: str) -> str:
    return "All Categories" if category == ALL_CATEGORIES else category


def sync_status(report: SyncReport | None, running: bool = False) -> tuple[str, str]:
    """Return (text, color) for the sync banner."""
    if running:
        return "Syncing with server...", COLOR_TEXT_MUTED
    if report is None:
        return "Not synced yet", COLOR_TEXT_MUTED
    when = format_datetime(report.finished_at)
    if report.skipped:
        return f"Sync skipped, another sync was running ({when})", COLOR_TEXT_MUTED
    if report.error:
        return f"Sync failed at {when}: {report.error}", COLOR_DANGER
    text = f"Synced {report.fetched} quotes from server at {when}"
    if report.failed:
        text += f" ({report.failed} uploads failed)"
        return text, COLOR_DANGER
    return text, COLOR_SUCCESS
