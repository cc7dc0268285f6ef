# tests/test_helpers.py

from quotebox.config import COLOR_DANGER, COLOR_SUCCESS
from quotebox.domain.models import SyncReport
from quotebox.ui.helpers import category_label, sync_status
from quotebox.utils.time import format_datetime


def test_category_label():
    assert category_label("all") == "All Categories"
    assert category_label("Life") == "Life"


def test_sync_status_variants():
    assert sync_status(None)[0] == "Not synced yet"
    assert sync_status(None, running=True)[0].startswith("Syncing")

    ok = SyncReport(fetched=3, pushed=3, finished_at="2026-10-19T09:05:00")
    assert sync_status(ok) == ("Synced 3 quotes from server at 2026-10-19 09:05", COLOR_SUCCESS)

    partial = SyncReport(fetched=3, pushed=2, failed=1, finished_at="2026-10-19T09:05:00")
    text, color = sync_status(partial)
    assert "1 uploads failed" in text
    assert color == COLOR_DANGER

    failed = SyncReport(error="offline", finished_at="2026-10-19T09:05:00")
    assert sync_status(failed)[1] == COLOR_DANGER


def test_format_datetime_falls_back_to_raw():
    assert format_datetime("not a date") == "not a date"
    assert format_datetime(None) == ""
