"""
ui_state.py - UI state container
"""
from quotebox.domain.models import SyncReport


class AppState:
    def __init__(self):
        self.sync_report: SyncReport | None = None
        self.sync_running: bool = False
