import flet as ft
from quotebox.config import (
    COLOR_PRIMARY,
    COLOR_CARD,
    COLOR_BORDER,
    BORDER_RADIUS_CARD,
)
from quotebox.domain.models import SyncReport
from quotebox.ui.helpers import sync_status


class SyncBanner(ft.Container):
    def __init__(
        self,
        report: SyncReport | None,
        running: bool,
        on_sync_callback,
    ):
        super().__init__()
        self.report = report
        self.running = running
        self.on_sync_callback = on_sync_callback

        self.padding = ft.Padding.symmetric(horizontal=14, vertical=10)
        self.bgcolor = COLOR_CARD
        self.border_radius = BORDER_RADIUS_CARD
        self.border = ft.border.all(1, COLOR_BORDER)
        self.content = self._build_content()

    def _build_content(self):
        text, color = sync_status(self.report, self.running)
        return ft.Row(
            controls=[
                ft.Icon(ft.Icons.CLOUD_SYNC, color=COLOR_PRIMARY, size=16),
                ft.Text(text, size=12, color=color, expand=True),
                ft.IconButton(
                    icon=ft.Icons.SYNC,
                    tooltip="Sync now",
                    disabled=self.running,
                    on_click=lambda e: self.on_sync_callback(),
                ),
            ],
            vertical_alignment=ft.CrossAxisAlignment.CENTER,
        )
