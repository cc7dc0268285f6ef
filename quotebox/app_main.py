"""
app_main.py - Quotebox メインアプリケーション
Quotebox v0.1
"""

import atexit
import logging

import flet as ft

from quotebox.config import APP_TITLE, COLOR_BG, COLOR_PRIMARY
from quotebox.controller import QuoteController, build_controller
from quotebox.domain.models import SyncReport
from quotebox.ui import actions, views
from quotebox.ui.components.quote_display import QuoteDisplay
from quotebox.ui_state import AppState

logger = logging.getLogger(__name__)


# ==========================================================================
# グローバルな状態とクリーンアップ処理
# ==========================================================================

_controller: QuoteController | None = None


def _cleanup_handler():
    """終了時に定期同期スレッドを止める。"""
    try:
        if _controller:
            _controller.sync.stop(timeout=1)
    except Exception:
        logger.debug("Cleanup failed", exc_info=True)


atexit.register(_cleanup_handler)


# ==========================================================================
# メインアプリ
# ==========================================================================


def main(page: ft.Page):
    global _controller
    page.title = APP_TITLE
    page.theme_mode = ft.ThemeMode.LIGHT
    page.bgcolor = COLOR_BG
    page.padding = 0
    page.theme = ft.Theme(color_scheme_seed=COLOR_PRIMARY)

    state = AppState()
    display = QuoteDisplay()

    try:
        controller = build_controller(display)
    except Exception as exc:
        logger.exception("Failed to open quote storage")
        page.overlay.append(
            ft.AlertDialog(
                title=ft.Text("Storage error"),
                content=ft.Text(f"Could not open the quote database.\nDetails: {exc}"),
                open=True,
            )
        )
        page.update()
        return
    _controller = controller

    def refresh_view():
        try:
            page.views.clear()
            page.views.append(
                views.build_quote_view(
                    page=page,
                    state=state,
                    controller=controller,
                    display=display,
                    on_new_quote=show_new_quote,
                    on_add_quote=lambda: actions.show_add_quote_dialog(
                        page, controller, refresh_view
                    ),
                    on_select_category=select_category,
                    on_export=export_file,
                    on_import=import_file,
                    on_sync=sync_now,
                )
            )
            page.update()
        except Exception as exc:
            logger.exception("Error in refresh_view")
            page.overlay.append(
                ft.AlertDialog(
                    title=ft.Text("An error occurred"),
                    content=ft.Text(f"Details: {exc}"),
                    open=True,
                )
            )
            page.update()

    async def export_file(_e):
        await actions.export_quotes(page, controller)

    async def import_file(_e):
        await actions.import_quotes(page, controller, refresh_view)

    def show_new_quote():
        controller.show_next()
        page.update()

    def select_category(category: str):
        try:
            controller.change_filter(category)
        except Exception as exc:
            logger.exception("Failed to save category filter")
            actions.show_message(page, f"Could not save filter: {exc}", error=True)
        refresh_view()

    def sync_now():
        state.sync_running = True
        refresh_view()
        controller.sync.trigger()

    def on_synced(report: SyncReport):
        state.sync_report = report
        state.sync_running = controller.sync.in_progress
        if report.error:
            actions.show_message(page, "Sync failed; working offline.", error=True)
        refresh_view()

    controller.on_changed(refresh_view)
    controller.sync.add_listener(on_synced)

    def route_change(_e: ft.RouteChangeEvent):
        if page.route == "/":
            refresh_view()

    page.on_route_change = route_change

    async def on_window_event(e: ft.WindowEvent):
        if e.type == ft.WindowEventType.CLOSE:
            logger.debug("Window close event")
            controller.sync.stop(timeout=1)
            page.window.prevent_close = False
            await page.window.close()

    page.window.prevent_close = True
    page.window.on_event = on_window_event

    controller.restore()
    refresh_view()
    controller.sync.start()


# ==========================================================================
# エントリーポイント
# ==========================================================================


if __name__ == "__main__":
    ft.app(main)
