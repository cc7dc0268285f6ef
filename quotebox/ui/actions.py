"""
actions.py - UI-side actions and dialogs
Single responsibility: handle modal and file-picker flows that mutate quotes.
"""
import logging

import flet as ft

from quotebox.config import (
    COLOR_BORDER,
    COLOR_PRIMARY,
    COLOR_SUCCESS,
    BORDER_RADIUS_BTN,
    BORDER_RADIUS_CARD,
    COLOR_DANGER,
    EXPORT_FILENAME,
)
from quotebox.controller import QuoteController
from quotebox.domain.errors import ParseError, ValidationError

logger = logging.getLogger(__name__)


def show_message(page: ft.Page, text: str, error: bool = False) -> None:
    snack = ft.SnackBar(ft.Text(text), bgcolor=COLOR_DANGER if error else COLOR_SUCCESS)
    page.overlay.append(snack)
    snack.open = True
    page.update()


def show_add_quote_dialog(page: ft.Page, controller: QuoteController, on_added):
    """Open a dialog to add a quote and refresh the view on success."""
    text_field = ft.TextField(
        label="Enter a new quote *",
        multiline=True,
        min_lines=2,
        max_lines=6,
        border_color=COLOR_BORDER,
        focused_border_color=COLOR_PRIMARY,
        border_radius=BORDER_RADIUS_BTN,
    )
    category_field = ft.TextField(
        label="Enter quote category *",
        border_color=COLOR_BORDER,
        focused_border_color=COLOR_PRIMARY,
        border_radius=BORDER_RADIUS_BTN,
    )
    error_text = ft.Text("", color=COLOR_DANGER, size=12)

    def on_save(_e=None):
        try:
            controller.add_quote(text_field.value, category_field.value)
        except ValidationError as exc:
            error_text.value = f"⚠  {exc}"
            page.update()
            return
        except Exception as exc:
            logger.exception("Failed to add quote")
            error_text.value = f"⚠  Could not save the quote: {exc}"
            page.update()
            return
        dialog.open = False
        on_added()
        show_message(page, "Quote added successfully!")

    def on_cancel(_e=None):
        dialog.open = False
        page.update()

    dialog = ft.AlertDialog(
        modal=True,
        title=ft.Text("Add Quote", weight=ft.FontWeight.BOLD),
        content=ft.Container(
            content=ft.Column(
                controls=[text_field, category_field, error_text],
                spacing=16,
                tight=True,
            ),
            width=500,
        ),
        actions=[
            ft.TextButton("Cancel", on_click=on_cancel),
            ft.FilledButton(
                "Add Quote",
                style=ft.ButtonStyle(bgcolor=COLOR_PRIMARY, color="white"),
                on_click=on_save,
            ),
        ],
        actions_alignment=ft.MainAxisAlignment.END,
        shape=ft.RoundedRectangleBorder(radius=BORDER_RADIUS_CARD),
    )
    page.overlay.append(dialog)
    dialog.open = True
    page.update()


async def export_quotes(page: ft.Page, controller: QuoteController) -> None:
    """Ask for a destination and write quotes.json there."""
    path = await ft.FilePicker().save_file(
        dialog_title="Export quotes",
        file_name=EXPORT_FILENAME,
        allowed_extensions=["json"],
    )
    if not path:
        return
    try:
        written = controller.export_to(path)
    except OSError as exc:
        logger.exception("Export failed")
        show_message(page, f"Export failed: {exc}", error=True)
        return
    show_message(page, f"Exported {len(controller.quotes)} quotes to {written}")


async def import_quotes(page: ft.Page, controller: QuoteController, on_imported) -> None:
    """Let the user pick a JSON file and merge it into the collection."""
    files = await ft.FilePicker().pick_files(
        dialog_title="Import quotes",
        allowed_extensions=["json"],
        allow_multiple=False,
    )
    if not files or not files[0].path:
        return
    try:
        imported = controller.import_from(files[0].path)
    except ParseError as exc:
        logger.warning("Import rejected: %s", exc)
        show_message(page, f"Invalid quotes file: {exc}", error=True)
        return
    except OSError as exc:
        logger.exception("Import failed")
        show_message(page, f"Could not read file: {exc}", error=True)
        return
    on_imported()
    show_message(page, f"Quotes imported successfully! ({len(imported)} added)")
