import flet as ft
from quotebox.config import (
    COLOR_CARD,
    COLOR_TEXT_MUTED,
    COLOR_TEXT_MAIN,
    COLOR_PRIMARY,
    BORDER_RADIUS_CARD,
)


class QuoteDisplay(ft.Container):
    """Quote text region. Values are set here; the caller runs page.update()."""

    def __init__(self):
        super().__init__()
        self.quote_text = ft.Text(
            "",
            size=22,
            italic=True,
            color=COLOR_TEXT_MAIN,
            text_align=ft.TextAlign.CENTER,
        )
        self.category_text = ft.Text(
            "",
            size=13,
            color=COLOR_PRIMARY,
            weight=ft.FontWeight.W_500,
        )

        self.padding = ft.Padding.all(32)
        self.bgcolor = COLOR_CARD
        self.border_radius = BORDER_RADIUS_CARD
        self.shadow = ft.BoxShadow(
            blur_radius=2,
            color=ft.Colors.BLACK12,
            offset=ft.Offset(0, 1),
        )
        self.content = ft.Column(
            controls=[
                ft.Icon(ft.Icons.FORMAT_QUOTE, size=32, color=COLOR_PRIMARY),
                self.quote_text,
                self.category_text,
            ],
            horizontal_alignment=ft.CrossAxisAlignment.CENTER,
            spacing=12,
        )

    def show_quote(self, text: str, category: str) -> None:
        self.quote_text.value = text
        self.quote_text.color = COLOR_TEXT_MAIN
        self.category_text.value = f"- {category}"

    def show_empty(self, message: str) -> None:
        self.quote_text.value = message
        self.quote_text.color = COLOR_TEXT_MUTED
        self.category_text.value = ""
