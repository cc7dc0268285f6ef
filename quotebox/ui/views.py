"""
views.py - UI view builders
Single responsibility: build flet Views using provided callbacks/state.
"""

import flet as ft

from quotebox.config import (
    APP_TITLE,
    COLOR_BG,
    COLOR_CARD,
    COLOR_TEXT_MUTED,
    COLOR_TEXT_MAIN,
    COLOR_PRIMARY,
    COLOR_APPBAR_BG,
    COLOR_APPBAR_FG,
    BORDER_RADIUS_CARD,
    SHADOW_ELEVATION,
    ALL_CATEGORIES,
)
from quotebox.controller import QuoteController
from quotebox.ui.components.quote_display import QuoteDisplay
from quotebox.ui.components.sync_banner import SyncBanner
from quotebox.ui.helpers import category_label


def build_appbar(quote_count: int) -> ft.AppBar:
    return ft.AppBar(
        title=ft.Text(
            APP_TITLE,
            color=COLOR_APPBAR_FG,
            weight=ft.FontWeight.BOLD,
            size=20,
        ),
        bgcolor=COLOR_APPBAR_BG,
        center_title=False,
        elevation=SHADOW_ELEVATION,
        shadow_color=ft.Colors.BLACK12,
        automatically_imply_leading=False,
        actions=[
            ft.Container(
                content=ft.Text(
                    f"{quote_count} quotes", color=COLOR_TEXT_MUTED, size=14
                ),
                padding=ft.Padding.only(right=24),
                alignment=ft.Alignment.CENTER_LEFT,
            ),
        ],
    )


def build_quote_view(
    page: ft.Page,
    state,
    controller: QuoteController,
    display: QuoteDisplay,
    on_new_quote,
    on_add_quote,
    on_select_category,
    on_export,
    on_import,
    on_sync,
) -> ft.View:
    quotes = controller.quotes
    selected = controller.selected_filter()

    def build_category_btn(category: str):
        is_selected = selected == category
        color = COLOR_PRIMARY if is_selected else COLOR_TEXT_MUTED
        return ft.Container(
            content=ft.Text(
                category_label(category),
                color=color,
                weight=ft.FontWeight.BOLD if is_selected else ft.FontWeight.NORMAL,
            ),
            padding=ft.Padding.symmetric(vertical=12, horizontal=20),
            border=ft.border.only(
                bottom=ft.BorderSide(2, COLOR_PRIMARY if is_selected else "transparent")
            ),
            on_click=lambda _, c=category: on_select_category(c),
            ink=True,
            border_radius=ft.border_radius.only(top_left=6, top_right=6),
        )

    category_row = ft.Row(
        controls=[build_category_btn(c) for c in controller.filter_options()],
        spacing=0,
        wrap=True,
    )

    toolbar = ft.Row(
        controls=[
            ft.FilledButton(
                "Show New Quote",
                icon=ft.Icons.SHUFFLE,
                style=ft.ButtonStyle(bgcolor=COLOR_PRIMARY, color="white"),
                on_click=lambda _: on_new_quote(),
            ),
            ft.OutlinedButton(
                "Add Quote", icon=ft.Icons.ADD, on_click=lambda _: on_add_quote()
            ),
            ft.Container(expand=True),
            ft.TextButton("Export Quotes", icon=ft.Icons.DOWNLOAD, on_click=on_export),
            ft.TextButton("Import Quotes", icon=ft.Icons.UPLOAD_FILE, on_click=on_import),
        ],
        spacing=12,
    )

    visible = [
        q for q in quotes if selected == ALL_CATEGORIES or q.category == selected
    ]
    if visible:
        list_controls = [
            ft.Container(
                content=ft.Column(
                    controls=[
                        ft.Text(q.text, size=14, color=COLOR_TEXT_MAIN),
                        ft.Text(q.category, size=11, color=COLOR_PRIMARY),
                    ],
                    spacing=4,
                ),
                padding=ft.Padding.all(12),
                bgcolor=COLOR_CARD,
                border_radius=BORDER_RADIUS_CARD,
            )
            for q in visible
        ]
    else:
        list_controls = [
            ft.Container(
                content=ft.Column(
                    [
                        ft.Icon(ft.Icons.INBOX, size=64, color="#d0d7de"),
                        ft.Text(
                            "No quotes in this category",
                            color=COLOR_TEXT_MUTED,
                            size=16,
                        ),
                    ],
                    horizontal_alignment=ft.CrossAxisAlignment.CENTER,
                ),
                alignment=ft.Alignment.CENTER,
                padding=60,
            )
        ]

    body = ft.Container(
        content=ft.Column(
            controls=[
                SyncBanner(state.sync_report, state.sync_running, on_sync),
                display,
                toolbar,
                category_row,
                ft.Column(controls=list_controls, spacing=8, scroll=ft.ScrollMode.AUTO, expand=True),
            ],
            spacing=16,
            expand=True,
        ),
        padding=ft.Padding.symmetric(horizontal=32, vertical=24),
        expand=True,
    )

    return ft.View(
        route="/",
        appbar=build_appbar(len(quotes)),
        bgcolor=COLOR_BG,
        padding=0,
        controls=[body],
    )
