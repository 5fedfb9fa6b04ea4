from __future__ import annotations

import flet as ft

from recordbook.domain.models.entities import Division

# (background, text) per division
BADGE_COLORS: dict[Division, tuple[str, str]] = {
    Division.FIRST: (ft.Colors.GREEN_600, ft.Colors.WHITE),
    Division.SECOND: (ft.Colors.BLUE_600, ft.Colors.WHITE),
    Division.THIRD: (ft.Colors.AMBER_400, ft.Colors.BLACK),
    Division.FAIL: (ft.Colors.RED_600, ft.Colors.WHITE),
}


def badge_colors(division: Division) -> tuple[str, str]:
    return BADGE_COLORS.get(division, BADGE_COLORS[Division.FAIL])


def division_badge(division: Division) -> ft.Container:
    bgcolor, color = badge_colors(division)
    return ft.Container(
        content=ft.Text(division.value, size=12, color=color, weight=ft.FontWeight.BOLD),
        bgcolor=bgcolor,
        padding=ft.padding.symmetric(horizontal=8, vertical=2),
        border_radius=6,
    )
