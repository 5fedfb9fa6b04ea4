from __future__ import annotations

import logging

import flet as ft

from recordbook.config.settings import settings
from recordbook.domain.logic.grading import MARK_COUNT, format_percentage
from recordbook.domain.models.entities import ALL_DIVISIONS, Division
from recordbook.state import form_state as fs
from recordbook.state.form_state import AppState
from recordbook.ui.badges import division_badge

logger = logging.getLogger(__name__)


def _division_options() -> list[ft.dropdown.Option]:
    return [ft.dropdown.Option(ALL_DIVISIONS, "All Divisions")] + [ft.dropdown.Option(d.value) for d in Division]


class RecordBookApp:
    def __init__(self, page: ft.Page) -> None:
        self.page = page
        self.page.title = settings.app_title
        self.page.scroll = ft.ScrollMode.AUTO
        self.state = AppState()

        self.name = ft.TextField(label="Student Name", hint_text="e.g. Ajeet Yadav", width=320, on_change=self.handle_name)
        self.age = ft.TextField(
            label="Age",
            hint_text="1 - 100",
            width=320,
            keyboard_type=ft.KeyboardType.NUMBER,
            on_change=self.handle_age,
        )
        self.marks = [
            ft.TextField(
                label=f"Marks {i + 1}",
                hint_text="0 - 100",
                width=320,
                keyboard_type=ft.KeyboardType.NUMBER,
                on_change=lambda e, idx=i: self.handle_mark(idx, e.control.value),
            )
            for i in range(MARK_COUNT)
        ]
        self.error = ft.Text(color=ft.Colors.RED)
        self.preview = ft.Column(visible=False, spacing=4)
        self.submit_button = ft.ElevatedButton("Submit", on_click=self.handle_submit)

        self.filter_name = ft.TextField(label="Search by Name", width=260, on_change=self.handle_filter_name)
        self.filter_division = ft.Dropdown(
            label="Division",
            width=200,
            options=_division_options(),
            value=ALL_DIVISIONS,
            on_change=self.handle_filter_division,
        )
        self.table_container = ft.Container()

    def run(self) -> None:
        self.page.add(
            ft.Row(
                [
                    ft.Column(
                        [
                            ft.Text("Student Record", size=24, weight=ft.FontWeight.BOLD),
                            self.error,
                            self.name,
                            self.age,
                            *self.marks,
                            self.preview,
                            ft.Row(
                                [
                                    self.submit_button,
                                    ft.OutlinedButton("Clear", on_click=self.handle_clear),
                                ]
                            ),
                        ],
                        width=360,
                    ),
                    ft.Column(
                        [
                            ft.Text("Student Records", size=20, weight=ft.FontWeight.BOLD),
                            ft.Row([self.filter_name, self.filter_division]),
                            self.table_container,
                        ],
                        expand=True,
                        scroll=ft.ScrollMode.AUTO,
                    ),
                ],
                vertical_alignment=ft.CrossAxisAlignment.START,
            )
        )
        self.refresh()

    # -- event handlers: each one swaps in the next state; all but name and age re-render

    def handle_name(self, e: ft.ControlEvent) -> None:
        self.state = fs.set_name(self.state, e.control.value)

    def handle_age(self, e: ft.ControlEvent) -> None:
        self.state = fs.set_age(self.state, e.control.value)

    def handle_mark(self, index: int, value: str) -> None:
        self.state = fs.set_mark(self.state, index, value or "")
        self.refresh()

    def handle_filter_name(self, e: ft.ControlEvent) -> None:
        self.state = fs.set_filter_name(self.state, e.control.value or "")
        self.refresh()

    def handle_filter_division(self, e: ft.ControlEvent) -> None:
        self.state = fs.set_filter_division(self.state, e.control.value or ALL_DIVISIONS)
        self.refresh()

    def handle_submit(self, _: ft.ControlEvent) -> None:
        self.state = fs.submit(self.state)
        if self.state.form.error:
            logger.info("Submission rejected: %s", self.state.form.error)
        self.sync_form()
        self.refresh()

    def handle_clear(self, _: ft.ControlEvent) -> None:
        self.state = fs.clear(self.state)
        self.sync_form()
        self.refresh()

    def handle_edit(self, index: int) -> None:
        logger.info("Editing record %d", index)
        self.state = fs.edit(self.state, index)
        self.sync_form()
        self.refresh()

    def handle_delete(self, index: int) -> None:
        self.state = fs.delete(self.state, index)
        self.sync_form()
        self.refresh()

    # -- rendering

    def sync_form(self) -> None:
        form = self.state.form
        self.name.value = form.name
        self.age.value = form.age
        for field, value in zip(self.marks, form.marks):
            field.value = value
        self.error.value = form.error
        self.submit_button.text = fs.submit_label(form)

    def refresh(self) -> None:
        self.render_preview()
        self.table_container.content = self.records_table()
        self.page.update()

    def render_preview(self) -> None:
        result = fs.preview(self.state.form)
        self.preview.controls.clear()
        self.preview.visible = result is not None
        if result is None:
            return
        self.preview.controls.extend(
            [
                ft.Text("Preview", weight=ft.FontWeight.BOLD),
                ft.Text(f"Percentage: {format_percentage(result.percentage)}%"),
                ft.Row([ft.Text("Division:"), division_badge(result.division)]),
            ]
        )

    def records_table(self) -> ft.Control:
        rows = fs.visible_rows(self.state)
        if not rows:
            return ft.Text("No matching records found.")

        columns = [
            ft.DataColumn(ft.Text("Name")),
            ft.DataColumn(ft.Text("Age"), numeric=True),
            *[ft.DataColumn(ft.Text(f"M{i + 1}"), numeric=True) for i in range(MARK_COUNT)],
            ft.DataColumn(ft.Text("%"), numeric=True),
            ft.DataColumn(ft.Text("Division")),
            ft.DataColumn(ft.Text("Edit")),
            ft.DataColumn(ft.Text("Delete")),
        ]
        data_rows = [
            ft.DataRow(
                cells=[
                    ft.DataCell(ft.Text(row.record.name)),
                    ft.DataCell(ft.Text(str(row.record.age))),
                    *[ft.DataCell(ft.Text(str(m))) for m in row.record.marks],
                    ft.DataCell(ft.Text(format_percentage(row.record.percentage))),
                    ft.DataCell(division_badge(row.record.division)),
                    ft.DataCell(ft.IconButton(icon=ft.Icons.EDIT, on_click=lambda _, idx=row.index: self.handle_edit(idx))),
                    ft.DataCell(
                        ft.IconButton(
                            icon=ft.Icons.DELETE,
                            icon_color=ft.Colors.RED,
                            on_click=lambda _, idx=row.index: self.handle_delete(idx),
                        )
                    ),
                ]
            )
            for row in rows
        ]
        return ft.DataTable(columns=columns, rows=data_rows)


def main(page: ft.Page) -> None:
    RecordBookApp(page).run()
