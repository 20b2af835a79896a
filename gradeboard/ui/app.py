from __future__ import annotations

import threading
import time
from datetime import datetime

import flet as ft

from gradeboard.config.settings import settings
from gradeboard.domain.logic.validation import CAT_SCORE, EXAM_SCORE, NAME, REGISTRATION_NUMBER
from gradeboard.services.gradebook_service import GradebookService
from gradeboard.state.session_state import SessionState
from gradeboard.ui import messages


class GradeboardApp:
    def __init__(self, page: ft.Page) -> None:
        self.page = page
        self.page.title = "Academic Dashboard"
        self.page.scroll = ft.ScrollMode.AUTO
        self.state = SessionState(gradebook=GradebookService.from_settings())
        self._running = True

        self.clock = ft.Text(messages.format_clock(datetime.now()), size=16)
        self.banner = ft.Text(self.state.banner, size=18, weight=ft.FontWeight.BOLD)
        self.status = ft.Text()
        self.no_data = ft.Text("No student records yet. Add one above.", visible=False)

        self.fields = {
            NAME: ft.TextField(label="Full Name", width=300),
            REGISTRATION_NUMBER: ft.TextField(label="Registration Number", width=300),
            CAT_SCORE: ft.TextField(label="CAT Marks (0-30)", width=200),
            EXAM_SCORE: ft.TextField(label="Exam Marks (0-70)", width=200),
        }

        self.table = ft.DataTable(
            columns=[
                ft.DataColumn(ft.Text("Name")),
                ft.DataColumn(ft.Text("Reg No")),
                ft.DataColumn(ft.Text("Total"), numeric=True),
                ft.DataColumn(ft.Text("Grade")),
                ft.DataColumn(ft.Text("")),
            ],
            rows=[],
        )

    def run(self) -> None:
        self.page.on_disconnect = self.stop
        self.page.add(
            ft.Column(
                [
                    ft.Row(
                        [
                            ft.Text("Academic Dashboard", size=28, weight=ft.FontWeight.BOLD),
                            self.clock,
                        ],
                        alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
                    ),
                    self.banner,
                    ft.Divider(),
                    ft.Row([self.fields[NAME], self.fields[REGISTRATION_NUMBER]]),
                    ft.Row([self.fields[CAT_SCORE], self.fields[EXAM_SCORE]]),
                    ft.ElevatedButton("Add Student", on_click=self.handle_submit),
                    ft.Divider(),
                    ft.Row(
                        [
                            ft.OutlinedButton("Sort by Total", on_click=self.handle_sort),
                            ft.OutlinedButton("Class Average", on_click=self.handle_average),
                            ft.OutlinedButton("Top Student", on_click=self.handle_top),
                            ft.OutlinedButton("Pass/Fail Stats", on_click=self.handle_stats),
                        ],
                        wrap=True,
                    ),
                    self.status,
                    self.table,
                    self.no_data,
                ]
            )
        )
        self.refresh_table()
        self.set_status(messages.NO_STUDENTS if self.state.gradebook.store.is_empty() else "")
        threading.Thread(target=self._tick_clock, daemon=True).start()
        threading.Thread(target=self._rotate_banner, daemon=True).start()

    def stop(self, _: ft.ControlEvent | None = None) -> None:
        self._running = False

    def _tick_clock(self) -> None:
        while self._running:
            time.sleep(settings.clock_interval)
            if not self._running:
                break
            self.clock.value = messages.format_clock(datetime.now())
            self.page.update()

    def _rotate_banner(self) -> None:
        while self._running:
            time.sleep(settings.banner_interval)
            if not self._running:
                break
            self.banner.value = self.state.next_banner()
            self.page.update()

    def set_status(self, message: str) -> None:
        self.state.status_message = message
        self.status.value = message

    def refresh_table(self) -> None:
        gradebook = self.state.gradebook
        records = gradebook.get_all()
        highlighted = gradebook.highlight_set()

        self.table.rows = [
            ft.DataRow(
                color=ft.Colors.AMBER_100 if idx in highlighted else None,
                cells=[
                    ft.DataCell(ft.Text(r.name)),
                    ft.DataCell(ft.Text(r.registration_number)),
                    ft.DataCell(ft.Text(messages.format_total(r.total))),
                    ft.DataCell(ft.Text(r.grade.value, weight=ft.FontWeight.BOLD)),
                    ft.DataCell(
                        ft.TextButton(
                            "Delete",
                            on_click=lambda _, rid=r.record_id: self.handle_delete(rid),
                        )
                    ),
                ],
            )
            for idx, r in enumerate(records)
        ]
        self.table.visible = bool(records)
        self.no_data.visible = not records

    def handle_submit(self, _: ft.ControlEvent) -> None:
        for field in self.fields.values():
            field.error_text = None

        result = self.state.gradebook.submit(*(self.fields[key].value for key in (NAME, REGISTRATION_NUMBER, CAT_SCORE, EXAM_SCORE)))
        if not result.ok:
            for error in result.errors:
                self.fields[error.field].error_text = error.message
            self.page.update()
            return

        for field in self.fields.values():
            field.value = ""
        self.refresh_table()
        self.set_status(messages.added_message(result.value))
        self.page.update()

    def handle_delete(self, record_id: str) -> None:
        deleted = self.state.gradebook.delete_record(record_id)
        self.refresh_table()
        self.set_status(messages.delete_message(deleted))
        self.page.update()

    def handle_sort(self, _: ft.ControlEvent) -> None:
        self.state.gradebook.sort_descending()
        self.refresh_table()
        self.set_status(messages.SORTED)
        self.page.update()

    def handle_average(self, _: ft.ControlEvent) -> None:
        gradebook = self.state.gradebook
        self.set_status(messages.average_message(gradebook.average(), gradebook.store.size()))
        self.page.update()

    def handle_top(self, _: ft.ControlEvent) -> None:
        self.refresh_table()
        self.set_status(messages.top_performer_message(self.state.gradebook.top_performer()))
        self.page.update()

    def handle_stats(self, _: ft.ControlEvent) -> None:
        self.set_status(messages.pass_fail_message(self.state.gradebook.pass_fail_stats()))
        self.page.update()


def main(page: ft.Page) -> None:
    GradeboardApp(page).run()
