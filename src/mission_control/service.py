from collections.abc import Sequence

from src.common.opentelemetry import get_tracer
from src.mission_control.document import MissionControlDocument
from src.mission_control.parser import parse_mission_control
from src.mission_control.schemas import DashboardData, DashboardSummary, Note, Task
from src.mission_control.sections import TaskSection


def select_recent_notes(notes: Sequence[Note], limit: int) -> list[Note]:
    """Last ``limit`` notes of the log, newest first."""
    if limit <= 0:
        return []
    return list(reversed(notes[-limit:]))


class DashboardService:
    def __init__(self, document: MissionControlDocument, recent_notes_limit: int = 5):
        self.document = document
        self.recent_notes_limit = recent_notes_limit
        self.tracer = get_tracer()

    def get_dashboard(self) -> DashboardData:
        text = self.document.read_text()

        with self.tracer.start_as_current_span("parse_mission_control") as span:
            data = parse_mission_control(text)
            span.set_attribute("mission_control.document_length", len(text))
            for section in TaskSection:
                span.set_attribute(
                    f"mission_control.{section.value}",
                    len(getattr(data, section.value)),
                )
            span.set_attribute("mission_control.notes", len(data.notes))

        return data

    def get_summary(self) -> DashboardSummary:
        data = self.get_dashboard()
        return DashboardSummary(
            active=len(data.active),
            waiting=len(data.waiting),
            completed=len(data.completed),
            backlog=len(data.backlog),
            blocked=len(data.blocked),
            notes=len(data.notes),
            last_updated=data.last_updated,
        )

    def get_section(self, section: TaskSection) -> list[Task]:
        return list(getattr(self.get_dashboard(), section.value))

    def get_recent_notes(self, limit: int | None = None) -> list[Note]:
        return select_recent_notes(
            self.get_dashboard().notes, limit or self.recent_notes_limit
        )
