from pydantic import BaseModel

from src.mission_control.schemas import Note, Task


class StatCard(BaseModel):
    label: str
    count: int
    color: str


class TaskPanel(BaseModel):
    key: str
    title: str
    color: str
    empty_message: str
    tasks: tuple[Task, ...]
    numbered: bool = False
    show_dates: bool = False


class Theme(BaseModel):
    dark: str
    card: str
    accent: str
    success: str
    warning: str
    danger: str
    muted: str


class DashboardView(BaseModel):
    title: str
    subtitle: str
    last_updated: str
    stats: list[StatCard]
    panels: list[TaskPanel]
    recent_notes: list[Note]
    theme: Theme
