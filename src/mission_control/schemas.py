from pydantic import BaseModel, ConfigDict, Field


class Task(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    date: str | None = None


class Note(BaseModel):
    model_config = ConfigDict(frozen=True)

    date: str
    item: str
    note: str


class DashboardData(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    active: tuple[Task, ...] = ()
    waiting: tuple[Task, ...] = ()
    completed: tuple[Task, ...] = ()
    backlog: tuple[Task, ...] = ()
    blocked: tuple[Task, ...] = ()
    notes: tuple[Note, ...] = ()
    last_updated: str = Field(default="", alias="lastUpdated")


class DashboardSummary(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    active: int
    waiting: int
    completed: int
    backlog: int
    blocked: int
    notes: int
    last_updated: str = Field(alias="lastUpdated")
