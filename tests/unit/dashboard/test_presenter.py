import pytest

from src.config import Settings
from src.dashboard.presenter import build_dashboard_view, build_stats, build_theme
from src.mission_control.schemas import DashboardData, Note, Task


@pytest.fixture
def settings() -> Settings:
    return Settings(
        DASHBOARD_TITLE="Test Control",
        DASHBOARD_SUBTITLE="Test subtitle",
        RECENT_NOTES_LIMIT=2,
        THEME_DANGER="#FF0000",
    )


@pytest.fixture
def dashboard_data() -> DashboardData:
    return DashboardData(
        active=[Task(text="Fix bug"), Task(text="Ship release")],
        completed=[Task(text="Deploy v2", date="2024-01-15")],
        backlog=[Task(text="Audit dependencies")],
        blocked=[Task(text="Waiting on DNS")],
        notes=[
            Note(date="2024-01-10", item="Schema", note="Use UUIDs"),
            Note(date="2024-01-11", item="Hosting", note="Stay on Vercel"),
            Note(date="2024-01-12", item="Billing", note="Use Stripe"),
        ],
        last_updated="2024-01-15",
    )


def test_build_theme_normalizes_colours(settings: Settings) -> None:
    theme = build_theme(settings)

    assert theme.danger == "#ff0000"
    assert theme.dark == "#0f172a"


def test_build_stats(settings: Settings, dashboard_data: DashboardData) -> None:
    stats = build_stats(dashboard_data, build_theme(settings))

    assert [(stat.label, stat.count) for stat in stats] == [
        ("Active", 2),
        ("Waiting", 0),
        ("Completed", 1),
        ("Backlog", 1),
    ]
    assert stats[0].color == "#ff0000"


def test_build_dashboard_view(settings: Settings, dashboard_data: DashboardData) -> None:
    view = build_dashboard_view(dashboard_data, settings)

    assert view.title == "Test Control"
    assert view.subtitle == "Test subtitle"
    assert view.last_updated == "2024-01-15"
    assert [panel.key for panel in view.panels] == [
        "active",
        "waiting",
        "completed",
        "backlog",
        "blocked",
    ]
    assert [note.item for note in view.recent_notes] == ["Billing", "Hosting"]


def test_panels_carry_presentation_flags(
    settings: Settings, dashboard_data: DashboardData
) -> None:
    panels = {panel.key: panel for panel in build_dashboard_view(dashboard_data, settings).panels}

    assert panels["completed"].show_dates
    assert panels["backlog"].numbered
    assert panels["waiting"].tasks == ()
    assert panels["waiting"].empty_message == "Nothing waiting for review"
