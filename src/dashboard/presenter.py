"""Turns parsed dashboard data into the view rendered by the HTML page.

The template only enumerates what is built here; counts, empty-state
messages and panel ordering are decided in this module.
"""

from src.config import Settings
from src.dashboard.schemas import DashboardView, StatCard, TaskPanel, Theme
from src.mission_control.schemas import DashboardData
from src.mission_control.service import select_recent_notes


def build_theme(settings: Settings) -> Theme:
    return Theme(
        dark=settings.THEME_DARK,
        card=settings.THEME_CARD,
        accent=settings.THEME_ACCENT,
        success=settings.THEME_SUCCESS,
        warning=settings.THEME_WARNING,
        danger=settings.THEME_DANGER,
        muted=settings.THEME_MUTED,
    )


def build_stats(data: DashboardData, theme: Theme) -> list[StatCard]:
    # Blocked has its own panel but no stat card
    return [
        StatCard(label="Active", count=len(data.active), color=theme.danger),
        StatCard(label="Waiting", count=len(data.waiting), color=theme.warning),
        StatCard(label="Completed", count=len(data.completed), color=theme.success),
        StatCard(label="Backlog", count=len(data.backlog), color=theme.muted),
    ]


def build_panels(data: DashboardData, theme: Theme) -> list[TaskPanel]:
    return [
        TaskPanel(
            key="active",
            title="Active Tasks",
            color=theme.danger,
            empty_message="No active tasks",
            tasks=data.active,
        ),
        TaskPanel(
            key="waiting",
            title="Waiting for Review",
            color=theme.warning,
            empty_message="Nothing waiting for review",
            tasks=data.waiting,
        ),
        TaskPanel(
            key="completed",
            title="Completed (Last 7 Days)",
            color=theme.success,
            empty_message="No completed tasks",
            tasks=data.completed,
            show_dates=True,
        ),
        TaskPanel(
            key="backlog",
            title="Backlog",
            color=theme.muted,
            empty_message="No backlog items",
            tasks=data.backlog,
            numbered=True,
        ),
        TaskPanel(
            key="blocked",
            title="Blocked",
            color=theme.danger,
            empty_message="Nothing blocked",
            tasks=data.blocked,
        ),
    ]


def build_dashboard_view(data: DashboardData, settings: Settings) -> DashboardView:
    theme = build_theme(settings)
    return DashboardView(
        title=settings.DASHBOARD_TITLE,
        subtitle=settings.DASHBOARD_SUBTITLE,
        last_updated=data.last_updated,
        stats=build_stats(data, theme),
        panels=build_panels(data, theme),
        recent_notes=select_recent_notes(data.notes, settings.RECENT_NOTES_LIMIT),
        theme=theme,
    )
