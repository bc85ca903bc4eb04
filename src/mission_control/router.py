from fastapi import APIRouter, Depends, Query

from src.common.exceptions import document_unavailable_response
from src.mission_control.dependencies import get_dashboard_service
from src.mission_control.schemas import DashboardData, DashboardSummary, Note, Task
from src.mission_control.sections import TaskSection
from src.mission_control.service import DashboardService


router = APIRouter(
    prefix="/dashboard",
    tags=["Dashboard"],
    responses={**document_unavailable_response},
)


@router.get("")
def get_dashboard(
    dashboard_service: DashboardService = Depends(get_dashboard_service),
) -> DashboardData:
    return dashboard_service.get_dashboard()


@router.get("/summary")
def get_summary(
    dashboard_service: DashboardService = Depends(get_dashboard_service),
) -> DashboardSummary:
    return dashboard_service.get_summary()


@router.get("/sections/{section}")
def get_section(
    section: TaskSection,
    dashboard_service: DashboardService = Depends(get_dashboard_service),
) -> list[Task]:
    return dashboard_service.get_section(section)


@router.get("/notes")
def get_recent_notes(
    limit: int | None = Query(default=None, ge=1, le=100),
    dashboard_service: DashboardService = Depends(get_dashboard_service),
) -> list[Note]:
    return dashboard_service.get_recent_notes(limit)
