from pathlib import Path
from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from src.common.exceptions import document_unavailable_response
from src.config import Settings, get_settings
from src.dashboard.presenter import build_dashboard_view
from src.mission_control.dependencies import get_dashboard_service
from src.mission_control.service import DashboardService

templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))

router = APIRouter(tags=["Page"])


@router.get(
    "/",
    response_class=HTMLResponse,
    responses={**document_unavailable_response},
)
def dashboard_page(
    request: Request,
    dashboard_service: DashboardService = Depends(get_dashboard_service),
    settings: Settings = Depends(get_settings),
) -> HTMLResponse:
    view = build_dashboard_view(dashboard_service.get_dashboard(), settings)
    return templates.TemplateResponse(
        request=request,
        name="dashboard.html",
        context={"view": view},
    )
