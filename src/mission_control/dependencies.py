from fastapi import Depends

from src.config import Settings, get_settings
from src.mission_control.document import MissionControlDocument
from src.mission_control.service import DashboardService


def get_mission_control_document(
    settings: Settings = Depends(get_settings),
) -> MissionControlDocument:
    return MissionControlDocument(
        path=settings.MISSION_CONTROL_PATH,
        encoding=settings.DOCUMENT_ENCODING,
    )


def get_dashboard_service(
    document: MissionControlDocument = Depends(get_mission_control_document),
    settings: Settings = Depends(get_settings),
) -> DashboardService:
    return DashboardService(
        document=document,
        recent_notes_limit=settings.RECENT_NOTES_LIMIT,
    )
