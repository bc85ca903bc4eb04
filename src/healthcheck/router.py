from typing import Any
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from src.common.exceptions import DocumentUnavailableException
from src.mission_control.dependencies import get_mission_control_document
from src.mission_control.document import MissionControlDocument

router = APIRouter()


@router.get(
    "/healthcheck",
    tags=["Healthcheck"],
    status_code=status.HTTP_200_OK,
    responses={
        200: {
            "description": "Healthcheck status",
            "content": {
                "application/json": {
                    "example": {
                        "api": {"status": "ok"},
                        "document": {
                            "status": "ok",
                            "path": "data/MISSION_CONTROL.md",
                            "modified_at": "2024-01-15T09:30:00+00:00",
                        },
                    }
                }
            },
        },
        503: {
            "description": "Service unavailable",
            "content": {
                "application/json": {
                    "example": {
                        "api": {"status": "ok"},
                        "document": {
                            "status": "error",
                            "path": "data/MISSION_CONTROL.md",
                            "message": "Document 'data/MISSION_CONTROL.md' is unavailable",
                        },
                    }
                }
            },
        },
    },
)
def healthcheck(
    document: MissionControlDocument = Depends(get_mission_control_document),
) -> JSONResponse:
    health_status: dict[str, Any] = {
        "api": {"status": "ok"},
        "document": {"status": "ok", "path": str(document.path)},
    }

    # Check the source document can be read
    try:
        document.read_text()
        modified_at = document.modified_at()
        health_status["document"]["modified_at"] = (
            modified_at.isoformat() if modified_at else None
        )
    except DocumentUnavailableException as e:
        health_status["document"].update({"status": "error", "message": str(e)})
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content=health_status
        )

    return JSONResponse(status_code=status.HTTP_200_OK, content=health_status)
