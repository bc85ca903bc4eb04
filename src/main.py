import logging
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from src.common.exceptions import (
    DocumentUnavailableException,
    document_unavailable_handler,
    unexpected_exception_handler,
    validation_exception_handler,
    internal_error_response,
    validation_error_response,
)
from src.common.opentelemetry import setup_opentelemetry
from src.config import get_settings
from src.dashboard.router import router as page_router
from src.healthcheck.router import router as health_router
from src.mission_control.router import router as dashboard_router

settings = get_settings()

logging.basicConfig(
    level=settings.LOG_LEVEL,
)

logger = logging.getLogger(__name__)


app = FastAPI(
    title=settings.API_NAME,
    summary=settings.API_SUMMARY,
    responses={
        **internal_error_response,
        **validation_error_response,
    },
    version=settings.APP_VERSION,
)

if settings.OTEL_ENABLED:
    setup_opentelemetry(
        settings.OTEL_SERVICE_NAME,
        app,
        service_version=settings.APP_VERSION,
        exporter_endpoint=settings.OTEL_EXPORTER_ENDPOINT,
    )

if settings.CORS_ENABLED:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

app.exception_handler(RequestValidationError)(validation_exception_handler)
app.exception_handler(DocumentUnavailableException)(document_unavailable_handler)
app.exception_handler(Exception)(unexpected_exception_handler)


app.include_router(health_router)
app.include_router(dashboard_router)
app.include_router(page_router)

logger.info(f"Serving dashboard from '{settings.MISSION_CONTROL_PATH}'")
