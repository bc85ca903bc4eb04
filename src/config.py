import re
from functools import lru_cache
from typing import Any, Literal
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

HEX_COLOR_RE = re.compile(r"^#[0-9a-fA-F]{6}$")


class Settings(BaseSettings):
    # Application Configuration
    APP_VERSION: str = "v0.1.x"
    API_NAME: str = "Mission Control"
    API_SUMMARY: str = "A read-only productivity dashboard built from MISSION_CONTROL.md"

    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    CORS_ENABLED: bool = False
    CORS_ORIGINS: list[str] = ["*"]

    # Source Document
    MISSION_CONTROL_PATH: str = "data/MISSION_CONTROL.md"
    DOCUMENT_ENCODING: str = "utf-8"

    # Dashboard Page
    DASHBOARD_TITLE: str = "Evernu Mission Control"
    DASHBOARD_SUBTITLE: str = "Productivity dashboard for Evernu.co.uk"
    RECENT_NOTES_LIMIT: int = 5

    # Theme
    THEME_DARK: str = "#0f172a"
    THEME_CARD: str = "#1e293b"
    THEME_ACCENT: str = "#3b82f6"
    THEME_SUCCESS: str = "#10b981"
    THEME_WARNING: str = "#f59e0b"
    THEME_DANGER: str = "#ef4444"
    THEME_MUTED: str = "#64748b"

    # OpenTelemetry Settings
    OTEL_ENABLED: bool = False
    OTEL_SERVICE_NAME: str = "mission-control"
    OTEL_EXPORTER_ENDPOINT: str | None = None

    @field_validator("LOG_LEVEL", mode="before")
    def normalize_log_level(cls, v: Any):
        if isinstance(v, str):
            return v.upper()
        return v

    @field_validator("CORS_ORIGINS", mode="before")
    def validate_list_from_string(cls, v: Any):
        if isinstance(v, str):
            return [item.strip() for item in v.split(",")]
        return v

    @field_validator(
        "THEME_DARK",
        "THEME_CARD",
        "THEME_ACCENT",
        "THEME_SUCCESS",
        "THEME_WARNING",
        "THEME_DANGER",
        "THEME_MUTED",
    )
    def validate_hex_color(cls, v: str):
        if not HEX_COLOR_RE.match(v):
            raise ValueError(f"'{v}' is not a #rrggbb colour")
        return v.lower()

    @field_validator("RECENT_NOTES_LIMIT")
    def validate_recent_notes_limit(cls, v: int):
        if v < 1:
            raise ValueError("RECENT_NOTES_LIMIT must be at least 1")
        return v

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings():
    return Settings()
