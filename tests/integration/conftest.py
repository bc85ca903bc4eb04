from pathlib import Path
from typing import Generator
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.config import Settings, get_settings
from src.main import app as main_app

MISSION_CONTROL = """# Mission Control

_Last updated: 2024-01-15 09:30 GMT_

## 🔴 Active Tasks

- [ ] Fix bug
- [x] Ship release

## 🟡 Waiting for Owner Review

- [ ] _(Completed work pending approval before use)_

## ✅ Completed (last 7 days)

- [x] [2024-01-15] Deploy v2
- [x] Tidy README

## 📋 Backlog

- [ ] Audit dependencies
- [ ] Write changelog

## 🚫 Blocked

- [ ] Nothing blocked.

## 📝 Notes & Decisions Log

| Date | Item | Decision/Note |
|------|------|---------------|
| 2024-01-10 | Schema | Use UUIDs |
| 2024-01-11 | Hosting | Stay on Vercel |
| 2024-01-12 | Billing | <b>Use Stripe</b> |
"""


@pytest.fixture
def document_path(tmp_path: Path) -> Path:
    path = tmp_path / "MISSION_CONTROL.md"
    path.write_text(MISSION_CONTROL, encoding="utf-8")
    return path


@pytest.fixture
def test_settings(document_path: Path) -> Settings:
    return Settings(
        MISSION_CONTROL_PATH=str(document_path),
        DASHBOARD_TITLE="Test Mission Control",
        RECENT_NOTES_LIMIT=2,
        OTEL_ENABLED=False,
    )


@pytest.fixture
def test_app(test_settings: Settings) -> Generator[FastAPI, None, None]:
    def get_test_settings() -> Settings:
        return test_settings

    main_app.dependency_overrides[get_settings] = get_test_settings
    yield main_app
    main_app.dependency_overrides.clear()


@pytest.fixture
def test_client(test_app: FastAPI) -> Generator[TestClient, None, None]:
    with TestClient(test_app) as client:
        yield client
