"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from healthreg.api.server import create_app
from healthreg.checks.service import CheckService
from healthreg.checks.store import CheckStore


@pytest.fixture
def checks_path(tmp_path: Path) -> Path:
    return tmp_path / "endpoints.json"


@pytest.fixture
def store(checks_path: Path) -> CheckStore:
    """CheckStore backed by a temp file."""
    return CheckStore(checks_path)


@pytest.fixture
def service(store: CheckStore) -> CheckService:
    return CheckService(store)


@pytest.fixture
def client(service: CheckService) -> TestClient:
    app = create_app()
    app.state.check_service = service
    return TestClient(app)
