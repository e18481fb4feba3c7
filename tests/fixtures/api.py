from __future__ import annotations

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from src.ichor.api.http.app import app
from src.ichor.api.http.app_data import ApplicationDependencies


@pytest.fixture(name="client")
def client_fixture(app_dependencies: ApplicationDependencies) -> Generator[TestClient]:
    """Create a test client over the in-memory database.

    The lifespan is not entered, so startup never builds its own engine.
    """
    app.state.app_dependencies = app_dependencies
    try:
        yield TestClient(app)
    finally:
        app.state.app_dependencies = None
