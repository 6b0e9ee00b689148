import uuid

import pytest
from fastapi.testclient import TestClient

from localfinder.main import app, get_gemini_client


@pytest.fixture
def api():
    """TestClient whose Gemini dependency is swapped by `api.use(client)`."""
    client = TestClient(app)

    def use(gemini_client):
        app.dependency_overrides[get_gemini_client] = lambda: gemini_client

    client.use = use
    yield client
    app.dependency_overrides.clear()


@pytest.fixture
def session_id():
    return uuid.uuid4().hex
