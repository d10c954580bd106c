# tests/services/conftest.py
from __future__ import annotations
import pytest
from starlette.testclient import TestClient

from mediameta.common.localization import FormatContext
from mediameta.services.api.app import create_app
from mediameta.services.api.deps import get_context


@pytest.fixture()
def api_client():
    """
    A TestClient whose `get_context` dependency is pinned to the default
    FormatContext so rendered values do not depend on the host settings.
    """
    app = create_app()
    app.dependency_overrides[get_context] = lambda: FormatContext()
    try:
        with TestClient(app) as client:
            yield client
    finally:
        app.dependency_overrides.clear()
