"""
- Keep the app from configuring logging on startup (pytest owns that)
- Provide a client fixture (TestClient(app)) that talks to the app in-process
"""
import os
import pytest

from fastapi.testclient import TestClient

# Must be set before the app module is imported
os.environ.setdefault("APP_ENV", "test")

from mastermind.main import app


@pytest.fixture
def client():
    # No database, no network: every request is scored in-process.
    return TestClient(app)
