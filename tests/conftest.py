import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from hello_web.config import get_settings
from hello_web.home import router as home_router


@pytest.fixture
def web_client() -> TestClient:
    # Only the home router, none of the application wiring.
    web_layer = FastAPI()
    web_layer.include_router(home_router)
    return TestClient(web_layer)


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("APP_NAME", "HOST", "PORT", "LOG_LEVEL"):
        monkeypatch.delenv(f"HELLO_WEB_{name}", raising=False)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()
