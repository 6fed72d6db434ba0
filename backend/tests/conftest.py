import pytest
import sys
from pathlib import Path
from fastapi.testclient import TestClient
from unittest.mock import AsyncMock, MagicMock

sys.path.insert(0, str(Path(__file__).parent.parent))


@pytest.fixture(autouse=True)
def setup_test_env(monkeypatch):
    """Keep tests fast and independent of any local .env file."""
    monkeypatch.setenv("ANALYSIS_DELAY_SECONDS", "0")
    monkeypatch.setenv("SERPER_API_KEY", "")
    monkeypatch.setenv("SERPER_ENDPOINT", "https://serpapi.com/search.json")
    monkeypatch.setenv("SEARCH_ENGINE", "google")
    monkeypatch.setenv("SEARCH_TIMEOUT_SECONDS", "30")


@pytest.fixture
def mock_env_vars(monkeypatch):
    """Configure the search credential."""
    env_vars = {
        "SERPER_API_KEY": "test_serper_key",
    }
    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)
    return env_vars


@pytest.fixture
def test_client():
    """Create a TestClient for FastAPI app."""
    import main
    return TestClient(main.app)


@pytest.fixture
def mock_httpx_client():
    """Mock httpx.AsyncClient usable as an async context manager."""
    mock_client = MagicMock()
    mock_client.__aenter__ = AsyncMock(return_value=mock_client)
    mock_client.__aexit__ = AsyncMock(return_value=False)
    return mock_client


@pytest.fixture
def make_response():
    """Factory for fake httpx responses."""
    def _make(status_code: int = 200, json_body=None, text: str = ""):
        response = MagicMock()
        response.status_code = status_code
        response.is_success = 200 <= status_code < 300
        response.json.return_value = json_body
        response.text = text
        return response
    return _make


@pytest.fixture
def sample_search_response():
    """Sample upstream search response."""
    return {
        "search_metadata": {"status": "Success"},
        "organic_results": [
            {
                "position": 1,
                "title": "Global Temperature | Vital Signs - NASA Climate",
                "link": "https://climate.nasa.gov/vital-signs/global-temperature/",
                "snippet": "Earth's global average surface temperature in 2023 was the warmest on record."
            }
        ]
    }
