import pytest

from google_search_mcp.models.settings import GoogleSearchSettings


@pytest.fixture
def settings() -> GoogleSearchSettings:
    return GoogleSearchSettings(api_key="test-api-key", search_engine_id="test-search-engine-id")
