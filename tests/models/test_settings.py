import pytest
from pydantic import ValidationError

from google_search_mcp.models.errors import ConfigurationError
from google_search_mcp.models.settings import GoogleSearchSettings


def test_from_env():
    settings = GoogleSearchSettings.from_env({"GOOGLE_API_KEY": "test-api-key", "GOOGLE_SEARCH_ENGINE_ID": "test-search-engine-id"})

    assert settings.api_key == "test-api-key"
    assert settings.search_engine_id == "test-search-engine-id"


def test_from_env_missing_both():
    with pytest.raises(ConfigurationError) as exc_info:
        GoogleSearchSettings.from_env({})

    assert exc_info.value.variables == ["GOOGLE_API_KEY", "GOOGLE_SEARCH_ENGINE_ID"]
    assert str(exc_info.value) == "Missing or empty environment variables: GOOGLE_API_KEY, GOOGLE_SEARCH_ENGINE_ID"


@pytest.mark.parametrize(
    ("environ", "expected"),
    [
        ({"GOOGLE_SEARCH_ENGINE_ID": "test-search-engine-id"}, ["GOOGLE_API_KEY"]),
        ({"GOOGLE_API_KEY": "", "GOOGLE_SEARCH_ENGINE_ID": "test-search-engine-id"}, ["GOOGLE_API_KEY"]),
        ({"GOOGLE_API_KEY": "test-api-key"}, ["GOOGLE_SEARCH_ENGINE_ID"]),
        ({"GOOGLE_API_KEY": "test-api-key", "GOOGLE_SEARCH_ENGINE_ID": ""}, ["GOOGLE_SEARCH_ENGINE_ID"]),
    ],
)
def test_from_env_missing_one(environ: dict[str, str], expected: list[str]):
    with pytest.raises(ConfigurationError) as exc_info:
        GoogleSearchSettings.from_env(environ)

    assert exc_info.value.variables == expected


def test_from_env_reads_process_environment(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("GOOGLE_API_KEY", "env-api-key")
    monkeypatch.setenv("GOOGLE_SEARCH_ENGINE_ID", "env-search-engine-id")

    settings = GoogleSearchSettings.from_env()

    assert settings.api_key == "env-api-key"
    assert settings.search_engine_id == "env-search-engine-id"


def test_settings_are_frozen(settings: GoogleSearchSettings):
    with pytest.raises(ValidationError):
        settings.api_key = "another-key"  # pyright: ignore[reportAttributeAccessIssue]
