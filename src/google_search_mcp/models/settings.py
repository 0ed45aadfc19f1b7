import os
from collections.abc import Mapping
from typing import ClassVar, Self

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from google_search_mcp.models.errors import ConfigurationError

API_KEY_ENV_VAR = "GOOGLE_API_KEY"
SEARCH_ENGINE_ID_ENV_VAR = "GOOGLE_SEARCH_ENGINE_ID"

FIELD_ENV_VARS = {
    "api_key": API_KEY_ENV_VAR,
    "search_engine_id": SEARCH_ENGINE_ID_ENV_VAR,
}


class GoogleSearchSettings(BaseModel):
    """Credentials for the Custom Search API, loaded once at startup."""

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    api_key: str = Field(min_length=1)
    search_engine_id: str = Field(min_length=1)

    @classmethod
    def from_values(cls, api_key: str | None, search_engine_id: str | None) -> Self:
        try:
            return cls.model_validate({"api_key": api_key, "search_engine_id": search_engine_id})
        except ValidationError as e:
            invalid_fields = {str(error["loc"][0]) for error in e.errors() if error["loc"]}
            raise ConfigurationError([env_var for field, env_var in FIELD_ENV_VARS.items() if field in invalid_fields]) from e

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Self:
        if environ is None:
            environ = os.environ

        return cls.from_values(
            api_key=environ.get(API_KEY_ENV_VAR),
            search_engine_id=environ.get(SEARCH_ENGINE_ID_ENV_VAR),
        )
