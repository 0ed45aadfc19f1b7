from typing import Any, ClassVar, override

from aiohttp import ClientSession
from fastmcp.utilities.logging import get_logger
from pydantic import BaseModel, ConfigDict, ValidationError

from google_search_mcp.clients.search.base import BaseSearchClient
from google_search_mcp.models.errors import GoogleSearchAPIError
from google_search_mcp.models.search import SearchResponse, SearchResult, region_code
from google_search_mcp.models.settings import GoogleSearchSettings

logger = get_logger(__name__)

GOOGLE_SEARCH_URL = "https://www.googleapis.com/customsearch/v1"


class GoogleSearchItem(BaseModel):
    model_config: ClassVar[ConfigDict] = ConfigDict(extra="ignore")

    title: str | None = None
    link: str | None = None
    snippet: str | None = None

    def to_search_result(self) -> SearchResult:
        return SearchResult(
            title=self.title,
            url=self.link,
            snippet=self.snippet,
        )


class GoogleSearchApiResponse(BaseModel):
    model_config: ClassVar[ConfigDict] = ConfigDict(extra="ignore")

    items: list[GoogleSearchItem] | None = None

    def to_search_response(self) -> SearchResponse:
        if self.items is None:
            return SearchResponse(items=None)

        return SearchResponse(items=[item.to_search_result() for item in self.items])


class GoogleApiErrorDetail(BaseModel):
    code: int | None = None
    message: str | None = None


class GoogleApiErrorResponse(BaseModel):
    error: GoogleApiErrorDetail


class GoogleSearchClient(BaseSearchClient):
    session: ClientSession | None

    def __init__(self, settings: GoogleSearchSettings, session: ClientSession | None = None):
        self.settings = settings
        self.session = session
        self.owns_session = session is None

    async def close(self) -> None:
        """Close the session this client created. Sessions passed in by the caller are left open."""
        if self.owns_session and self.session is not None:
            await self.session.close()
            self.session = None

    def build_params(self, query: str, results: int, country: str | None) -> dict[str, Any]:
        params: dict[str, Any] = {
            "key": self.settings.api_key,
            "cx": self.settings.search_engine_id,
            "q": query,
            "num": results,
        }

        if region := region_code(country):
            params["gl"] = region.lower()

        return params

    async def google_search(self, query: str, results: int = 5, country: str | None = None) -> GoogleSearchApiResponse:
        if self.session is None:
            self.session = ClientSession()

        async with self.session.get(url=GOOGLE_SEARCH_URL, params=self.build_params(query, results, country)) as response:
            if not response.ok:
                body = await response.text()
                try:
                    message = GoogleApiErrorResponse.model_validate_json(body).error.message
                except ValidationError:
                    message = None

                raise GoogleSearchAPIError(response.status, message or response.reason or f"HTTP {response.status}")

            return GoogleSearchApiResponse.model_validate(await response.json(content_type=None))

    @override
    async def search(self, query: str, results: int = 5, country: str | None = None) -> SearchResponse:
        try:
            response = await self.google_search(query, results=results, country=country)
        except Exception:
            logger.exception(f"Error performing search for {query!r}")
            raise

        return response.to_search_response()
