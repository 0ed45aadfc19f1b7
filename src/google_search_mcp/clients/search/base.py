from abc import ABC, abstractmethod

from google_search_mcp.models.search import SearchResponse


class BaseSearchClient(ABC):
    @abstractmethod
    async def search(self, query: str, results: int = 5, country: str | None = None) -> SearchResponse: ...
