from typing import Any, ClassVar, Self, override

from fastmcp.tools.tool import Tool, ToolResult
from fastmcp.utilities.logging import get_logger
from pydantic import BaseModel, ConfigDict

from google_search_mcp.clients.search.base import BaseSearchClient
from google_search_mcp.models.search import SearchArguments

logger = get_logger(__name__)

SEARCH_TOOL_NAME = "search"
SEARCH_TOOL_DESCRIPTION = "Search the web using Google Custom Search API"


class GoogleSearchServer(BaseModel):
    model_config: ClassVar[ConfigDict] = ConfigDict(arbitrary_types_allowed=True)

    search_client: BaseSearchClient

    async def search(self, arguments: SearchArguments) -> str:
        """Search the web and render the results as text.

        Provider failures are returned as `Search failed: <message>` text instead of being raised.
        """

        try:
            response = await self.search_client.search(arguments.query, results=arguments.num_results, country=arguments.country)
        except Exception as e:
            logger.warning(f"Search for {arguments.query!r} failed: {e!r}")
            return f"Search failed: {e}"

        return response.to_text(country=arguments.country)


class SearchTool(Tool):
    """The `search` tool, validating its raw arguments before searching."""

    search_server: GoogleSearchServer

    @classmethod
    def from_server(cls, search_server: GoogleSearchServer) -> Self:
        return cls(
            name=SEARCH_TOOL_NAME,
            description=SEARCH_TOOL_DESCRIPTION,
            parameters=SearchArguments.tool_parameters(),
            search_server=search_server,
        )

    @override
    async def run(self, arguments: dict[str, Any]) -> ToolResult:
        search_arguments = SearchArguments.from_arguments(arguments)

        text = await self.search_server.search(search_arguments)

        return ToolResult(content=text)
