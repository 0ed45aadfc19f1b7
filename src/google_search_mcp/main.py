import asyncio
from typing import Literal

import asyncclick as click
from dotenv import load_dotenv
from fastmcp import FastMCP
from fastmcp.server.middleware.logging import LoggingMiddleware
from fastmcp.utilities.logging import configure_logging, get_logger

from google_search_mcp.clients.search.base import BaseSearchClient
from google_search_mcp.clients.search.google import GoogleSearchClient
from google_search_mcp.models.errors import ConfigurationError
from google_search_mcp.models.settings import API_KEY_ENV_VAR, SEARCH_ENGINE_ID_ENV_VAR, GoogleSearchSettings
from google_search_mcp.servers.search import GoogleSearchServer, SearchTool

load_dotenv()

logger = get_logger(__name__)

SERVER_NAME = "Google Custom Search MCP"


def build_server(search_client: BaseSearchClient) -> FastMCP[None]:
    search_server = GoogleSearchServer(search_client=search_client)

    mcp = FastMCP[None](name=SERVER_NAME, middleware=[LoggingMiddleware()])

    mcp.add_tool(tool=SearchTool.from_server(search_server))

    return mcp


@click.command()
@click.option("--api-key", type=str, envvar=API_KEY_ENV_VAR, required=False, help="The Google Custom Search API key")
@click.option("--search-engine-id", type=str, envvar=SEARCH_ENGINE_ID_ENV_VAR, required=False, help="The Programmable Search Engine ID (cx)")
@click.option(
    "--mcp-transport", type=click.Choice(["stdio", "streamable-http"]), default="stdio", help="The transport to run the MCP server on"
)
@click.option(
    "--logging-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    default="INFO",
    help="The logging level to use for the server.",
)
async def cli(
    api_key: str | None,
    search_engine_id: str | None,
    mcp_transport: Literal["stdio", "streamable-http"],
    logging_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
):
    configure_logging(level=logging_level)

    try:
        settings = GoogleSearchSettings.from_values(api_key=api_key, search_engine_id=search_engine_id)
    except ConfigurationError as e:
        logger.error(f"Invalid configuration: {e}")
        raise click.ClickException(str(e)) from e

    search_client = GoogleSearchClient(settings=settings)
    mcp = build_server(search_client)

    logger.info(f"{SERVER_NAME} Server running on {mcp_transport}")

    try:
        await mcp.run_async(transport=mcp_transport)
    finally:
        await search_client.close()


def run_mcp():
    asyncio.run(cli())


if __name__ == "__main__":
    run_mcp()
