import asyncio
import logging
import sys
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import CallToolResult, Tool

from . import dispatcher
from .config import Settings
from .context import JiraContext
from .errors import ConfigurationError
from .tools import check_registry, list_tools as registered_tools

SERVER_NAME = "jira-query-mcp"
SERVER_VERSION = "1.0.0"

logger = logging.getLogger(__name__)


def create_server(context: JiraContext) -> Server:
    check_registry()

    server = Server(SERVER_NAME, version=SERVER_VERSION)

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        return registered_tools()

    # Arguments are checked by the handlers so every failure gets the same envelope.
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict[str, Any]) -> CallToolResult:
        return await dispatcher.call_tool(context, name, arguments)

    return server


def setup_logging(level: str) -> None:
    # stdout carries the protocol
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


async def run_server(server: Server, context: JiraContext):
    try:
        async with stdio_server() as (read_stream, write_stream):
            await server.run(read_stream, write_stream, server.create_initialization_options())
    finally:
        await context.aclose()


def main():
    settings = Settings.from_env()
    setup_logging(settings.log_level)

    try:
        context = JiraContext.from_settings(settings)
        server = create_server(context)
    except ConfigurationError as e:
        logger.error("Cannot start %s: %s", SERVER_NAME, e)
        sys.exit(1)

    logger.info(
        "Starting %s %s against %s (API v%s)",
        SERVER_NAME,
        SERVER_VERSION,
        settings.jira_host or "<JIRA_HOST unset>",
        settings.api_version,
    )
    asyncio.run(run_server(server, context))


if __name__ == "__main__":
    main()
