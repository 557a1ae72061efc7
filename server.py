from __future__ import annotations
import os, sys, logging

from dotenv import load_dotenv
from mcp.server.fastmcp import FastMCP

from catalog import get_repository
from defaults.prompts import register_default_prompts
from defaults.resources import register_default_resources
from defaults.tools import register_default_tools
from docs_search import get_search

load_dotenv()

LOG_LEVEL = os.getenv("ALLOY_MCP_LOG_LEVEL", "INFO").upper()
TRANSPORT = os.getenv("ALLOY_MCP_TRANSPORT", "stdio")
TRANSPORTS = ("stdio", "sse", "streamable-http")

# Log to STDERR only (stdio transport cannot receive stdout noise)
logging.basicConfig(stream=sys.stderr, level=LOG_LEVEL)
log = logging.getLogger("alloy-mcp")

INSTRUCTIONS = "Provides curated documentation for alloy.rs Ethereum library types."


def create_server() -> FastMCP:
    """Build the FastMCP server with tools, resources and prompts registered."""
    mcp = FastMCP("alloy", instructions=INSTRUCTIONS)
    repository = get_repository()
    register_default_tools(mcp, get_search())
    register_default_resources(mcp, repository)
    register_default_prompts(mcp)
    return mcp


def main():
    if TRANSPORT not in TRANSPORTS:
        raise ValueError(f"Unknown ALLOY_MCP_TRANSPORT: {TRANSPORT!r}. Supported: {', '.join(TRANSPORTS)}")
    mcp = create_server()
    log.info("Starting alloy-mcp server (%s)", TRANSPORT)
    mcp.run(transport=TRANSPORT)


if __name__ == "__main__":
    main()
