from typing import Any, Callable, Dict, List, Optional

from mcp.server.fastmcp import FastMCP

from defaults.schemas import LookupTypeArgs, SearchResourcesArgs, GetResourceArgs
from docs_search import DocsSearch, get_search


def build_tool_table(search: DocsSearch) -> List[Dict[str, Any]]:
    """Operation table: one row per tool with its schema, handler and description."""

    def lookup_type(args: LookupTypeArgs) -> str:
        """Look up alloy type information by name."""
        return search.lookup_type(args.type_name)

    def search_resources(args: SearchResourcesArgs) -> str:
        """Full-text search across all alloy documentation."""
        return search.search_resources(args.query, max_results=args.max_results)

    def get_resource(args: GetResourceArgs) -> str:
        """Fetch an alloy documentation resource by URI."""
        return search.get_resource(args.uri)

    return [
        {
            "name": "lookup_type",
            "description": "Look up alloy type information by name. Returns relevant documentation sections with code examples.",
            "category": "lookup",
            "schema": LookupTypeArgs,
            "handler": lookup_type,
        },
        {
            "name": "search_resources",
            "description": "Full-text search across all alloy documentation. Accepts type names, concepts, or error messages.",
            "category": "search",
            "schema": SearchResourcesArgs,
            "handler": search_resources,
        },
        {
            "name": "get_resource",
            "description": "Fetch a specific alloy documentation resource by URI. Pass uri='list' to see all available resources.",
            "category": "resources",
            "schema": GetResourceArgs,
            "handler": get_resource,
        },
    ]


def register_default_tools(mcp: FastMCP, search: Optional[DocsSearch] = None):
    """Register every row of the operation table as an MCP tool."""

    # Name, description and category of each registered tool
    if not hasattr(mcp, '_default_tools_registry'):
        mcp._default_tools_registry = []

    if search is None:
        search = get_search()
    table = build_tool_table(search)
    for row in table:
        handler: Callable[..., str] = row["handler"]
        mcp.add_tool(handler, name=row["name"], description=row["description"])
        mcp._default_tools_registry.append({
            "name": row["name"],
            "description": row["description"],
            "category": row["category"],
        })
    return table
