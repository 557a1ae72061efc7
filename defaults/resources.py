from typing import Callable, Optional

from mcp.server.fastmcp import FastMCP

from catalog import DocumentRepository, get_repository
from docs_search import DocsSearch


def _reader(repository: DocumentRepository, uri: str) -> Callable[[], str]:
    def read() -> str:
        return repository.read(uri).content
    return read


def register_default_resources(mcp: FastMCP, repository: Optional[DocumentRepository] = None):
    """Expose every catalog document as an MCP resource, plus the type lookup template."""
    if repository is None:
        repository = get_repository()
    search = DocsSearch(repository)

    if not hasattr(mcp, '_default_resources_registry'):
        mcp._default_resources_registry = []

    for doc in repository:
        mcp.resource(doc.uri, name=doc.name, description=doc.description, mime_type=doc.mime_type)(
            _reader(repository, doc.uri)
        )
        mcp._default_resources_registry.append({"uri": doc.uri, "name": doc.name})

    @mcp.resource("alloy://type/{type_name}", name="Type Lookup", description="Look up a specific alloy type by name")
    def type_lookup(type_name: str) -> str:
        return search.lookup_type(type_name)
