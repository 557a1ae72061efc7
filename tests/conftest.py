"""
Shared pytest fixtures for alloy-mcp tests
"""
import pytest
from mcp.server.fastmcp import FastMCP

from catalog import Document, DocumentRepository
from docs_search import DocsSearch


TRANSACTIONS_MD = """# Transaction Types

Intro text about TxEnvelope.

## TxLegacy

Legacy transaction with gas_price.

## TxEip1559

Use `TxEip1559` for dynamic fee transactions. Set the nonce and gas limit.
"""

FILLERS_MD = """## GasFiller

Fills gas fields. gas gas.

## NonceFiller

Fills the nonce. Mentions TxEip1559 once.
"""

CORE_TYPES_MD = """Address and U256 live here.
Nothing else."""


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def sample_documents():
    """Small three-document corpus"""
    return [
        Document(
            uri="alloy://consensus/transactions",
            name="Transaction Types",
            description="Guide to transaction types",
            content=TRANSACTIONS_MD,
        ),
        Document(
            uri="alloy://provider/fillers",
            name="Provider Fillers",
            description="Guide to fillers",
            content=FILLERS_MD,
        ),
        Document(
            uri="alloy://primitives/core-types",
            name="Primitives & Core Types",
            description="Guide to primitives",
            content=CORE_TYPES_MD,
        ),
    ]


@pytest.fixture
def repository(sample_documents):
    return DocumentRepository(sample_documents)


@pytest.fixture
def search(repository):
    return DocsSearch(repository)


@pytest.fixture
def mcp_server():
    """Create a fresh FastMCP server instance for testing"""
    return FastMCP("test-alloy")


@pytest.fixture
def mcp_server_with_tools(mcp_server, search):
    """Create a FastMCP server with default tools registered over the sample corpus"""
    from defaults.tools import register_default_tools
    register_default_tools(mcp_server, search)
    return mcp_server
