"""
Static catalog of alloy documentation resources.

The Markdown corpus ships as package data in ``defaults/content/`` and is read
once at startup into an immutable ``DocumentRepository`` keyed by URI. Nothing
here is reloaded or mutated after construction, so the repository can be
shared freely.
"""
from __future__ import annotations

import os
import logging
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Tuple

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

import defaults

load_dotenv()

log = logging.getLogger("alloy-mcp")

# ------------------------------------------------------------------------------
# Environment / Config
# ------------------------------------------------------------------------------

# Installed alongside the defaults package so wheels carry the corpus
DEFAULT_CONTENT_DIR = Path(defaults.__file__).parent / "content"
CONTENT_DIR = Path(os.getenv("ALLOY_MCP_CONTENT_DIR", DEFAULT_CONTENT_DIR))

MARKDOWN = "text/markdown"

# (uri, name, description, path relative to CONTENT_DIR)
CATALOG: List[Tuple[str, str, str, str]] = [
    (
        "alloy://consensus/transactions",
        "Transaction Types",
        "Guide to alloy transaction types: TxLegacy, TxEip1559, TxEip4844, TxEnvelope, etc.",
        "consensus/transactions.md",
    ),
    (
        "alloy://eips/block-identifiers",
        "Block Identifier Types",
        "Guide to BlockId, BlockNumberOrTag, HashOrNumber, and related types.",
        "eips/block-identifiers.md",
    ),
    (
        "alloy://provider/setup",
        "Provider Setup",
        "Guide to setting up alloy providers: ProviderBuilder, wallets, WebSocket, layers.",
        "provider/setup.md",
    ),
    (
        "alloy://sol-macro/contract-bindings",
        "sol! Macro & Contract Bindings",
        "Guide to sol! macro: contract interfaces, #[sol(rpc)], SolCall, SolEvent, type mapping.",
        "sol-macro/contract-bindings.md",
    ),
    (
        "alloy://signers/signing-guide",
        "Signers & Signing Guide",
        "Guide to PrivateKeySigner, EthereumWallet, Signer trait, EIP-712 typed data signing.",
        "signers/signing-guide.md",
    ),
    (
        "alloy://primitives/core-types",
        "Primitives & Core Types",
        "Guide to Address, B256, U256, Bytes, TxKind, keccak256, literal macros, conversions.",
        "primitives/core-types.md",
    ),
    (
        "alloy://consensus/events",
        "Event & Log Decoding",
        "Guide to SolEvent, SolEventInterface, log decoding, event filtering, subscriptions.",
        "consensus/events.md",
    ),
    (
        "alloy://provider/fillers",
        "Provider Fillers",
        "Guide to GasFiller, NonceFiller, ChainIdFiller, BlobGasFiller, custom filler configs.",
        "provider/fillers.md",
    ),
    (
        "alloy://sol-macro/sol-types",
        "Sol Types: ABI Encoding & Decoding",
        "Guide to SolType, SolValue, SolStruct, SolCall traits for ABI encoding/decoding.",
        "sol-macro/sol-types.md",
    ),
    (
        "alloy://rpc/transaction-request",
        "TransactionRequest Builder",
        "Guide to TransactionRequest: building, sending, gas config, blob txs, MEV bundles.",
        "rpc/transaction-request.md",
    ),
    (
        "alloy://encoding/rlp-eip2718",
        "RLP & EIP-2718 Encoding",
        "Guide to Encodable2718, Decodable2718, RLP encoding/decoding, transaction serialization.",
        "encoding/rlp-eip2718.md",
    ),
    (
        "alloy://encoding/blobs",
        "Blob Transactions & Sidecars",
        "Guide to SidecarBuilder, SimpleCoder, BlobTransactionSidecar, blob transaction construction.",
        "encoding/blobs.md",
    ),
    (
        "alloy://consensus/recovered",
        "Recovered Transactions & Type Aliases",
        "Guide to Recovered<T>, sender recovery, custom transaction type aliases, DataCompat.",
        "consensus/recovered.md",
    ),
]


# ------------------------------------------------------------------------------
# Models
# ------------------------------------------------------------------------------

class Document(BaseModel):
    """One immutable documentation resource."""
    uri: str = Field(..., min_length=1, description="Unique resource URI, e.g. alloy://consensus/transactions")
    name: str = Field(..., description="Display name")
    description: str = Field("", description="One-line summary")
    mime_type: str = Field(MARKDOWN)
    content: str = Field("", description="Full Markdown body")

    model_config = ConfigDict(frozen=True)


class ResourceNotFoundError(LookupError):
    """Raised by structured reads when a URI has no catalog entry."""

    def __init__(self, uri: str):
        super().__init__(f"Resource not found: {uri}")
        self.uri = uri


# ------------------------------------------------------------------------------
# Repository
# ------------------------------------------------------------------------------

class DocumentRepository:
    """Read-only mapping of URI -> Document, iterated in catalog order."""

    def __init__(self, documents: List[Document]):
        self._documents: Dict[str, Document] = {}
        for doc in documents:
            if doc.uri in self._documents:
                raise ValueError(f"Duplicate resource URI in catalog: {doc.uri}")
            self._documents[doc.uri] = doc

    def __iter__(self) -> Iterator[Document]:
        return iter(list(self._documents.values()))

    def __len__(self) -> int:
        return len(self._documents)

    def __contains__(self, uri: object) -> bool:
        return uri in self._documents

    def get(self, uri: str) -> Optional[Document]:
        return self._documents.get(uri)

    def read(self, uri: str) -> Document:
        """Structured single-resource read; unknown URIs raise ResourceNotFoundError."""
        doc = self._documents.get(uri)
        if doc is None:
            raise ResourceNotFoundError(uri)
        return doc

    def uris(self) -> List[str]:
        return list(self._documents)


def load_documents(content_dir: Path | None = None) -> List[Document]:
    """
    Read every catalog entry from disk.

    A missing or unreadable file aborts startup rather than serving a partial
    corpus.
    """
    root = Path(content_dir) if content_dir is not None else CONTENT_DIR
    documents: List[Document] = []
    for uri, name, description, rel_path in CATALOG:
        path = root / rel_path
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise RuntimeError(f"Cannot load resource {uri} from {path}: {e}") from e
        documents.append(Document(uri=uri, name=name, description=description, mime_type=MARKDOWN, content=text))
    log.info("Loaded %d documentation resources from %s", len(documents), root)
    return documents


# Singleton for the server to import
_repository: DocumentRepository | None = None

def get_repository() -> DocumentRepository:
    global _repository
    if _repository is None:
        _repository = DocumentRepository(load_documents())
    return _repository
