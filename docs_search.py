"""
Lightweight documentation search engine for the alloy knowledge base.
Splits the bundled markdown into ``## `` sections on every call, scores each
section against the query and renders ranked, truncated text for MCP clients.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from catalog import DocumentRepository, get_repository

log = logging.getLogger("alloy-mcp")

HEADING_PREFIX = "## "
INTRO_HEADING = "(intro)"

LOOKUP_LIMIT = 3
DEFAULT_MAX_RESULTS = 5
PREVIEW_LINES = 40


# ---------------------------------------------------------------------------
# Chunk documents into sections
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Section:
    uri: str
    resource_name: str
    heading: str
    content: str

    @property
    def title(self) -> str:
        """Heading without the leading ``#`` marks."""
        return self.heading.lstrip("#").strip()


def _lines(text: str) -> List[str]:
    """Split on newlines only, dropping a trailing carriage return from each line."""
    return [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]


def parse_sections(uri: str, resource_name: str, content: str) -> List[Section]:
    """Split markdown into sections on level-2 headings, keeping document order."""
    sections: List[Section] = []
    heading = ""
    lines: List[str] = []

    def flush() -> None:
        text = "\n".join(lines).strip()
        if text:
            sections.append(Section(uri, resource_name, heading or INTRO_HEADING, text))

    for line in _lines(content):
        if line.startswith(HEADING_PREFIX):
            flush()
            heading = line
            lines = [line]
        else:
            lines.append(line)
    flush()
    return sections


# ---------------------------------------------------------------------------
# Scoring
# ---------------------------------------------------------------------------

def score_section(section: Section, query: str) -> int:
    """
    Score how well *section* matches *query*. Higher is better, 0 is no match.

    First match wins:
      heading contains the query           -> 100
      body contains the query in backticks -> 80
      body contains the query              -> 50 + min(occurrences, 30)
    """
    q = query.lower()
    if q in section.heading.lower():
        return 100

    body = section.content.lower()
    if f"`{q}`" in body:
        return 80

    if q in body:
        return 50 + min(body.count(q), 30)

    return 0


def _rank(scored: List[Tuple[int, Section]]) -> List[Tuple[int, Section]]:
    # sorted() is stable, so equal scores keep corpus order
    return sorted((pair for pair in scored if pair[0] > 0), key=lambda pair: pair[0], reverse=True)


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------

class DocsSearch:
    """Query operations over an immutable DocumentRepository."""

    def __init__(self, repository: DocumentRepository):
        self.repository = repository

    def all_sections(self) -> List[Section]:
        sections: List[Section] = []
        for doc in self.repository:
            sections.extend(parse_sections(doc.uri, doc.name, doc.content))
        return sections

    # ------------------------------------------------------------------
    def lookup_type(self, type_name: str) -> str:
        """Return the (at most three) best sections for a type name, with scores."""
        scored = _rank([(score_section(s, type_name), s) for s in self.all_sections()])[:LOOKUP_LIMIT]
        log.debug("lookup_type %r -> %d sections", type_name, len(scored))

        if not scored:
            uris = "\n".join(f"  - {doc.uri} ({doc.name})" for doc in self.repository)
            return f"No documentation found for '{type_name}'. Available resources:\n{uris}"

        result = f"# Results for '{type_name}'\n\n"
        for score, section in scored:
            result += (
                f"---\n**{section.title}** — {section.resource_name} (relevance: {score})\n"
                f"URI: {section.uri}\n\n{section.content}\n\n"
            )
        return result

    # ------------------------------------------------------------------
    def search_resources(self, query: str, max_results: Optional[int] = DEFAULT_MAX_RESULTS) -> str:
        """
        Free-text search across every section.

        The whole query is scored like ``lookup_type``; each whitespace term
        then adds 10 when found in the heading and 5 when found in the body.
        Term bonuses apply even when the whole query matches nowhere.
        """
        limit = DEFAULT_MAX_RESULTS if max_results is None else max(max_results, 0)
        terms = query.lower().split()

        scored: List[Tuple[int, Section]] = []
        for section in self.all_sections():
            heading = section.heading.lower()
            body = section.content.lower()
            total = score_section(section, query)
            for term in terms:
                if term in heading:
                    total += 10
                if term in body:
                    total += 5
            scored.append((total, section))

        ranked = _rank(scored)[:limit]
        log.debug("search_resources %r -> %d sections", query, len(ranked))

        if not ranked:
            uris = "\n".join(f"  - {doc.uri} — {doc.description}" for doc in self.repository)
            return f"No results for '{query}'. Available resources:\n{uris}"

        result = f"# Search results for '{query}'\n\n"
        for _score, section in ranked:
            result += (
                f"---\n**{section.title}** — {section.resource_name}\n"
                f"URI: {section.uri}\n\n{_preview(section)}\n\n"
            )
        return result

    # ------------------------------------------------------------------
    def get_resource(self, uri: str) -> str:
        """Raw content for *uri*, or the catalog when uri is ``list``."""
        if uri == "list":
            entries = sorted(
                f"- **{doc.name}**\n  URI: `{doc.uri}`\n  {doc.description}" for doc in self.repository
            )
            return "# Available Resources\n\n" + "\n\n".join(entries)

        doc = self.repository.get(uri)
        if doc is not None:
            return doc.content

        uris = "\n".join(f"  {d.uri} — {d.name}" for d in self.repository)
        return f"Resource not found: '{uri}'\n\nAvailable URIs:\n{uris}"


def _preview(section: Section) -> str:
    lines = _lines(section.content)
    if len(lines) <= PREVIEW_LINES:
        return section.content
    head = "\n".join(lines[:PREVIEW_LINES])
    return f"{head}\n\n... ({len(lines) - PREVIEW_LINES} more lines, fetch full resource: {section.uri})"


# Singleton for the server to import
_search: DocsSearch | None = None

def get_search() -> DocsSearch:
    global _search
    if _search is None:
        _search = DocsSearch(get_repository())
    return _search
