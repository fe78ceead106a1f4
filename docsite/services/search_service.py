"""Full-text search over the documentation pages."""

from collections.abc import Iterable

from ..models import Doc, SearchResult
from .markdown_outline import find_nearest_heading

MIN_QUERY_LENGTH = 2

# Context kept around a match in snippets
SNIPPET_BEFORE = 50
SNIPPET_AFTER = 100


def count_matches(text: str, query: str) -> int:
    """Count non-overlapping case-insensitive occurrences of query."""
    if not query:
        return 0
    return text.lower().count(query.lower())


def get_snippet(content: str, query: str, max_length: int = 150) -> str:
    """Cut a short excerpt of content around the first match of query.

    The excerpt starts and ends on word boundaries where possible and is
    marked with "..." where it was cut.
    """
    index = content.lower().find(query.lower())
    if index == -1:
        return ""

    start = max(0, index - SNIPPET_BEFORE)
    if start > 0:
        space = content.find(" ", start)
        if space != -1 and space < index:
            start = space + 1

    end = min(len(content), index + len(query) + max_length - SNIPPET_BEFORE)
    if end < len(content):
        space = content.rfind(" ", 0, end + 1)
        if space > index + len(query):
            end = space

    snippet = content[start:end]
    if start > 0:
        snippet = "..." + snippet
    if end < len(content):
        snippet = snippet + "..."
    return snippet


def search(docs: Iterable[tuple[Doc, str]], query: str) -> list[SearchResult]:
    """Search (doc, content) pairs for query.

    Title matches rank first, then documents with more matches. Queries
    shorter than two characters match nothing.
    """
    if not query or len(query) < MIN_QUERY_LENGTH:
        return []

    lower_query = query.lower()
    results = []

    for doc, content in docs:
        title_match = lower_query in doc.title.lower()
        content_match = lower_query in content.lower()
        if not (title_match or content_match):
            continue

        results.append(SearchResult(
            doc=doc,
            match_type="title" if title_match else "content",
            match_count=count_matches(doc.title, query) + count_matches(content, query),
            search_query=query,
            snippet=get_snippet(content, query) if content_match else None,
            nearest_heading_id=find_nearest_heading(content, query) if content_match else None,
        ))

    results.sort(key=lambda r: (r.match_type != "title", -r.match_count))
    return results
