"""Search result model."""

from dataclasses import dataclass
from typing import Literal

from .doc import Doc


@dataclass
class SearchResult:
    """A document matching a search query."""

    doc: Doc
    match_type: Literal["title", "content"]
    match_count: int
    search_query: str
    snippet: str | None = None  # Only for content matches
    nearest_heading_id: str | None = None  # Anchor to jump to

    @property
    def href(self) -> str:
        """Link to the document, anchored at the nearest heading if known."""
        if self.nearest_heading_id:
            return f"{self.doc.href}#{self.nearest_heading_id}"
        return self.doc.href
