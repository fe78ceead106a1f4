"""Heading outline entries produced while rendering a document."""

from dataclasses import dataclass


@dataclass(frozen=True)
class HeadingEntry:
    """A heading collected for the table of contents."""

    id: str  # Slug used as the anchor id
    text: str  # Plain text, inline markup discarded
    level: int  # 2 or 3

    def to_dict(self) -> dict:
        return {"id": self.id, "text": self.text, "level": self.level}
