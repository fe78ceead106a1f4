"""Result of rendering a markdown document."""

from dataclasses import dataclass, field

from .heading import HeadingEntry


@dataclass
class ParsedMarkdown:
    """Rendered HTML fragment plus the heading outline, in document order."""

    html: str
    headings: list[HeadingEntry] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "html": self.html,
            "headings": [heading.to_dict() for heading in self.headings],
        }
