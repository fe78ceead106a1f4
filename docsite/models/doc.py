"""Catalog models for the documentation pages."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Doc:
    """A documentation page in the catalog."""

    id: str  # Slug, also the content file stem
    title: str
    section: str

    @property
    def href(self) -> str:
        """Site-relative URL of the page."""
        return f"/{self.id}"

    def __str__(self) -> str:
        return f"{self.title} ({self.id})"


@dataclass
class Section:
    """A named group of docs, in catalog order."""

    name: str
    docs: list[Doc] = field(default_factory=list)
