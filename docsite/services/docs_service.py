"""Documentation catalog and content loading.

Pages are markdown files named <slug>.md in the content directory. The
catalog below fixes their titles, sections and reading order.
"""

import sys
from pathlib import Path

from ..models import Doc, ParsedMarkdown, Section
from ..utils.paths import doc_path_for_slug
from .markdown_renderer import parse_markdown
from .settings_service import SettingsService


DOCS = [
    Doc("01-introduction", "Introduction", "Getting Started"),
    Doc("02-typescript-fundamentals", "TypeScript Fundamentals", "Core Standards"),
    Doc("03-nextjs-patterns", "Next.js Patterns", "Core Standards"),
    Doc("04-error-handling", "Error Handling", "Core Standards"),
    Doc("05-code-style", "Code Style", "Core Standards"),
    Doc("06-performance", "Performance", "Core Standards"),
    Doc("07-testing", "Testing", "Quality Assurance"),
    Doc("08-security", "Security", "Quality Assurance"),
    Doc("09-accessibility", "Accessibility", "Quality Assurance"),
    Doc("10-documentation", "Documentation", "Quality Assurance"),
    Doc("11-project-structure", "Project Structure", "Architecture"),
    Doc("12-state-management", "State Management", "Architecture"),
    Doc("13-api-design", "API Design", "Architecture"),
    Doc("14-components", "Components", "Architecture"),
    Doc("15-forms-validation", "Forms & Validation", "Implementation"),
    Doc("16-environment", "Environment", "Implementation"),
    Doc("17-deployment", "Deployment", "Implementation"),
    Doc("18-review-checklist", "Review Checklist", "Reference"),
]


def build_sections(docs: list[Doc]) -> list[Section]:
    """Group docs by section, sections in order of first appearance."""
    sections: dict[str, Section] = {}
    for doc in docs:
        if doc.section not in sections:
            sections[doc.section] = Section(name=doc.section)
        sections[doc.section].docs.append(doc)
    return list(sections.values())


SECTIONS = build_sections(DOCS)


class DocsService:
    """Looks up catalog entries and reads their content.

    Usage:
        docs = DocsService()  # content dir from settings
        content = docs.get_doc_content("01-introduction")
        prev_doc, next_doc = docs.get_adjacent_docs("01-introduction")
    """

    def __init__(self, content_dir: str | Path | None = None, docs: list[Doc] | None = None):
        if content_dir is None:
            content_dir = SettingsService.get_instance().get("content.dir")
        self.content_dir = Path(content_dir)
        self.docs = list(docs) if docs is not None else list(DOCS)

    def get_doc(self, slug: str) -> Doc | None:
        """Get the catalog entry for a slug."""
        for doc in self.docs:
            if doc.id == slug:
                return doc
        return None

    def get_doc_content(self, slug: str) -> str | None:
        """Read the markdown for a slug.

        Returns None for slugs not in the catalog and for files that
        cannot be read.
        """
        if self.get_doc(slug) is None:
            return None

        file_path = doc_path_for_slug(self.content_dir, slug)
        if file_path is None:
            return None

        try:
            return file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            print(f"Error reading file for slug {slug}: {e}", file=sys.stderr)
            return None

    def get_all_doc_slugs(self) -> list[str]:
        """Get every slug in catalog order."""
        return [doc.id for doc in self.docs]

    def get_sections(self) -> list[Section]:
        return build_sections(self.docs)

    def get_adjacent_docs(self, slug: str) -> tuple[Doc | None, Doc | None]:
        """Get the previous and next docs in reading order."""
        for index, doc in enumerate(self.docs):
            if doc.id == slug:
                prev_doc = self.docs[index - 1] if index > 0 else None
                next_doc = self.docs[index + 1] if index < len(self.docs) - 1 else None
                return prev_doc, next_doc
        return None, None

    def render_doc(self, slug: str) -> ParsedMarkdown | None:
        """Render a doc's markdown, or None if it has no readable content."""
        content = self.get_doc_content(slug)
        if content is None:
            return None
        return parse_markdown(content)

    def load_all(self) -> list[tuple[Doc, str]]:
        """Get (doc, content) for every doc whose content can be read."""
        loaded = []
        for doc in self.docs:
            content = self.get_doc_content(doc.id)
            if content is not None:
                loaded.append((doc, content))
        return loaded
