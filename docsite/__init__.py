"""docsite - markdown rendering for the coding standards documentation site."""

from .models import HeadingEntry, ParsedMarkdown
from .services import parse_markdown
from .version import __version__

__all__ = [
    "HeadingEntry",
    "ParsedMarkdown",
    "parse_markdown",
    "__version__",
]
