from .config_path import get_config_dir
from .settings_service import SettingsService
from .highlighter import (
    HighlighterService,
    HighlightError,
    HighlighterInitError,
    UnsupportedLanguageError,
)
from .markdown_renderer import parse_markdown, normalize_language, extract_filename, slugify
from .markdown_outline import parse_markdown_outline, find_nearest_heading, MarkdownHeading
from .docs_service import DocsService, DOCS, SECTIONS
from .search_service import search, get_snippet, count_matches

__all__ = [
    "get_config_dir",
    "SettingsService",
    "HighlighterService",
    "HighlightError",
    "HighlighterInitError",
    "UnsupportedLanguageError",
    "parse_markdown",
    "normalize_language",
    "extract_filename",
    "slugify",
    "parse_markdown_outline",
    "find_nearest_heading",
    "MarkdownHeading",
    "DocsService",
    "DOCS",
    "SECTIONS",
    "search",
    "get_snippet",
    "count_matches",
]
