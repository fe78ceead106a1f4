from .heading import HeadingEntry
from .parsed import ParsedMarkdown
from .code_fragment import CodeFragment
from .doc import Doc, Section
from .search_result import SearchResult

__all__ = [
    "HeadingEntry",
    "ParsedMarkdown",
    "CodeFragment",
    "Doc",
    "Section",
    "SearchResult",
]
