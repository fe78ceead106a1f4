"""Markdown outline scanner working on the source text.

Unlike the renderer this never builds HTML, so it is cheap enough to run over
every document for search.
"""

import re
from collections.abc import Iterable
from dataclasses import dataclass

import mistune

from .markdown_renderer import MARKDOWN_PLUGINS, plain_text, slugify

# Token-only parser, reused for every heading
_heading_parser = mistune.create_markdown(renderer="ast", plugins=MARKDOWN_PLUGINS)


def heading_plain_text(text: str, level: int = 2) -> str:
    """Get the text the renderer shows for a heading, inline markup removed.

    Example: "See [docs](https://x.com)" -> "See docs"
    """
    for token in _heading_parser(f"{'#' * level} {text}"):
        if token["type"] == "heading":
            return plain_text(token.get("children", []))
    return text


@dataclass
class MarkdownHeading:
    """A heading found in markdown source."""

    text: str  # As written, markup included
    level: int  # 1-6
    line: int
    offset: int  # Character offset of the heading line in the source

    @property
    def id(self) -> str:
        """Anchor id the renderer gives this heading."""
        return slugify(heading_plain_text(self.text, self.level))


# Regex for ATX-style headings: # Heading, ## Heading, etc.
HEADING_PATTERN = re.compile(r"^(#{1,6})\s+(.+?)(?:\s+#+)?$")

# Regex for fenced code block markers: ``` or ~~~
CODE_FENCE_PATTERN = re.compile(r"^(`{3,}|~{3,})")


def parse_markdown_outline(source: str, levels: Iterable[int] | None = None) -> list[MarkdownHeading]:
    """Parse Markdown source and extract headings.

    Supports ATX-style headings (# Heading) and ignores headings inside
    fenced code blocks. If levels is given, only headings of those depths
    are returned.

    Returns a list of MarkdownHeading objects ordered by line number.
    """
    wanted = set(levels) if levels is not None else None
    items = []
    in_code_block = False
    code_fence_char = None
    offset = 0

    for line_num, line in enumerate(source.splitlines(keepends=True), start=1):
        line_offset = offset
        offset += len(line)
        stripped = line.strip()

        # Check for code fence toggle
        fence_match = CODE_FENCE_PATTERN.match(stripped)
        if fence_match:
            fence = fence_match.group(1)
            if not in_code_block:
                in_code_block = True
                code_fence_char = fence[0]
            elif fence[0] == code_fence_char:
                in_code_block = False
                code_fence_char = None
            continue

        if in_code_block:
            continue

        match = HEADING_PATTERN.match(stripped)
        if match:
            level = len(match.group(1))
            if wanted is not None and level not in wanted:
                continue
            items.append(MarkdownHeading(
                text=match.group(2).strip(),
                level=level,
                line=line_num,
                offset=line_offset,
            ))

    return items


def find_nearest_heading(source: str, query: str) -> str | None:
    """Get the anchor id of the heading a search match falls under.

    Looks for the first case-insensitive occurrence of query. Returns the id
    of the last heading above it, or of the first heading in the document if
    the match comes before any heading. None if query does not occur or the
    document has no headings.
    """
    if not query:
        return None

    index = source.lower().find(query.lower())
    if index == -1:
        return None

    headings = parse_markdown_outline(source)
    if not headings:
        return None

    nearest = None
    for heading in headings:
        if heading.offset >= index:
            break
        nearest = heading

    return (nearest or headings[0]).id
