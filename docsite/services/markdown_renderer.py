"""Markdown to HTML rendering for documentation pages.

parse_markdown() turns a markdown document into an HTML fragment plus the
heading outline used by the table of contents. Three kinds of nodes get
custom output:

- headings carry a slug id and are recorded in the outline,
- fenced code is highlighted and wrapped in a code-block container that
  keeps the raw source in a data-code attribute for the copy button,
- links that leave the page open in a new tab.
"""

import html
import re

import mistune
from mistune.util import escape, safe_entity

from ..models import CodeFragment, HeadingEntry, ParsedMarkdown
from .highlighter import HighlightError, HighlighterService

# GitHub-flavoured extras
MARKDOWN_PLUGINS = ["strikethrough", "table", "url", "task_lists"]

# Only these heading depths go into the outline
OUTLINE_LEVELS = (2, 3)

# Heading that would point the table of contents at itself
TOC_HEADING = "table of contents"

LANGUAGE_ALIASES = {
    "js": "javascript",
    "ts": "typescript",
    "sh": "bash",
    "shell": "bash",
    "yml": "yaml",
    "md": "markdown",
    "": "text",
}

# First-line comments naming the file: "// a.ts", "# a.py", "/* a.css"
FILENAME_PATTERNS = [
    re.compile(r"^//\s*(.+\.\w+)"),
    re.compile(r"^#\s*(.+\.\w+)"),
    re.compile(r"^/\*\s*(.+\.\w+)"),
]

DEFAULT_FILENAMES = {
    "typescript": "code.ts",
    "javascript": "code.js",
    "tsx": "component.tsx",
    "jsx": "component.jsx",
    "json": "config.json",
    "bash": "terminal",
    "yaml": "config.yaml",
    "css": "styles.css",
    "html": "index.html",
}
DEFAULT_FILENAME = "code"

_TAG_RE = re.compile(r"<[^>]*>")
_NON_SLUG_RE = re.compile(r"[^a-z0-9]+")

CODE_BLOCK_TEMPLATE = """
<div class="code-block-wrapper" data-code="{encoded}">
  <div class="code-block-header">
    <span class="code-block-filename">{filename}</span>
    <button class="code-block-copy" aria-label="Copy code">
      <svg class="copy-icon" width="14" height="14" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2">
        <rect x="9" y="9" width="13" height="13" rx="2" ry="2"></rect>
        <path d="M5 15H4a2 2 0 0 1-2-2V4a2 2 0 0 1 2-2h9a2 2 0 0 1 2 2v1"></path>
      </svg>
      <svg class="check-icon" width="14" height="14" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" style="display:none">
        <polyline points="20 6 9 17 4 12"></polyline>
      </svg>
      <span class="copy-text">Copy</span>
    </button>
  </div>
  <div class="code-block-content">
    {highlighted}
  </div>
</div>
"""


def normalize_language(lang: str | None) -> str:
    """Map a fence language tag to the highlighter's name for it.

    Unknown tags pass through unchanged, a missing tag becomes "text".
    """
    lang = lang or ""
    return LANGUAGE_ALIASES.get(lang, lang) or "text"


def extract_filename(code: str, lang: str) -> str:
    """Pick the filename shown above a code block.

    Uses a filename comment on the first line when there is one (keeping only
    the last path segment), otherwise a default for the language.
    """
    first_line = code.split("\n", 1)[0].strip()
    for pattern in FILENAME_PATTERNS:
        match = pattern.match(first_line)
        if match:
            return match.group(1).split("/")[-1]

    return DEFAULT_FILENAMES.get(lang, DEFAULT_FILENAME)


def slugify(text: str) -> str:
    """Anchor id for a heading: lowercase, tags removed, hyphen-separated."""
    slug = _TAG_RE.sub("", text.lower())
    slug = _NON_SLUG_RE.sub("-", slug)
    return slug.strip("-")


def plain_text(tokens: list[dict]) -> str:
    """Join the literal text runs of inline tokens, dropping markup and raw HTML."""
    parts = []
    for token in tokens:
        if token["type"] == "inline_html":
            continue
        if "children" in token:
            parts.append(plain_text(token["children"]))
        elif "raw" in token:
            parts.append(token["raw"])
    return "".join(parts)


class DocsRenderer(mistune.HTMLRenderer):
    """HTML renderer with the documentation site's heading, code and link output.

    A renderer collects the outline of the one document it renders; create a
    new one per document.
    """

    def __init__(self, highlighter: HighlighterService):
        super().__init__(escape=False)
        self.highlighter = highlighter
        self.headings: list[HeadingEntry] = []

    def render_token(self, token, state):
        # Headings and links are rendered from their plain text
        if token["type"] in ("heading", "link"):
            func = self._get_method(token["type"])
            return func(plain_text(token.get("children", [])), **token["attrs"])
        return super().render_token(token, state)

    def heading(self, text: str, level: int, **attrs) -> str:
        slug = slugify(text)
        # Text runs keep entity references such as &amp;
        outline_text = html.unescape(text)
        if level in OUTLINE_LEVELS and outline_text.lower() != TOC_HEADING:
            self.headings.append(HeadingEntry(id=slug, text=outline_text, level=level))
        return f'<h{level} id="{slug}">{safe_entity(text)}</h{level}>\n'

    def block_code(self, code: str, info: str | None = None) -> str:
        # The line break before the closing fence is not part of the code
        if code.endswith("\n"):
            code = code[:-1]
        lang = info.strip().split(None, 1)[0] if info and info.strip() else ""
        language = normalize_language(lang)
        fragment = CodeFragment(
            language=language,
            filename=extract_filename(code, language),
            raw_code=code,
        )
        return self.render_code_fragment(fragment)

    def render_code_fragment(self, fragment: CodeFragment) -> str:
        try:
            highlighted = self.highlighter.code_to_html(fragment.raw_code, fragment.language)
        except HighlightError:
            # Unsupported language: this block only falls back to plain text
            highlighted = self.highlighter.code_to_html(fragment.raw_code, "text")

        return CODE_BLOCK_TEMPLATE.format(
            encoded=fragment.encoded_code,
            filename=escape(fragment.filename),
            highlighted=highlighted,
        )

    def link(self, text: str, url: str, title: str | None = None) -> str:
        title_attr = f' title="{safe_entity(title)}"' if title else ""
        if url.startswith("#"):
            return f'<a href="{url}" class="anchor-link"{title_attr}>{safe_entity(text)}</a>'
        return (
            f'<a href="{self.safe_url(url)}" target="_blank" rel="noopener noreferrer"'
            f"{title_attr}>{safe_entity(text)}</a>"
        )


def parse_markdown(content: str) -> ParsedMarkdown:
    """Render markdown to HTML and collect the level 2-3 heading outline.

    Code in an unsupported language is shown unhighlighted; a highlighter that
    cannot be initialised raises HighlighterInitError.
    """
    highlighter = HighlighterService.get_instance()
    renderer = DocsRenderer(highlighter)
    markdown = mistune.create_markdown(renderer=renderer, plugins=MARKDOWN_PLUGINS)
    rendered = markdown(content)
    return ParsedMarkdown(html=rendered, headings=renderer.headings)
