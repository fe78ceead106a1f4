"""Shared syntax highlighter for fenced code blocks, backed by Pygments.

One HighlighterService exists per process. It is built on first use with a
fixed theme and a closed set of languages, and every grammar is resolved up
front so a broken installation fails at initialisation rather than halfway
through a page.
"""

import threading

from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexer import Lexer
from pygments.lexers import get_lexer_by_name
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

from .settings_service import SettingsService

DEFAULT_THEME = "github-dark"

# Supported language -> Pygments lexer alias
LANGUAGE_LEXERS = {
    "typescript": "typescript",
    "javascript": "javascript",
    "tsx": "typescript",
    "jsx": "javascript",
    "json": "json",
    "bash": "bash",
    "shell": "bash",
    "yaml": "yaml",
    "markdown": "markdown",
    "css": "css",
    "html": "html",
    "sql": "sql",
    "graphql": "graphql",
    "python": "python",
    "text": "text",
}


class HighlightError(Exception):
    """Base class for highlighter failures."""


class UnsupportedLanguageError(HighlightError):
    """The language is not in the highlighter's language set."""

    def __init__(self, language: str):
        super().__init__(f"Unsupported language: {language!r}")
        self.language = language


class HighlighterInitError(HighlightError):
    """The highlighter could not be constructed."""


class HighlighterService:
    """Process-wide syntax highlighter.

    Usage:
        highlighter = HighlighterService.get_instance()
        html = highlighter.code_to_html("print('hi')", "python")

    get_instance() is safe to call from several threads at once: the first
    caller builds the instance while the others wait on the lock, and all of
    them get the same object. If construction fails nothing is cached and the
    error reaches every caller that triggered it.
    """

    _instance: "HighlighterService | None" = None
    _lock = threading.Lock()

    def __init__(self, theme: str = DEFAULT_THEME, languages: dict[str, str] | None = None):
        self._theme = theme
        self._lexers = self._load_lexers(languages or LANGUAGE_LEXERS)

        try:
            style = get_style_by_name(theme)
        except ClassNotFound as e:
            raise HighlighterInitError(f"Unknown highlight theme: {theme!r}") from e

        self._formatter = HtmlFormatter(
            style=style,
            noclasses=True,
            wrapcode=True,
            cssclass=f"highlight {theme}",
        )

    @classmethod
    def get_instance(cls) -> "HighlighterService":
        """Get the shared instance, creating it on first use."""
        instance = cls._instance
        if instance is None:
            with cls._lock:
                if cls._instance is None:
                    theme = SettingsService.get_instance().get("highlighter.theme", DEFAULT_THEME)
                    cls._instance = cls(theme=theme)
                instance = cls._instance
        return instance

    @classmethod
    def reset_instance(cls) -> None:
        """Drop the shared instance (used by tests)."""
        with cls._lock:
            cls._instance = None

    @staticmethod
    def _load_lexers(languages: dict[str, str]) -> dict[str, Lexer]:
        lexers = {}
        for language, alias in languages.items():
            try:
                lexers[language] = get_lexer_by_name(alias)
            except ClassNotFound as e:
                raise HighlighterInitError(
                    f"No grammar for {language!r} (lexer {alias!r})"
                ) from e
        return lexers

    @property
    def theme(self) -> str:
        return self._theme

    @property
    def supported_languages(self) -> list[str]:
        return sorted(self._lexers)

    def supports(self, language: str) -> bool:
        return language in self._lexers

    def code_to_html(self, code: str, language: str) -> str:
        """Highlight code as HTML with inline theme colours.

        Raises:
            UnsupportedLanguageError: language is outside the supported set.
        """
        lexer = self._lexers.get(language)
        if lexer is None:
            raise UnsupportedLanguageError(language)
        return highlight(code, lexer, self._formatter)
