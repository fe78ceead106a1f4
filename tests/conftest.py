from __future__ import annotations

from pathlib import Path

import pytest

from docsite.services.highlighter import HighlighterService
from docsite.services.settings_service import SettingsService


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path: Path) -> Path:
    config_dir = tmp_path / "config"
    monkeypatch.setenv("DOCSITE_CONFIG_DIR", str(config_dir))
    SettingsService.reset_instance()
    HighlighterService.reset_instance()
    yield config_dir
    SettingsService.reset_instance()
    HighlighterService.reset_instance()


class RecordingHighlighter:
    """Stands in for HighlighterService and records what it was asked to do."""

    def __init__(self, supported=("typescript", "text")) -> None:
        self.supported = set(supported)
        self.calls: list[tuple[str, str]] = []

    def code_to_html(self, code: str, language: str) -> str:
        from docsite.services.highlighter import UnsupportedLanguageError

        self.calls.append((code, language))
        if language not in self.supported:
            raise UnsupportedLanguageError(language)
        return f'<pre class="fake" data-lang="{language}"><code>highlighted</code></pre>'


@pytest.fixture
def recording_highlighter(monkeypatch) -> RecordingHighlighter:
    fake = RecordingHighlighter()
    monkeypatch.setattr(HighlighterService, "_instance", fake)
    return fake
