from __future__ import annotations

import json
from pathlib import Path

import pytest

from docsite.main import main


def _write(tmp_path: Path, name: str, text: str) -> Path:
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_render_prints_html(tmp_path: Path, capsys) -> None:
    path = _write(tmp_path, "page.md", "## Getting Started\n\n[x](https://example.com)\n")
    assert main(["render", str(path)]) == 0
    out = capsys.readouterr().out
    assert '<h2 id="getting-started">Getting Started</h2>' in out
    assert 'target="_blank"' in out


def test_render_json(tmp_path: Path, capsys) -> None:
    path = _write(tmp_path, "page.md", "## Table of Contents\n\n## Setup\n")
    assert main(["render", "--json", str(path)]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["headings"] == [{"id": "setup", "text": "Setup", "level": 2}]
    assert "<h2" in data["html"]


def test_render_missing_file(tmp_path: Path, capsys) -> None:
    assert main(["render", str(tmp_path / "nope.md")]) == 1
    assert "Cannot read" in capsys.readouterr().err


def test_outline(tmp_path: Path, capsys) -> None:
    path = _write(tmp_path, "page.md", "# Top\n\n## One\n\n### One A\n")
    assert main(["outline", str(path)]) == 0
    assert capsys.readouterr().out.splitlines() == ["- One (#one)", "  - One A (#one-a)"]


def test_docs_lists_sections(tmp_path: Path, capsys) -> None:
    assert main(["docs", "--content-dir", str(tmp_path)]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Getting Started\n")
    assert "18-review-checklist" in out


def test_search(tmp_path: Path, capsys) -> None:
    _write(tmp_path, "07-testing.md", "## Unit Tests\n\nMock the network.\n")
    assert main(["search", "network", "--content-dir", str(tmp_path)]) == 0
    out = capsys.readouterr().out
    assert "Testing [content, 1] /07-testing#unit-tests" in out
    assert "Mock the network." in out


def test_search_no_results(tmp_path: Path, capsys) -> None:
    assert main(["search", "zebra", "--content-dir", str(tmp_path)]) == 1
    assert "No results" in capsys.readouterr().err


def test_command_is_required() -> None:
    with pytest.raises(SystemExit):
        main([])


def test_render_catalog_doc_by_slug(tmp_path: Path, capsys) -> None:
    _write(tmp_path, "05-code-style.md", "## Naming\n")
    assert main(["render", "--slug", "05-code-style", "--content-dir", str(tmp_path), "--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["headings"] == [{"id": "naming", "text": "Naming", "level": 2}]
    assert data["prev"] == "04-error-handling"
    assert data["next"] == "06-performance"


def test_render_unknown_slug(tmp_path: Path, capsys) -> None:
    assert main(["render", "--slug", "99-nope", "--content-dir", str(tmp_path)]) == 1
    assert "Unknown doc: 99-nope" in capsys.readouterr().err


def test_render_slug_without_content(tmp_path: Path, capsys) -> None:
    assert main(["render", "--slug", "01-introduction", "--content-dir", str(tmp_path)]) == 1
    assert "No content for doc: 01-introduction" in capsys.readouterr().err


def test_render_needs_file_or_slug() -> None:
    with pytest.raises(SystemExit):
        main(["render"])
