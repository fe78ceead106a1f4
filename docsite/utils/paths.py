"""Path helpers mapping doc slugs to content files."""

from pathlib import Path

CONTENT_EXTENSION = ".md"


def doc_path_for_slug(content_dir: str | Path, slug: str) -> Path | None:
    """Get the markdown file for a slug.

    Returns None for slugs that would escape the content directory
    (path separators, "..", empty).
    """
    if not slug or slug in (".", "..") or "/" in slug or "\\" in slug:
        return None
    return Path(content_dir) / f"{slug}{CONTENT_EXTENSION}"


def slug_for_path(file_path: str | Path) -> str:
    """Get the slug of a content file.

    Example: public/content/01-introduction.md -> 01-introduction
    """
    return Path(file_path).stem
