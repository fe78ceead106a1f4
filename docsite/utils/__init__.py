from .paths import doc_path_for_slug, slug_for_path

__all__ = [
    "doc_path_for_slug",
    "slug_for_path",
]
