"""docsite command line: render, outline, list and search documentation pages."""

import argparse
import json
import sys
from pathlib import Path

from .services import DocsService, parse_markdown, search
from .version import __version__


def _read_markdown(file_arg: str) -> str | None:
    path = Path(file_arg).expanduser()
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: Cannot read {file_arg}: {e}", file=sys.stderr)
        return None


def cmd_render(args) -> int:
    """Print a file or catalog doc rendered to HTML, or HTML and outline as JSON.

    For a catalog doc the JSON also names the previous and next docs.
    """
    data = {}
    if args.slug:
        docs = DocsService(args.content_dir)
        if docs.get_doc(args.slug) is None:
            print(f"Error: Unknown doc: {args.slug}", file=sys.stderr)
            return 1
        parsed = docs.render_doc(args.slug)
        if parsed is None:
            print(f"Error: No content for doc: {args.slug}", file=sys.stderr)
            return 1
        prev_doc, next_doc = docs.get_adjacent_docs(args.slug)
        data["prev"] = prev_doc.id if prev_doc else None
        data["next"] = next_doc.id if next_doc else None
    else:
        content = _read_markdown(args.file)
        if content is None:
            return 1
        parsed = parse_markdown(content)

    if args.json:
        data.update(parsed.to_dict())
        print(json.dumps(data, indent=2))
    else:
        print(parsed.html)
    return 0


def cmd_outline(args) -> int:
    """Print the table of contents of a file."""
    content = _read_markdown(args.file)
    if content is None:
        return 1

    for heading in parse_markdown(content).headings:
        indent = "  " * (heading.level - 2)
        print(f"{indent}- {heading.text} (#{heading.id})")
    return 0


def cmd_docs(args) -> int:
    """List the catalog by section."""
    docs = DocsService(args.content_dir)
    for section in docs.get_sections():
        print(section.name)
        for doc in section.docs:
            print(f"  {doc.id:<30} {doc.title}")
    return 0


def cmd_search(args) -> int:
    """Search all readable docs."""
    docs = DocsService(args.content_dir)
    results = search(docs.load_all(), args.query)
    if not results:
        print(f"No results for {args.query!r}", file=sys.stderr)
        return 1

    for result in results:
        print(f"{result.doc.title} [{result.match_type}, {result.match_count}] {result.href}")
        if result.snippet:
            print(f"    {' '.join(result.snippet.split())}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="docsite", description="Documentation site renderer")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    render = subparsers.add_parser("render", help="Render a markdown file or catalog doc to HTML")
    source = render.add_mutually_exclusive_group(required=True)
    source.add_argument("file", nargs="?", help="Markdown file")
    source.add_argument("--slug", help="Catalog doc to render, e.g. 01-introduction")
    render.add_argument("--content-dir", help="Directory of <slug>.md files")
    render.add_argument("--json", action="store_true", help="Print HTML and headings as JSON")
    render.set_defaults(func=cmd_render)

    outline = subparsers.add_parser("outline", help="Print the table of contents of a file")
    outline.add_argument("file", help="Markdown file")
    outline.set_defaults(func=cmd_outline)

    docs = subparsers.add_parser("docs", help="List documentation pages")
    docs.add_argument("--content-dir", help="Directory of <slug>.md files")
    docs.set_defaults(func=cmd_docs)

    search_cmd = subparsers.add_parser("search", help="Search documentation pages")
    search_cmd.add_argument("query", help="Text to look for")
    search_cmd.add_argument("--content-dir", help="Directory of <slug>.md files")
    search_cmd.set_defaults(func=cmd_search)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Application entry point."""
    args = build_parser().parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
