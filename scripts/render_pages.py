from __future__ import annotations

import argparse
import json
from pathlib import Path

from dotenv import load_dotenv

from src.ingest.loader import load_pages
from src.models.page import PageRecord
from src.page_tree import PageList
from src.server.settings import get_settings


def parse_args() -> argparse.Namespace:
    if Path(".env").exists():
        load_dotenv(".env", override=False)
    parser = argparse.ArgumentParser(description="Print a page export as an indented hierarchy.")
    parser.add_argument("pages", type=Path, help="Pages file (.json, .yaml, .yml or .toml)")
    parser.add_argument(
        "--indent",
        type=int,
        default=None,
        help="Spaces per hierarchy index (default: the configured PAGE_INDENT_WIDTH)",
    )
    parser.add_argument(
        "--remove",
        type=int,
        default=None,
        help="Position in the sorted list whose subtree should be dropped before printing.",
    )
    parser.add_argument("--json", action="store_true", help="Emit JSON instead of an outline.")
    args = parser.parse_args()
    if args.indent is None:
        args.indent = get_settings().indent_width
    elif args.indent < 0:
        parser.error("--indent must be zero or greater")
    return args


def render_outline(pages: PageList[PageRecord], indent: int) -> str:
    lines = []
    for page in pages:
        label = page.title or f"#{page.id}"
        lines.append(f"{' ' * (indent * page.hierarchy_index)}{label}")
    return "\n".join(lines)


def main() -> None:
    args = parse_args()

    pages = PageList(load_pages(args.pages)).sort().hierarchy_indexes()
    if args.remove is not None:
        pages = pages.remove(args.remove).hierarchy_indexes()

    if args.json:
        payload = [
            {
                "id": page.id,
                "parent_id": page.parent_id,
                "visible_root": page.visible_root,
                "hierarchy_index": page.hierarchy_index,
                "title": page.title,
            }
            for page in pages
        ]
        print(json.dumps(payload, indent=2))
        return

    print(render_outline(pages, args.indent))


if __name__ == "__main__":
    main()
