#!/usr/bin/env python3
"""
Root entry: read a JSON tree -> render a d3 Reingold-Tilford page.
Prints to stdout unless --file (or --iframe) is given.
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

_ROOT = Path(__file__).resolve().parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from src.config import load_env, get_log_level
from src.document import d3_tree
from src.tree import D3TreeError

logger = logging.getLogger(__name__)


def _setup_logging() -> None:
    # stderr: stdout carries the page
    logging.basicConfig(
        level=getattr(logging, get_log_level(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def _load_tree(source: str):
    """JSON tree from a file path, or stdin for '-'."""
    if source == "-":
        return json.load(sys.stdin)
    return json.loads(Path(source).read_text(encoding="utf-8"))


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Render a hierarchical JSON tree as a D3 Reingold-Tilford tree page."
    )
    parser.add_argument("tree", metavar="TREE_JSON", help="JSON file with {name, children}; '-' for stdin")
    parser.add_argument("--height", type=float, default=600, help="Frame height in pixels (default 600)")
    parser.add_argument("--width", type=float, default=900, help="Frame width in pixels (default 900)")
    parser.add_argument("--fontsize", type=float, default=10, help="Label font size in pixels (default 10)")
    parser.add_argument("--link-colour", default="#ccc", help="Link line colour (default #ccc)")
    parser.add_argument("--node-colour", default="#3182bd", help="Node circle colour (default #3182bd)")
    parser.add_argument("--text-colour", default="#3182bd", help="Label colour (default #3182bd)")
    parser.add_argument("--opacity", type=float, default=0.9, help="Opacity of graph elements, (0, 1] (default 0.9)")
    parser.add_argument("--diameter", type=float, default=980, help="Tree diameter in pixels (default 980)")
    parser.add_argument("--zoom", action="store_true", help="Enable scroll-wheel zoom and drag to pan")
    parser.add_argument(
        "--fragment",
        action="store_true",
        help="Emit only style + script (no page head/footer) for embedding",
    )
    parser.add_argument("--file", default=None, help="Write the page to this file instead of stdout")
    parser.add_argument(
        "--iframe",
        action="store_true",
        help="Write the page to --file (random NetworkGraphXXXXX.html if omitted) and print an <iframe> for it",
    )
    parser.add_argument("--d3-script", default=None, help="URL of d3.js (default from D3TREE_SCRIPT_SOURCE or d3js.org v3)")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    load_env()
    _setup_logging()

    try:
        tree = _load_tree(args.tree)
    except (OSError, json.JSONDecodeError) as e:
        logger.error("Cannot read tree from %s: %s", args.tree, e)
        return 1

    try:
        d3_tree(
            tree,
            height=args.height,
            width=args.width,
            fontsize=args.fontsize,
            link_colour=args.link_colour,
            node_colour=args.node_colour,
            text_colour=args.text_colour,
            opacity=args.opacity,
            diameter=args.diameter,
            zoom=args.zoom,
            stand_alone=not args.fragment,
            file=args.file,
            iframe=args.iframe,
            script_source=args.d3_script,
        )
    except D3TreeError as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
