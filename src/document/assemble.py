"""
Assemble the d3 tree page and send it to the console, a file, or a file plus an iframe snippet.
"""
from __future__ import annotations

import logging
import random
import string
import sys
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any, TextIO

from ..config import get_script_source
from ..templates import CLOSING_MARKER, compose_blocks, format_number
from ..tree import IOWriteError, check_tree, root_assignment
from .options import OutputMode, RenderConfig, check_iframe, resolve_output_mode

logger = logging.getLogger(__name__)

FILE_PREFIX = "NetworkGraph"
FILE_SUFFIX = ".html"
TOKEN_LENGTH = 5
TOKEN_ALPHABET = string.digits + string.ascii_letters


def random_token(length: int) -> str:
    return "".join(random.choices(TOKEN_ALPHABET, k=length))


def generated_file_name(token_source: Callable[[int], str] = random_token) -> str:
    """NetworkGraph<5 alphanumerics>.html, for iframe output when no file was named."""
    return f"{FILE_PREFIX}{token_source(TOKEN_LENGTH)}{FILE_SUFFIX}"


def iframe_snippet(path: Path | str, config: RenderConfig) -> str:
    return (
        f"<iframe src='{path}' height={format_number(config.frame_height)} "
        f"width={format_number(config.frame_width)}></iframe>"
    )


def build_document(tree: Mapping[str, Any], config: RenderConfig, *, stand_alone: bool) -> str:
    """
    Head (standalone only), stylesheet, script prefix, `var root = ...;`, script suffix,
    closing marker (standalone only); joined by single spaces.
    """
    blocks = compose_blocks(config)
    parts = [blocks.style_sheet, blocks.script_prefix, root_assignment(tree), blocks.script_suffix]
    if stand_alone:
        parts = [blocks.page_head, *parts, CLOSING_MARKER]
    return " ".join(parts)


def write_document(path: Path | str, text: str) -> Path:
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise IOWriteError(path, e.strerror or str(e)) from e
    return path


def d3_tree(
    tree: Mapping[str, Any],
    *,
    height: float = 600,
    width: float = 900,
    fontsize: float = 10,
    link_colour: str = "#ccc",
    node_colour: str = "#3182bd",
    text_colour: str = "#3182bd",
    opacity: float = 0.9,
    diameter: float = 980,
    zoom: bool = False,
    stand_alone: bool = True,
    file: Path | str | None = None,
    iframe: bool = False,
    script_source: str | None = None,
    out: TextIO | None = None,
    token_source: Callable[[int], str] = random_token,
) -> str:
    """
    Render a tree of {"name": ..., "children": [...]} as a radial Reingold-Tilford graph.

    With no file the page goes to `out` (stdout by default). With a file it is written
    there; with iframe=True an <iframe> pointing at the file is also printed to `out`,
    and a random NetworkGraphXXXXX.html name is used when no file is given.
    Everything is validated and rendered before anything is written.
    Returns the page text.
    """
    check_iframe(stand_alone, iframe)
    if file is None and iframe:
        file = generated_file_name(token_source)
        logger.info("No file given for iframe output, using %s", file)
    check_tree(tree)
    config = RenderConfig(
        height=height,
        width=width,
        fontsize=fontsize,
        link_colour=link_colour,
        node_colour=node_colour,
        text_colour=text_colour,
        opacity=opacity,
        diameter=diameter,
        zoom=zoom,
        script_source=script_source or get_script_source(),
    )
    mode = resolve_output_mode(file is not None, stand_alone, iframe)
    logger.debug("Output mode: %s", mode.value)

    document = build_document(tree, config, stand_alone=mode.stand_alone)
    out = out if out is not None else sys.stdout

    if not mode.writes_file:
        out.write(document)
        return document

    path = write_document(file, document)
    logger.info("Wrote %s (%d chars)", path, len(document))
    if mode is OutputMode.FILE_STANDALONE_WITH_IFRAME:
        out.write(iframe_snippet(file, config) + "\n")
    return document
