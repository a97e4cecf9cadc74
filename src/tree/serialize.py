"""
Tree -> JSON text embedded in the page as `var root = ... ;`.
"""
from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any, TypedDict

from .errors import InvalidInputKind

logger = logging.getLogger(__name__)


class TreeNode(TypedDict, total=False):
    name: str
    children: list["TreeNode"]


def _plain(value: Any) -> Any:
    """Mappings -> dict and tuples -> list, recursively; key and child order kept."""
    if isinstance(value, Mapping):
        return {k: _plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    return value


def check_tree(tree: Any) -> None:
    """Raise InvalidInputKind unless the root is a mapping."""
    if not isinstance(tree, Mapping):
        raise InvalidInputKind(
            f"Tree root must be a mapping with 'name' and 'children', got {type(tree).__name__}"
        )


def serialize_tree(tree: TreeNode | Mapping[str, Any]) -> str:
    """
    JSON text for the tree. Child order and key order are kept as given, so the same
    tree always gives the same bytes. `</` is escaped so a name cannot close the script tag.
    """
    check_tree(tree)
    text = json.dumps(_plain(tree), ensure_ascii=False)
    return text.replace("</", "<\\/")


def root_assignment(tree: TreeNode | Mapping[str, Any]) -> str:
    """The script statement that hands the tree to the render code."""
    text = serialize_tree(tree)
    logger.debug("Serialized tree: %d chars", len(text))
    return f"var root = {text} ; \n"
