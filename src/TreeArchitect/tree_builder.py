"""Build a folder/file hierarchy from a list of relative paths."""

from __future__ import annotations

import logging
from typing import Iterable

from TreeArchitect.models import Node, NodeKind

logger = logging.getLogger(__name__)

ROOT_NAME = "root"


def build_tree(paths: Iterable[str]) -> Node:
    """Build a hierarchy from ``/``-separated relative paths.

    Every segment but the last is a folder, the last one is a file. Existing
    folders are reused, so paths sharing a prefix end up under the same
    node. The returned node is a synthetic ``"root"`` folder whose single
    child is normally the folder the user picked.

    Example:
        >>> root = build_tree(["proj/src/main.ts", "proj/readme.md"])
        >>> list(root.children)
        ['proj']
    """
    root = Node(name=ROOT_NAME, kind=NodeKind.FOLDER)

    for path in paths:
        # Empty segments come from leading, trailing or doubled slashes
        parts = [part for part in path.split("/") if part]
        if not parts:
            logger.debug("Skipping empty path %r", path)
            continue
        _insert(root, parts, path)

    return root


def _insert(root: Node, parts: list[str], path: str) -> None:
    node = root
    for part in parts[:-1]:
        child = node.children.get(part)
        if child is None:
            child = Node(name=part, kind=NodeKind.FOLDER)
            node.children[part] = child
        elif child.is_file:
            logger.warning("Skipping %r: %r is already a file", path, part)
            return
        node = child

    leaf = parts[-1]
    if leaf not in node.children:
        node.children[leaf] = Node(name=leaf, kind=NodeKind.FILE)


def extract_top_level(root: Node) -> Node | None:
    """Return the folder the user picked, or None if nothing was built."""
    if not root.children:
        return None
    if len(root.children) > 1:
        logger.warning(
            "Expected one top-level entry, found %d; using the first",
            len(root.children),
        )
    return next(iter(root.children.values()))
