"""Address-based toggles on a hierarchy.

Trees are treated as immutable values: every operation returns a new root
and leaves the tree it was given untouched, so callers can detect changes
by comparing references.
"""

from __future__ import annotations

import copy
from typing import Sequence

from TreeArchitect.models import Node


class AddressNotFoundError(Exception):
    """Raised when an address does not resolve to a node in the tree."""

    def __init__(self, address: Sequence[str], segment: str) -> None:
        self.address = tuple(address)
        self.segment = segment
        super().__init__(
            f"No node at {'/'.join(self.address) or '<root>'!r} "
            f"(cannot resolve {segment!r})"
        )


def resolve(tree: Node, address: Sequence[str]) -> Node:
    """Walk *address* down from *tree*. An empty address is the tree itself."""
    node = tree
    for segment in address:
        # Files have no children, so descending into one fails here too
        child = node.children.get(segment) if node.is_folder else None
        if child is None:
            raise AddressNotFoundError(address, segment)
        node = child
    return node


def set_checked(tree: Node, address: Sequence[str], value: bool) -> Node:
    """Return a copy of *tree* with the addressed subtree (un)checked."""
    resolve(tree, address)
    new_tree = copy.deepcopy(tree)
    _check_recursive(resolve(new_tree, address), value)
    return new_tree


def _check_recursive(node: Node, value: bool) -> None:
    node.checked = value
    for child in node.children.values():
        _check_recursive(child, value)


def set_expanded(tree: Node, address: Sequence[str], value: bool) -> Node:
    """Return a copy of *tree* with one folder expanded or collapsed.

    Only the addressed node changes. Files cannot be expanded; for them the
    tree is returned as is.
    """
    if resolve(tree, address).is_file:
        return tree
    new_tree = copy.deepcopy(tree)
    resolve(new_tree, address).expanded = value
    return new_tree


def toggle_expanded(tree: Node, address: Sequence[str]) -> Node:
    return set_expanded(tree, address, not resolve(tree, address).expanded)
