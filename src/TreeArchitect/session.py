"""State owned by the UI: the current hierarchy and its change counter."""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from TreeArchitect import tree_mutator
from TreeArchitect.models import ExportPayload, Node
from TreeArchitect.tree_builder import build_tree, extract_top_level
from TreeArchitect.tree_renderer import svg_export, text_export

logger = logging.getLogger(__name__)

DEFAULT_ROOT_NAME = "Project"


class TreeSession:
    """Holds the working tree between UI reruns.

    The tree is replaced, never edited, by each operation; ``version`` goes
    up on every change so widgets can be keyed on it.
    """

    def __init__(self) -> None:
        self.tree: Node | None = None
        self.root_name = DEFAULT_ROOT_NAME
        self.version = 0

    @property
    def has_tree(self) -> bool:
        return self.tree is not None

    def load(self, paths: Iterable[str]) -> bool:
        """Rebuild the tree from *paths*. Returns False if nothing was found."""
        tree = extract_top_level(build_tree(paths))
        self._replace(tree)
        if tree is None:
            logger.info("No entries to build a tree from")
            return False
        self.root_name = tree.name
        logger.info("Loaded tree for %s", tree.name)
        return True

    def reset(self) -> None:
        self._replace(None)

    def set_checked(self, address: Sequence[str], value: bool) -> None:
        self._replace(tree_mutator.set_checked(self._require_tree(), address, value))

    def toggle_expanded(self, address: Sequence[str]) -> None:
        self._replace(tree_mutator.toggle_expanded(self._require_tree(), address))

    def text_export(self) -> ExportPayload | None:
        return text_export(self.tree)

    def svg_export(self) -> ExportPayload | None:
        return svg_export(self.tree)

    def _require_tree(self) -> Node:
        if self.tree is None:
            raise tree_mutator.AddressNotFoundError((), "<no tree loaded>")
        return self.tree

    def _replace(self, tree: Node | None) -> None:
        self.tree = tree
        self.version += 1
