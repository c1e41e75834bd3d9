"""Data classes for TreeArchitect."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class NodeKind(Enum):
    FILE = "file"
    FOLDER = "folder"


@dataclass
class Node:
    name: str
    kind: NodeKind
    children: dict[str, Node] = field(default_factory=dict)  # folders only
    checked: bool = True
    expanded: bool = True  # ignored for files

    @property
    def is_folder(self) -> bool:
        return self.kind is NodeKind.FOLDER

    @property
    def is_file(self) -> bool:
        return self.kind is NodeKind.FILE


@dataclass
class ExportPayload:
    data: bytes
    file_name: str
    mime: str
