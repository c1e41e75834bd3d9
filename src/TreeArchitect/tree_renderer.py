"""Text and SVG output for the checked part of a hierarchy."""

from __future__ import annotations

from xml.sax.saxutils import escape

from TreeArchitect.models import ExportPayload, Node

# SVG metrics (pixels)
LINE_HEIGHT = 20
CHAR_WIDTH = 8
MARGIN = 20
FONT_SIZE = 14


def render_lines(tree: Node | None) -> list[str]:
    """Render the checked part of *tree* as connector-style lines.

    Example output:
        proj
        ├── src
        │   └── main.ts
        └── readme.md

    The first line is the bare root name. Unchecked nodes are dropped
    together with everything below them.
    """
    if tree is None:
        return []

    lines = [tree.name]
    if tree.checked:
        _render_children(tree, lines, prefix="")
    return lines


def sort_key(node: Node) -> tuple[bool, str, str]:
    # Folders first, then by name ignoring case; ties broken by exact name
    return (node.is_file, node.name.casefold(), node.name)


def _render_children(node: Node, lines: list[str], prefix: str) -> None:
    """Recursively render the checked children of *node* into lines."""
    entries = sorted(
        (child for child in node.children.values() if child.checked),
        key=sort_key,
    )
    for i, child in enumerate(entries):
        is_last = i == len(entries) - 1
        connector = "└── " if is_last else "├── "
        lines.append(f"{prefix}{connector}{child.name}")

        if child.is_folder:
            extension = "    " if is_last else "│   "
            _render_children(child, lines, prefix + extension)


def render_text(tree: Node | None) -> str:
    return "\n".join(render_lines(tree))


def render_svg(tree: Node | None) -> str:
    """Render the text listing as a standalone SVG document.

    Each line of :func:`render_lines` becomes one ``<tspan>`` row, in
    order. The canvas is sized from those lines only, so unchecked entries
    never widen it.
    """
    lines = render_lines(tree)
    width = max((len(line) for line in lines), default=0) * CHAR_WIDTH + MARGIN
    height = len(lines) * LINE_HEIGHT + MARGIN

    rows = "".join(
        f'<tspan x="10" dy="{0 if i == 0 else LINE_HEIGHT}">{escape(line)}</tspan>'
        for i, line in enumerate(lines)
    )
    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{width}" height="{height}" '
        f'style="background-color: white; font-family: monospace;">'
        f'<rect width="100%" height="100%" fill="white"/>'
        f'<text x="10" y="20" font-family="monospace" font-size="{FONT_SIZE}" '
        f'fill="black" xml:space="preserve">{rows}</text>'
        f"</svg>\n"
    )


def text_export(tree: Node | None) -> ExportPayload | None:
    """Build the ``.txt`` download for *tree*, or None without a tree."""
    if tree is None:
        return None
    return ExportPayload(
        data=(render_text(tree) + "\n").encode("utf-8"),
        file_name=f"{tree.name}_structure.txt",
        mime="text/plain",
    )


def svg_export(tree: Node | None) -> ExportPayload | None:
    """Build the ``.svg`` download for *tree*, or None without a tree."""
    if tree is None:
        return None
    return ExportPayload(
        data=render_svg(tree).encode("utf-8"),
        file_name=f"{tree.name}_structure.svg",
        mime="image/svg+xml",
    )


def count_entries(tree: Node | None) -> tuple[int, int]:
    """Count (folders, files) that would appear below the root line."""
    if tree is None or not tree.checked:
        return 0, 0
    folders = files = 0
    for child in tree.children.values():
        if not child.checked:
            continue
        if child.is_folder:
            sub_folders, sub_files = count_entries(child)
            folders += 1 + sub_folders
            files += sub_files
        else:
            files += 1
    return folders, files
