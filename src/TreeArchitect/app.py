"""Streamlit UI for TreeArchitect."""

from __future__ import annotations

from typing import Sequence

import streamlit as st

from TreeArchitect.folder_scanner import FolderScanError, scan_folder
from TreeArchitect.models import Node
from TreeArchitect.path_filter import (
    DEFAULT_EXCLUDE,
    compile_patterns,
    parse_pattern_input,
    validate_patterns,
)
from TreeArchitect.session import TreeSession
from TreeArchitect.tree_mutator import AddressNotFoundError
from TreeArchitect.tree_renderer import count_entries, render_text, sort_key

_PREVIEW_MAX_LINES = 1000
_INDENT_WIDTH = 0.04


def _qp(key: str, default: str = "") -> str:
    """Read a query parameter, returning *default* if absent."""
    params = st.query_params
    return params.get(key, default)


def _session() -> TreeSession:
    if "tree_session" not in st.session_state:
        st.session_state["tree_session"] = TreeSession()
    return st.session_state["tree_session"]


def main() -> None:
    st.set_page_config(
        page_title="Folder Tree Architect",
        page_icon="🌳",
        layout="centered",
    )

    # Hide Streamlit's default toolbar (Deploy, Stop, etc.)
    st.markdown(
        "<style>[data-testid='stToolbar'] { display: none; }</style>",
        unsafe_allow_html=True,
    )

    st.title("Folder Tree Architect")
    st.caption("Select a folder, customize visibility, and export.")

    session = _session()

    if session.has_tree:
        _show_tree(session)
    else:
        _show_picker(session)


def _show_picker(session: TreeSession) -> None:
    folder = st.text_input(
        "Folder",
        value=_qp("folder"),
        placeholder="/path/to/project",
    )

    exclude_raw = st.text_input(
        "Skip paths (regex, comma-separated)",
        value=_qp("exclude", DEFAULT_EXCLUDE),
        help=(
            "Files whose path inside the folder matches any pattern are left out. "
            "Separate multiple patterns with commas. Leave empty to include everything."
        ),
    )

    exclude_patterns = parse_pattern_input(exclude_raw)
    exclude_errors = validate_patterns(exclude_patterns) if exclude_patterns else []
    for err in exclude_errors:
        st.error(f"Invalid regex: {err}")

    load_clicked = st.button(
        "Load folder",
        type="primary",
        use_container_width=True,
        disabled=bool(exclude_errors),
    )

    if load_clicked and folder.strip():
        _load_folder(session, folder.strip(), exclude_patterns)
    elif load_clicked:
        st.error("Please enter a folder path.")


def _load_folder(session: TreeSession, folder: str, exclude_patterns: list[str]) -> None:
    try:
        with st.spinner("Reading folder..."):
            paths = scan_folder(folder, compile_patterns(exclude_patterns))
    except FolderScanError as exc:
        st.error(str(exc))
        return

    if not session.load(paths):
        st.warning("No files found in the folder.")
        return

    st.rerun()


def _show_tree(session: TreeSession) -> None:
    top_left, top_right = st.columns([3, 2])
    with top_left:
        st.button("← Choose Different Folder", on_click=session.reset)

    text_payload = session.text_export()
    svg_payload = session.svg_export()
    with top_right:
        text_col, svg_col = st.columns(2)
        with text_col:
            st.download_button(
                label="Text",
                data=text_payload.data,
                file_name=text_payload.file_name,
                mime=text_payload.mime,
                use_container_width=True,
            )
        with svg_col:
            st.download_button(
                label="SVG",
                data=svg_payload.data,
                file_name=svg_payload.file_name,
                mime=svg_payload.mime,
                use_container_width=True,
            )

    folders, files = count_entries(session.tree)
    st.info(f"Exporting {folders} folders and {files} files.")

    st.subheader(session.root_name)
    _render_node(session, session.tree, ())

    _show_preview(render_text(session.tree))


def _render_node(session: TreeSession, node: Node, address: Sequence[str]) -> None:
    """Render one row of the checkbox tree and, if open, its children."""
    depth = len(address)
    # Keys include the version so every widget picks up the new tree state
    key = f"{session.version}:{'/'.join(address)}"

    _indent, toggle_col, check_col = st.columns([_INDENT_WIDTH * depth + 0.001, 0.06, 1])
    with toggle_col:
        if node.is_folder:
            st.button(
                "▾" if node.expanded else "▸",
                key=f"open:{key}",
                on_click=_toggle_expanded,
                args=(session, tuple(address)),
            )
    with check_col:
        icon = ("📂" if node.expanded else "📁") if node.is_folder else "📄"
        st.checkbox(
            f"{icon} {node.name}",
            value=node.checked,
            key=f"check:{key}",
            on_change=_set_checked,
            args=(session, tuple(address), f"check:{key}"),
        )

    if node.is_folder and node.expanded:
        for child in sorted(node.children.values(), key=sort_key):
            _render_node(session, child, (*address, child.name))


def _set_checked(session: TreeSession, address: tuple[str, ...], widget_key: str) -> None:
    try:
        session.set_checked(address, bool(st.session_state[widget_key]))
    except AddressNotFoundError as exc:
        st.error(f"Tree changed underneath the selection: {exc}")


def _toggle_expanded(session: TreeSession, address: tuple[str, ...]) -> None:
    try:
        session.toggle_expanded(address)
    except AddressNotFoundError as exc:
        st.error(f"Tree changed underneath the selection: {exc}")


def _show_preview(text: str) -> None:
    preview_lines = text.split("\n")
    with st.expander("Preview", expanded=True):
        if len(preview_lines) > _PREVIEW_MAX_LINES:
            st.code("\n".join(preview_lines[:_PREVIEW_MAX_LINES]), language="text")
            st.caption(
                f"Preview is truncated to {_PREVIEW_MAX_LINES:,} lines "
                f"(total {len(preview_lines):,} lines). "
                "Download the file for the full content."
            )
        else:
            st.code(text, language="text")


if __name__ == "__main__":
    main()
