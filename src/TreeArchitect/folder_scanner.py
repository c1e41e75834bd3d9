"""List the files of a local folder as folder-prefixed relative paths."""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path

from TreeArchitect.path_filter import matches_any_pattern

logger = logging.getLogger(__name__)


class FolderScanError(Exception):
    """Raised when a folder cannot be scanned."""


def scan_folder(
    folder: str | Path,
    exclude: list[re.Pattern[str]] | None = None,
) -> list[str]:
    """Return ``/``-separated paths of all files below *folder*.

    Each path starts with the folder's own name, e.g. ``proj/src/main.py``
    for ``/home/me/proj``. Paths matching any *exclude* pattern (tested
    against the part after the folder name) are left out. Empty folders
    produce no entry.
    """
    root = Path(folder).expanduser()
    if not root.exists():
        raise FolderScanError(f"Folder not found: {root}")
    if not root.is_dir():
        raise FolderScanError(f"Not a folder: {root}")

    root = root.resolve()
    top = root.name or "root"  # filesystem root has no name
    paths: list[str] = []
    skipped = 0

    for dirpath, dirnames, filenames in os.walk(root, onerror=_log_walk_error):
        dirnames.sort()
        rel_dir = Path(dirpath).relative_to(root).as_posix()
        for filename in sorted(filenames):
            rel = filename if rel_dir == "." else f"{rel_dir}/{filename}"
            if exclude and matches_any_pattern(rel, exclude):
                skipped += 1
                continue
            paths.append(f"{top}/{rel}")

    logger.info("Scanned %s: %d files, %d excluded", root, len(paths), skipped)
    return paths


def _log_walk_error(exc: OSError) -> None:
    logger.warning("Cannot read %s: %s", exc.filename, exc.strerror)
