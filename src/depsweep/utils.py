"""Shared utility functions."""

from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path

from depsweep.errors import DeletionError

log = logging.getLogger(__name__)


def dir_info(path: Path | str) -> tuple[int, int]:
    """Calculate total size and file count of a directory tree.

    Walks with ``os.scandir`` and an explicit stack, never following
    symlinks. Entries that cannot be read contribute nothing, so the
    result is a lower bound rather than an error.

    Returns:
        (total_bytes, file_count) tuple.
    """
    total = 0
    count = 0
    stack: list[Path | str] = [path]
    while stack:
        current = stack.pop()
        try:
            with os.scandir(current) as it:
                for entry in it:
                    try:
                        if entry.is_file(follow_symlinks=False):
                            total += entry.stat(follow_symlinks=False).st_size
                            count += 1
                        elif entry.is_dir(follow_symlinks=False):
                            stack.append(entry.path)
                    except OSError:
                        log.debug("Cannot stat: %s", entry.path)
        except OSError:
            log.debug("Cannot read directory while sizing: %s", current)
    return total, count


def size_of(path: Path | str) -> int:
    """Calculate total size of a directory tree."""
    return dir_info(path)[0]


def remove_tree(path: Path) -> None:
    """Delete a directory tree, raising DeletionError on failure."""
    try:
        shutil.rmtree(path)
    except OSError as e:
        raise DeletionError(path, e) from e


def bytes_to_human(size_bytes: int) -> str:
    """Convert byte count to a human-readable string."""
    if size_bytes < 0:
        return f"-{bytes_to_human(-size_bytes)}"
    if size_bytes == 0:
        return "0 B"

    units = ("B", "KB", "MB", "GB", "TB")
    value = float(size_bytes)
    for unit in units[:-1]:
        if abs(value) < 1024:
            return f"{value:.1f} {unit}" if unit != "B" else f"{int(value)} B"
        value /= 1024
    return f"{value:.1f} {units[-1]}"


def format_elapsed(seconds: float) -> str:
    """Format an elapsed time as a human-readable string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f} ms"
    if seconds < 60:
        return f"{seconds:.1f}s"
    minutes = int(seconds) // 60
    secs = seconds - minutes * 60
    return f"{minutes}m {secs:.0f}s"
