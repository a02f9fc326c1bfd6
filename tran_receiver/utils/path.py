"""
Utilities for presenting received file paths.
"""

import re

_SEPARATORS = re.compile(r"[\\/]+")


def _split_path(path: str) -> list[str]:
    return [part for part in _SEPARATORS.split(path) if part and part != "."]


def top_level_files(file_names: list[str]) -> list[tuple[str, int]]:
    """
    Collapses received paths to their first path segment.

    Returns ``(name, nested_count)`` pairs, deduplicated and in first-seen order.
    ``nested_count`` is the number of received entries that live below ``name``;
    it is zero for plain top-level files.
    """
    children: dict[str, int] = {}
    for file_name in file_names:
        parts = _split_path(file_name)
        if not parts:
            continue
        top = parts[0]
        children.setdefault(top, 0)
        if len(parts) > 1:
            children[top] += 1
    return list(children.items())


def top_level_files_text(file_names: list[str]) -> str:
    """Formats the top-level view of ``file_names`` as a comma separated line."""
    entries = []
    for name, nested in top_level_files(file_names):
        if nested:
            noun = "file" if nested == 1 else "files"
            entries.append(f"{name} ({nested} {noun})")
        else:
            entries.append(name)
    return ", ".join(entries)
