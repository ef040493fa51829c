"""Depth-first search for a file name below a directory."""

import logging
import os
from collections.abc import Iterator
from pathlib import Path

from autoloader.list_directory_items import list_directory_items

logger = logging.getLogger(__name__)


def _entries(directory: str) -> Iterator[str]:
    return (os.path.join(directory, name) for name in list_directory_items(directory))


def find_file_in_directory(file_name: str, directory: str | Path) -> str | None:
    """Find the first file called ``file_name`` anywhere below ``directory``.

    Entries are visited in sorted order and subdirectories are descended into
    before their later siblings are examined, so the result is the first hit of
    a depth-first walk. Symlinked directories are followed, but a directory
    whose real path was already visited is skipped.

    Returned paths start with ``directory`` exactly as given; nothing is
    normalized.
    """
    root = os.fspath(directory)
    visited = {os.path.realpath(root)}
    stack = [_entries(root)]

    while stack:
        item_path = next(stack[-1], None)
        if item_path is None:
            stack.pop()
            continue

        if os.path.isdir(item_path):
            real_path = os.path.realpath(item_path)
            if real_path in visited:
                logger.debug("Skipping already visited directory %s", item_path)
                continue
            visited.add(real_path)
            stack.append(_entries(item_path))
        elif os.path.basename(item_path) == file_name:
            return item_path

    return None
