"""Logic for listing directory entries during a search."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def list_directory_items(directory: str | Path) -> list[str]:
    """Return the sorted entry names of a directory.

    Missing paths, plain files and unreadable directories yield no entries.
    """
    try:
        names = [entry.name for entry in Path(directory).iterdir()]
    except OSError as exc:
        logger.debug("Cannot list %s: %s", directory, exc)
        return []
    # Sorted so that the first match is reproducible across filesystems.
    return sorted(names)
