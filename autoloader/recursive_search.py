"""Search strategy that walks registered root directories recursively."""

import os

from autoloader.find_file_in_directory import find_file_in_directory
from autoloader.strict_name import (
    DEFAULT_EXTENSION,
    DEFAULT_NAMESPACE_SEPARATOR,
    class_file_name,
)


class RecursiveDirectorySearch:
    """Locates class files anywhere below a set of root directories."""

    def __init__(
        self,
        extension: str = DEFAULT_EXTENSION,
        separator: str = DEFAULT_NAMESPACE_SEPARATOR,
    ) -> None:
        """Initialize the search with no roots registered."""
        self.extension = extension
        self.separator = separator
        self.roots: list[str] = []

    def register_root(self, path: str) -> None:
        """Register a root directory; it is only checked at lookup time."""
        self.roots.append(path)

    def resolve(self, symbolic_name: str) -> str | None:
        """Return the first matching file path, searching roots in order."""
        file_name = class_file_name(symbolic_name, self.extension, self.separator)
        for root in tuple(self.roots):
            found = find_file_in_directory(file_name, root)
            # A dangling symlink with the right name does not count.
            if found is not None and os.path.isfile(found):
                return found
        return None
