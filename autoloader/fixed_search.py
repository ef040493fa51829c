"""Search strategy backed by explicit class-to-file registrations."""

from pathlib import Path

from autoloader.strict_name import DEFAULT_NAMESPACE_SEPARATOR


class FixedSearch:
    """Resolves classes whose file paths were registered one by one."""

    def __init__(self, separator: str = DEFAULT_NAMESPACE_SEPARATOR) -> None:
        """Initialize the search with an empty class map."""
        self.separator = separator
        self.class_paths: dict[str, str] = {}

    def register_class_path(self, symbolic_name: str, path: str) -> None:
        """Bind a fully qualified class name to a file path."""
        self.class_paths[symbolic_name.lstrip(self.separator)] = path

    def resolve(self, symbolic_name: str) -> str | None:
        """Return the registered path if it points at an existing file."""
        path = self.class_paths.get(symbolic_name.lstrip(self.separator))
        if path is None or not Path(path).is_file():
            return None
        return path
