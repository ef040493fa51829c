"""Search strategy that maps namespaces directly onto directory paths."""

from dataclasses import dataclass
from pathlib import Path

from autoloader.strict_name import DEFAULT_EXTENSION, DEFAULT_NAMESPACE_SEPARATOR


@dataclass(frozen=True)
class NamespacePath:
    """A base directory serving one namespace prefix."""

    namespace: str
    path: str


class DirectorySearch:
    """Locates class files at the path implied by their namespace.

    With ``Vendor\\Lib`` registered at ``/src``, the class
    ``Vendor\\Lib\\Core\\Widget`` is expected at ``/src/Core/Widget.php``.
    No directories are walked.
    """

    def __init__(
        self,
        extension: str = DEFAULT_EXTENSION,
        separator: str = DEFAULT_NAMESPACE_SEPARATOR,
    ) -> None:
        """Initialize the search with no paths registered."""
        self.extension = extension
        self.separator = separator
        self.paths: list[NamespacePath] = []

    def register_path(self, path: str, namespace: str = "") -> None:
        """Register a base directory for a namespace prefix ('' = global)."""
        self.paths.append(NamespacePath(namespace.strip(self.separator), path))

    def resolve(self, symbolic_name: str) -> str | None:
        """Return the first existing candidate file, or None."""
        segments = self._segments(symbolic_name)
        if not segments:
            return None

        for entry in tuple(self.paths):
            prefix = self._segments(entry.namespace)
            if segments[: len(prefix)] != prefix or len(segments) == len(prefix):
                continue
            relative = segments[len(prefix) :]
            candidate = Path(entry.path, *relative[:-1], relative[-1] + self.extension)
            if candidate.is_file():
                return str(candidate)
        return None

    def _segments(self, name: str) -> list[str]:
        stripped = name.strip(self.separator)
        return stripped.split(self.separator) if stripped else []
