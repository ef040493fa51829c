"""Shared contract of the file search strategies."""

from typing import Protocol


class SearchStrategy(Protocol):
    """Anything that can turn a class name into a file path."""

    def resolve(self, symbolic_name: str) -> str | None:
        """Return the path of the file declaring the class, or None."""
        ...
