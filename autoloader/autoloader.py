"""Dispatch chain asking each registered search strategy in turn."""

import logging

from autoloader.search_strategy import SearchStrategy

logger = logging.getLogger(__name__)


class Autoloader:
    """Resolves class names by falling through a list of strategies."""

    def __init__(self) -> None:
        """Initialize an autoloader with no strategies."""
        self.strategies: list[SearchStrategy] = []

    def register_strategy(self, strategy: SearchStrategy) -> None:
        """Append a strategy; earlier registrations are asked first."""
        self.strategies.append(strategy)

    def resolve(self, symbolic_name: str) -> str | None:
        """Return the path from the first strategy that knows the class."""
        for strategy in tuple(self.strategies):
            path = strategy.resolve(symbolic_name)
            if path is not None:
                logger.debug(
                    "Resolved %s via %s: %s",
                    symbolic_name,
                    type(strategy).__name__,
                    path,
                )
                return path
        return None
