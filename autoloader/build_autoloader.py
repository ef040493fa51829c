"""Construct an autoloader and its strategies from configuration."""

from typing import Any

from autoloader.autoloader import Autoloader
from autoloader.directory_search import DirectorySearch
from autoloader.fixed_search import FixedSearch
from autoloader.recursive_search import RecursiveDirectorySearch


def _list_option(entry: dict[str, Any], key: str) -> list[Any]:
    value = entry.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        msg = f"Search strategy option '{key}' must be a list: {entry!r}"
        raise ValueError(msg)
    return value


def _build_recursive(
    entry: dict[str, Any], ext: str, sep: str
) -> RecursiveDirectorySearch:
    strategy = RecursiveDirectorySearch(extension=ext, separator=sep)
    for root in _list_option(entry, "roots"):
        strategy.register_root(str(root))
    return strategy


def _build_directory(entry: dict[str, Any], ext: str, sep: str) -> DirectorySearch:
    strategy = DirectorySearch(extension=ext, separator=sep)
    for item in _list_option(entry, "paths"):
        if isinstance(item, dict):
            if "path" not in item:
                msg = f"Directory strategy path entry lacks 'path': {item!r}"
                raise ValueError(msg)
            strategy.register_path(str(item["path"]), str(item.get("namespace", "")))
        else:
            strategy.register_path(str(item))
    return strategy


def _build_fixed(entry: dict[str, Any], ext: str, sep: str) -> FixedSearch:
    strategy = FixedSearch(separator=sep)
    classes = entry.get("classes") or {}
    if not isinstance(classes, dict):
        msg = f"Fixed strategy option 'classes' must be a mapping: {entry!r}"
        raise ValueError(msg)
    for name, path in classes.items():
        strategy.register_class_path(str(name), str(path))
    return strategy


BUILDERS = {
    "recursive": _build_recursive,
    "directory": _build_directory,
    "fixed": _build_fixed,
}


def build_autoloader(config: dict[str, Any]) -> Autoloader:
    """Create an Autoloader with one strategy per configured entry."""
    ext = config["extension"]
    sep = config["namespace_separator"]
    if not isinstance(ext, str):
        msg = f"Configured extension must be a string: {ext!r}"
        raise ValueError(msg)
    if not isinstance(sep, str) or not sep:
        msg = f"Configured namespace separator must be a non-empty string: {sep!r}"
        raise ValueError(msg)

    strategies = config.get("strategies") or []
    if not isinstance(strategies, list):
        msg = f"Configured search strategies must be a list: {strategies!r}"
        raise ValueError(msg)

    autoloader = Autoloader()
    for entry in strategies:
        kind = entry.get("kind") if isinstance(entry, dict) else None
        builder = BUILDERS.get(kind)  # type: ignore[arg-type]
        if builder is None:
            msg = f"Unknown search strategy in configuration: {entry!r}"
            raise ValueError(msg)
        autoloader.register_strategy(builder(entry, ext, sep))
    return autoloader
