"""Utilities for deriving file names from namespaced class names."""

DEFAULT_EXTENSION = ".php"
DEFAULT_NAMESPACE_SEPARATOR = "\\"


def extract_strict_name(
    symbolic_name: str, separator: str = DEFAULT_NAMESPACE_SEPARATOR
) -> str:
    """Strip the namespace chain and return the bare class name.

    Foo\\Bar\\Baz -> Baz, \\Baz -> Baz.
    """
    # Leading separators mark the global namespace, not a segment.
    name = symbolic_name.lstrip(separator)
    _, found, strict_name = name.rpartition(separator)
    if found:
        return strict_name
    return name


def class_file_name(
    symbolic_name: str,
    extension: str = DEFAULT_EXTENSION,
    separator: str = DEFAULT_NAMESPACE_SEPARATOR,
) -> str:
    """Build the file name that should contain the given class."""
    return extract_strict_name(symbolic_name, separator) + extension
