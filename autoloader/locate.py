"""Command line front end resolving class names to file paths."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TYPE_CHECKING

import yaml

from autoloader.build_autoloader import build_autoloader
from autoloader.load_config import load_config
from autoloader.recursive_search import RecursiveDirectorySearch

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments for the locator."""
    parser = argparse.ArgumentParser(
        description="Locate the files declaring namespaced classes."
    )
    parser.add_argument("names", nargs="+", help="Fully qualified class names")
    parser.add_argument("--config", help="Path to configuration file")
    parser.add_argument(
        "--root",
        action="append",
        default=[],
        help="Directory to search recursively (repeatable, searched last)",
    )
    parser.add_argument("--extension", help="File extension of class files")
    parser.add_argument("--separator", help="Namespace separator")
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log search details to stderr",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Resolve each name and print where it was found."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config)
        if args.extension is not None:
            config["extension"] = args.extension
        if args.separator is not None:
            config["namespace_separator"] = args.separator
        autoloader = build_autoloader(config)
    except (ValueError, OSError, yaml.YAMLError) as exc:
        print(f"Error loading configuration: {exc}", file=sys.stderr)
        return 2

    if args.root:
        recursive = RecursiveDirectorySearch(
            extension=config["extension"], separator=config["namespace_separator"]
        )
        for root in args.root:
            recursive.register_root(root)
        autoloader.register_strategy(recursive)

    if not autoloader.strategies:
        logger.warning("No search strategies configured; nothing can be found.")

    missing = 0
    for name in args.names:
        path = autoloader.resolve(name)
        if path is None:
            missing += 1
            print(f"{name} -> not found")
        else:
            print(f"{name} -> {path}")
    return 1 if missing else 0


if __name__ == "__main__":
    sys.exit(main())
