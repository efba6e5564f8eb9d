#!/usr/bin/env python3
"""
dep-tree CLI

Trace import/require dependencies of a JavaScript, TypeScript or Python
project from its entry points and print them as a tree, DOT or JSON.
"""

import argparse
import logging
import sys
from pathlib import Path

from config import ConfigError, load_config, merge_overrides
from exporters import to_dot, to_json, to_tree
from scanner.builder import build_graph
from scanner.discovery import discover_entries


__version__ = "1.0.0"

logger = logging.getLogger("deptree")


def _depth(value: str) -> float:
    """argparse type for --depth: a non-negative integer or 'inf'."""
    if value.lower() in ("inf", "infinity"):
        return float("inf")
    try:
        depth = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid depth: {value!r}")
    if depth < 0:
        raise argparse.ArgumentTypeError(f"depth must not be negative: {value!r}")
    return depth


def parse_args(args=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="deptree",
        description="Trace import/require dependencies from a project's entry points.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  deptree                            # Analyze current directory
  deptree ./app -e src/index.js      # Start from a specific entry point
  deptree . -f dot | dot -Tsvg       # Graphviz output
  deptree . -f json -o deps.json     # JSON output to file
  deptree . --external --builtin     # Include package and stdlib edges
  deptree . -d 2                     # Stop two levels below the entries
        """,
    )

    parser.add_argument(
        "root",
        nargs="?",
        default=".",
        help="Project directory (default: current directory)",
    )

    parser.add_argument(
        "-f", "--format",
        choices=["tree", "dot", "json"],
        default=None,
        help="Output format (default: tree)",
    )

    parser.add_argument(
        "-e", "--entry",
        action="append",
        dest="entries",
        default=None,
        metavar="FILE",
        help="Entry point (repeatable; auto-detected if omitted)",
    )

    parser.add_argument(
        "-d", "--depth",
        type=_depth,
        default=None,
        help="Max traversal depth (default: unlimited)",
    )

    parser.add_argument(
        "--external",
        action="store_const",
        const=True,
        default=None,
        help="Include external (npm/pip) dependencies as edges",
    )

    parser.add_argument(
        "--builtin",
        action="store_const",
        const=True,
        default=None,
        help="Include builtin (node/python stdlib) dependencies as edges",
    )

    parser.add_argument(
        "--no-color",
        action="store_const",
        const=False,
        dest="color",
        default=None,
        help="Disable color output",
    )

    parser.add_argument(
        "--ascii",
        action="store_const",
        const="ascii",
        dest="style",
        default=None,
        help="Draw the tree with pure ASCII characters",
    )

    parser.add_argument(
        "-o", "--output",
        type=str,
        default=None,
        help="Output file (default: stdout)",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log progress to stderr",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log every scanned file and unresolved import to stderr",
    )

    parser.add_argument(
        "-v", "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser.parse_args(args)


def _configure_logging(parsed) -> None:
    if parsed.debug:
        level = logging.DEBUG
    elif parsed.verbose:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(args=None):
    """Main entry point."""
    parsed = parse_args(args)
    _configure_logging(parsed)

    root = Path(parsed.root).resolve()
    if not root.is_dir():
        print(f"Error: '{parsed.root}' is not a directory", file=sys.stderr)
        return 1

    try:
        settings = merge_overrides(load_config(root), {
            "format": parsed.format,
            "entries": parsed.entries,
            "external": parsed.external,
            "builtin": parsed.builtin,
            "depth": parsed.depth,
            "color": parsed.color,
            "style": parsed.style,
        })
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    entries = settings["entries"] or discover_entries(root)
    if not entries:
        print("No entry points found. Use -e to specify one.", file=sys.stderr)
        return 1

    logger.info("Entries: %s", ", ".join(entries))

    max_depth = settings["depth"]
    if max_depth == float("inf"):
        max_depth = None

    try:
        graph = build_graph(
            entries,
            root=root,
            include_external=settings["external"],
            include_builtin=settings["builtin"],
            max_depth=max_depth,
        )
    except OSError as e:
        print(f"Error scanning repository: {e}", file=sys.stderr)
        return 1

    if settings["format"] == "dot":
        output = to_dot(graph, title=root.name)
    elif settings["format"] == "json":
        output = to_json(graph)
    else:  # tree (default)
        color = settings["color"] and not parsed.output and sys.stdout.isatty()
        output = to_tree(graph, color=color, style=settings["style"])

    if parsed.output:
        try:
            output_path = Path(parsed.output)
            output_path.write_text(output + "\n", encoding="utf-8")
            print(f"Output written to: {output_path}", file=sys.stderr)
        except OSError as e:
            print(f"Error writing output: {e}", file=sys.stderr)
            return 1
    else:
        print(output)

    return 0


if __name__ == "__main__":
    sys.exit(main())
