"""CLI entry point for memfs: in-memory hierarchical namespace."""

import argparse
import logging
import os
import sys

from display import render
from namespace import NamespaceError, NodeKind, Tree
from shell import Shell

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(levelname)s | %(name)s | %(message)s"


def build_demo_tree() -> Tree:
    """Build the sample tree with /home/user1/file1.txt and /etc/config."""
    tree = Tree()
    tree.add("/", "home", NodeKind.DIRECTORY)
    tree.add("/home", "user1", NodeKind.DIRECTORY)
    tree.add("/home/user1", "file1.txt", NodeKind.FILE)
    tree.add("/", "etc", NodeKind.DIRECTORY)
    tree.add("/etc", "config", NodeKind.FILE)

    tree.write("/home/user1/file1.txt", "Hello, World!\n")
    tree.write("/home/user1/file1.txt", "This is the second line.\n")
    tree.write("/etc/config", "Configuration data here.")
    return tree


def run_demo() -> int:
    tree = build_demo_tree()
    print("Contents of /home/user1/file1.txt:")
    print(tree.read("/home/user1/file1.txt"))
    print("\nContents of /etc/config:")
    print(tree.read("/etc/config"))
    print("\nFile System Structure:")
    print(render(tree))
    return 0


def run_shell(script: str) -> int:
    shell = Shell()
    if script == "-":
        logger.debug("Reading commands from stdin")
        return shell.run(sys.stdin)

    if not os.path.exists(script):
        print(f"Error: {script} not found", file=sys.stderr)
        return 1
    if not os.path.isfile(script):
        print(f"Error: {script} is not a file", file=sys.stderr)
        return 1
    logger.debug("Reading commands from %s", script)
    try:
        with open(script, "r", encoding="utf-8") as f:
            return shell.run(f)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: Cannot read {script}: {e}", file=sys.stderr)
        return 1


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="memfs: in-memory hierarchical namespace"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    sub = parser.add_subparsers(dest="command")
    sub.add_parser("demo", help="Build the sample tree and print it")
    p = sub.add_parser("shell", help="Run namespace commands from a script")
    p.add_argument("script", nargs="?", default="-", help="Command file ('-' for stdin)")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )

    if not args.command:
        parser.print_help()
        return 1

    try:
        if args.command == "demo":
            return run_demo()
        return run_shell(args.script)
    except NamespaceError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
