"""Line-oriented command interpreter driving a namespace Tree."""

import logging
import re
import sys
from typing import Iterable, TextIO

from display import render
from namespace import NamespaceError, NodeKind, Tree

logger = logging.getLogger(__name__)

KINDS = {
    "dir": NodeKind.DIRECTORY,
    "directory": NodeKind.DIRECTORY,
    "file": NodeKind.FILE,
}

_ESCAPES = {"n": "\n", "t": "\t", "\\": "\\"}


class ShellError(NamespaceError):
    """Malformed or unknown command."""
    pass


def _unescape(text: str) -> str:
    """Decode \\n, \\t and \\\\ in command text."""
    return re.sub(r"\\([nt\\])", lambda m: _ESCAPES[m.group(1)], text)


class Shell:
    """Execute text commands against a Tree.

    Commands:
        add PARENT NAME dir|file
        mkdir PARENT NAME
        touch PARENT NAME
        write PATH TEXT...  (TEXT is everything after the space
                             following PATH, leading spaces included)
        read PATH  (alias: cat)
        ls [PATH]
        info PATH
        tree [PATH]
    """

    def __init__(self, tree: Tree | None = None):
        self.tree = tree if tree is not None else Tree()
        self._commands = {
            "add": self._add,
            "mkdir": self._mkdir,
            "touch": self._touch,
            "write": self._write,
            "read": self._read,
            "cat": self._read,
            "ls": self._ls,
            "info": self._info,
            "tree": self._tree,
        }

    def execute(self, line: str) -> str | None:
        """Run one command line. Returns printable output, or None."""
        parts = line.split(None, 1)
        if not parts:
            return None
        name = parts[0]
        rest = parts[1] if len(parts) > 1 else ""
        handler = self._commands.get(name)
        if handler is None:
            raise ShellError(f"Unknown command: {name}")
        logger.debug("Executing %s %r", name, rest)
        return handler(name, rest)

    def run(self, lines: Iterable[str], out: TextIO | None = None, err: TextIO | None = None) -> int:
        """Execute lines in order, skipping blanks and '#' comments.

        A failing command is reported on err and does not stop the run.
        Returns 0 if every command succeeded, 1 otherwise.
        """
        if out is None:
            out = sys.stdout
        if err is None:
            err = sys.stderr
        status = 0
        for lineno, line in enumerate(lines, 1):
            line = line.rstrip("\r\n")
            if not line.strip() or line.lstrip().startswith("#"):
                continue
            try:
                output = self.execute(line)
            except NamespaceError as e:
                logger.debug("Line %d failed: %s", lineno, e)
                print(f"Error: {e}", file=err)
                status = 1
                continue
            if output is not None:
                print(output, file=out)
        return status

    def _args(self, name: str, rest: str, min_count: int, max_count: int) -> list[str]:
        args = rest.split()
        if not min_count <= len(args) <= max_count:
            raise ShellError(f"Wrong number of arguments for {name}")
        return args

    def _add(self, name, rest):
        parent, child, kind = self._args(name, rest, 3, 3)
        if kind not in KINDS:
            raise ShellError(f"Unknown node kind: {kind} (expected dir or file)")
        self.tree.add(parent, child, KINDS[kind])

    def _mkdir(self, name, rest):
        parent, child = self._args(name, rest, 2, 2)
        self.tree.add(parent, child, NodeKind.DIRECTORY)

    def _touch(self, name, rest):
        parent, child = self._args(name, rest, 2, 2)
        self.tree.add(parent, child, NodeKind.FILE)

    def _write(self, name, rest):
        # Everything after the single space following PATH is content
        path, sep, text = rest.partition(" ")
        if not path or not sep:
            raise ShellError(f"Wrong number of arguments for {name}")
        self.tree.write(path, _unescape(text))

    def _read(self, name, rest):
        (path,) = self._args(name, rest, 1, 1)
        return self.tree.read(path)

    def _ls(self, name, rest):
        args = self._args(name, rest, 0, 1)
        names = self.tree.list(args[0] if args else "/")
        return "\n".join(names) if names else None

    def _info(self, name, rest):
        (path,) = self._args(name, rest, 1, 1)
        info = self.tree.info(path)
        if info.is_dir:
            return f"directory, {info.size} {'entry' if info.size == 1 else 'entries'}"
        return f"file, {info.size} bytes"

    def _tree(self, name, rest):
        args = self._args(name, rest, 0, 1)
        return render(self.tree, args[0] if args else "/")
