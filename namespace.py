"""In-memory hierarchical namespace: directories and files addressed by absolute paths."""

import enum
from dataclasses import dataclass, field
from typing import Iterator


class NamespaceError(Exception):
    """Base error for namespace operations."""
    pass


class PathNotFoundError(NamespaceError):
    """A path segment has no matching child."""
    pass


class NotDirectoryError(NamespaceError):
    """Tried to add or list children of a file."""
    pass


class IsDirectoryError(NamespaceError):
    """Tried to read or write content of a directory."""
    pass


class NodeKind(enum.Enum):
    DIRECTORY = "dir"
    FILE = "file"


@dataclass
class NodeInfo:
    """Metadata about a node."""
    is_dir: bool
    size: int = 0


@dataclass
class Node:
    """A single tree entry.

    Directories own an insertion-ordered list of children; files hold a text
    buffer. A node keeps no reference to its parent.
    """
    name: str
    kind: NodeKind
    children: list["Node"] = field(default_factory=list)
    content: str = ""

    @property
    def is_dir(self) -> bool:
        return self.kind is NodeKind.DIRECTORY

    def attach_child(self, node: "Node") -> None:
        if not self.is_dir:
            raise NotDirectoryError(f"{self.name} is not a directory")
        self.children.append(node)


def _walk(node: Node, depth: int) -> Iterator[tuple[int, str]]:
    stack = [(depth, node)]
    while stack:
        depth, node = stack.pop()
        yield depth, node.name
        if node.is_dir:
            # Reversed so the first child is popped next
            stack.extend((depth + 1, child) for child in reversed(node.children))


class Tree:
    """Owns the root directory and exposes all path-addressed operations.

    Paths are '/'-separated and must start with '/'. The root '/' is always
    a directory. Segments are matched literally: no '.', '..', repeated or
    trailing slash handling, so '/home/' looks up a child named ''.

    Example:
        tree = Tree()
        tree.add("/", "etc", NodeKind.DIRECTORY)
        tree.add("/etc", "config", NodeKind.FILE)
        tree.write("/etc/config", "data")
        tree.read("/etc/config")  # -> "data"
    """

    def __init__(self):
        self.root = Node("/", NodeKind.DIRECTORY)

    def resolve(self, path: str) -> Node:
        """Walk the tree to find the node at path. Raises PathNotFoundError."""
        if path == "/":
            return self.root
        if not path.startswith("/"):
            raise PathNotFoundError(f"Not an absolute path: {path!r}")

        node = self.root
        for part in path[1:].split("/"):
            # First match wins; sibling names are not required to be unique
            for child in node.children:
                if child.name == part:
                    node = child
                    break
            else:
                raise PathNotFoundError(f"Path {path} not found")
        return node

    def add(self, parent_path: str, name: str, kind: NodeKind) -> Node:
        """Create a node called name under the directory at parent_path."""
        parent = self.resolve(parent_path)
        node = Node(name, kind)
        parent.attach_child(node)
        return node

    def write(self, path: str, content: str) -> None:
        """Append content to the file at path."""
        node = self.resolve(path)
        if node.is_dir:
            raise IsDirectoryError(f"{path} is a directory, cannot write content")
        node.content += content

    def read(self, path: str) -> str:
        """Return the full content of the file at path."""
        node = self.resolve(path)
        if node.is_dir:
            raise IsDirectoryError(f"{path} is a directory, cannot read content")
        return node.content

    def enumerate(self, node: Node | None = None, depth: int = 0) -> Iterator[tuple[int, str]]:
        """Lazily yield (depth, name) for node and its subtree, depth first.

        Starts at the root when no node is given.
        """
        if node is None:
            node = self.root
        return _walk(node, depth)

    def walk(self, path: str = "/") -> Iterator[tuple[int, str]]:
        """Enumerate the subtree at path, which is reported at depth 0."""
        return self.enumerate(self.resolve(path))

    def info(self, path: str) -> NodeInfo:
        node = self.resolve(path)
        if node.is_dir:
            return NodeInfo(is_dir=True, size=len(node.children))
        return NodeInfo(is_dir=False, size=len(node.content.encode("utf-8")))

    def list(self, path: str) -> list[str]:
        """Return child names of a directory in insertion order."""
        node = self.resolve(path)
        if not node.is_dir:
            raise NotDirectoryError(f"Not a directory: {path}")
        return [child.name for child in node.children]
