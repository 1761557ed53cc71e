"""Plain-text rendering of a namespace tree, one indented name per line."""

from typing import Iterable

from namespace import Tree

INDENT = "  "


def render_entries(entries: Iterable[tuple[int, str]], indent: str = INDENT) -> list[str]:
    """Turn (depth, name) pairs into lines indented by depth."""
    return [indent * depth + name for depth, name in entries]


def render(tree: Tree, path: str = "/") -> str:
    """Render the subtree at path.

    Example:
        /
          etc
            config
    """
    return "\n".join(render_entries(tree.walk(path)))
