"""Expansion-set helpers.

The set holds path keys of expanded parents. It is kept independent of the
tree content; keys that point at leaves or missing nodes are inert.
"""

from __future__ import annotations

from .paths import iter_paths, path_key
from .types import Tree, TreePath

ExpandedSet = frozenset[str]


def toggle_expanded(expanded: ExpandedSet, path: TreePath) -> ExpandedSet:
    """Flip membership of ``path`` in ``expanded``."""
    key = path_key(path)
    if key in expanded:
        return expanded - {key}
    return expanded | {key}


def expand(expanded: ExpandedSet, path: TreePath) -> ExpandedSet:
    return expanded | {path_key(path)}


def collapse(expanded: ExpandedSet, path: TreePath) -> ExpandedSet:
    return expanded - {path_key(path)}


def is_expanded(expanded: ExpandedSet | set[str], path: TreePath) -> bool:
    return path_key(path) in expanded


def default_expanded(tree: Tree) -> ExpandedSet:
    """Expand every root parent, leaving deeper levels collapsed."""
    return frozenset(path_key((index,)) for index, node in enumerate(tree) if node.is_parent)


def expand_all(tree: Tree) -> ExpandedSet:
    """Return keys for every parent node in ``tree``."""
    return frozenset(path_key(path) for path, node in iter_paths(tree) if node.is_parent)
