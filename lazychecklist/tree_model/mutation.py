"""Copy-on-write tree updates addressed by path.

Only nodes on the spine from the root to the target are rebuilt. Every
sibling subtree off that spine is returned as the same object.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import replace

from .paths import ancestors_of, node_at_path
from .types import ChecklistNode, Tree, TreePath


def replace_at_path(
    tree: Tree,
    path: TreePath,
    updater: Callable[[ChecklistNode], ChecklistNode],
) -> Tree:
    """Return a new tree where the node at ``path`` is ``updater(node)``."""
    if not path:
        return tree

    def rebuild(nodes: tuple[ChecklistNode, ...], remaining: TreePath) -> tuple[ChecklistNode, ...]:
        head, rest = remaining[0], remaining[1:]
        if head < 0 or head >= len(nodes):
            return nodes
        target = nodes[head]
        if not rest:
            updated = updater(target)
        elif target.children is None:
            return nodes
        else:
            children = rebuild(target.children, rest)
            if children is target.children:
                return nodes
            updated = replace(target, children=children)
        return nodes[:head] + (updated,) + nodes[head + 1 :]

    return rebuild(tree, path)


def set_checked_recursive(node: ChecklistNode, checked: bool) -> ChecklistNode:
    """Return ``node`` with itself and every descendant forced to ``checked``."""
    if node.children is None:
        return replace(node, checked=checked)
    return replace(
        node,
        checked=checked,
        children=tuple(set_checked_recursive(child, checked) for child in node.children),
    )


def toggle_checked_independent(tree: Tree, path: TreePath) -> Tree:
    """Flip ``checked`` on the target only; ancestors and descendants untouched."""
    return replace_at_path(tree, path, lambda node: replace(node, checked=not node.checked))


def toggle_checked_cascade(tree: Tree, path: TreePath) -> Tree:
    """Flip the target and force its whole subtree to the new value."""
    return replace_at_path(tree, path, lambda node: set_checked_recursive(node, not node.checked))


def effective_checked_inherited(tree: Tree, path: TreePath) -> bool:
    """Return whether the node or any ancestor carries ``checked``."""
    node = node_at_path(tree, path)
    if node is None:
        return False
    return node.checked or any(ancestor.checked for ancestor in ancestors_of(tree, path))


def effective_checked_stored(tree: Tree, path: TreePath) -> bool:
    """Return the node's own stored flag."""
    node = node_at_path(tree, path)
    return bool(node is not None and node.checked)
