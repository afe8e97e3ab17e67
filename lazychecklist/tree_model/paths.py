"""Positional path addressing for checklist nodes.

A path is a tuple of zero-based child indices starting at the root forest.
Keys are the indices joined by ``-``, which cannot appear inside a rendered
non-negative integer, so the mapping is injective.
"""

from __future__ import annotations

from collections.abc import Iterator

from .types import ChecklistNode, Tree, TreePath

PATH_KEY_SEPARATOR = "-"


def path_key(path: TreePath) -> str:
    """Return canonical set key for ``path`` (``(1, 0)`` -> ``"1-0"``)."""
    return PATH_KEY_SEPARATOR.join(str(index) for index in path)


def node_at_path(tree: Tree, path: TreePath) -> ChecklistNode | None:
    """Resolve ``path`` against ``tree``; ``None`` when it does not resolve."""
    if not path:
        return None
    nodes: tuple[ChecklistNode, ...] = tree
    node: ChecklistNode | None = None
    for index in path:
        if index < 0 or index >= len(nodes):
            return None
        node = nodes[index]
        nodes = node.children or ()
    return node


def ancestors_of(tree: Tree, path: TreePath) -> list[ChecklistNode]:
    """Return nodes strictly above ``path``, outermost first."""
    return [
        node
        for node in (node_at_path(tree, path[:depth]) for depth in range(1, len(path)))
        if node is not None
    ]


def iter_paths(tree: Tree) -> Iterator[tuple[TreePath, ChecklistNode]]:
    """Yield ``(path, node)`` for every node in pre-order."""

    def walk(nodes: tuple[ChecklistNode, ...], parent: TreePath) -> Iterator[tuple[TreePath, ChecklistNode]]:
        for index, node in enumerate(nodes):
            path = parent + (index,)
            yield path, node
            if node.children:
                yield from walk(node.children, path)

    yield from walk(tree, ())
