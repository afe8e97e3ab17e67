"""Projection of tree + expansion set into visible checklist rows."""

from __future__ import annotations

from .expansion import is_expanded
from .types import ChecklistNode, FlatRow, Tree, TreePath


def visible_rows(tree: Tree, expanded: frozenset[str] | set[str]) -> list[FlatRow]:
    """Build pre-order rows for nodes whose ancestors are all expanded.

    Rows follow document order. A parent with an empty child tuple still
    reports ``is_parent`` and simply contributes no child rows.
    """
    rows: list[FlatRow] = []

    def walk(nodes: tuple[ChecklistNode, ...], level: int, parent: TreePath) -> None:
        for index, node in enumerate(nodes):
            path = parent + (index,)
            is_open = node.is_parent and is_expanded(expanded, path)
            rows.append(
                FlatRow(
                    name=node.name,
                    level=level,
                    path=path,
                    is_parent=node.is_parent,
                    expanded=is_open,
                )
            )
            if is_open and node.children:
                walk(node.children, level + 1, path)

    walk(tree, 0, ())
    return rows
