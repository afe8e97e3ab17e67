"""Flatten checked state into the exported name list.

Both variants walk the whole tree in pre-order regardless of expansion, and
keep duplicate names from different branches as separate entries.
"""

from __future__ import annotations

from .types import ChecklistNode, Tree


def export_inherited(tree: Tree) -> list[str]:
    """Include a node when it or any ancestor is checked."""
    result: list[str] = []

    def walk(nodes: tuple[ChecklistNode, ...], parent_effective: bool) -> None:
        for node in nodes:
            effective = parent_effective or node.checked
            if effective:
                result.append(node.name)
            if node.children:
                walk(node.children, effective)

    walk(tree, False)
    return result


def export_checked(tree: Tree) -> list[str]:
    """Include exactly the nodes whose own flag is set."""
    result: list[str] = []

    def walk(nodes: tuple[ChecklistNode, ...]) -> None:
        for node in nodes:
            if node.checked:
                result.append(node.name)
            if node.children:
                walk(node.children)

    walk(tree)
    return result
