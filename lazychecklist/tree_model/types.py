"""Checklist node and row datatypes shared across tree-model modules."""

from __future__ import annotations

from dataclasses import dataclass

TreePath = tuple[int, ...]


@dataclass(frozen=True)
class ChecklistNode:
    """One checklist item.

    ``children is None`` marks a leaf. Any tuple, including an empty one,
    marks a parent row that can be expanded.
    """

    name: str
    checked: bool = False
    children: tuple[ChecklistNode, ...] | None = None
    description: str | None = None

    @property
    def is_parent(self) -> bool:
        return self.children is not None


Tree = tuple[ChecklistNode, ...]


@dataclass(frozen=True)
class FlatRow:
    """One visible row in the checklist pane."""

    name: str
    level: int
    path: TreePath
    is_parent: bool
    expanded: bool
