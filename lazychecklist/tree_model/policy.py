"""Checked-state propagation policies.

``inherit`` toggles nodes independently and lets a checked ancestor imply
its whole subtree at render and export time. ``cascade`` pushes the new
value into every descendant when toggling and exports stored flags as-is.
"""

from __future__ import annotations

from enum import Enum

from .export import export_checked, export_inherited
from .mutation import (
    effective_checked_inherited,
    effective_checked_stored,
    toggle_checked_cascade,
    toggle_checked_independent,
)
from .types import Tree, TreePath


class CheckPolicy(str, Enum):
    INHERIT = "inherit"
    CASCADE = "cascade"

    @classmethod
    def parse(cls, name: str) -> CheckPolicy:
        """Return policy for ``name`` (case-insensitive); raise ``ValueError`` otherwise."""
        candidate = str(name).strip().lower()
        for policy in cls:
            if policy.value == candidate:
                return policy
        choices = ", ".join(policy.value for policy in cls)
        raise ValueError(f"unknown check policy {name!r} (expected one of: {choices})")

    def toggle(self, tree: Tree, path: TreePath) -> Tree:
        if self is CheckPolicy.INHERIT:
            return toggle_checked_independent(tree, path)
        return toggle_checked_cascade(tree, path)

    def export(self, tree: Tree) -> list[str]:
        if self is CheckPolicy.INHERIT:
            return export_inherited(tree)
        return export_checked(tree)

    def is_checked(self, tree: Tree, path: TreePath) -> bool:
        """Return the checkbox state shown for ``path``."""
        if self is CheckPolicy.INHERIT:
            return effective_checked_inherited(tree, path)
        return effective_checked_stored(tree, path)


DEFAULT_POLICY = CheckPolicy.CASCADE


def policy_names() -> tuple[str, ...]:
    return tuple(policy.value for policy in CheckPolicy)
