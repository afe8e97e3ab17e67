"""Interaction controller for one checklist session.

Exposes one entry point per user action. Each action replaces the tree or
expansion set with a new revision, then re-derives visible rows and clamps
the selection so the list always stays navigable.
"""

from __future__ import annotations

import structlog

from ..state import ChecklistState
from ..tree_model import (
    CheckPolicy,
    FlatRow,
    Tree,
    collapse,
    default_expanded,
    expand,
    expand_all,
    node_at_path,
)

logger = structlog.get_logger(__name__)


class ChecklistSession:
    """Own tree, expansion set and selection for the running UI."""

    def __init__(self, state: ChecklistState) -> None:
        self.state = state

    @classmethod
    def create(
        cls,
        tree: Tree,
        policy: CheckPolicy,
        *,
        expand_everything: bool = False,
    ) -> ChecklistSession:
        """Build a session with roots (or every parent) expanded."""
        expanded = expand_all(tree) if expand_everything else default_expanded(tree)
        return cls(ChecklistState(tree=tree, expanded=expanded, policy=policy))

    @property
    def rows(self) -> list[FlatRow]:
        return self.state.rows

    def selected_row(self) -> FlatRow | None:
        if not self.state.rows:
            return None
        return self.state.rows[self.state.selected_idx]

    def move_selection(self, direction: int) -> bool:
        """Move highlight by ``direction`` rows, stopping at either end."""
        state = self.state
        if not state.rows:
            return False
        target = max(0, min(len(state.rows) - 1, state.selected_idx + direction))
        if target == state.selected_idx:
            return False
        state.selected_idx = target
        state.dirty = True
        return True

    def expand_selected(self) -> bool:
        """Expand current row when it is a collapsed parent."""
        row = self.selected_row()
        if row is None or not row.is_parent or row.expanded:
            return False
        self._set_expanded(expand(self.state.expanded, row.path))
        logger.debug("expanded", path=row.path)
        return True

    def collapse_selected(self) -> bool:
        """Collapse current row when it is an expanded parent."""
        row = self.selected_row()
        if row is None or not row.is_parent or not row.expanded:
            return False
        self._set_expanded(collapse(self.state.expanded, row.path))
        logger.debug("collapsed", path=row.path)
        return True

    def toggle_selected(self) -> bool:
        """Toggle checked state of the current row under the active policy."""
        row = self.selected_row()
        if row is None:
            return False
        state = self.state
        state.tree = state.policy.toggle(state.tree, row.path)
        state.refresh_rows()
        state.dirty = True
        logger.debug("toggled", path=row.path, policy=state.policy.value)
        return True

    def toggle_help(self) -> bool:
        self.state.show_help = not self.state.show_help
        self.state.dirty = True
        return True

    def is_checked(self, row: FlatRow) -> bool:
        return self.state.policy.is_checked(self.state.tree, row.path)

    def description_for(self, row: FlatRow) -> str | None:
        node = node_at_path(self.state.tree, row.path)
        return node.description if node is not None else None

    def export(self) -> list[str]:
        """Return exported names for the current tree revision."""
        names = self.state.policy.export(self.state.tree)
        logger.info("exported", count=len(names), policy=self.state.policy.value)
        return names

    def _set_expanded(self, expanded: frozenset[str]) -> None:
        state = self.state
        state.expanded = expanded
        state.refresh_rows()
        state.dirty = True
