from __future__ import annotations

from dataclasses import dataclass, field

from .tree_model import DEFAULT_POLICY, CheckPolicy, FlatRow, Tree, visible_rows


@dataclass
class ChecklistState:
    tree: Tree
    expanded: frozenset[str]
    policy: CheckPolicy = DEFAULT_POLICY
    selected_idx: int = 0
    list_start: int = 0
    show_help: bool = True
    dirty: bool = True
    rows: list[FlatRow] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.refresh_rows()

    def refresh_rows(self) -> None:
        """Recompute visible rows and clamp the selection into range."""
        self.rows = visible_rows(self.tree, self.expanded)
        if not self.rows:
            self.selected_idx = 0
        else:
            self.selected_idx = max(0, min(self.selected_idx, len(self.rows) - 1))
