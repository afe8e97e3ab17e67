"""Checklist tree model: nodes, path addressing, projections and policies.

Everything here is pure. Mutations return new tree revisions that share
untouched subtrees with the previous one.
"""

from __future__ import annotations

from .definition import DEFAULT_TREE, TreeDefinitionError, load_tree, tree_from_data
from .expansion import (
    ExpandedSet,
    collapse,
    default_expanded,
    expand,
    expand_all,
    is_expanded,
    toggle_expanded,
)
from .export import export_checked, export_inherited
from .mutation import (
    effective_checked_inherited,
    effective_checked_stored,
    replace_at_path,
    set_checked_recursive,
    toggle_checked_cascade,
    toggle_checked_independent,
)
from .paths import ancestors_of, iter_paths, node_at_path, path_key
from .policy import DEFAULT_POLICY, CheckPolicy, policy_names
from .types import ChecklistNode, FlatRow, Tree, TreePath
from .visibility import visible_rows

__all__ = [
    "ChecklistNode",
    "FlatRow",
    "Tree",
    "TreePath",
    "ExpandedSet",
    "DEFAULT_TREE",
    "TreeDefinitionError",
    "load_tree",
    "tree_from_data",
    "path_key",
    "node_at_path",
    "ancestors_of",
    "iter_paths",
    "toggle_expanded",
    "expand",
    "collapse",
    "is_expanded",
    "default_expanded",
    "expand_all",
    "visible_rows",
    "replace_at_path",
    "set_checked_recursive",
    "toggle_checked_independent",
    "toggle_checked_cascade",
    "effective_checked_inherited",
    "effective_checked_stored",
    "export_inherited",
    "export_checked",
    "CheckPolicy",
    "DEFAULT_POLICY",
    "policy_names",
]
