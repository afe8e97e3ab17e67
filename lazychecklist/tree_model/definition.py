"""Initial checklist definitions.

Provides the built-in service forest and a JSON loader for custom trees.
Loader errors name the offending location, e.g. ``[1].children[0]``.
"""

from __future__ import annotations

import json
from pathlib import Path

import structlog

from .types import ChecklistNode, Tree

logger = structlog.get_logger(__name__)


class TreeDefinitionError(ValueError):
    """Raised when a tree definition cannot be turned into checklist nodes."""


DEFAULT_TREE: Tree = (
    ChecklistNode(
        name="backend",
        description="Backend services and APIs",
        checked=False,
        children=(
            ChecklistNode(
                name="auth",
                description="Authentication and authorization service",
                checked=False,
            ),
            ChecklistNode(
                name="billing",
                description="Payment processing and subscription management",
                checked=True,
            ),
            ChecklistNode(
                name="notifications",
                description="Email and push notification system",
                checked=False,
            ),
        ),
    ),
    ChecklistNode(
        name="frontend",
        description="User interface applications",
        checked=True,
        children=(
            ChecklistNode(
                name="dashboard",
                description="Main administrative dashboard",
                checked=True,
            ),
            ChecklistNode(
                name="settings",
                description="User settings and preferences panel",
                checked=True,
            ),
        ),
    ),
)


def _node_from_data(data: object, where: str) -> ChecklistNode:
    if not isinstance(data, dict):
        raise TreeDefinitionError(f"{where}: node must be an object")

    name = data.get("name")
    if not isinstance(name, str) or not name:
        raise TreeDefinitionError(f'{where}: "name" must be a non-empty string')

    checked = data.get("checked", False)
    if not isinstance(checked, bool):
        raise TreeDefinitionError(f'{where}: "checked" must be a boolean')

    description = data.get("description")
    if description is not None and not isinstance(description, str):
        raise TreeDefinitionError(f'{where}: "description" must be a string')

    children: tuple[ChecklistNode, ...] | None = None
    if "children" in data:
        raw_children = data["children"]
        if not isinstance(raw_children, list):
            raise TreeDefinitionError(f'{where}: "children" must be a list')
        children = _nodes_from_list(raw_children, f"{where}.children")

    return ChecklistNode(name=name, checked=checked, children=children, description=description)


def _nodes_from_list(items: list[object], where: str) -> tuple[ChecklistNode, ...]:
    nodes: list[ChecklistNode] = []
    seen: set[str] = set()
    for index, item in enumerate(items):
        node = _node_from_data(item, f"{where}[{index}]")
        if node.name in seen:
            raise TreeDefinitionError(f"{where}[{index}]: duplicate sibling name {node.name!r}")
        seen.add(node.name)
        nodes.append(node)
    return tuple(nodes)


def tree_from_data(data: object) -> Tree:
    """Validate decoded JSON and build an immutable checklist forest."""
    if not isinstance(data, list):
        raise TreeDefinitionError("tree definition must be a list of nodes")
    return _nodes_from_list(data, "")


def load_tree(path: Path) -> Tree:
    """Read and validate a JSON tree definition from ``path``."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise TreeDefinitionError(f"cannot read {path}: {exc.strerror or exc}") from exc
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise TreeDefinitionError(f"{path}: invalid JSON at line {exc.lineno}: {exc.msg}") from exc
    tree = tree_from_data(data)
    logger.debug("tree_loaded", path=str(path), roots=len(tree))
    return tree
