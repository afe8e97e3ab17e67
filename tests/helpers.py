"""Tree fixtures shared by checklist tests."""

from __future__ import annotations

from lazychecklist.tree_model import ChecklistNode, Tree


def leaf(name: str, checked: bool = False) -> ChecklistNode:
    return ChecklistNode(name=name, checked=checked)


def parent(name: str, *children: ChecklistNode, checked: bool = False) -> ChecklistNode:
    return ChecklistNode(name=name, checked=checked, children=tuple(children))


def readme_tree() -> Tree:
    """backend{auth:on, billing, notifications}, frontend:on{dashboard, settings}."""
    return (
        parent("backend", leaf("auth", True), leaf("billing"), leaf("notifications")),
        parent("frontend", leaf("dashboard"), leaf("settings"), checked=True),
    )


def unchecked_tree() -> Tree:
    return (
        parent("backend", leaf("auth"), leaf("billing"), leaf("notifications")),
        parent("frontend", leaf("dashboard"), leaf("settings")),
    )


def deep_tree() -> Tree:
    return (
        parent(
            "platform",
            parent("compute", leaf("vm"), parent("containers", leaf("k8s"), leaf("nomad"))),
            parent("storage", leaf("s3"), leaf("k8s")),
            parent("empty"),
        ),
        leaf("docs"),
    )
