"""Tests for the built-in tree and JSON tree-definition loading."""

from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path

from lazychecklist.tree_model import (
    DEFAULT_TREE,
    ChecklistNode,
    TreeDefinitionError,
    export_checked,
    export_inherited,
    load_tree,
    tree_from_data,
)


class DefaultTreeTests(unittest.TestCase):
    def test_default_tree_shape(self) -> None:
        self.assertEqual([node.name for node in DEFAULT_TREE], ["backend", "frontend"])
        self.assertEqual(
            [child.name for child in DEFAULT_TREE[0].children],
            ["auth", "billing", "notifications"],
        )
        self.assertTrue(all(node.description for node in DEFAULT_TREE))

    def test_default_tree_initial_exports(self) -> None:
        self.assertEqual(export_checked(DEFAULT_TREE), ["billing", "frontend", "dashboard", "settings"])
        self.assertEqual(export_inherited(DEFAULT_TREE), ["billing", "frontend", "dashboard", "settings"])


class TreeFromDataTests(unittest.TestCase):
    def test_builds_nodes_with_defaults(self) -> None:
        tree = tree_from_data(
            [
                {"name": "a", "children": [{"name": "b", "checked": True, "description": "bee"}]},
                {"name": "c", "children": []},
                {"name": "d"},
            ]
        )
        self.assertEqual(
            tree,
            (
                ChecklistNode(
                    name="a",
                    checked=False,
                    children=(ChecklistNode(name="b", checked=True, description="bee"),),
                ),
                ChecklistNode(name="c", children=()),
                ChecklistNode(name="d"),
            ),
        )
        self.assertTrue(tree[1].is_parent)
        self.assertFalse(tree[2].is_parent)

    def test_rejects_non_list_top_level(self) -> None:
        with self.assertRaises(TreeDefinitionError):
            tree_from_data({"name": "a"})

    def test_error_names_nested_location(self) -> None:
        with self.assertRaises(TreeDefinitionError) as ctx:
            tree_from_data([{"name": "a"}, {"name": "b", "children": [{"checked": True}]}])
        self.assertIn("[1].children[0]", str(ctx.exception))
        self.assertIn('"name"', str(ctx.exception))

    def test_rejects_non_boolean_checked(self) -> None:
        with self.assertRaises(TreeDefinitionError):
            tree_from_data([{"name": "a", "checked": "yes"}])

    def test_rejects_non_list_children(self) -> None:
        with self.assertRaises(TreeDefinitionError):
            tree_from_data([{"name": "a", "children": {"name": "b"}}])

    def test_rejects_duplicate_sibling_names(self) -> None:
        with self.assertRaises(TreeDefinitionError) as ctx:
            tree_from_data([{"name": "a"}, {"name": "a"}])
        self.assertIn("duplicate", str(ctx.exception))

    def test_allows_duplicate_names_in_different_branches(self) -> None:
        tree = tree_from_data(
            [
                {"name": "x", "children": [{"name": "shared"}]},
                {"name": "y", "children": [{"name": "shared"}]},
            ]
        )
        self.assertEqual(len(tree), 2)

    def test_definition_error_is_value_error(self) -> None:
        self.assertTrue(issubclass(TreeDefinitionError, ValueError))


class LoadTreeTests(unittest.TestCase):
    def test_load_tree_reads_json_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "tree.json"
            path.write_text(json.dumps([{"name": "only", "checked": True}]), encoding="utf-8")
            self.assertEqual(load_tree(path), (ChecklistNode(name="only", checked=True),))

    def test_load_tree_reports_invalid_json(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "tree.json"
            path.write_text("[{", encoding="utf-8")
            with self.assertRaises(TreeDefinitionError) as ctx:
                load_tree(path)
            self.assertIn("invalid JSON", str(ctx.exception))

    def test_load_tree_reports_unreadable_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(TreeDefinitionError):
                load_tree(Path(tmp) / "missing.json")


if __name__ == "__main__":
    unittest.main()
