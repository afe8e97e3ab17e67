"""Tests for copy-on-write toggles, both export variants and policy dispatch."""

from __future__ import annotations

import unittest

from lazychecklist.tree_model import (
    CheckPolicy,
    ChecklistNode,
    effective_checked_inherited,
    export_checked,
    export_inherited,
    iter_paths,
    node_at_path,
    replace_at_path,
    toggle_checked_cascade,
    toggle_checked_independent,
)
from tests.helpers import deep_tree, leaf, parent, readme_tree, unchecked_tree


class ReplaceAtPathTests(unittest.TestCase):
    def test_only_spine_nodes_are_rebuilt(self) -> None:
        tree = deep_tree()
        updated = replace_at_path(tree, (0, 0, 1, 0), lambda node: ChecklistNode(name="renamed"))

        self.assertIsNot(updated, tree)
        self.assertIsNot(updated[0], tree[0])
        self.assertIsNot(updated[0].children[0], tree[0].children[0])
        self.assertIs(updated[1], tree[1])
        self.assertIs(updated[0].children[1], tree[0].children[1])
        self.assertIs(updated[0].children[0].children[0], tree[0].children[0].children[0])
        self.assertIs(updated[0].children[0].children[1].children[1], tree[0].children[0].children[1].children[1])
        self.assertEqual(node_at_path(updated, (0, 0, 1, 0)).name, "renamed")

    def test_original_revision_is_unchanged(self) -> None:
        tree = readme_tree()
        toggle_checked_cascade(tree, (1,))
        self.assertEqual(export_checked(tree), ["auth", "frontend"])

    def test_empty_path_returns_tree_unchanged(self) -> None:
        tree = readme_tree()
        self.assertIs(replace_at_path(tree, (), lambda node: node), tree)


class IndependentToggleTests(unittest.TestCase):
    def test_flips_only_target(self) -> None:
        tree = readme_tree()
        updated = toggle_checked_independent(tree, (0,))
        self.assertTrue(updated[0].checked)
        self.assertEqual([child.checked for child in updated[0].children], [True, False, False])
        self.assertIs(updated[0].children, tree[0].children)
        self.assertIs(updated[1], tree[1])

    def test_effective_checked_ors_ancestors(self) -> None:
        tree = readme_tree()
        self.assertTrue(effective_checked_inherited(tree, (1, 0)))
        self.assertTrue(effective_checked_inherited(tree, (0, 0)))
        self.assertFalse(effective_checked_inherited(tree, (0, 1)))
        self.assertFalse(effective_checked_inherited(tree, (0,)))


class CascadeToggleTests(unittest.TestCase):
    def test_forces_every_descendant_to_new_value(self) -> None:
        tree = deep_tree()
        updated = toggle_checked_cascade(tree, (0, 0))
        subtree_flags = [node.checked for path, node in iter_paths(updated) if path[:2] == (0, 0)]
        self.assertEqual(len(subtree_flags), 5)
        self.assertTrue(all(subtree_flags))
        self.assertFalse(updated[0].checked)
        self.assertIs(updated[0].children[1], tree[0].children[1])

    def test_unchecking_parent_overwrites_checked_children(self) -> None:
        tree = (parent("group", leaf("a", True), leaf("b", False), checked=True),)
        updated = toggle_checked_cascade(tree, (0,))
        self.assertFalse(updated[0].checked)
        self.assertEqual([child.checked for child in updated[0].children], [False, False])

    def test_ancestors_untouched(self) -> None:
        tree = deep_tree()
        updated = toggle_checked_cascade(tree, (0, 0, 1))
        self.assertFalse(updated[0].checked)
        self.assertFalse(updated[0].children[0].checked)

    def test_leaf_toggle_flips_leaf(self) -> None:
        updated = toggle_checked_cascade(readme_tree(), (0, 1))
        self.assertTrue(updated[0].children[1].checked)


class ExportTests(unittest.TestCase):
    def test_inherited_export_matches_readme_example(self) -> None:
        self.assertEqual(
            export_inherited(readme_tree()),
            ["auth", "frontend", "dashboard", "settings"],
        )

    def test_inherited_export_includes_subtree_of_checked_parent(self) -> None:
        tree = (
            parent(
                "outer",
                parent("inner", leaf("x"), leaf("y", True)),
                leaf("z"),
                checked=True,
            ),
        )
        self.assertEqual(export_inherited(tree), ["outer", "inner", "x", "y", "z"])

    def test_descendant_toggle_under_checked_ancestor_does_not_change_inherited_export(self) -> None:
        tree = readme_tree()
        before = export_inherited(tree)
        for path in ((1, 0), (1, 1)):
            self.assertEqual(export_inherited(toggle_checked_independent(tree, path)), before)

    def test_cascade_scenario_from_unchecked_frontend(self) -> None:
        tree = toggle_checked_cascade(unchecked_tree(), (1,))
        self.assertEqual(export_checked(tree), ["frontend", "dashboard", "settings"])
        self.assertTrue(all(child.checked for child in tree[1].children))

    def test_checked_export_equals_own_flag_set(self) -> None:
        tree = toggle_checked_cascade(deep_tree(), (0, 1))
        expected = [node.name for _path, node in iter_paths(tree) if node.checked]
        self.assertEqual(export_checked(tree), expected)
        self.assertEqual(export_checked(tree), ["storage", "s3", "k8s"])

    def test_duplicate_names_are_preserved(self) -> None:
        tree = toggle_checked_cascade(deep_tree(), (0,))
        self.assertEqual(export_checked(tree).count("k8s"), 2)
        self.assertEqual(export_inherited(tree).count("k8s"), 2)

    def test_export_is_idempotent(self) -> None:
        tree = readme_tree()
        self.assertEqual(export_inherited(tree), export_inherited(tree))
        self.assertEqual(export_checked(tree), export_checked(tree))

    def test_export_of_empty_tree_is_empty(self) -> None:
        self.assertEqual(export_inherited(()), [])
        self.assertEqual(export_checked(()), [])


class CheckPolicyTests(unittest.TestCase):
    def test_parse_accepts_names_case_insensitively(self) -> None:
        self.assertIs(CheckPolicy.parse("Inherit"), CheckPolicy.INHERIT)
        self.assertIs(CheckPolicy.parse(" cascade "), CheckPolicy.CASCADE)

    def test_parse_rejects_unknown_name(self) -> None:
        with self.assertRaises(ValueError):
            CheckPolicy.parse("both")

    def test_inherit_policy_pairs_independent_toggle_with_inherited_export(self) -> None:
        policy = CheckPolicy.INHERIT
        tree = policy.toggle(unchecked_tree(), (1,))
        self.assertFalse(tree[1].children[0].checked)
        self.assertTrue(policy.is_checked(tree, (1, 0)))
        self.assertEqual(policy.export(tree), ["frontend", "dashboard", "settings"])

    def test_cascade_policy_reads_stored_flags(self) -> None:
        policy = CheckPolicy.CASCADE
        tree = readme_tree()
        self.assertFalse(policy.is_checked(tree, (1, 0)))
        self.assertEqual(policy.export(tree), ["auth", "frontend"])


if __name__ == "__main__":
    unittest.main()
