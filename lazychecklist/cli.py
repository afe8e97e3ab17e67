"""Command-line front door for lazychecklist.

Parses CLI options, loads the tree definition and resolves the check policy
and theme from flags, persisted config and built-in defaults, in that order.
Then dispatches into the interactive checklist runtime.
"""

from __future__ import annotations

import argparse
from pathlib import Path

from .log import configure_logging
from .render import DEFAULT_TITLE
from .runtime import run_checklist
from .runtime import config
from .tree_model import DEFAULT_POLICY, DEFAULT_TREE, CheckPolicy, TreeDefinitionError, load_tree, policy_names
from .ui_theme import available_theme_names


def _policy_arg(value: str) -> CheckPolicy:
    """argparse type for ``--policy``."""
    try:
        return CheckPolicy.parse(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lazychecklist",
        description="Pick items from a collapsible checklist tree and print the selection as JSON.",
    )
    parser.add_argument(
        "tree",
        nargs="?",
        default=None,
        help="JSON tree definition. Defaults to the built-in service tree.",
    )
    parser.add_argument(
        "--policy",
        type=_policy_arg,
        default=None,
        help=(
            f"Checked-state propagation ({', '.join(policy_names())}). "
            "'inherit' lets a checked parent imply its children; "
            "'cascade' copies a toggle into every descendant."
        ),
    )
    parser.add_argument("--expand-all", action="store_true", help="Start with every parent expanded.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--title", default=DEFAULT_TITLE, help="Heading shown above the checklist.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument(
        "--no-interactive",
        action="store_true",
        help="Skip the UI and print the export of the initial tree.",
    )
    parser.add_argument(
        "--save-defaults",
        action="store_true",
        help="Persist --policy, --theme and --expand-all as defaults for later runs.",
    )
    parser.add_argument("--log-file", default=None, help="Write debug/info logs to this file.")
    parser.add_argument("--debug", action="store_true", help="Log at debug level.")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and run one checklist session."""
    args = build_parser().parse_args(argv)
    configure_logging(log_file=args.log_file, debug=args.debug)

    if args.tree is None:
        tree = DEFAULT_TREE
    else:
        tree_path = Path(args.tree)
        if not tree_path.exists():
            raise SystemExit(f"Path not found: {tree_path}")
        try:
            tree = load_tree(tree_path)
        except TreeDefinitionError as exc:
            raise SystemExit(f"Invalid tree definition: {exc}") from exc

    policy = args.policy or config.load_policy() or DEFAULT_POLICY
    theme_name = args.theme or config.load_theme_name()
    expand_everything = args.expand_all or config.load_expand_all()

    if args.save_defaults:
        if args.policy is not None:
            config.save_policy(args.policy)
        if args.theme is not None:
            config.save_theme_name(args.theme)
        config.save_expand_all(args.expand_all)

    run_checklist(
        tree,
        policy,
        expand_everything=expand_everything,
        theme_name=theme_name,
        no_color=args.no_color,
        interactive=not args.no_interactive,
        title=args.title,
    )
