"""Checklist runtime bootstrap.

Builds the session, runs the interactive loop inside raw mode, and writes
the export only after the terminal has been restored. Frames go to the
controlling terminal so a redirected stdout receives nothing but the JSON.
"""

from __future__ import annotations

import os
import sys

import structlog

from ..output import write_export
from ..render import DEFAULT_TITLE
from ..terminal import TerminalController
from ..tree_model import CheckPolicy, Tree
from ..ui_theme import resolve_theme
from .loop import RuntimeLoopOptions, run_main_loop
from .session import ChecklistSession

logger = structlog.get_logger(__name__)

TTY_DEVICE = "/dev/tty"


def open_tty() -> int:
    return os.open(TTY_DEVICE, os.O_WRONLY)


def _screen_fd() -> tuple[int, bool] | None:
    """Return ``(fd, owned)`` to draw frames on, or ``None`` without a terminal."""
    if sys.stdout.isatty():
        return sys.stdout.fileno(), False
    try:
        return open_tty(), True
    except OSError as exc:
        logger.warning("no_controlling_terminal", device=TTY_DEVICE, error=str(exc))
        return None


def run_checklist(
    tree: Tree,
    policy: CheckPolicy,
    *,
    expand_everything: bool = False,
    theme_name: str | None = None,
    no_color: bool = False,
    interactive: bool = True,
    title: str = DEFAULT_TITLE,
) -> list[str]:
    """Run one checklist session and print its export; return exported names."""
    session = ChecklistSession.create(tree, policy, expand_everything=expand_everything)
    logger.info("session_start", policy=policy.value, rows=len(session.rows), interactive=interactive)

    screen = _screen_fd() if interactive and sys.stdin.isatty() else None
    if screen is not None:
        screen_fd, owned = screen
        try:
            stdin_fd = sys.stdin.fileno()
            terminal = TerminalController(stdin_fd=stdin_fd, stdout_fd=screen_fd)
            options = RuntimeLoopOptions(title=title, theme=resolve_theme(theme_name, no_color=no_color))
            run_main_loop(session, terminal, stdin_fd, options)
        finally:
            if owned:
                os.close(screen_fd)
    else:
        logger.debug("non_interactive_export")

    names = session.export()
    write_export(names, no_color=no_color)
    return names
