"""Main interactive event loop for the checklist UI.

Each iteration redraws when state is dirty, then blocks on one key and
dispatches it. The loop returns once a quit key arrives; the caller exports
after the terminal has been restored.
"""

from __future__ import annotations

import os
import shutil
from collections.abc import Callable
from dataclasses import dataclass

from ..input import KeyRegistry, build_key_registry, handle_key, read_key
from ..render import RowView, build_frame, render_frame
from ..terminal import TerminalController
from ..ui_theme import UITheme
from .session import ChecklistSession

RESIZE_POLL_MS = 250


@dataclass(frozen=True)
class RuntimeLoopOptions:
    """Presentation settings for ``run_main_loop``."""

    title: str
    theme: UITheme


def row_views(session: ChecklistSession) -> list[RowView]:
    """Resolve checkbox state and descriptions for every visible row."""
    selected = session.state.selected_idx
    return [
        RowView(
            row=row,
            checked=session.is_checked(row),
            description=session.description_for(row),
            selected=idx == selected,
        )
        for idx, row in enumerate(session.rows)
    ]


def screen_size(fd: int) -> tuple[int, int]:
    """Return ``(columns, lines)`` of the terminal behind ``fd``."""
    try:
        size = os.get_terminal_size(fd)
    except OSError:
        size = shutil.get_terminal_size((80, 24))
    return size.columns, size.lines


def draw(
    session: ChecklistSession,
    options: RuntimeLoopOptions,
    width: int,
    height: int,
    out_fd: int,
) -> None:
    state = session.state
    frame, state.list_start = build_frame(
        row_views(session),
        title=options.title,
        show_help=state.show_help,
        width=width,
        height=height,
        list_start=state.list_start,
        theme=options.theme,
    )
    render_frame(frame, out_fd)
    state.dirty = False


def run_main_loop(
    session: ChecklistSession,
    terminal: TerminalController,
    stdin_fd: int,
    options: RuntimeLoopOptions,
    *,
    key_reader: Callable[[int, int | None], str] | None = None,
    registry: KeyRegistry | None = None,
) -> None:
    """Run the interactive loop until a quit key arrives or stdin hangs up."""
    state = session.state
    keys = registry if registry is not None else build_key_registry(session)
    read = key_reader if key_reader is not None else read_key
    last_size: tuple[int, int] | None = None

    with terminal.raw_mode():
        while True:
            size = screen_size(terminal.stdout_fd)
            if size != last_size:
                last_size = size
                state.dirty = True
            if state.dirty:
                draw(session, options, size[0], size[1], terminal.stdout_fd)

            key = read(stdin_fd, RESIZE_POLL_MS)
            if not key:
                continue
            if handle_key(key, keys):
                return
