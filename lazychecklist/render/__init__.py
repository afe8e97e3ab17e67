"""Rendering for the checklist screen.

Frames are composed as one string (title, key hints, visible rows) and
written in a single ``os.write`` so the terminal never shows a partial frame.
Composition is side-effect free; only ``render_frame`` touches the terminal.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from ..tree_model import FlatRow
from ..ui_theme import DEFAULT_THEME, UITheme
from .ansi import clip_ansi_line

DEFAULT_TITLE = "Service Tree Navigator"
KEY_HINT = "↑↓ Navigate | → Expand | ← Collapse | SPACE/ENTER Toggle | ? Help | Q Quit"
EXPANDED_MARKER = "▼ "
COLLAPSED_MARKER = "▶ "
LEAF_MARKER = "  "
CHECKED_BOX = "[✓]"
UNCHECKED_BOX = "[ ]"


@dataclass(frozen=True)
class RowView:
    """Display data for one row, resolved against the active check policy."""

    row: FlatRow
    checked: bool
    description: str | None
    selected: bool


def format_row(view: RowView, theme: UITheme | None = None) -> str:
    """Render one checklist row as ANSI-styled text."""
    active_theme = theme or DEFAULT_THEME
    row = view.row
    indent = "  " * row.level
    if row.is_parent:
        marker = EXPANDED_MARKER if row.expanded else COLLAPSED_MARKER
    else:
        marker = LEAF_MARKER
    checkbox = CHECKED_BOX if view.checked else UNCHECKED_BOX
    if view.selected:
        color = active_theme.selected
    elif view.checked:
        color = active_theme.checked
    else:
        color = active_theme.unchecked
    reset = active_theme.reset
    if view.selected:
        text = f"{color}{indent}{marker}{checkbox} {row.name}{reset}"
    else:
        marker_color = active_theme.marker
        text = f"{color}{indent}{marker_color}{marker}{reset}{color}{checkbox} {row.name}{reset}"
    if view.description:
        text += f" {active_theme.description}{view.description}{reset}"
    return text


def header_lines(title: str, show_help: bool, theme: UITheme | None = None) -> list[str]:
    active_theme = theme or DEFAULT_THEME
    reset = active_theme.reset
    lines = [f"{active_theme.title}{title}{reset}"]
    if show_help:
        lines.append(f"{active_theme.hint}{KEY_HINT}{reset}")
    lines.append("")
    return lines


def scroll_start(selected: int, start: int, visible: int, total: int) -> int:
    """Return list offset that keeps ``selected`` inside a ``visible``-row window."""
    if visible <= 0:
        return 0
    if selected < start:
        start = selected
    elif selected >= start + visible:
        start = selected - visible + 1
    return max(0, min(start, max(0, total - visible)))


def build_frame(
    views: list[RowView],
    *,
    title: str,
    show_help: bool,
    width: int,
    height: int,
    list_start: int,
    theme: UITheme | None = None,
) -> tuple[str, int]:
    """Compose a full frame; return ``(frame_text, adjusted_list_start)``."""
    active_theme = theme or DEFAULT_THEME
    header = header_lines(title, show_help, active_theme)
    list_rows = max(1, height - len(header))
    selected = next((idx for idx, view in enumerate(views) if view.selected), 0)
    start = scroll_start(selected, list_start, list_rows, len(views))

    out: list[str] = ["\033[H\033[J"]
    lines = list(header)
    lines.extend(format_row(view, active_theme) for view in views[start : start + list_rows])
    for idx, line in enumerate(lines):
        clipped = clip_ansi_line(line, width)
        out.append(clipped)
        if "\033" in clipped:
            out.append("\033[0m")
        if idx < len(lines) - 1:
            out.append("\r\n")
    return "".join(out), start


def render_frame(frame: str, fd: int) -> None:
    os.write(fd, frame.encode("utf-8", errors="replace"))


__all__ = [
    "DEFAULT_TITLE",
    "KEY_HINT",
    "RowView",
    "build_frame",
    "format_row",
    "header_lines",
    "render_frame",
    "scroll_start",
]
