"""Checklist key bindings.

``UP``/``DOWN`` move the highlight, ``RIGHT``/``LEFT`` expand or collapse the
current parent, space or Enter toggles it, ``q``/Esc quits. ``h/j/k/l`` are
accepted as vim-style aliases. Ctrl+D and a hung-up stdin also end the session.
"""

from __future__ import annotations

import structlog

from ..runtime.session import ChecklistSession
from .key_registry import KeyBinding, KeyRegistry
from .reader import EOF_TOKEN

logger = structlog.get_logger(__name__)

QUIT_KEYS: tuple[str, ...] = ("q", "Q", "ESC", "CTRL_C", "CTRL_D", EOF_TOKEN)
ACTION_QUIT = "quit"


def build_key_registry(session: ChecklistSession) -> KeyRegistry:
    """Bind every checklist action to its key tokens for ``session``."""
    return KeyRegistry().register(
        KeyBinding(("UP", "k"), "up", lambda: session.move_selection(-1)),
        KeyBinding(("DOWN", "j"), "down", lambda: session.move_selection(1)),
        KeyBinding(("RIGHT", "l"), "expand", session.expand_selected),
        KeyBinding(("LEFT", "h"), "collapse", session.collapse_selected),
        KeyBinding((" ", "ENTER_CR", "ENTER_LF"), "toggle", session.toggle_selected),
        KeyBinding(("?",), "help", session.toggle_help),
        KeyBinding(QUIT_KEYS, ACTION_QUIT, lambda: True),
    )


def handle_key(key: str, registry: KeyRegistry) -> bool:
    """Handle one key token and return ``True`` when the session should end."""
    action = registry.action_for(key)
    if action is None:
        return False
    logger.debug("key", key=key, action=action)
    if action == ACTION_QUIT:
        return True
    registry.dispatch(key)
    return False
