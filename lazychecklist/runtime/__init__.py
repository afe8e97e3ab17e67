"""Public runtime orchestration entry points.

This package groups the checklist bootstrap (`run_checklist`), the session
controller and the lower-level event loop used by tests and the CLI.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .loop import RuntimeLoopOptions
    from .session import ChecklistSession


def run_checklist(*args, **kwargs):
    """Lazily import the bootstrap to keep ``import lazychecklist.runtime`` light."""
    from .app import run_checklist as _run_checklist

    return _run_checklist(*args, **kwargs)


def run_main_loop(*args, **kwargs):
    """Lazily import loop runner to avoid package-import cycles."""
    from .loop import run_main_loop as _run_main_loop

    return _run_main_loop(*args, **kwargs)


def __getattr__(name: str):
    if name == "RuntimeLoopOptions":
        from . import loop as _loop

        return getattr(_loop, name)
    if name == "ChecklistSession":
        from . import session as _session

        return getattr(_session, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "run_checklist",
    "run_main_loop",
    "RuntimeLoopOptions",
    "ChecklistSession",
]
