"""Public package surface for lazychecklist.

Exports ``main`` for programmatic CLI invocation. The tree model lives in
``lazychecklist.tree_model`` and is importable without the terminal layer.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main"]
