"""Key-token to action dispatch table."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True)
class KeyBinding:
    """One action reachable from one or more key tokens."""

    keys: tuple[str, ...]
    action: str
    handler: Callable[[], bool | None]


class KeyRegistry:
    """Map key tokens to handlers; later bindings override earlier ones."""

    def __init__(self) -> None:
        self._bindings: dict[str, KeyBinding] = {}

    def register(self, *bindings: KeyBinding) -> KeyRegistry:
        for binding in bindings:
            for key in binding.keys:
                self._bindings[key] = binding
        return self

    def action_for(self, key: str) -> str | None:
        binding = self._bindings.get(key)
        return binding.action if binding is not None else None

    def dispatch(self, key: str) -> bool | None:
        """Run the handler bound to ``key``; ``None`` when the key is unbound."""
        binding = self._bindings.get(key)
        if binding is None:
            return None
        return binding.handler()
