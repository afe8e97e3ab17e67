"""Input-layer public API for key decoding and checklist key dispatch."""

from .key_registry import KeyBinding, KeyRegistry
from .keys import QUIT_KEYS, build_key_registry, handle_key
from .reader import EOF_TOKEN, ESC_SEQUENCE_TIMEOUT_MS, read_key

__all__ = [
    "read_key",
    "EOF_TOKEN",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "KeyBinding",
    "KeyRegistry",
    "QUIT_KEYS",
    "build_key_registry",
    "handle_key",
]
