"""Export output formatting.

Exported names are written as a pretty-printed JSON array. On a color TTY the
array is highlighted with pygments; piped output stays plain JSON.
"""

from __future__ import annotations

import json
import sys

from pygments import highlight
from pygments.formatters import Terminal256Formatter
from pygments.lexers import JsonLexer
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

DEFAULT_STYLE = "monokai"


def format_export(names: list[str]) -> str:
    return json.dumps(names, indent=2, ensure_ascii=False) + "\n"


def colorize_export(text: str, style: str = DEFAULT_STYLE) -> str:
    """Return ``text`` highlighted as JSON for a terminal."""
    try:
        get_style_by_name(style)
    except ClassNotFound:
        style = DEFAULT_STYLE
    return highlight(text, JsonLexer(), Terminal256Formatter(style=style))


def write_export(names: list[str], *, no_color: bool = False, style: str = DEFAULT_STYLE) -> None:
    """Write exported names to stdout, highlighted only for a color TTY."""
    text = format_export(names)
    if not no_color and sys.stdout.isatty():
        text = colorize_export(text, style)
    sys.stdout.write(text)
    sys.stdout.flush()
