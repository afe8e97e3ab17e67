"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the checklist pane. Syntax colors for the
exported JSON come from pygments and are a separate setting.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    title: str
    hint: str
    marker: str
    selected: str
    checked: str
    unchecked: str
    description: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    title="\033[1;34m",
    hint="\033[38;5;245m",
    marker="\033[38;5;44m",
    selected="\033[1;34;40m",
    checked="\033[32m",
    unchecked="\033[37m",
    description="\033[2;37m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    title="\033[1;38;5;45m",
    hint="\033[2;38;5;110m",
    marker="\033[38;5;39m",
    selected="\033[1;38;5;45;48;5;236m",
    checked="\033[38;5;84m",
    unchecked="\033[38;5;252m",
    description="\033[2;38;5;110m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    title="",
    hint="",
    marker="",
    selected="",
    checked="",
    unchecked="",
    description="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]
