"""UI theme definitions and selection helpers.

Themes are UI-only ANSI palettes (title bar, candidate list, detail pane).
Highlighting style for structured residue values remains a separate setting.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    reverse: str
    divider: str
    title: str
    prompt: str
    query: str
    placeholder: str
    candidate: str
    candidate_focused: str
    section: str
    label: str
    bullet: str
    dim: str
    error: str
    residue_style: str


DARK_THEME = UITheme(
    name="dark",
    reset="\033[0m",
    reverse="\033[7m",
    divider="\033[2m",
    title="\033[1;38;5;229m",
    prompt="\033[38;5;44m",
    query="\033[1;38;5;81m",
    placeholder="\033[2;38;5;250m",
    candidate="\033[38;5;252m",
    candidate_focused="\033[1;48;5;240;38;5;231m",
    section="\033[1;38;5;81m",
    label="\033[1;38;5;229m",
    bullet="\033[38;5;109m",
    dim="\033[2;38;5;250m",
    error="\033[1;38;5;203m",
    residue_style="monokai",
)

LIGHT_THEME = UITheme(
    name="light",
    reset="\033[0m",
    reverse="\033[7m",
    divider="\033[38;5;250m",
    title="\033[1;38;5;24m",
    prompt="\033[38;5;31m",
    query="\033[1;38;5;25m",
    placeholder="\033[38;5;245m",
    candidate="\033[38;5;236m",
    candidate_focused="\033[1;48;5;253;38;5;16m",
    section="\033[1;38;5;25m",
    label="\033[1;38;5;94m",
    bullet="\033[38;5;66m",
    dim="\033[38;5;245m",
    error="\033[1;38;5;160m",
    residue_style="friendly",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    reverse="",
    divider="",
    title="",
    prompt="",
    query="",
    placeholder="",
    candidate="",
    candidate_focused="",
    section="",
    label="",
    bullet="",
    dim="",
    error="",
    residue_style="",
)

_THEMES: dict[str, UITheme] = {
    DARK_THEME.name: DARK_THEME,
    LIGHT_THEME.name: LIGHT_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to dark."""
    if not name:
        return DARK_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DARK_THEME.name


def resolve_theme(name: str | None, no_color: bool = False) -> UITheme:
    """Return the palette for ``name``; ``no_color`` forces the plain palette."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


def toggled_theme_name(name: str | None) -> str:
    """Return the other of the dark/light pair."""
    return LIGHT_THEME.name if normalize_theme_name(name) == DARK_THEME.name else DARK_THEME.name
