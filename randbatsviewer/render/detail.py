"""Detail-pane rendering for a committed selection.

Turns a ``Selection`` into styled text rows. Structured residue values are
shown as indented JSON highlighted with Pygments.
"""

from __future__ import annotations

from functools import lru_cache

from pygments import highlight
from pygments.formatters import Terminal256Formatter
from pygments.lexers import JsonLexer
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

from ..catalog.types import format_category, sprite_url
from ..selector.controller import Selection
from ..ui_theme import UITheme
from ..view_model.builder import MOVEPOOL_LABEL, format_residue_value, is_structured_value
from ..view_model.types import ChangedStatList, DisplayGroup, InvalidGroup, Residue, RolePartition, SimpleList
from .ansi import sanitize_text

DEFAULT_SET_LABEL = "Default Moveset"
RESIDUE_LABEL = "Other Information"
FALLBACK_STYLE = "monokai"
INDENT = "  "
BULLET = "•"
# Groups rendered one item per row instead of a joined line.
BULLETED_LIST_LABELS = frozenset({MOVEPOOL_LABEL})


@lru_cache(maxsize=16)
def _formatter_for_style(style: str) -> Terminal256Formatter:
    """Return cached formatter, falling back to ``monokai`` for unknown styles."""
    try:
        get_style_by_name(style)
    except ClassNotFound:
        style = FALLBACK_STYLE
    return Terminal256Formatter(style=style)


def highlight_literal(text: str, style: str | None) -> str:
    """Highlight a JSON literal; empty/``None`` style returns text unchanged."""
    if not style:
        return text
    return highlight(text, JsonLexer(), _formatter_for_style(style)).rstrip("\n")


def _label(theme: UITheme, text: str) -> str:
    return f"{theme.label}{text}{theme.reset}"


def _residue_lines(group: Residue, theme: UITheme, style: str | None, indent: str) -> list[str]:
    lines = [f"{indent}{_label(theme, RESIDUE_LABEL)}"]
    inner = indent + INDENT
    for key, value in group.entries:
        key = sanitize_text(key)
        text = sanitize_text(format_residue_value(value))
        if is_structured_value(value):
            lines.append(f"{inner}{_label(theme, f'{key}:')}")
            lines.extend(f"{inner}{INDENT}{row}" for row in highlight_literal(text, style).splitlines())
        else:
            lines.append(f"{inner}{_label(theme, f'{key}:')} {text}")
    return lines


def group_lines(group: DisplayGroup, theme: UITheme, style: str | None = None, indent: str = INDENT) -> list[str]:
    """Return rows for one display group, recursing into role partitions."""
    if isinstance(group, SimpleList):
        if group.label in BULLETED_LIST_LABELS:
            bullet = f"{theme.bullet}{BULLET}{theme.reset}"
            return [f"{indent}{_label(theme, f'{group.label}:')}"] + [
                f"{indent}{INDENT}{bullet} {sanitize_text(item)}" for item in group.items
            ]
        return [f"{indent}{_label(theme, f'{group.label}:')} {sanitize_text(', '.join(group.items))}"]
    if isinstance(group, ChangedStatList):
        bullet = f"{theme.bullet}{BULLET}{theme.reset}"
        return [f"{indent}{_label(theme, f'{group.label}:')}"] + [
            f"{indent}{INDENT}{bullet} {stat}: {value}" for stat, value in group.entries
        ]
    if isinstance(group, Residue):
        return _residue_lines(group, theme, style, indent)
    if isinstance(group, RolePartition):
        return section_lines(group.role, group.groups, theme, style, indent[: -len(INDENT)] if indent else "")
    if isinstance(group, InvalidGroup):
        return [f"{indent}{theme.error}{group.label}: {group.error}{theme.reset}"]
    raise TypeError(f"unsupported display group: {group!r}")


def section_lines(
    title: str,
    groups: tuple[DisplayGroup, ...],
    theme: UITheme,
    style: str | None = None,
    indent: str = "",
) -> list[str]:
    """Return a titled section (one role, or the default set) and its groups."""
    lines = [f"{indent}{theme.section}▾ {title}{theme.reset}"]
    for group in groups:
        lines.extend(group_lines(group, theme, style, indent + INDENT))
    lines.append("")
    return lines


def detail_lines(selection: Selection, theme: UITheme, style: str | None = None) -> list[str]:
    """Return all detail-pane rows for ``selection``.

    Role-partitioned entries render one section per role; default entries
    render a single default-moveset section.
    """
    header = f"{theme.title}{sanitize_text(selection.name)}{theme.reset}"
    if selection.level is not None:
        header += f"  {theme.dim}Level: {selection.level}{theme.reset}"
    lines = [
        header,
        f"{theme.dim}{format_category(selection.category)} · {sprite_url(selection.name)}{theme.reset}",
        "",
    ]
    if all(isinstance(group, RolePartition) for group in selection.groups):
        for group in selection.groups:
            lines.extend(group_lines(group, theme, style, INDENT))
        return lines
    lines.extend(section_lines(DEFAULT_SET_LABEL, selection.groups, theme, style))
    return lines
