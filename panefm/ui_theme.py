"""UI theme definitions and selection helpers.

Themes are UI-only ANSI palettes (panes, listing, status line, help). Syntax
highlighting style for previews remains a separate setting.
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
    header_active: str
    header_inactive: str
    entry_dir: str
    entry_file: str
    entry_hidden: str
    status_name: str
    status_bar: str
    status_position: str
    status_logo: str
    status_error: str
    command_text: str
    command_placeholder: str
    help_heading: str
    help_key: str
    help_dim: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    reverse="\033[7m",
    divider="\033[2m",
    header_active="\033[1;38;5;81m",
    header_inactive="\033[2;38;5;250m",
    entry_dir="\033[1;34m",
    entry_file="\033[38;5;252m",
    entry_hidden="\033[2;38;5;245m",
    status_name="\033[1;38;5;230;48;5;63m",
    status_bar="\033[38;5;252;48;5;236m",
    status_position="\033[38;5;230;48;5;61m",
    status_logo="\033[1;38;5;230;48;5;99m",
    status_error="\033[1;38;5;231;48;5;124m",
    command_text="\033[1;38;5;81;48;5;236m",
    command_placeholder="\033[2;38;5;250;48;5;236m",
    help_heading="\033[1;38;5;81m",
    help_key="\033[38;5;229m",
    help_dim="\033[2;38;5;250m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    reverse="\033[7m",
    divider="\033[2;38;5;31m",
    header_active="\033[1;38;5;45m",
    header_inactive="\033[2;38;5;110m",
    entry_dir="\033[1;38;5;45m",
    entry_file="\033[38;5;252m",
    entry_hidden="\033[2;38;5;110m",
    status_name="\033[1;38;5;231;48;5;25m",
    status_bar="\033[38;5;153;48;5;17m",
    status_position="\033[38;5;231;48;5;31m",
    status_logo="\033[1;38;5;231;48;5;39m",
    status_error="\033[1;38;5;231;48;5;160m",
    command_text="\033[1;38;5;45;48;5;17m",
    command_placeholder="\033[2;38;5;110;48;5;17m",
    help_heading="\033[1;38;5;45m",
    help_key="\033[38;5;153m",
    help_dim="\033[2;38;5;110m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    reverse="",
    divider="",
    header_active="",
    header_inactive="",
    entry_dir="",
    entry_file="",
    entry_hidden="",
    status_name="",
    status_bar="",
    status_position="",
    status_logo="",
    status_error="",
    command_text="",
    command_placeholder="",
    help_heading="",
    help_key="",
    help_dim="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
    PLAIN_THEME.name: PLAIN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    return tuple(_THEMES)


def resolve_theme(name: str | None) -> UITheme:
    """Return the named theme, or the default one for unknown names."""
    if not name:
        return DEFAULT_THEME
    return _THEMES.get(name.strip().lower(), DEFAULT_THEME)
