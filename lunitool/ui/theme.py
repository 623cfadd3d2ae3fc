"""Named dialogrc colour schemes.

dialog only knows the eight curses colours, so each theme is reduced to a
small palette that is expanded into a full dialogrc. The active theme is
written to ``<config dir>/dialogrc`` and exported through ``DIALOGRC``; every
later dialog invocation picks it up.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

from loguru import logger

from lunitool.config.settings import DEFAULT_THEME

DIALOGRC_NAME = "dialogrc"


@dataclass(frozen=True)
class DialogTheme:
    id: str
    name: str
    screen: str
    background: str
    text: str
    title: str
    accent: str
    accent_text: str
    border: str


THEMES: Dict[str, DialogTheme] = {
    theme.id: theme
    for theme in (
        DialogTheme("ableton_disco", "Ableton Disco", "BLACK", "BLACK", "WHITE", "MAGENTA", "MAGENTA", "WHITE", "CYAN"),
        DialogTheme("brown_sugar", "Brown Sugar", "BLACK", "BLACK", "YELLOW", "RED", "YELLOW", "BLACK", "RED"),
        DialogTheme("lady_like", "Lady Like", "MAGENTA", "WHITE", "BLACK", "MAGENTA", "MAGENTA", "WHITE", "MAGENTA"),
        DialogTheme("materia_matter", "Materia Matter", "BLACK", "BLACK", "WHITE", "CYAN", "CYAN", "BLACK", "BLUE"),
        DialogTheme("ratatui_rules", "Ratatui Rules", "BLUE", "BLUE", "WHITE", "CYAN", "YELLOW", "BLACK", "WHITE"),
        DialogTheme("terminal_spirit", "Terminal Spirit", "BLACK", "BLACK", "WHITE", "GREEN", "GREEN", "BLACK", "WHITE"),
        DialogTheme("ubuntu_joy", "Ubuntu Joy", "MAGENTA", "BLACK", "WHITE", "YELLOW", "RED", "WHITE", "YELLOW"),
        DialogTheme("white_sur", "White Sur", "WHITE", "WHITE", "BLACK", "BLUE", "BLUE", "WHITE", "BLACK"),
    )
}

DIALOGRC_TEMPLATE = """\
# Dialog configuration for lunitool
# Theme: {name}

# Screen
use_shadow = OFF
use_colors = ON
screen_color = ({screen},{screen},OFF)
dialog_color = ({text},{background},OFF)
title_color = ({title},{background},ON)
border_color = ({border},{background},OFF)
border2_color = ({border},{background},OFF)
shadow_color = (BLACK,BLACK,OFF)

# Buttons
button_active_color = ({accent_text},{accent},ON)
button_inactive_color = ({text},{background},OFF)
button_key_active_color = ({accent_text},{accent},ON)
button_key_inactive_color = ({title},{background},OFF)
button_label_active_color = ({accent_text},{accent},ON)
button_label_inactive_color = ({text},{background},ON)

# Menu entries
menubox_color = ({text},{background},OFF)
menubox_border_color = ({border},{background},OFF)
menubox_border2_color = ({border},{background},OFF)
item_color = ({text},{background},OFF)
item_selected_color = ({accent_text},{accent},ON)
tag_color = ({title},{background},ON)
tag_selected_color = ({accent_text},{accent},ON)
tag_key_color = ({title},{background},ON)
tag_key_selected_color = ({accent_text},{accent},ON)

# Forms and input
inputbox_color = ({text},{background},OFF)
inputbox_border_color = ({border},{background},OFF)
searchbox_color = ({text},{background},OFF)
searchbox_title_color = ({title},{background},ON)
searchbox_border_color = ({border},{background},OFF)
position_indicator_color = ({title},{background},ON)
form_active_text_color = ({accent_text},{accent},ON)
form_text_color = ({text},{background},ON)
form_item_readonly_color = ({border},{background},ON)
gauge_color = ({accent},{background},ON)

# Navigation
check_color = ({text},{background},OFF)
check_selected_color = ({accent_text},{accent},ON)
uarrow_color = ({title},{background},ON)
darrow_color = ({title},{background},ON)
itemhelp_color = ({text},{background},OFF)
"""


def get_theme(theme_id: Optional[str]) -> DialogTheme:
    """Return the theme for ``theme_id``; unknown ids fall back to the default."""
    theme = THEMES.get(theme_id or DEFAULT_THEME)
    if theme is None:
        logger.warning(f"Unknown theme {theme_id!r}, using {DEFAULT_THEME}")
        theme = THEMES[DEFAULT_THEME]
    return theme


def render_dialogrc(theme: DialogTheme) -> str:
    return DIALOGRC_TEMPLATE.format(
        name=theme.name,
        screen=theme.screen,
        background=theme.background,
        text=theme.text,
        title=theme.title,
        accent=theme.accent,
        accent_text=theme.accent_text,
        border=theme.border,
    )


def install_dialogrc(config_dir: Path, theme_id: Optional[str] = DEFAULT_THEME) -> Optional[Path]:
    """Write the dialogrc for ``theme_id`` and point ``DIALOGRC`` at it.

    Returns the path in use, or None when the file cannot be written; dialog
    then keeps whatever colours it had before.
    """
    theme = get_theme(theme_id)
    path = config_dir / DIALOGRC_NAME
    content = render_dialogrc(theme)
    try:
        if not path.exists() or path.read_text(encoding="utf-8") != content:
            config_dir.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
    except OSError as error:
        logger.warning(f"Could not write {path}: {error}")
        return None
    os.environ["DIALOGRC"] = str(path)
    logger.debug(f"Dialog theme: {theme.name}")
    return path
