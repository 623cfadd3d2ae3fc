"""Setup screen options and menu item builders.

Edit this file to adjust the bundled languages or keyboard layouts.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, List, Mapping, Tuple

from lunitool.menu.model import MenuItem
from lunitool.ui.theme import THEMES

if TYPE_CHECKING:
    from lunitool.app.context import AppContext
    from lunitool.tasks import TaskDescriptor

# (value, label key)
LANGUAGE_OPTIONS: Tuple[Tuple[str, str], ...] = (
    ("de", "LANG_OPTION_DE"),
    ("en", "LANG_OPTION_EN"),
)

KEYBOARD_OPTIONS: Tuple[Tuple[str, str], ...] = (
    ("de", "LANG_KEYBOARD_DE"),
    ("us", "LANG_KEYBOARD_US"),
)


def option_items(ctx: AppContext, options: Iterable[Tuple[str, str]]) -> List[MenuItem]:
    return [MenuItem(id=value, label=ctx.text(key)) for value, key in options]


def language_items(ctx: AppContext) -> List[MenuItem]:
    return option_items(ctx, LANGUAGE_OPTIONS)


def keyboard_items(ctx: AppContext) -> List[MenuItem]:
    # Offer the layout matching the current language first.
    options = list(KEYBOARD_OPTIONS)
    if ctx.session.language == "en":
        options.sort(key=lambda option: option[0] != "us")
    return option_items(ctx, options)


def main_menu_items(
    ctx: AppContext,
    descriptors: Iterable[TaskDescriptor],
    availability: Mapping[str, bool],
) -> List[MenuItem]:
    items = []
    for descriptor in descriptors:
        help_text = ctx.text(descriptor.description_key)
        if not availability.get(descriptor.id, False):
            help_text = f"{help_text} ({ctx.text('LANG_NOT_AVAILABLE_SHORT')})"
        items.append(
            MenuItem(
                id=descriptor.id,
                label=ctx.text(descriptor.title_key),
                help_text=help_text,
            )
        )
    return items


def theme_items(current: str) -> List[MenuItem]:
    """Named colour themes; the active one is marked with an asterisk."""
    return [
        MenuItem(
            id=theme.id,
            label=f"{theme.name} *" if theme.id == current else theme.name,
        )
        for theme in THEMES.values()
    ]
