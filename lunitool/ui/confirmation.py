"""Exit confirmation prompt shared by menus, the quit entry and signals."""

from __future__ import annotations

from typing import TYPE_CHECKING

from lunitool.logging import LoggerFactory

if TYPE_CHECKING:
    from lunitool.app.context import AppContext

EXIT_PROMPT_KEY = "LANG_EXIT_CONFIRM"

log = LoggerFactory.for_menu()


def confirm_exit(ctx: AppContext, prompt_key: str = EXIT_PROMPT_KEY) -> bool:
    """Ask whether to leave the program. Every call prompts again."""
    log.debug("Showing exit confirmation")
    confirmed = ctx.backend.show_confirm(
        ctx.text(prompt_key),
        ctx.text("LANG_YES"),
        ctx.text("LANG_NO"),
    )
    log.debug(f"Exit confirmation: {'yes' if confirmed else 'no'}")
    return confirmed
