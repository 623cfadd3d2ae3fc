from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from lunitool.exceptions import DialogUnavailableError
from lunitool.logging import LoggerFactory
from lunitool.menu.model import Cancelled, Errored, MenuItem, MenuOutcome, Selected

if TYPE_CHECKING:
    from lunitool.app.context import AppContext

# Consecutive backend failures after which the dialog program is treated as broken.
MAX_BACKEND_ERRORS = 5

log = LoggerFactory.for_menu()


class MenuEngine:
    """Show a menu until the user picks an entry or presses "back".

    ESC opens the exit confirmation instead of returning: "yes" shuts the
    program down, "no" shows the same menu again. Selections that do not
    match an enabled item are reported and the menu is shown again.
    """

    def __init__(self, ctx: AppContext) -> None:
        self._ctx = ctx

    def run(
        self,
        title: str,
        items: Sequence[MenuItem],
        *,
        text: str = "",
    ) -> MenuOutcome:
        ctx = self._ctx
        known = {item.id: item for item in items}
        backend_errors = 0
        while True:
            log.debug(f"Showing menu: {title}")
            result = ctx.backend.show_menu(
                title,
                items,
                text=text,
                ok_label=ctx.text("LANG_SELECT"),
                cancel_label=ctx.text("LANG_BACK"),
            )
            if ctx.lifecycle.process_pending():
                # The interrupt also ended the dialog; its result is void.
                log.debug(f"Interrupt declined, showing {title} again")
                continue
            if not isinstance(result, Errored):
                backend_errors = 0

            if isinstance(result, Selected):
                item = known.get(result.id)
                if item is not None and item.enabled:
                    log.debug(f"Menu selection: {result.id}")
                    return result
                log.warning(f"Unknown menu selection {result.id!r} in {title}")
                self._report("LANG_INVALID_SELECTION")
                continue

            if isinstance(result, Cancelled):
                if not result.escaped:
                    log.debug(f"Menu cancelled: {title}")
                    return result
                ctx.lifecycle.request_exit()
                continue

            if isinstance(result, Errored):
                backend_errors += 1
                log.error(f"Menu {title} failed: {result.reason}")
                if backend_errors >= MAX_BACKEND_ERRORS:
                    raise DialogUnavailableError(ctx.backend.program, result.reason)
                self._report("LANG_DIALOG_FAILED", result.reason)
                continue

    def _report(self, key: str, detail: str = "") -> None:
        ctx = self._ctx
        message = ctx.text(key)
        if detail:
            message = f"{message}\n\n{detail}"
        ctx.backend.show_error(
            ctx.text("LANG_ERROR"),
            message,
            label=ctx.text("LANG_ERROR"),
            ok_label=ctx.text("LANG_OK"),
        )
