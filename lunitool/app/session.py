"""Top-level screen flow.

    LANGUAGE_SELECT -> KEYBOARD_SELECT -> MAIN_MENU -> TASK_DISPATCH -> MAIN_MENU

"Back" on the main menu always revisits the language and keyboard screens.
Cancelling one of those screens keeps the value chosen earlier in the
session; before any value has been chosen the screen is shown again.
The colour theme entry opens its own menu and comes back to the main menu.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Optional

from lunitool.app.context import AppContext
from lunitool.app.state import SessionEvent, SessionState, next_state
from lunitool.config import settings
from lunitool.logging import LoggerFactory
from lunitool.menu import definitions
from lunitool.menu.model import Selected
from lunitool.menu.navigator import MenuEngine
from lunitool.tasks import QUIT_TASK_ID, THEME_TASK_ID, TaskDescriptor

log = LoggerFactory.for_session()


class SessionStateMachine:
    def __init__(
        self,
        ctx: AppContext,
        descriptors: List[TaskDescriptor],
        launch: Callable[[str], None],
        *,
        engine: Optional[MenuEngine] = None,
        apply_keyboard: Optional[Callable[[str], bool]] = None,
        apply_theme: Optional[Callable[[str], object]] = None,
        persist: Callable[[str, object], None] = settings.set_setting,
    ) -> None:
        self.ctx = ctx
        self.descriptors = list(descriptors)
        self._launch = launch
        self._engine = engine or MenuEngine(ctx)
        self._apply_keyboard = apply_keyboard
        self._apply_theme = apply_theme
        self._persist = persist
        self.state = SessionState.LANGUAGE_SELECT
        self._pending_task: Optional[str] = None
        self._handlers: Dict[SessionState, Callable[[], SessionEvent]] = {
            SessionState.LANGUAGE_SELECT: self._language_select,
            SessionState.KEYBOARD_SELECT: self._keyboard_select,
            SessionState.MAIN_MENU: self._main_menu,
            SessionState.TASK_DISPATCH: self._task_dispatch,
        }

    def step(self) -> SessionState:
        """Run the current screen once and apply the resulting transition."""
        event = self._handlers[self.state]()
        previous = self.state
        self.state = next_state(previous, event)
        if previous is not self.state:
            log.debug(f"{previous.name} --{event.value}--> {self.state.name}")
        return self.state

    def run(self) -> None:
        while self.state is not SessionState.EXIT:
            self.step()
        log.info("Session finished")

    # ------------------------------------------------------------------
    # Screens
    # ------------------------------------------------------------------

    def _language_select(self) -> SessionEvent:
        session = self.ctx.session
        outcome = self._engine.run(
            self.ctx.text("LANG_LANGUAGE_SELECT"),
            definitions.language_items(self.ctx),
        )
        if isinstance(outcome, Selected):
            session.language = outcome.id
            session.language_chosen = True
            self._persist("language", outcome.id)
            log.info(f"Language changed to {outcome.id}")
            return SessionEvent.CHOSEN
        if session.language_chosen:
            log.debug(f"Language selection cancelled, keeping {session.language}")
            return SessionEvent.KEPT
        return SessionEvent.RETRY

    def _keyboard_select(self) -> SessionEvent:
        session = self.ctx.session
        outcome = self._engine.run(
            self.ctx.text("LANG_KEYBOARD_SELECT"),
            definitions.keyboard_items(self.ctx),
        )
        if isinstance(outcome, Selected):
            session.keyboard_layout = outcome.id
            session.keyboard_chosen = True
            if self._apply_keyboard is not None:
                self._apply_keyboard(outcome.id)
            self._persist("keyboard", outcome.id)
            log.info(f"Keyboard layout changed to {outcome.id}")
            return SessionEvent.CHOSEN
        if session.keyboard_chosen:
            log.debug(
                f"Keyboard selection cancelled, keeping {session.keyboard_layout}"
            )
            return SessionEvent.KEPT
        return SessionEvent.RETRY

    def _main_menu(self) -> SessionEvent:
        ctx = self.ctx
        availability = {
            descriptor.id: descriptor.availability_check()
            for descriptor in self.descriptors
        }
        outcome = self._engine.run(
            ctx.text("LANG_MAIN_MENU"),
            definitions.main_menu_items(ctx, self.descriptors, availability),
            text=ctx.text("LANG_NAVIGATION"),
        )
        if not isinstance(outcome, Selected):
            log.debug("Back to basic setup")
            return SessionEvent.BACK

        task_id = outcome.id
        if task_id == QUIT_TASK_ID:
            return SessionEvent.QUIT if ctx.lifecycle.ask_exit() else SessionEvent.STAY
        if task_id == THEME_TASK_ID:
            self._theme_select()
            return SessionEvent.STAY
        if not availability.get(task_id, False):
            log.info(f"Task module {task_id} is not available")
            ctx.backend.show_message(
                ctx.text("LANG_INFORMATION"),
                ctx.text("LANG_NOT_IMPLEMENTED"),
                ok_label=ctx.text("LANG_OK"),
            )
            return SessionEvent.UNAVAILABLE
        self._pending_task = task_id
        return SessionEvent.DISPATCH

    def _task_dispatch(self) -> SessionEvent:
        ctx = self.ctx
        task_id = self._pending_task
        self._pending_task = None
        try:
            self._launch(task_id)
        except Exception as error:
            log.exception(f"Task module {task_id} failed")
            ctx.backend.show_error(
                ctx.text("LANG_ERROR"),
                f"{ctx.text('LANG_TASK_FAILED')}\n\n{error}",
                label=ctx.text("LANG_ERROR"),
                ok_label=ctx.text("LANG_OK"),
            )
        ctx.lifecycle.process_pending()
        return SessionEvent.RETURNED

    def _theme_select(self) -> None:
        session = self.ctx.session
        outcome = self._engine.run(
            self.ctx.text("LANG_THEME_SELECT"),
            definitions.theme_items(session.theme),
        )
        if not isinstance(outcome, Selected):
            return
        session.theme = outcome.id
        if self._apply_theme is not None:
            self._apply_theme(outcome.id)
        self._persist("theme", outcome.id)
        log.info(f"Theme changed to {outcome.id}")
