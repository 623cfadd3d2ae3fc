"""Signal handling and the single teardown path.

SIGINT and SIGTERM run the same exit confirmation as the menu's quit entry.
While the prompt is open further signals are ignored. If a signal lands
while another dialog owns the terminal it is parked and handled by
:meth:`Lifecycle.process_pending` once that dialog returns, so two dialogs
never run at once.
"""

from __future__ import annotations

import atexit
import signal
from typing import Callable, Dict, Optional

from lunitool.logging import LoggerFactory

HANDLED_SIGNALS = (signal.SIGINT, signal.SIGTERM)

log = LoggerFactory.for_system()


class Lifecycle:
    def __init__(
        self,
        restore_terminal: Callable[[], None],
        *,
        confirm: Optional[Callable[[], bool]] = None,
        dialog_active: Optional[Callable[[], bool]] = None,
    ) -> None:
        self._restore_terminal = restore_terminal
        self.confirm = confirm
        self._dialog_active = dialog_active or (lambda: False)
        self._previous: Dict[int, object] = {}
        self._installed = False
        self._atexit_registered = False
        self._prompting = False
        self._pending = False
        self._torn_down = False

    @property
    def torn_down(self) -> bool:
        return self._torn_down

    def install(self) -> None:
        if self._installed:
            return
        for signum in HANDLED_SIGNALS:
            self._previous[signum] = signal.signal(signum, self._handle_signal)
        self._installed = True
        if not self._atexit_registered:
            atexit.register(self.teardown)
            self._atexit_registered = True
        log.debug("Signal handlers installed")

    def uninstall(self) -> None:
        if not self._installed:
            return
        for signum, previous in self._previous.items():
            signal.signal(signum, previous if previous is not None else signal.SIG_DFL)
        self._previous.clear()
        self._installed = False
        log.debug("Signal handlers removed")

    def _handle_signal(self, signum, _frame) -> None:
        name = signal.Signals(signum).name
        if self._prompting or self._torn_down:
            log.debug(f"{name} ignored: exit already in progress")
            return
        if self._dialog_active():
            log.debug(f"{name} deferred until the active dialog returns")
            self._pending = True
            return
        log.info(f"Received {name}")
        self.request_exit()

    def process_pending(self) -> bool:
        """Handle a signal parked while a dialog was on screen.

        Returns True if a parked signal was handled and the user chose to
        stay. A confirmed exit does not return.
        """
        if not self._pending:
            return False
        self._pending = False
        self.request_exit()
        return True

    def ask_exit(self) -> bool:
        """Run the exit confirmation with signals held off.

        Signals arriving while the prompt is open are dropped, not parked.
        """
        if self._prompting:
            return False
        self._prompting = True
        try:
            confirmed = self.confirm() if self.confirm is not None else True
        finally:
            self._prompting = False
            self._pending = False
        return confirmed

    def request_exit(self) -> None:
        """Confirm, then either resume or shut down with status 0."""
        if self._prompting:
            return
        if self.ask_exit():
            log.info("Exiting on user request")
            self.shutdown(0)
        log.info("Exit declined, resuming")

    def teardown(self) -> None:
        """Restore the terminal. Runs at most once per process."""
        if self._torn_down:
            return
        self._torn_down = True
        self.uninstall()
        log.info("Cleaning up and exiting")
        self._restore_terminal()

    def shutdown(self, code: int = 0) -> None:
        self.teardown()
        raise SystemExit(code)
