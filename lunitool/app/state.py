from __future__ import annotations

from enum import Enum
from typing import Dict, Tuple


class SessionState(Enum):
    LANGUAGE_SELECT = "language_select"
    KEYBOARD_SELECT = "keyboard_select"
    MAIN_MENU = "main_menu"
    TASK_DISPATCH = "task_dispatch"
    EXIT = "exit"


class SessionEvent(Enum):
    CHOSEN = "chosen"
    # Cancelled with a value already chosen earlier in the session.
    KEPT = "kept"
    # Cancelled before any value was chosen.
    RETRY = "retry"
    BACK = "back"
    DISPATCH = "dispatch"
    UNAVAILABLE = "unavailable"
    QUIT = "quit"
    STAY = "stay"
    RETURNED = "returned"


TRANSITIONS: Dict[Tuple[SessionState, SessionEvent], SessionState] = {
    (SessionState.LANGUAGE_SELECT, SessionEvent.CHOSEN): SessionState.KEYBOARD_SELECT,
    (SessionState.LANGUAGE_SELECT, SessionEvent.KEPT): SessionState.KEYBOARD_SELECT,
    (SessionState.LANGUAGE_SELECT, SessionEvent.RETRY): SessionState.LANGUAGE_SELECT,
    (SessionState.KEYBOARD_SELECT, SessionEvent.CHOSEN): SessionState.MAIN_MENU,
    (SessionState.KEYBOARD_SELECT, SessionEvent.KEPT): SessionState.MAIN_MENU,
    (SessionState.KEYBOARD_SELECT, SessionEvent.RETRY): SessionState.KEYBOARD_SELECT,
    (SessionState.MAIN_MENU, SessionEvent.BACK): SessionState.LANGUAGE_SELECT,
    (SessionState.MAIN_MENU, SessionEvent.DISPATCH): SessionState.TASK_DISPATCH,
    (SessionState.MAIN_MENU, SessionEvent.UNAVAILABLE): SessionState.MAIN_MENU,
    (SessionState.MAIN_MENU, SessionEvent.STAY): SessionState.MAIN_MENU,
    (SessionState.MAIN_MENU, SessionEvent.QUIT): SessionState.EXIT,
    (SessionState.TASK_DISPATCH, SessionEvent.RETURNED): SessionState.MAIN_MENU,
}


def next_state(state: SessionState, event: SessionEvent) -> SessionState:
    try:
        return TRANSITIONS[(state, event)]
    except KeyError:
        raise ValueError(f"No transition from {state.name} on {event.name}") from None
