"""
Pytest configuration and shared fixtures for lunitool tests.

This module provides a scripted stand-in for the dialog backend and an
application context wired to it, so menu and session logic can be tested
without a terminal.
"""

from functools import partial
from typing import Any, List, Optional, Tuple
from unittest.mock import Mock

import pytest

from lunitool.app.context import AppContext, SessionConfig
from lunitool.app.lifecycle import Lifecycle
from lunitool.config import settings
from lunitool.i18n import TextProvider
from lunitool.menu.model import MenuItem, ScreenResult
from lunitool.ui.confirmation import confirm_exit


class FakeBackend:
    """Dialog backend that replays scripted answers and records every call."""

    program = "dialog"

    def __init__(
        self,
        results: Optional[List[ScreenResult]] = None,
        confirms: Optional[List[bool]] = None,
    ) -> None:
        self.results = list(results or [])
        self.confirms = list(confirms or [])
        self.calls: List[Tuple[str, Any]] = []
        self.in_flight = False

    def show_menu(self, title, items, *, text="", ok_label="OK", cancel_label="Cancel"):
        self.calls.append(("menu", (title, list(items), ok_label, cancel_label)))
        if not self.results:
            raise AssertionError(f"No scripted result left for menu {title!r}")
        return self.results.pop(0)

    def show_confirm(self, message, yes_label, no_label):
        self.calls.append(("confirm", (message, yes_label, no_label)))
        if not self.confirms:
            raise AssertionError(f"No scripted answer left for {message!r}")
        return self.confirms.pop(0)

    def show_message(self, title, text, *, ok_label="OK"):
        self.calls.append(("message", (title, text)))

    def show_warning(self, title, text, *, label="Notice", ok_label="OK"):
        self.calls.append(("warning", (title, text)))

    def show_error(self, title, text, *, label="Error", ok_label="OK"):
        self.calls.append(("error", (title, text)))

    def clear(self):
        self.calls.append(("clear", None))

    def of_kind(self, kind: str) -> List[Any]:
        return [payload for name, payload in self.calls if name == kind]

    def menu_titles(self) -> List[str]:
        return [payload[0] for payload in self.of_kind("menu")]


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Point the settings store at a temporary file for every test."""
    monkeypatch.delenv("LUNITOOL_LANG", raising=False)
    monkeypatch.delenv("LUNITOOL_KEYBOARD", raising=False)
    settings_file = tmp_path / "config" / "settings.json"
    monkeypatch.setattr(settings, "SETTINGS_PATH", settings_file)
    monkeypatch.setattr(settings, "CONFIG_DIR", settings_file.parent)
    settings.load_settings()
    return settings_file


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def restore_terminal() -> Mock:
    return Mock()


@pytest.fixture
def lifecycle(restore_terminal, backend) -> Lifecycle:
    return Lifecycle(restore_terminal, dialog_active=lambda: backend.in_flight)


@pytest.fixture
def app_context(backend, lifecycle) -> AppContext:
    """Context with English texts and no choices made yet."""
    ctx = AppContext(
        backend=backend,
        texts=TextProvider(),
        session=SessionConfig(language="en", keyboard_layout="us"),
        lifecycle=lifecycle,
    )
    lifecycle.confirm = partial(confirm_exit, ctx)
    return ctx


@pytest.fixture
def menu_items() -> List[MenuItem]:
    return [
        MenuItem(id="a", label="Alpha"),
        MenuItem(id="k", label="Kilo", help_text="Kilo help"),
        MenuItem(id="off", label="Disabled", enabled=False),
    ]
