from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from lunitool.config import settings
from lunitool.i18n import TextProvider

if TYPE_CHECKING:
    from lunitool.app.lifecycle import Lifecycle
    from lunitool.ui.dialog import DialogBackend


@dataclass
class SessionConfig:
    language: str = settings.DEFAULT_LANGUAGE
    keyboard_layout: str = settings.DEFAULT_KEYBOARD
    theme: str = settings.DEFAULT_THEME
    # Set once the user has picked a value in this session.
    language_chosen: bool = False
    keyboard_chosen: bool = False


@dataclass
class AppContext:
    backend: DialogBackend
    texts: TextProvider
    session: SessionConfig
    lifecycle: Lifecycle

    def text(self, key: str) -> str:
        return self.texts.lookup(key, self.session.language)
