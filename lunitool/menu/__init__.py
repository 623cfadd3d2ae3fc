from lunitool.menu.model import (
    Cancelled,
    Errored,
    MenuItem,
    MenuOutcome,
    ScreenResult,
    Selected,
)
from lunitool.menu.navigator import MenuEngine

__all__ = [
    "Cancelled",
    "Errored",
    "MenuEngine",
    "MenuItem",
    "MenuOutcome",
    "ScreenResult",
    "Selected",
]
