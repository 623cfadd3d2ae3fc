from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class MenuItem:
    id: str
    label: str
    enabled: bool = True
    help_text: Optional[str] = None


@dataclass(frozen=True)
class Selected:
    id: str


@dataclass(frozen=True)
class Cancelled:
    # True for ESC, False for the explicit "back" button.
    escaped: bool = False


@dataclass(frozen=True)
class Errored:
    reason: str


ScreenResult = Union[Selected, Cancelled, Errored]
MenuOutcome = Union[Selected, Cancelled]
