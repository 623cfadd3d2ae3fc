"""Dialog box sizing derived from the current terminal size."""

from __future__ import annotations

import shutil
from dataclasses import dataclass
from typing import Optional

MIN_WIDTH = 80
MAX_WIDTH = 120
MIN_HEIGHT = 25
MAX_HEIGHT = 40

WIDTH_PERCENT = 90
HEIGHT_PERCENT = 80
CONTENT_PERCENT = 60


def _clamp(value: int, lower: int, upper: int) -> int:
    return max(lower, min(upper, value))


@dataclass(frozen=True)
class GeometrySpec:
    width: int
    height: int
    content_height: int

    def half(self) -> tuple[int, int]:
        """(height, width) for message, warning, error and input boxes."""
        return self.height // 2, self.width // 2

    def confirm_box(self) -> tuple[int, int]:
        """(height, width) for yes/no prompts."""
        return self.height // 4, self.width // 2

    def gauge_box(self) -> tuple[int, int]:
        """(height, width) for the progress gauge."""
        return self.height // 2, self.width * 70 // 100


def compute(columns: Optional[int] = None, rows: Optional[int] = None) -> GeometrySpec:
    """Compute dialog geometry for a terminal of ``columns`` x ``rows``.

    When either dimension is omitted the live terminal size is read. The
    result is never cached: the terminal may be resized between screens.
    """
    if columns is None or rows is None:
        size = shutil.get_terminal_size()
        columns = size.columns if columns is None else columns
        rows = size.lines if rows is None else rows
    width = _clamp(columns * WIDTH_PERCENT // 100, MIN_WIDTH, MAX_WIDTH)
    height = _clamp(rows * HEIGHT_PERCENT // 100, MIN_HEIGHT, MAX_HEIGHT)
    content_height = height * CONTENT_PERCENT // 100
    return GeometrySpec(width=width, height=height, content_height=content_height)
