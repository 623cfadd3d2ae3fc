"""Apply a keyboard layout to the console or X session."""

from __future__ import annotations

import shutil

from loguru import logger

from lunitool.services.commands import run_command

# Console first, then X11.
LAYOUT_TOOLS = ("loadkeys", "setxkbmap")


def apply_layout(layout: str) -> bool:
    for tool in LAYOUT_TOOLS:
        if shutil.which(tool) is None:
            continue
        result = run_command([tool, layout])
        if result.returncode == 0:
            logger.info(f"Keyboard layout set to {layout} via {tool}")
            return True
    logger.warning(f"Could not set keyboard layout {layout} with system tools")
    return False
