"""Package manager detection and installation."""

from __future__ import annotations

import shutil
from typing import Optional

from loguru import logger

from lunitool.services.commands import run_command

# Checked in order; the first one on PATH wins.
PACKAGE_MANAGERS: dict[str, list[str]] = {
    "apt": ["apt-get", "install", "-y"],
    "dnf": ["dnf", "install", "-y"],
    "pacman": ["pacman", "-S", "--noconfirm"],
    "zypper": ["zypper", "--non-interactive", "install"],
}

REFRESH_COMMANDS: dict[str, list[str]] = {
    "apt": ["apt-get", "update"],
}


def detect_package_manager() -> Optional[str]:
    for name, command in PACKAGE_MANAGERS.items():
        if shutil.which(command[0]) is not None:
            return name
    return None


def install_package(package: str) -> bool:
    """Install ``package`` with the detected package manager."""
    manager = detect_package_manager()
    if manager is None:
        logger.error(f"No supported package manager found to install {package}")
        return False
    refresh = REFRESH_COMMANDS.get(manager)
    if refresh:
        run_command(refresh)
    logger.info(f"Installing {package} with {manager}")
    result = run_command(PACKAGE_MANAGERS[manager] + [package])
    if result.returncode != 0:
        logger.error(
            f"Installing {package} failed ({result.returncode}): {result.stderr.strip()}"
        )
        return False
    return True
