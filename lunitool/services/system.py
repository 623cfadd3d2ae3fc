"""Host inspection: privileges, OS details and live-media detection."""

from __future__ import annotations

import os
import platform
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

from loguru import logger

from lunitool.services import packages

LIVE_PATHS = (Path("/run/live"), Path("/run/initramfs/live"))
OS_RELEASE_PATH = Path("/etc/os-release")
CMDLINE_PATH = Path("/proc/cmdline")
MEMINFO_PATH = Path("/proc/meminfo")


def is_root() -> bool:
    return os.geteuid() == 0


@dataclass
class SystemInfo:
    os_info: str
    kernel: str
    architecture: str
    disk_free: str
    ram_free: str
    is_live: bool
    package_manager: str
    properties: Dict[str, str] = field(default_factory=dict)


def read_os_release(path: Path = OS_RELEASE_PATH) -> str:
    try:
        content = path.read_text(encoding="utf-8")
    except OSError:
        return "Unknown"
    values = {}
    for line in content.splitlines():
        key, sep, value = line.partition("=")
        if sep:
            values[key.strip()] = value.strip().strip('"')
    return values.get("PRETTY_NAME") or values.get("NAME") or "Unknown"


def read_available_memory(path: Path = MEMINFO_PATH) -> Optional[int]:
    """Return MemAvailable in bytes, or None if unknown."""
    try:
        content = path.read_text(encoding="utf-8")
    except OSError:
        return None
    for line in content.splitlines():
        if line.startswith("MemAvailable:"):
            parts = line.split()
            if len(parts) >= 2 and parts[1].isdigit():
                return int(parts[1]) * 1024
    return None


def detect_live_environment(
    live_paths=LIVE_PATHS, cmdline_path: Path = CMDLINE_PATH
) -> bool:
    if any(path.exists() for path in live_paths):
        return True
    try:
        return "boot=live" in cmdline_path.read_text(encoding="utf-8")
    except OSError:
        return False


def _format_gib(value: Optional[float]) -> str:
    if value is None:
        return "Unknown"
    return f"{value / 1024 ** 3:.2f} GB"


def collect_system_info() -> SystemInfo:
    try:
        disk_free: Optional[float] = shutil.disk_usage("/").free
    except OSError:
        disk_free = None
    return SystemInfo(
        os_info=read_os_release(),
        kernel=platform.release() or "Unknown",
        architecture=platform.machine() or "Unknown",
        disk_free=_format_gib(disk_free),
        ram_free=_format_gib(read_available_memory()),
        is_live=detect_live_environment(),
        package_manager=packages.detect_package_manager() or "unknown",
        properties={
            "CPU Cores": str(os.cpu_count() or "Unknown"),
            "Host Name": platform.node() or "Unknown",
        },
    )


def log_system_info(info: SystemInfo) -> None:
    log = logger.bind(source="system", tags=["system"])
    log.info(f"System: {info.os_info}")
    log.info(f"Kernel: {info.kernel}")
    log.info(f"Architecture: {info.architecture}")
    log.info(f"Disk space: {info.disk_free} available")
    log.info(f"RAM: {info.ram_free} available")
    log.info(f"Live environment: {info.is_live}")
    log.info(f"Package manager: {info.package_manager}")
    for key, value in info.properties.items():
        log.info(f"{key}: {value}")
