from __future__ import annotations

import getpass
import os
import socket
import sys
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from loguru import Logger

from loguru import logger

from lunitool.__version__ import __version__

DEFAULT_LOG_DIR = Path(os.environ.get("LUNITOOL_LOG_DIR", "/var/log/lunitool"))
FALLBACK_LOG_DIR = Path(tempfile.gettempdir()) / "lunitool"
LOG_FILE_NAME = "lunitool.log"


def _should_log_render(record) -> bool:
    """Keep per-render dialog chatter out of the operations log."""
    tags = record["extra"].get("tags", [])
    if "render" in tags:
        return record["level"].no <= logger.level("TRACE").no or (
            record["level"].no >= logger.level("WARNING").no
        )
    return True


def _resolve_log_dir(log_dir: Path) -> Path:
    """Return ``log_dir`` if writable, otherwise a temp directory."""
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
    except OSError:
        log_dir = FALLBACK_LOG_DIR
        log_dir.mkdir(parents=True, exist_ok=True)
        return log_dir
    if not os.access(log_dir, os.W_OK):
        log_dir = FALLBACK_LOG_DIR
        log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir


def setup_logging(
    *,
    debug: bool = False,
    trace: bool = False,
    verbose: bool = False,
    log_dir: Path | None = None,
) -> Path:
    """
    Configure loguru sinks for a dialog session.

    The dialog UI owns the terminal, so by default nothing is written to the
    console. Passing ``verbose`` adds a stderr sink for troubleshooting.

    Log Files:
    - lunitool.log: INFO+ events (or DEBUG+/TRACE+ with debug/trace)
    - structured.jsonl: Structured JSON logs for analysis (INFO+)

    Args:
        debug: Enable DEBUG level logging
        trace: Enable TRACE level logging (every dialog invocation)
        verbose: Mirror log output to stderr
        log_dir: Custom log directory (defaults to /var/log/lunitool)

    Returns:
        The directory the log files were written to.
    """
    logger.remove()
    logger.configure(extra={"tags": [], "source": "app"})

    if trace:
        level = "TRACE"
    elif debug:
        level = "DEBUG"
    else:
        level = "INFO"

    if verbose:
        logger.add(
            sys.stderr,
            level=level,
            backtrace=False,
            diagnose=False,
            colorize=True,
            format=(
                "<green>{time:HH:mm:ss}</green> | "
                "<level>{level: <8}</level> | "
                "<cyan>{extra[source]: <10}</cyan> | "
                "{message}"
            ),
        )

    resolved_dir = _resolve_log_dir(log_dir or DEFAULT_LOG_DIR)

    logger.add(
        resolved_dir / LOG_FILE_NAME,
        level=level,
        rotation="5 MB",
        retention="7 days",
        compression="zip",
        backtrace=debug or trace,
        diagnose=False,
        filter=_should_log_render,
        format=(
            "{time:YYYY-MM-DD HH:mm:ss} | "
            "{level: <8} | "
            "{extra[source]: <10} | "
            "{message}"
        ),
    )

    logger.add(
        resolved_dir / "structured.jsonl",
        level="INFO",
        rotation="10 MB",
        retention="7 days",
        compression="zip",
        serialize=True,
        format="{message}",
    )

    return resolved_dir


def log_startup_banner() -> None:
    """Write the session header the operations log starts with."""
    log = LoggerFactory.for_system()
    try:
        user = getpass.getuser()
    except (KeyError, OSError):
        user = "unknown"
    log.info("=== LUNITOOL log started ===")
    log.info(f"Version: {__version__}")
    log.info(f"User: {user}")
    log.info(f"Hostname: {socket.gethostname()}")


def get_logger(
    *,
    tags: Iterable[str] | None = None,
    source: str | None = None,
) -> Logger:
    """
    Get a logger with bound context.

    Args:
        tags: Tags for filtering (e.g., ["ui", "render"])
        source: Source component (e.g., "menu", "session", "task")
    """
    extras: dict[str, object] = {}
    if tags is not None:
        extras["tags"] = list(tags)
    if source is not None:
        extras["source"] = source
    return logger.bind(**extras)


class LoggerFactory:
    """
    Factory for creating component loggers with automatic context.

    Each factory method returns a logger pre-configured with the source and
    tags of the component that uses it.
    """

    @staticmethod
    def for_menu() -> Logger:
        """Logger for menu navigation."""
        return logger.bind(source="menu", tags=["ui", "menu"])

    @staticmethod
    def for_dialog() -> Logger:
        """Logger for dialog backend invocations."""
        return logger.bind(source="dialog", tags=["ui", "render"])

    @staticmethod
    def for_session() -> Logger:
        """Logger for session state transitions."""
        return logger.bind(source="session", tags=["session"])

    @staticmethod
    def for_system() -> Logger:
        """Logger for system operations (startup, shutdown, config)."""
        return logger.bind(source="system", tags=["system"])

    @staticmethod
    def for_task(task_id: str) -> Logger:
        """Logger for a task module run."""
        return logger.bind(source="task", tags=["task", task_id], task_id=task_id)
