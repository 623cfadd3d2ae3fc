"""Subprocess helpers with debug logging."""

from __future__ import annotations

import subprocess

from loguru import logger


def _escape_braces(text: str) -> str:
    """Escape curly braces for loguru formatting."""
    return text.replace("{", "{{").replace("}", "}}")


def validate_command_args(args: list[str]) -> None:
    """Validate command arguments before executing."""
    if not args or not all(isinstance(arg, str) and arg for arg in args):
        raise ValueError("Command args must be a non-empty list of strings.")


def run_command(args: list[str]) -> subprocess.CompletedProcess[str]:
    """Run a command and capture output."""
    validate_command_args(args)
    logger.debug(f"Running command: {_escape_braces(repr(args))}", component="system")
    result = subprocess.run(
        args,
        capture_output=True,
        text=True,
        check=False,
    )
    logger.debug(f"Command return code: {result.returncode}", component="system")
    if result.returncode != 0:
        logger.debug(
            f"Command stderr: {_escape_braces(repr(result.stderr.strip()))}",
            component="system",
        )
    return result
