"""Custom exceptions for lunitool.

Exception Hierarchy:
    LunitoolError (base)
        ├── StartupError
        │   ├── DialogUnavailableError
        │   └── MissingTextError
        └── TaskError
            └── UnknownTaskError

Startup errors are fatal: they abort before the first screen is shown.
Everything else is recoverable and surfaces as an error notice.

Usage:
    from lunitool.exceptions import DialogUnavailableError

    if shutil.which("dialog") is None:
        raise DialogUnavailableError("dialog")
"""


class LunitoolError(Exception):
    """Base exception for all lunitool errors."""


class StartupError(LunitoolError):
    """The engine cannot start; no UI may be shown."""


class DialogUnavailableError(StartupError):
    """The terminal dialog program cannot be located or started."""

    def __init__(self, program: str, reason: str = ""):
        self.program = program
        self.reason = reason
        msg = f"Dialog backend '{program}' is not available"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class MissingTextError(StartupError):
    """Mandatory localized strings are missing for a locale."""

    def __init__(self, locale: str, keys: list[str]):
        self.locale = locale
        self.keys = keys
        super().__init__(
            f"Missing mandatory text for locale '{locale}': {', '.join(keys)}"
        )


class TaskError(LunitoolError):
    """A task module failed while it had control."""

    def __init__(self, task_id: str, message: str):
        self.task_id = task_id
        super().__init__(f"Task '{task_id}' failed: {message}")


class UnknownTaskError(TaskError):
    """No descriptor exists for the requested task id."""

    def __init__(self, task_id: str):
        super().__init__(task_id, "unknown task")
