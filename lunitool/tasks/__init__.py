"""Task module registry and launch contract.

A task module is any importable module exposing a ``start()`` function.
It is launched synchronously with no arguments; it reaches the shared dialog
backend and localized text through :func:`get_task_context` and reports its
own success or failure to the user before returning.

By default task ``<id>`` lives in ``lunitool.tasks.<id>``. The
``task_modules`` setting maps ids to other ``module:function`` targets. A task
is available when its module can be located.
"""

from __future__ import annotations

import importlib
import importlib.util
from dataclasses import dataclass
from functools import partial
from typing import TYPE_CHECKING, Callable, Dict, List, Mapping, Optional, Tuple

from lunitool.exceptions import TaskError, UnknownTaskError
from lunitool.logging import LoggerFactory

if TYPE_CHECKING:
    from lunitool.app.context import AppContext


QUIT_TASK_ID = "quit"
THEME_TASK_ID = "theme"
DEFAULT_ENTRY = "start"


@dataclass(frozen=True)
class TaskDescriptor:
    id: str
    title_key: str
    description_key: str
    availability_check: Callable[[], bool]


# (id, title key, description key) in main menu order.
TASK_TABLE: Tuple[Tuple[str, str, str], ...] = (
    ("install", "LANG_INSTALL", "LANG_INSTALL_DESC"),
    ("backup", "LANG_BACKUP", "LANG_BACKUP_DESC"),
    ("keys", "LANG_KEYS", "LANG_KEYS_DESC"),
)

THEME_DESCRIPTOR = TaskDescriptor(
    id=THEME_TASK_ID,
    title_key="LANG_THEME",
    description_key="LANG_THEME_DESC",
    availability_check=lambda: True,
)

QUIT_DESCRIPTOR = TaskDescriptor(
    id=QUIT_TASK_ID,
    title_key="LANG_QUIT",
    description_key="LANG_QUIT_DESC",
    availability_check=lambda: True,
)

# Entries handled by the session itself, appended after the task table.
BUILTIN_DESCRIPTORS = (THEME_DESCRIPTOR, QUIT_DESCRIPTOR)


_TASK_CONTEXT: Optional[AppContext] = None


def set_task_context(context: AppContext) -> None:
    global _TASK_CONTEXT
    _TASK_CONTEXT = context


def get_task_context() -> AppContext:
    """Get the context shared with task modules. Raises RuntimeError if not configured."""
    if _TASK_CONTEXT is None:
        raise RuntimeError("Task context has not been configured.")
    return _TASK_CONTEXT


def _split_target(target: str) -> Tuple[str, str]:
    module_name, _, function_name = target.partition(":")
    return module_name, function_name or DEFAULT_ENTRY


class TaskRegistry:
    def __init__(
        self,
        targets: Optional[Mapping[str, str]] = None,
        *,
        package: str = __name__,
        table: Tuple[Tuple[str, str, str], ...] = TASK_TABLE,
    ) -> None:
        self._table = table
        self._targets: Dict[str, str] = {
            task_id: f"{package}.{task_id}:{DEFAULT_ENTRY}" for task_id, _, _ in table
        }
        if targets:
            self._targets.update(targets)

    def target(self, task_id: str) -> Tuple[str, str]:
        try:
            return _split_target(self._targets[task_id])
        except KeyError:
            raise UnknownTaskError(task_id) from None

    def is_available(self, task_id: str) -> bool:
        module_name, _ = self.target(task_id)
        try:
            return importlib.util.find_spec(module_name) is not None
        except (ImportError, ValueError):
            # Parent package missing or not a package.
            return False

    def launch(self, task_id: str) -> None:
        """Run the task entry point; any failure is raised as :class:`TaskError`."""
        module_name, function_name = self.target(task_id)
        log = LoggerFactory.for_task(task_id)
        log.info(f"Starting task module {module_name}:{function_name}")
        try:
            module = importlib.import_module(module_name)
            entry: Callable[[], object] = getattr(module, function_name)
            entry()
        except TaskError:
            raise
        except Exception as error:
            raise TaskError(task_id, str(error) or type(error).__name__) from error
        log.info("Task module returned")

    def descriptors(self, *, include_builtin: bool = True) -> List[TaskDescriptor]:
        descriptors = [
            TaskDescriptor(
                id=task_id,
                title_key=title_key,
                description_key=description_key,
                availability_check=partial(self.is_available, task_id),
            )
            for task_id, title_key, description_key in self._table
        ]
        if include_builtin:
            descriptors.extend(BUILTIN_DESCRIPTORS)
        return descriptors
