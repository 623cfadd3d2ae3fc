"""Adapter over the dialog(1) program.

Every call recomputes the box geometry, runs ``dialog`` attached to the
terminal and reads the user's answer from stderr. Exit codes map to
:mod:`lunitool.menu.model` results:

- 0: OK / Yes -> ``Selected``
- 1: Cancel / No (the "back" button) -> ``Cancelled(escaped=False)``
- 255: ESC -> ``Cancelled(escaped=True)``
- killed by a signal (negative code) -> ``Cancelled(escaped=True)``
- anything else, or output on 255 -> ``Errored``
"""

from __future__ import annotations

import contextlib
import shutil
import subprocess
import sys
import time
from typing import Callable, Iterable, Optional, Sequence

from lunitool.exceptions import DialogUnavailableError
from lunitool.logging import LoggerFactory
from lunitool.menu.model import Cancelled, Errored, MenuItem, ScreenResult, Selected
from lunitool.ui import geometry
from lunitool.ui.geometry import GeometrySpec

DIALOG_OK = 0
DIALOG_CANCEL = 1
DIALOG_ESC = 255

DEFAULT_PROGRAM = "dialog"
DEFAULT_BACKTITLE = "LUNITOOL"

CLEAR_SEQUENCE = "\033[0m\033[2J\033[H"

log = LoggerFactory.for_dialog()


def _clamp_percent(value: float) -> int:
    return max(0, min(100, int(value)))


class DialogBackend:
    def __init__(
        self,
        program: str = DEFAULT_PROGRAM,
        *,
        backtitle: str = DEFAULT_BACKTITLE,
        geometry_provider: Callable[[], GeometrySpec] = geometry.compute,
    ) -> None:
        self.program = program
        self.backtitle = backtitle
        self._geometry_provider = geometry_provider
        self._path: Optional[str] = None
        self.in_flight = False

    @classmethod
    def locate(cls, program: str = DEFAULT_PROGRAM, **kwargs) -> "DialogBackend":
        """Return a backend for ``program`` or raise if it cannot run."""
        path = shutil.which(program)
        if path is None:
            raise DialogUnavailableError(program, "not found on PATH")
        try:
            completed = subprocess.run(
                [path, "--print-version"],
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as error:
            raise DialogUnavailableError(program, str(error)) from error
        if completed.returncode != 0:
            raise DialogUnavailableError(
                program, f"exit code {completed.returncode}"
            )
        version = (completed.stdout or completed.stderr).strip()
        LoggerFactory.for_system().info(f"Dialog backend: {path} {version}")
        backend = cls(program, **kwargs)
        backend._path = path
        return backend

    # ------------------------------------------------------------------
    # Invocation
    # ------------------------------------------------------------------

    def _base_args(self, title: str) -> list[str]:
        return [
            self._path or self.program,
            "--clear",
            "--backtitle",
            self.backtitle,
            "--title",
            title,
            "--cr-wrap",
            "--center",
        ]

    def _run(self, args: Sequence[str]) -> ScreenResult:
        log.trace(f"dialog {' '.join(args[1:])}")
        self.in_flight = True
        try:
            completed = subprocess.run(
                list(args),
                stderr=subprocess.PIPE,
                text=True,
                check=False,
            )
        except OSError as error:
            log.error(f"Dialog invocation failed: {error}")
            return Errored(str(error))
        finally:
            self.in_flight = False
        output = (completed.stderr or "").strip()
        code = completed.returncode
        log.trace(f"dialog returned {code}: {output!r}")
        if code == DIALOG_OK:
            return Selected(output)
        if code == DIALOG_CANCEL:
            return Cancelled(escaped=False)
        if code == DIALOG_ESC and not output:
            return Cancelled(escaped=True)
        if code < 0:
            log.debug(f"dialog ended by signal {-code}")
            return Cancelled(escaped=True)
        return Errored(output or f"dialog exit code {code}")

    # ------------------------------------------------------------------
    # Widgets
    # ------------------------------------------------------------------

    def show_menu(
        self,
        title: str,
        items: Sequence[MenuItem],
        *,
        text: str = "",
        ok_label: str = "OK",
        cancel_label: str = "Cancel",
    ) -> ScreenResult:
        spec = self._geometry_provider()
        with_help = any(item.help_text for item in items)
        args = self._base_args(title)
        args += ["--ok-label", ok_label, "--cancel-label", cancel_label]
        if with_help:
            args.append("--item-help")
        args += [
            "--menu",
            text,
            str(spec.height),
            str(spec.width),
            str(spec.content_height),
        ]
        for item in items:
            args += [item.id, item.label]
            if with_help:
                args.append(item.help_text or "")
        return self._run(args)

    def show_confirm(self, message: str, yes_label: str, no_label: str) -> bool:
        """Ask a yes/no question. Only an explicit "yes" returns True."""
        spec = self._geometry_provider()
        height, width = spec.confirm_box()
        args = self._base_args(message)
        args += [
            "--yes-label",
            yes_label,
            "--no-label",
            no_label,
            "--yesno",
            "",
            str(height),
            str(width),
        ]
        result = self._run(args)
        return isinstance(result, Selected)

    def _notice(self, title: str, text: str, ok_label: str, colors: bool) -> None:
        spec = self._geometry_provider()
        height, width = spec.half()
        args = self._base_args(title)
        args += ["--ok-label", ok_label]
        if colors:
            args.append("--colors")
        args += ["--msgbox", text, str(height), str(width)]
        self._run(args)

    def show_message(self, title: str, text: str, *, ok_label: str = "OK") -> None:
        self._notice(title, text, ok_label, colors=False)

    def show_warning(
        self,
        title: str,
        text: str,
        *,
        label: str = "Notice",
        ok_label: str = "OK",
    ) -> None:
        self._notice(title, f"\\Z1[{label}]\\Zn\n\n{text}", ok_label, colors=True)

    def show_error(
        self,
        title: str,
        text: str,
        *,
        label: str = "Error",
        ok_label: str = "OK",
    ) -> None:
        log.error(f"UI error: {text}")
        self._notice(title, f"\\Z1[{label}]\\Zn\n\n{text}", ok_label, colors=True)

    def show_info(self, title: str, text: str, timeout: float = 2.0) -> None:
        """Show a notice that dismisses itself after ``timeout`` seconds."""
        spec = self._geometry_provider()
        height, width = spec.half()
        args = self._base_args(title)
        args += ["--infobox", text, str(height), str(width)]
        self._run(args)
        time.sleep(timeout)

    def show_input(self, title: str, prompt: str, default: str = "") -> ScreenResult:
        spec = self._geometry_provider()
        height, width = spec.half()
        args = self._base_args(title)
        args += ["--inputbox", prompt, str(height), str(width), default]
        return self._run(args)

    def show_file_select(self, title: str, path: str) -> ScreenResult:
        spec = self._geometry_provider()
        args = self._base_args(title)
        args += ["--fselect", path, str(spec.content_height), str(spec.width)]
        return self._run(args)

    def show_date(self, title: str, text: str = "") -> ScreenResult:
        spec = self._geometry_provider()
        height, width = spec.half()
        args = self._base_args(title)
        args += ["--date-format", "%Y-%m-%d", "--calendar", text, str(height), str(width)]
        return self._run(args)

    def show_progress(
        self, title: str, text: str, percent_stream: Iterable[float]
    ) -> None:
        """Drive a gauge from ``percent_stream`` until 100 or stream end."""
        spec = self._geometry_provider()
        height, width = spec.gauge_box()
        args = self._base_args(title)
        args += ["--gauge", text, str(height), str(width), "0"]
        log.trace(f"dialog {' '.join(args[1:])}")
        try:
            process = subprocess.Popen(args, stdin=subprocess.PIPE, text=True)
        except OSError as error:
            log.error(f"Dialog invocation failed: {error}")
            return
        self.in_flight = True
        try:
            for value in percent_stream:
                percent = _clamp_percent(value)
                process.stdin.write(f"{percent}\n")
                process.stdin.flush()
                if percent >= 100:
                    break
        except BrokenPipeError:
            log.debug("Gauge closed before the stream finished")
        finally:
            with contextlib.suppress(BrokenPipeError):
                process.stdin.close()
            process.wait()
            self.in_flight = False

    def clear(self) -> None:
        """Reset attributes and clear the terminal."""
        sys.stdout.write(CLEAR_SEQUENCE)
        sys.stdout.flush()
