import argparse
import sys
from functools import partial
from pathlib import Path

from lunitool.__version__ import __version__
from lunitool.app.context import AppContext, SessionConfig
from lunitool.app.lifecycle import Lifecycle
from lunitool.app.session import SessionStateMachine
from lunitool.config import settings
from lunitool.exceptions import DialogUnavailableError, StartupError
from lunitool.i18n import TextProvider
from lunitool.logging import LoggerFactory, log_startup_banner, setup_logging
from lunitool.services import keyboard, packages, system
from lunitool.tasks import TaskRegistry, set_task_context
from lunitool.ui import theme
from lunitool.ui.confirmation import confirm_exit
from lunitool.ui.dialog import DialogBackend


def build_parser():
    parser = argparse.ArgumentParser(
        prog="lunitool",
        description="Linux Universal Tool - central management environment",
    )
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--trace", action="store_true", help="Log every dialog invocation")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Mirror log output to stderr"
    )
    parser.add_argument("--lang", help="Initial language (de, en)")
    parser.add_argument("--keyboard", help="Initial keyboard layout (de, us)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def start_backend(backtitle, auto_install):
    """Locate dialog, installing it first when allowed."""
    log = LoggerFactory.for_system()
    try:
        return DialogBackend.locate(backtitle=backtitle)
    except DialogUnavailableError:
        if not (auto_install and system.is_root()):
            raise
        log.warning("dialog is not installed. Trying to install it...")
        if not packages.install_package("dialog"):
            raise
    return DialogBackend.locate(backtitle=backtitle)


def main(argv=None):
    args = build_parser().parse_args(argv)
    log_dir = settings.get_setting("log_dir")
    setup_logging(
        debug=args.debug or settings.get_bool("debug_mode"),
        trace=args.trace,
        verbose=args.verbose,
        log_dir=Path(log_dir) if log_dir else None,
    )
    log_startup_banner()
    log = LoggerFactory.for_system()

    session = SessionConfig(
        language=args.lang or settings.get_setting("language", settings.DEFAULT_LANGUAGE),
        keyboard_layout=args.keyboard
        or settings.get_setting("keyboard", settings.DEFAULT_KEYBOARD),
        theme=settings.get_setting("theme", settings.DEFAULT_THEME),
    )

    texts = TextProvider()
    try:
        for locale in set(texts.locales) | {session.language}:
            texts.validate(locale)
        backend = start_backend(
            settings.get_setting("backtitle", settings.DEFAULT_BACKTITLE),
            settings.get_bool("auto_install_dialog", True),
        )
    except StartupError as error:
        log.error(f"Startup failed: {error}")
        print(f"Error: {error}", file=sys.stderr)
        if isinstance(error, DialogUnavailableError):
            print("Check that 'dialog' is installed.", file=sys.stderr)
        return 1

    theme.install_dialogrc(settings.CONFIG_DIR, session.theme)

    lifecycle = Lifecycle(
        backend.clear,
        dialog_active=lambda: backend.in_flight,
    )
    ctx = AppContext(backend=backend, texts=texts, session=session, lifecycle=lifecycle)
    lifecycle.confirm = partial(confirm_exit, ctx)
    set_task_context(ctx)
    lifecycle.install()
    log.info("UI initialised")

    system.log_system_info(system.collect_system_info())
    if not system.is_root():
        log.warning("Running without root privileges; some features may be limited")
        backend.show_warning(
            ctx.text("LANG_NOTICE"),
            ctx.text("LANG_ROOT_REQUIRED"),
            label=ctx.text("LANG_NOTICE"),
            ok_label=ctx.text("LANG_OK"),
        )

    registry = TaskRegistry(settings.get_setting("task_modules") or None)
    machine = SessionStateMachine(
        ctx,
        registry.descriptors(),
        registry.launch,
        apply_keyboard=keyboard.apply_layout,
        apply_theme=partial(theme.install_dialogrc, settings.CONFIG_DIR),
    )
    try:
        machine.run()
    except StartupError as error:
        log.error(f"Dialog backend failed: {error}")
        print(f"Error: {error}", file=sys.stderr)
        return 1
    except Exception as error:
        log.exception("Unhandled error")
        print(f"An error occurred: {type(error).__name__}", file=sys.stderr)
        print(str(error), file=sys.stderr)
        return 1
    finally:
        lifecycle.teardown()
    return 0


if __name__ == "__main__":
    sys.exit(main())
