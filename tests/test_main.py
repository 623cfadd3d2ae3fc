"""Tests for the command line entry point."""

from unittest.mock import Mock

import pytest

from lunitool import main as main_module
from lunitool.exceptions import DialogUnavailableError


@pytest.fixture
def quiet_startup(mocker):
    mocker.patch("lunitool.main.setup_logging")
    mocker.patch("lunitool.main.log_startup_banner")


@pytest.fixture
def ui_mocks(mocker, quiet_startup):
    backend = Mock(in_flight=False)
    return {
        "backend": backend,
        "locate": mocker.patch(
            "lunitool.main.DialogBackend.locate", return_value=backend
        ),
        "lifecycle": mocker.patch("lunitool.main.Lifecycle"),
        "machine": mocker.patch("lunitool.main.SessionStateMachine"),
        "dialogrc": mocker.patch("lunitool.main.theme.install_dialogrc"),
        "collect": mocker.patch("lunitool.main.system.collect_system_info"),
        "log_info": mocker.patch("lunitool.main.system.log_system_info"),
        "is_root": mocker.patch("lunitool.main.system.is_root", return_value=True),
    }


def test_missing_dialog_is_fatal_before_any_ui(mocker, quiet_startup, capsys):
    mocker.patch(
        "lunitool.main.DialogBackend.locate",
        side_effect=DialogUnavailableError("dialog", "not found on PATH"),
    )
    mocker.patch("lunitool.main.system.is_root", return_value=False)
    lifecycle = mocker.patch("lunitool.main.Lifecycle")
    machine = mocker.patch("lunitool.main.SessionStateMachine")

    assert main_module.main([]) == 1

    lifecycle.assert_not_called()
    machine.assert_not_called()
    assert "not found on PATH" in capsys.readouterr().err


def test_unknown_language_is_fatal(ui_mocks, capsys):
    assert main_module.main(["--lang", "fr"]) == 1

    ui_mocks["locate"].assert_not_called()
    assert "fr" in capsys.readouterr().err


def test_session_runs_and_tears_down(ui_mocks):
    assert main_module.main(["--lang", "en", "--keyboard", "us"]) == 0

    ctx = ui_mocks["machine"].call_args.args[0]
    assert ctx.session.language == "en"
    assert ctx.session.keyboard_layout == "us"
    assert ctx.backend is ui_mocks["backend"]
    ui_mocks["machine"].return_value.run.assert_called_once()
    lifecycle = ui_mocks["lifecycle"].return_value
    lifecycle.install.assert_called_once()
    lifecycle.teardown.assert_called()
    ui_mocks["backend"].show_warning.assert_not_called()


def test_stored_settings_seed_the_session(ui_mocks, isolated_settings):
    main_module.settings.set_setting("language", "en")

    main_module.main([])

    ctx = ui_mocks["machine"].call_args.args[0]
    assert ctx.session.language == "en"
    assert ctx.session.keyboard_layout == "de"


def test_stored_theme_is_installed_and_switchable(ui_mocks):
    main_module.settings.set_setting("theme", "ubuntu_joy")

    main_module.main([])

    config_dir = main_module.settings.CONFIG_DIR
    ui_mocks["dialogrc"].assert_called_once_with(config_dir, "ubuntu_joy")
    ctx = ui_mocks["machine"].call_args.args[0]
    assert ctx.session.theme == "ubuntu_joy"

    apply_theme = ui_mocks["machine"].call_args.kwargs["apply_theme"]
    apply_theme("white_sur")
    ui_mocks["dialogrc"].assert_called_with(config_dir, "white_sur")


def test_non_root_user_gets_notice(ui_mocks):
    ui_mocks["is_root"].return_value = False

    main_module.main(["--lang", "en"])

    title, text = ui_mocks["backend"].show_warning.call_args.args
    assert title == "Notice"
    assert text.startswith("This program needs root privileges")


def test_unexpected_error_returns_one(ui_mocks, capsys):
    ui_mocks["machine"].return_value.run.side_effect = RuntimeError("boom")

    assert main_module.main([]) == 1

    ui_mocks["lifecycle"].return_value.teardown.assert_called()
    assert "boom" in capsys.readouterr().err


def test_confirmed_exit_propagates(ui_mocks):
    ui_mocks["machine"].return_value.run.side_effect = SystemExit(0)

    with pytest.raises(SystemExit) as excinfo:
        main_module.main([])

    assert excinfo.value.code == 0
    ui_mocks["lifecycle"].return_value.teardown.assert_called()


def test_version_flag(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main_module.main(["--version"])

    assert excinfo.value.code == 0
    assert main_module.__version__ in capsys.readouterr().out


class TestStartBackend:
    def test_installs_dialog_when_root(self, mocker):
        backend = Mock()
        locate = mocker.patch(
            "lunitool.main.DialogBackend.locate",
            side_effect=[DialogUnavailableError("dialog"), backend],
        )
        mocker.patch("lunitool.main.system.is_root", return_value=True)
        install = mocker.patch(
            "lunitool.main.packages.install_package", return_value=True
        )

        assert main_module.start_backend("LUNITOOL", True) is backend
        install.assert_called_once_with("dialog")
        assert locate.call_count == 2

    def test_no_install_without_root(self, mocker):
        mocker.patch(
            "lunitool.main.DialogBackend.locate",
            side_effect=DialogUnavailableError("dialog"),
        )
        mocker.patch("lunitool.main.system.is_root", return_value=False)
        install = mocker.patch("lunitool.main.packages.install_package")

        with pytest.raises(DialogUnavailableError):
            main_module.start_backend("LUNITOOL", True)
        install.assert_not_called()

    def test_failed_install_is_fatal(self, mocker):
        mocker.patch(
            "lunitool.main.DialogBackend.locate",
            side_effect=DialogUnavailableError("dialog"),
        )
        mocker.patch("lunitool.main.system.is_root", return_value=True)
        mocker.patch("lunitool.main.packages.install_package", return_value=False)

        with pytest.raises(DialogUnavailableError):
            main_module.start_backend("LUNITOOL", True)

    def test_auto_install_disabled(self, mocker):
        mocker.patch(
            "lunitool.main.DialogBackend.locate",
            side_effect=DialogUnavailableError("dialog"),
        )
        mocker.patch("lunitool.main.system.is_root", return_value=True)
        install = mocker.patch("lunitool.main.packages.install_package")

        with pytest.raises(DialogUnavailableError):
            main_module.start_backend("LUNITOOL", False)
        install.assert_not_called()
