"""Tests for logging setup and helpers."""

from __future__ import annotations

import json
from types import SimpleNamespace

import pytest

from lunitool import logging as logging_module


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    logging_module.logger.remove()


def _record(tags, level):
    return {
        "extra": {"tags": tags},
        "level": SimpleNamespace(no=logging_module.logger.level(level).no),
    }


def test_setup_logging_writes_text_and_json_logs(tmp_path):
    log_dir = logging_module.setup_logging(log_dir=tmp_path / "logs")

    logging_module.get_logger(source="test", tags=["unit"]).info("Session ready")
    logging_module.logger.remove()

    assert log_dir == tmp_path / "logs"
    text = (log_dir / logging_module.LOG_FILE_NAME).read_text(encoding="utf-8")
    assert "Session ready" in text
    assert "test" in text
    lines = (log_dir / "structured.jsonl").read_text(encoding="utf-8").splitlines()
    record = json.loads(lines[-1])["record"]
    assert record["message"] == "Session ready"
    assert record["extra"]["source"] == "test"


def test_debug_messages_need_debug_flag(tmp_path):
    log_dir = logging_module.setup_logging(log_dir=tmp_path)
    logging_module.logger.debug("hidden detail")
    logging_module.logger.remove()

    assert "hidden detail" not in (log_dir / "lunitool.log").read_text(encoding="utf-8")

    log_dir = logging_module.setup_logging(debug=True, log_dir=tmp_path)
    logging_module.logger.debug("visible detail")
    logging_module.logger.remove()

    assert "visible detail" in (log_dir / "lunitool.log").read_text(encoding="utf-8")


def test_unwritable_log_dir_falls_back(tmp_path, monkeypatch, mocker):
    fallback = tmp_path / "fallback"
    monkeypatch.setattr(logging_module, "FALLBACK_LOG_DIR", fallback)
    mocker.patch("lunitool.logging.os.access", return_value=False)

    log_dir = logging_module.setup_logging(log_dir=tmp_path / "logs")

    assert log_dir == fallback
    assert fallback.is_dir()


def test_get_logger_preserves_context_metadata():
    logging_module.logger.remove()
    records: list[dict] = []

    def sink(message):
        records.append(message.record)

    logging_module.logger.add(sink, enqueue=False)

    log = logging_module.get_logger(tags=["session"], source="session")
    log.info("Context test")

    assert records
    assert records[0]["extra"]["tags"] == ["session"]
    assert records[0]["extra"]["source"] == "session"


def test_logger_factory_binds_component_context():
    logging_module.logger.remove()
    records: list[dict] = []
    logging_module.logger.add(lambda message: records.append(message.record))

    logging_module.LoggerFactory.for_menu().info("menu")
    logging_module.LoggerFactory.for_task("backup").info("task")

    assert records[0]["extra"]["source"] == "menu"
    assert records[1]["extra"]["source"] == "task"
    assert records[1]["extra"]["task_id"] == "backup"
    assert "backup" in records[1]["extra"]["tags"]


def test_startup_banner_mentions_version():
    logging_module.logger.remove()
    messages: list[str] = []
    logging_module.logger.add(lambda message: messages.append(message.record["message"]))

    logging_module.log_startup_banner()

    assert messages[0] == "=== LUNITOOL log started ==="
    assert any(logging_module.__version__ in message for message in messages)


@pytest.mark.parametrize(
    ("tags", "level", "expected"),
    [
        (["ui", "render"], "TRACE", True),
        (["ui", "render"], "DEBUG", False),
        (["ui", "render"], "INFO", False),
        (["ui", "render"], "WARNING", True),
        (["session"], "DEBUG", True),
        ([], "INFO", True),
    ],
)
def test_render_filter(tags, level, expected):
    assert logging_module._should_log_render(_record(tags, level)) is expected
