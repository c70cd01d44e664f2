import json
import logging

import pytest

from scoreboard_core import logging as sb_logging
from scoreboard_core.settings import LoggingSettings, Settings


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)


def _file_settings(path, json_format):
    return Settings(
        logging=LoggingSettings(
            level="DEBUG", json_format=json_format, destination="file", filename=str(path)
        )
    )


def test_plain_file_logging(tmp_path, restore_root_logger):
    log_file = tmp_path / "logs" / "server.log"
    sb_logging.configure_logging(_file_settings(log_file, False), force=True)

    logging.getLogger("scoreboard_core.test").debug("hello %s", "world")
    for h in logging.getLogger().handlers:
        h.flush()

    assert "DEBUG scoreboard_core.test - hello world" in log_file.read_text(encoding="utf-8")


def test_json_file_logging(tmp_path, restore_root_logger):
    log_file = tmp_path / "server.log"
    sb_logging.configure_logging(_file_settings(log_file, True), force=True)

    logging.getLogger("scoreboard_core.test").info("score saved")
    for h in logging.getLogger().handlers:
        h.flush()

    record = json.loads(log_file.read_text(encoding="utf-8").splitlines()[-1])
    assert record["message"] == "score saved"
    assert record["levelname"] == "INFO"


def test_configure_is_idempotent_without_force(tmp_path, restore_root_logger):
    sb_logging.configure_logging(_file_settings(tmp_path / "a.log", False), force=True)
    handlers = list(logging.getLogger().handlers)
    sb_logging.configure_logging(_file_settings(tmp_path / "b.log", False))
    assert logging.getLogger().handlers == handlers
    assert not (tmp_path / "b.log").exists()
