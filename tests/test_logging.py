import logging

import pytest

from bundlepeek.__main__ import setup_logging
from bundlepeek.storage import StorageManager


@pytest.fixture
def configured(tmp_path):
    """setup_logging against a tmp data dir; its root handlers are removed afterwards."""
    storage = StorageManager(str(tmp_path))
    installed = []

    def configure(**config):
        storage.config.update(config)
        logger = setup_logging(storage)
        installed.extend(logging.getLogger().handlers)
        return logger

    yield configure
    root = logging.getLogger()
    for handler in installed:
        root.removeHandler(handler)
        handler.close()
    root.setLevel(logging.WARNING)


def test_logs_go_to_stderr_only(configured, capsys):
    logger = configured()
    logger.info("inspecting")
    logging.getLogger("bundlepeek.api").warning("GET returned 404")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "bundlepeek - INFO - inspecting" in captured.err
    assert "GET returned 404" in captured.err


def test_log_file_when_configured(configured, tmp_path, capsys):
    configured(log_file="bundlepeek.log").warning("format anomaly")

    assert "format anomaly" in (tmp_path / "bundlepeek.log").read_text()
    assert capsys.readouterr().out == ""


def test_no_log_file_by_default(configured, tmp_path):
    configured().info("inspecting")
    assert list(tmp_path.iterdir()) == []
