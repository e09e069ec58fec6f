import logging

from regrad.config import RegradConfig
from regrad.logger import get_logger


def test_log_level_default(monkeypatch):
    monkeypatch.delenv(RegradConfig.LOG_LEVEL_ENV, raising=False)
    assert RegradConfig.log_level() == logging.WARNING


def test_log_level_from_env(monkeypatch):
    monkeypatch.setenv(RegradConfig.LOG_LEVEL_ENV, "debug")
    assert RegradConfig.log_level() == logging.DEBUG


def test_log_level_unknown_name_falls_back(monkeypatch):
    monkeypatch.setenv(RegradConfig.LOG_LEVEL_ENV, "chatty")
    assert RegradConfig.log_level() == logging.WARNING


def test_get_logger_names():
    assert get_logger("regrad.core.engine").name == "regrad.core.engine"
    assert get_logger("bench").name == "regrad.bench"
    assert get_logger().name == "regrad"
    assert logging.getLogger("regrad").handlers


def test_engine_logs_at_debug(caplog):
    from regrad import Value

    x = Value(2.0)
    with caplog.at_level(logging.DEBUG, logger="regrad"):
        (x * x).backward()
    assert any("backward: 2 nodes" in r.getMessage() for r in caplog.records)
