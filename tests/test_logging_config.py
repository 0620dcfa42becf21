# tests/test_logging_config.py
import logging
import sys

import pytest

from webhook_alert.logging_config import LOG_FORMAT, setup_logging


# --- 픽스처 ----------------------------------------------------------------

@pytest.fixture(autouse=True)
def restore_loggers():
    """setup_logging 은 루트 로거를 바꾸므로 테스트 후 원상복구"""
    root_logger = logging.getLogger()
    saved_handlers = list(root_logger.handlers)
    saved_level = root_logger.level
    saved_levels = {name: logging.getLogger(name).level for name in ("httpx", "httpcore")}
    yield
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
    for handler in saved_handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(saved_level)
    for name, level in saved_levels.items():
        logging.getLogger(name).setLevel(level)


# --- 테스트들 ---------------------------------------------------------------

def test_setup_logging_single_stdout_handler():
    """기존 핸들러는 지우고 stdout 핸들러 하나만 남김"""
    setup_logging("INFO")
    setup_logging("INFO")

    handlers = logging.getLogger().handlers
    assert len(handlers) == 1
    assert handlers[0].stream is sys.stdout
    assert handlers[0].formatter._fmt == LOG_FORMAT


def test_setup_logging_level_from_string():
    assert setup_logging("debug") == logging.DEBUG
    assert logging.getLogger().level == logging.DEBUG


def test_setup_logging_unknown_level_falls_back_to_info():
    assert setup_logging("chatty") == logging.INFO
    assert logging.getLogger().level == logging.INFO


def test_setup_logging_quiets_http_client_loggers():
    """INFO 에서는 httpx 요청 로그를 WARNING 으로 올리고, DEBUG 에서는 그대로 보임"""
    setup_logging("INFO")
    assert logging.getLogger("httpx").level == logging.WARNING
    assert logging.getLogger("httpcore").level == logging.WARNING

    setup_logging("DEBUG")
    assert logging.getLogger("httpx").level == logging.DEBUG
