# tests/test_logger.py

from __future__ import annotations

import logging

from ftt_parser.logger import get_logger, list_active_loggers, set_debug


def test_short_names_live_under_base_logger() -> None:
    log = get_logger("parser_core")
    assert log.name == "ftt_parser.parser_core"
    assert log.propagate is True


def test_base_logger_owns_handlers() -> None:
    base = get_logger()
    assert base.name == "ftt_parser"
    assert base.propagate is False
    assert any(isinstance(h, logging.StreamHandler) for h in base.handlers)


def test_module_file_handler_is_attached_once() -> None:
    first = get_logger("tests.logger")
    second = get_logger("tests.logger")
    assert first is second
    module_handlers = [h for h in first.handlers if getattr(h, "is_module_handler", False)]
    assert len(module_handlers) == 1
    assert "ftt_parser.tests.logger" in list_active_loggers()


def test_set_debug_retunes_handlers() -> None:
    log = get_logger("tests.debug_toggle")
    try:
        set_debug(True)
        assert log.level == logging.DEBUG
        assert all(h.level == logging.DEBUG for h in log.handlers)
    finally:
        set_debug(False)
    assert log.level == logging.INFO
