# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import io
import logging
from datetime import datetime

from rich.console import Console

from launchers_lib.core.logger import CFG, get_logger


def test_logger_debug_mode(monkeypatch):
    monkeypatch.setenv(CFG.env_vars.debug_mode, "1")
    logger = get_logger("test_debug")

    assert logger.level == logging.DEBUG


def test_logger_non_debug_mode(monkeypatch):
    monkeypatch.delenv(CFG.env_vars.debug_mode, raising=False)
    logger = get_logger("test_info")

    assert logger.level == logging.INFO


def test_logger_does_not_duplicate_handlers(monkeypatch):
    monkeypatch.delenv(CFG.env_vars.debug_mode, raising=False)
    logging.getLogger("test_duplicate").handlers.clear()

    get_logger("test_duplicate")
    logger = get_logger("test_duplicate")

    assert len(logger.handlers) == 1
    assert not logger.propagate


def test_logger_repeated_call_updates_level(monkeypatch):
    monkeypatch.delenv(CFG.env_vars.debug_mode, raising=False)
    logging.getLogger("test_relevel").handlers.clear()
    get_logger("test_relevel")

    monkeypatch.setenv(CFG.env_vars.debug_mode, "1")
    logger = get_logger("test_relevel")

    assert logger.level == logging.DEBUG
    assert logger.handlers[0].level == logging.DEBUG


def _make_stringio_logger(monkeypatch, *, show_time=False):
    """Return a logger writing into a StringIO buffer."""
    buf = io.StringIO()

    monkeypatch.setitem(
        get_logger.__globals__,
        "Console",
        lambda **kwargs: Console(file=buf, force_terminal=False, **kwargs),
    )

    name = f"test_logger_{show_time}"
    logging.getLogger(name).handlers.clear()
    logger = get_logger(name, show_time=show_time)
    return logger, buf


def test_logger_outputs_time_in_debug_mode(monkeypatch):
    monkeypatch.setenv(CFG.env_vars.debug_mode, "1")
    logger, buf = _make_stringio_logger(monkeypatch)
    logger.info("hello")

    timestamp = datetime.now().strftime(CFG.date_formats.standard)[:-3]
    assert timestamp in buf.getvalue()


def test_logger_does_not_output_time_by_default(monkeypatch):
    monkeypatch.delenv(CFG.env_vars.debug_mode, raising=False)
    logger, buf = _make_stringio_logger(monkeypatch)
    logger.warning("checkpoint missing")
    output = buf.getvalue()

    timestamp = datetime.now().strftime(CFG.date_formats.standard)[:-3]
    assert timestamp not in output
    assert "checkpoint missing" in output
    assert "WARNING" in output
