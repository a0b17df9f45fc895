from __future__ import annotations

import logging

import colorlog

from logging_config import setup_logging


def test_setup_logging_installs_colored_console_and_mutes_external_loggers() -> None:
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    external = logging.getLogger("urllib3.connectionpool")
    own = logging.getLogger("token_sale")
    try:
        setup_logging("DEBUG")

        assert root.level == logging.DEBUG
        assert any(isinstance(h.formatter, colorlog.ColoredFormatter) for h in root.handlers)
        assert external.disabled is True
        assert own.disabled is False
    finally:
        external.disabled = False
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
