"""Tests for logging configuration."""

from __future__ import annotations

import io
import logging

from faqnav.utils.logging_config import ExtraFieldsFormatter, get_logger


class TestExtraFieldsFormatter:
    """Tests for ExtraFieldsFormatter."""

    def _record(self, **extra: object) -> logging.LogRecord:
        record = logging.LogRecord("faqnav.test", logging.INFO, __file__, 1, "Loaded", (), None)
        for key, value in extra.items():
            setattr(record, key, value)
        return record

    def test_plain_message(self) -> None:
        formatter = ExtraFieldsFormatter("%(levelname)s %(message)s")
        assert formatter.format(self._record()) == "INFO Loaded"

    def test_appends_extra_fields_sorted(self) -> None:
        formatter = ExtraFieldsFormatter("%(message)s")
        text = formatter.format(self._record(source="faq.json", records=3))
        assert text == "Loaded | records=3 source='faq.json'"


def test_get_logger_attaches_handler_once() -> None:
    get_logger("faqnav.a")
    get_logger("faqnav.b")

    handlers = [
        handler
        for handler in logging.getLogger("faqnav").handlers
        if isinstance(handler.formatter, ExtraFieldsFormatter)
    ]
    assert len(handlers) == 1


def test_package_loggers_do_not_propagate() -> None:
    """Records are written by the package handler only, never again by the root logger."""
    get_logger("server.main")

    for name in ("faqnav", "server"):
        assert logging.getLogger(name).propagate is False


def test_root_handlers_do_not_repeat_records() -> None:
    stream = io.StringIO()
    root_handler = logging.StreamHandler(stream)
    root = logging.getLogger()
    logger = get_logger("faqnav.sample")

    root.addHandler(root_handler)
    try:
        logger.warning("Loaded once", extra={"records": 2})
    finally:
        root.removeHandler(root_handler)

    assert stream.getvalue() == ""
