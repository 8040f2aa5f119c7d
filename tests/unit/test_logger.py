import logging

import pytest

from fraudscan.extraction.base import join_pages
from fraudscan.logging.logger import ContextFormatter, Log


def _record(message: str, **extra: object) -> logging.LogRecord:
    record = logging.makeLogRecord({"msg": message, "levelname": "INFO"})
    record.__dict__.update(extra)
    return record


class TestContextFormatter:
    def test_plain_message_is_unchanged(self) -> None:
        formatter = ContextFormatter("%(message)s")
        assert formatter.format(_record("Processing file")) == "Processing file"

    def test_context_is_appended_sorted(self) -> None:
        formatter = ContextFormatter("[%(levelname)s] %(message)s")
        line = formatter.format(_record("Scanned document", findings=2, file="a.pdf"))
        assert line == "[INFO] Scanned document | file=a.pdf findings=2"


class TestJoinPages:
    def test_normalizes_line_endings_and_trailing_space(self) -> None:
        assert join_pages(["Vendor: Acme  \r\nTotal: 5", "", "page two\r"]) == (
            "Vendor: Acme\nTotal: 5\n\npage two"
        )

    def test_blank_pages_give_empty_string(self) -> None:
        assert join_pages(["", "  ", "\n"]) == ""


class TestLog:
    @pytest.mark.parametrize("level", ["debug", "info", "warning", "error"])
    def test_level_methods_pass_context_as_record_attributes(
        self, level: str, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.DEBUG, logger="fraudscan")

        getattr(Log, level)("Scanned document", file="a.pdf")

        [record] = caplog.records
        assert record.levelname == level.upper()
        assert record.getMessage() == "Scanned document"
        assert record.file == "a.pdf"  # type: ignore[attr-defined]

    @pytest.mark.parametrize(
        ("level", "doc"),
        [
            ("debug", "Log a debug message."),
            ("info", "Log an info message."),
            ("warning", "Log a warning message."),
            ("error", "Log an error message."),
        ],
    )
    def test_level_methods_are_documented(self, level: str, doc: str) -> None:
        assert getattr(Log, level).__doc__ == doc
