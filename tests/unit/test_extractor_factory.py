from unittest.mock import patch

import pytest

from fraudscan.extraction.exceptions import UnsupportedFormatError
from fraudscan.extraction.factory import ContentExtractorFactory
from fraudscan.extraction.pdfplumber_adapter import PdfPlumberAdapter
from fraudscan.extraction.pymupdf_adapter import PyMuPdfAdapter
from fraudscan.extraction.spreadsheet_adapter import SpreadsheetAdapter
from fraudscan.extraction.word_adapter import WordAdapter


def _make_settings(pdf_engine: str = "pdfplumber"):  # type: ignore[no-untyped-def]
    """Create a minimal Settings-like object with only pdf_engine."""
    with patch("fraudscan.config.settings.Settings") as mock_cls:
        settings = mock_cls.return_value
        settings.pdf_engine = pdf_engine
        return settings


class TestPdfEngines:
    def test_creates_pdfplumber_adapter(self) -> None:
        adapter = ContentExtractorFactory.for_filename("a.pdf", _make_settings("pdfplumber"))
        assert isinstance(adapter, PdfPlumberAdapter)

    def test_creates_pymupdf_adapter(self) -> None:
        adapter = ContentExtractorFactory.for_filename("a.pdf", _make_settings("pymupdf"))
        assert isinstance(adapter, PyMuPdfAdapter)

    def test_engine_is_case_insensitive(self) -> None:
        adapter = ContentExtractorFactory.for_filename("a.pdf", _make_settings("PdfPlumber"))
        assert isinstance(adapter, PdfPlumberAdapter)

    def test_raises_for_unknown_engine(self) -> None:
        with pytest.raises(ValueError, match="Unknown PDF engine"):
            ContentExtractorFactory.for_filename("a.pdf", _make_settings("unknown"))


class TestExtensions:
    @pytest.mark.parametrize(
        ("filename", "adapter_cls"),
        [
            ("invoice.xlsx", SpreadsheetAdapter),
            ("invoice.XLS", SpreadsheetAdapter),
            ("invoice.docx", WordAdapter),
            ("scan.final.PDF", PdfPlumberAdapter),
        ],
    )
    def test_picks_adapter_by_extension(self, filename: str, adapter_cls: type) -> None:
        adapter = ContentExtractorFactory.for_filename(filename, _make_settings())
        assert isinstance(adapter, adapter_cls)

    @pytest.mark.parametrize("filename", ["notes.txt", "legacy.doc", "README"])
    def test_raises_for_unsupported_extension(self, filename: str) -> None:
        with pytest.raises(UnsupportedFormatError, match="Unsupported file format"):
            ContentExtractorFactory.for_filename(filename, _make_settings())
