from pathlib import PurePath

from fraudscan.config.settings import Settings
from fraudscan.extraction.base import BaseContentExtractor
from fraudscan.extraction.exceptions import UnsupportedFormatError
from fraudscan.extraction.pdfplumber_adapter import PdfPlumberAdapter
from fraudscan.extraction.pymupdf_adapter import PyMuPdfAdapter
from fraudscan.extraction.spreadsheet_adapter import SpreadsheetAdapter
from fraudscan.extraction.word_adapter import WordAdapter


class ContentExtractorFactory:
    """Creates the correct content extractor for a file name."""

    PDF_ADAPTERS: dict[str, type[BaseContentExtractor]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    ADAPTERS: dict[str, type[BaseContentExtractor]] = {
        "xlsx": SpreadsheetAdapter,
        "xls": SpreadsheetAdapter,
        "docx": WordAdapter,
    }

    @classmethod
    def create_pdf(cls, settings: Settings) -> BaseContentExtractor:
        engine = settings.pdf_engine.lower()
        adapter_cls = cls.PDF_ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.PDF_ADAPTERS)}"
            )
        return adapter_cls()

    @classmethod
    def for_filename(cls, filename: str, settings: Settings) -> BaseContentExtractor:
        """Pick an extractor by file extension.

        Raises:
            UnsupportedFormatError: if the extension is not recognized.
        """
        extension = PurePath(filename).suffix.lower().lstrip(".")
        if extension == "pdf":
            return cls.create_pdf(settings)
        adapter_cls = cls.ADAPTERS.get(extension)
        if adapter_cls is None:
            supported = ["pdf", *cls.ADAPTERS]
            raise UnsupportedFormatError(
                f"Unsupported file format '.{extension}' for {filename}. "
                f"Choose from: {supported}"
            )
        return adapter_cls()
