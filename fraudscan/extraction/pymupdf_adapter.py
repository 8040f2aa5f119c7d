import pymupdf

from fraudscan.extraction.base import BaseContentExtractor, join_pages
from fraudscan.extraction.exceptions import ExtractionError
from fraudscan.logging.logger import Log


class PyMuPdfAdapter(BaseContentExtractor):
    """PDF text via PyMuPDF, blocks sorted top-to-bottom within a page."""

    def extract(self, raw_bytes: bytes) -> str:
        try:
            with pymupdf.open(stream=raw_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                pages = [page.get_text("text", sort=True) for page in doc]
        except Exception as exc:
            raise ExtractionError(f"pymupdf could not read the PDF: {exc}") from exc
        Log.debug(f"pymupdf read {len(pages)} pages")
        return join_pages(pages)
