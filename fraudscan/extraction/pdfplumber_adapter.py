import io

import pdfplumber

from fraudscan.extraction.base import BaseContentExtractor, join_pages
from fraudscan.extraction.exceptions import ExtractionError
from fraudscan.logging.logger import Log


class PdfPlumberAdapter(BaseContentExtractor):
    """PDF text via pdfplumber, one block per page in page order."""

    def extract(self, raw_bytes: bytes) -> str:
        try:
            with pdfplumber.open(io.BytesIO(raw_bytes)) as pdf:
                pages = [page.extract_text() or "" for page in pdf.pages]
        except Exception as exc:
            raise ExtractionError(f"pdfplumber could not read the PDF: {exc}") from exc
        Log.debug(f"pdfplumber read {len(pages)} pages")
        return join_pages(pages)
