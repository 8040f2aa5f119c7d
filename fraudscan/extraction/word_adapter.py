import io

import docx2txt

from fraudscan.extraction.base import BaseContentExtractor, join_pages
from fraudscan.extraction.exceptions import ExtractionError


class WordAdapter(BaseContentExtractor):
    """Extracts raw text from a .docx document using docx2txt."""

    def extract(self, raw_bytes: bytes) -> str:
        try:
            text = docx2txt.process(io.BytesIO(raw_bytes)) or ""
        except Exception as exc:
            raise ExtractionError(f"docx2txt extraction failed: {exc}") from exc
        return join_pages([text])
