from abc import ABC, abstractmethod
from collections.abc import Iterable

Row = list[object]
ExtractedContent = str | list[Row]


class BaseContentExtractor(ABC):
    """Contract for all content extraction adapters."""

    @abstractmethod
    def extract(self, raw_bytes: bytes) -> ExtractedContent:
        """Extract text or tabular rows from file bytes.

        Args:
            raw_bytes: Raw file content.

        Returns:
            A single text blob for document formats, or an ordered list of
            rows (each an ordered list of cell values) for spreadsheets.

        Raises:
            ExtractionError: if extraction fails for any reason.
        """


def join_pages(pages: Iterable[str]) -> str:
    """Join page texts with ``\\n`` line endings and no trailing blanks."""
    text = "\n".join(pages).replace("\r\n", "\n").replace("\r", "\n")
    return "\n".join(line.rstrip() for line in text.split("\n")).strip()
