import io

import pandas as pd

from fraudscan.extraction.base import BaseContentExtractor, Row
from fraudscan.extraction.exceptions import ExtractionError


class SpreadsheetAdapter(BaseContentExtractor):
    """Extracts rows from every worksheet of an Excel workbook using pandas.

    Sheets are concatenated in workbook order. Empty cells become ``None``.
    """

    def extract(self, raw_bytes: bytes) -> list[Row]:
        try:
            sheets = pd.read_excel(io.BytesIO(raw_bytes), sheet_name=None, header=None)
            rows: list[Row] = []
            for frame in sheets.values():
                cleaned = frame.astype(object).where(frame.notna(), None)
                rows.extend(list(row) for row in cleaned.itertuples(index=False, name=None))
            return rows
        except ExtractionError:
            raise
        except Exception as exc:
            raise ExtractionError(f"spreadsheet extraction failed: {exc}") from exc
