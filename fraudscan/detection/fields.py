"""Helpers that pull comparable fields out of extracted content.

Text content is searched line by line. Spreadsheet rows are first rendered
as tab-separated lines, so a label cell followed by a value cell reads the
same as ``Label: value`` in a PDF.
"""

import hashlib
import numbers
import re
import unicodedata

from fraudscan.detection.models import LineItem
from fraudscan.extraction.base import ExtractedContent

_VENDOR_RE = re.compile(
    r"^[ \t]*(?:vendor|supplier|payee|seller|from)\b(?:[ \t]+name)?"
    r"[ \t]*[:#\t][ \t]*(?P<value>[^\t\n]+)",
    re.IGNORECASE | re.MULTILINE,
)
_ACCOUNT_RE = re.compile(
    r"\b(?:iban|account(?:[ \t]*(?:no\.?|number|#))?|acct\.?(?:[ \t]*no\.?)?)"
    r"[ \t]*[:#\t]?[ \t]*"
    r"(?P<value>[A-Z]{0,4}\d[\dA-Z]*(?:[ \-]\d[\dA-Z]*)*)",
    re.IGNORECASE,
)
_ITEM_RE = re.compile(r"^[ \t]*(?P<item>[A-Za-z][A-Za-z &/\-]*[A-Za-z])")
_PRICE_RE = re.compile(r"(?:[$€£][ \t]*)?(\d{1,3}(?:,\d{3})+(?:\.\d+)?|\d+(?:\.\d+)?)")
# "2 x 150.00", "2 @ $150"
_QUANTITY_RE = re.compile(
    r"(?P<quantity>\d+(?:\.\d+)?)[ \t]*(?:x|×|@)[ \t]*(?:[$€£][ \t]*)?"
    r"(?P<unit>\d{1,3}(?:,\d{3})+(?:\.\d+)?|\d+(?:\.\d+)?)",
    re.IGNORECASE,
)

_HEADER_LABELS: dict[str, frozenset[str]] = {
    "quantity": frozenset({"qty", "quantity", "units", "pcs"}),
    "unit": frozenset({"price", "unit_price", "unit_cost", "rate", "price_each", "each"}),
    "total": frozenset({"total", "amount", "line_total", "total_price", "subtotal"}),
}

_MIN_ACCOUNT_DIGITS = 6


def content_to_text(content: ExtractedContent) -> str:
    """Render content as one canonical string."""
    if isinstance(content, str):
        return content
    return "\n".join(
        "\t".join("" if cell is None else str(cell) for cell in row) for row in content
    )


def fingerprint(text: str) -> str:
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def normalize_identifier(value: str) -> str:
    """Fold accents, lowercase, and collapse non-alphanumerics to ``_``."""
    decomposed = unicodedata.normalize("NFKD", value)
    ascii_only = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return re.sub(r"[^a-z0-9]+", "_", ascii_only.lower()).strip("_")


def find_vendor(text: str) -> str | None:
    match = _VENDOR_RE.search(text)
    if match is None:
        return None
    return normalize_identifier(match.group("value")) or None


def find_payment_account(text: str) -> str | None:
    for match in _ACCOUNT_RE.finditer(text):
        account = re.sub(r"[ \-]", "", match.group("value")).upper()
        if sum(ch.isdigit() for ch in account) >= _MIN_ACCOUNT_DIGITS:
            return account
    return None


def find_line_items(content: ExtractedContent) -> list[LineItem]:
    """Priced lines with their per-unit price.

    A line whose unit price cannot be told apart from a quantity or a line
    total is left out.
    """
    if isinstance(content, str):
        return _text_line_items(content)
    return _row_line_items(content)


def _text_line_items(text: str) -> list[LineItem]:
    items: list[LineItem] = []
    for line in text.splitlines():
        item_match = _ITEM_RE.match(line)
        if item_match is None:
            continue
        rest = line[item_match.end():]
        quantity_match = _QUANTITY_RE.search(rest)
        if quantity_match is not None:
            price = _parse_price(quantity_match.group("unit"))
        else:
            prices = _PRICE_RE.findall(rest)
            if len(prices) != 1:
                continue
            price = _parse_price(prices[0])
        name = normalize_identifier(item_match.group("item"))
        items.append(LineItem(name=name, price=price))
    return items


def _row_line_items(rows: list[list[object]]) -> list[LineItem]:
    items: list[LineItem] = []
    columns: dict[str, int] = {}
    for row in rows:
        header = _header_columns(row)
        if header:
            columns = header
            continue
        name = next(
            (c for c in row if isinstance(c, str) and any(ch.isalpha() for ch in c)),
            None,
        )
        price = _row_unit_price(row, columns)
        if name is not None and price is not None:
            items.append(LineItem(name=normalize_identifier(name), price=price))
    return items


def _header_columns(row: list[object]) -> dict[str, int]:
    """Map column roles to indexes when *row* is a table header."""
    if any(cell is not None and not isinstance(cell, str) for cell in row):
        return {}
    columns: dict[str, int] = {}
    for index, cell in enumerate(row):
        label = normalize_identifier(cell) if isinstance(cell, str) else ""
        for role, labels in _HEADER_LABELS.items():
            if label in labels:
                columns.setdefault(role, index)
    return columns


def _row_unit_price(row: list[object], columns: dict[str, int]) -> float | None:
    unit = _column_price(row, columns.get("unit"))
    if unit is not None:
        return unit
    quantity_index = columns.get("quantity")
    quantity = _column_price(row, quantity_index)
    total = _column_price(row, columns.get("total"))
    if quantity and total is not None:
        return total / quantity
    prices = [
        price
        for index, price in enumerate(_cell_price(c) for c in row)
        if price is not None and index != quantity_index
    ]
    if len(prices) != 1 or quantity not in (None, 1):
        return None
    return prices[0]


def _column_price(row: list[object], index: int | None) -> float | None:
    if index is None or index >= len(row):
        return None
    return _cell_price(row[index])


def _cell_price(cell: object) -> float | None:
    if isinstance(cell, bool):
        return None
    if isinstance(cell, numbers.Real):
        return float(cell)
    if isinstance(cell, str):
        match = _PRICE_RE.fullmatch(cell.strip())
        if match:
            return _parse_price(match.group(1))
    return None


def _parse_price(raw: str) -> float:
    return float(raw.replace(",", ""))
