import pytest

from fraudscan.detection.registry import PatternRegistry
from fraudscan.pricing.static_provider import StaticMarketPriceProvider
from tests.builders import make_docx, make_pdf, make_xlsx


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """A single-page invoice with vendor, account and one line item."""
    return make_pdf(
        [
            "Invoice INV-1001",
            "Vendor: Acme Supplies",
            "Account Number: 12345678",
            "Office Chair: 300.00",
        ]
    )


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    return make_pdf(["Page one content"], ["Page two content"])


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    return make_pdf([])


@pytest.fixture()
def sample_xlsx_bytes() -> bytes:
    return make_xlsx(
        {
            "Invoice": [
                ["Vendor", "Acme Supplies"],
                ["Office Chair", 300],
            ],
            "Notes": [
                ["Referral commission", None, "applies"],
            ],
        }
    )


@pytest.fixture()
def sample_docx_bytes() -> bytes:
    return make_docx(["Vendor: Acme Supplies", "Advance payment required before delivery"])


@pytest.fixture()
def registry() -> PatternRegistry:
    return PatternRegistry()


@pytest.fixture()
def price_provider() -> StaticMarketPriceProvider:
    return StaticMarketPriceProvider({"Office Chair": 100.0, "Desk": 250.0})
