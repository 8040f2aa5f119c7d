from fraudscan.exceptions import FraudScanError


class UnsupportedFormatError(FraudScanError):
    """Raised when a file extension has no registered extractor."""


class ExtractionError(FraudScanError):
    """Raised when the underlying format library fails to decode a file."""
