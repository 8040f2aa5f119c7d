from fraudscan.exceptions import FraudScanError


class MarketPriceUnavailableError(FraudScanError):
    """Raised when the market price reference cannot be retrieved."""
