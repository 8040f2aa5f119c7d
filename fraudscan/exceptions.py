class FraudScanError(Exception):
    """Base exception for all fraudscan errors."""
