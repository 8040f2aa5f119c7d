from fraudscan.detection.fields import normalize_identifier
from fraudscan.pricing.base import BaseMarketPriceProvider


class StaticMarketPriceProvider(BaseMarketPriceProvider):
    """Serves a fixed price table, typically loaded from settings."""

    def __init__(self, prices: dict[str, float] | None = None) -> None:
        self._prices = {normalize_identifier(k): float(v) for k, v in (prices or {}).items()}

    def get_market_prices(self) -> dict[str, float]:
        return dict(self._prices)
