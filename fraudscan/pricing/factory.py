from fraudscan.config.settings import Settings
from fraudscan.pricing.base import BaseMarketPriceProvider
from fraudscan.pricing.http_provider import HttpMarketPriceProvider
from fraudscan.pricing.static_provider import StaticMarketPriceProvider


class MarketPriceProviderFactory:
    """Creates the configured market price provider."""

    SOURCES = ("static", "http")

    @classmethod
    def create(cls, settings: Settings) -> BaseMarketPriceProvider:
        source = settings.market_price_source.lower()
        if source == "static":
            return StaticMarketPriceProvider(settings.market_prices)
        if source == "http":
            url = settings.market_price_url.strip()
            if not url:
                raise ValueError(
                    "market_price_url is required for market_price_source=http"
                )
            return HttpMarketPriceProvider(
                url=url,
                timeout_seconds=settings.market_price_timeout_seconds,
            )
        raise ValueError(
            f"Unknown market price source '{source}'. Choose from: {list(cls.SOURCES)}"
        )
