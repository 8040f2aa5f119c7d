from abc import ABC, abstractmethod


class BaseMarketPriceProvider(ABC):
    """Contract for market price reference lookups."""

    @abstractmethod
    def get_market_prices(self) -> dict[str, float]:
        """Return reference prices keyed by normalized item name.

        Raises:
            MarketPriceUnavailableError: if the reference cannot be retrieved.
        """

    def close(self) -> None:
        """Release any connection held by the provider."""
