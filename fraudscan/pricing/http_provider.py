import httpx

from fraudscan.detection.fields import normalize_identifier
from fraudscan.pricing.base import BaseMarketPriceProvider
from fraudscan.pricing.exceptions import MarketPriceUnavailableError


class HttpMarketPriceProvider(BaseMarketPriceProvider):
    """Fetches a JSON object of ``{item: price}`` from a remote endpoint."""

    def __init__(
        self,
        *,
        url: str,
        timeout_seconds: int,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._url = url
        self._client = httpx.Client(timeout=timeout_seconds, transport=transport)

    def get_market_prices(self) -> dict[str, float]:
        try:
            response = self._client.get(self._url)
            response.raise_for_status()
            payload = response.json()
        except (httpx.ConnectError, httpx.TimeoutException) as exc:
            raise MarketPriceUnavailableError(
                f"Market price service network error: {exc}"
            ) from exc
        except httpx.HTTPStatusError as exc:
            raise MarketPriceUnavailableError(
                f"Market price service returned {exc.response.status_code}"
            ) from exc
        except (httpx.HTTPError, ValueError) as exc:
            raise MarketPriceUnavailableError(
                f"Market price service error: {exc}"
            ) from exc

        if not isinstance(payload, dict):
            raise MarketPriceUnavailableError("Market price payload must be an object")
        try:
            return {normalize_identifier(str(k)): float(v) for k, v in payload.items()}
        except (TypeError, ValueError) as exc:
            raise MarketPriceUnavailableError(f"Invalid market price value: {exc}") from exc

    def close(self) -> None:
        self._client.close()
