from unittest.mock import Mock

import httpx
import pytest

from fraudscan.config.settings import Settings
from fraudscan.pricing.exceptions import MarketPriceUnavailableError
from fraudscan.pricing.factory import MarketPriceProviderFactory
from fraudscan.pricing.http_provider import HttpMarketPriceProvider
from fraudscan.pricing.static_provider import StaticMarketPriceProvider

_URL = "https://prices.example.com/v1/reference"


def _http_provider(handler) -> HttpMarketPriceProvider:  # type: ignore[no-untyped-def]
    return HttpMarketPriceProvider(
        url=_URL,
        timeout_seconds=5,
        transport=httpx.MockTransport(handler),
    )


class TestStaticMarketPriceProvider:
    def test_normalizes_item_names(self) -> None:
        provider = StaticMarketPriceProvider({"Office Chair": 100})
        assert provider.get_market_prices() == {"office_chair": 100.0}

    def test_returns_copy(self) -> None:
        provider = StaticMarketPriceProvider({"Desk": 250})
        provider.get_market_prices()["desk"] = 1.0
        assert provider.get_market_prices() == {"desk": 250.0}

    def test_empty_by_default(self) -> None:
        assert StaticMarketPriceProvider().get_market_prices() == {}


class TestHttpMarketPriceProvider:
    def test_returns_prices(self) -> None:
        provider = _http_provider(
            lambda request: httpx.Response(200, json={"Office Chair": "120.5"})
        )
        assert provider.get_market_prices() == {"office_chair": 120.5}

    def test_requests_configured_url(self) -> None:
        seen: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(str(request.url))
            return httpx.Response(200, json={})

        _http_provider(handler).get_market_prices()

        assert seen == [_URL]

    def test_raises_on_server_error(self) -> None:
        provider = _http_provider(lambda request: httpx.Response(503))
        with pytest.raises(MarketPriceUnavailableError, match="503"):
            provider.get_market_prices()

    def test_raises_on_connection_failure(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(MarketPriceUnavailableError, match="network error"):
            _http_provider(handler).get_market_prices()

    def test_raises_on_timeout(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("slow", request=request)

        with pytest.raises(MarketPriceUnavailableError, match="network error"):
            _http_provider(handler).get_market_prices()

    def test_raises_on_invalid_json(self) -> None:
        provider = _http_provider(lambda request: httpx.Response(200, text="not json"))
        with pytest.raises(MarketPriceUnavailableError):
            provider.get_market_prices()

    def test_raises_on_non_object_payload(self) -> None:
        provider = _http_provider(lambda request: httpx.Response(200, json=[1, 2]))
        with pytest.raises(MarketPriceUnavailableError, match="must be an object"):
            provider.get_market_prices()

    def test_raises_on_non_numeric_price(self) -> None:
        provider = _http_provider(lambda request: httpx.Response(200, json={"Desk": "cheap"}))
        with pytest.raises(MarketPriceUnavailableError, match="Invalid market price"):
            provider.get_market_prices()

    def test_close_closes_http_client(self) -> None:
        provider = _http_provider(lambda request: httpx.Response(200, json={}))
        provider.close()
        assert provider._client.is_closed


class TestMarketPriceProviderFactory:
    def test_creates_static_provider(self) -> None:
        settings = Mock(spec=Settings, market_price_source="static", market_prices={"Desk": 1})
        provider = MarketPriceProviderFactory.create(settings)
        assert isinstance(provider, StaticMarketPriceProvider)
        assert provider.get_market_prices() == {"desk": 1.0}

    def test_creates_http_provider(self) -> None:
        settings = Mock(
            spec=Settings,
            market_price_source="HTTP",
            market_price_url=_URL,
            market_price_timeout_seconds=3,
        )
        assert isinstance(MarketPriceProviderFactory.create(settings), HttpMarketPriceProvider)

    def test_http_requires_url(self) -> None:
        settings = Mock(spec=Settings, market_price_source="http", market_price_url="  ")
        with pytest.raises(ValueError, match="market_price_url is required"):
            MarketPriceProviderFactory.create(settings)

    def test_raises_for_unknown_source(self) -> None:
        settings = Mock(spec=Settings, market_price_source="oracle")
        with pytest.raises(ValueError, match="Unknown market price source"):
            MarketPriceProviderFactory.create(settings)
