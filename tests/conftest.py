"""
Pytest configuration and fixtures: stub providers, services and a test app.
"""

from typing import Any

import pytest
from fastapi.testclient import TestClient

from market_price_api.config import Settings
from market_price_api.deps import get_crypto_service, get_stocks_service
from market_price_api.main import create_app
from market_price_api.providers import CryptoProviderABC, StocksProviderABC
from market_price_api.services import CryptoService, StocksService


class StubCryptoProvider(CryptoProviderABC):
    """CryptoProviderABC returning canned coins/details and recording calls."""

    def __init__(
        self,
        coins: list[dict[str, Any]] | None = None,
        details: dict[str, dict[str, Any]] | None = None,
        error: Exception | None = None,
    ) -> None:
        self.coins = coins or []
        self.details = details or {}
        self.error = error
        self.searches: list[str | None] = []
        self.coin_ids: list[str] = []

    async def search(self, query: str | None) -> list[dict[str, Any]]:
        self.searches.append(query)
        if self.error is not None:
            raise self.error
        return self.coins

    async def get_coin(self, coin_id: str) -> dict[str, Any]:
        self.coin_ids.append(coin_id)
        return self.details[coin_id]


class StubStocksProvider(StocksProviderABC):
    """StocksProviderABC returning canned quotes/search results and recording calls."""

    def __init__(
        self,
        quotes: list[dict[str, Any]] | None = None,
        search_result: dict[str, Any] | None = None,
        quote_error: Exception | None = None,
        search_error: Exception | None = None,
    ) -> None:
        self.quotes = quotes or []
        self.search_result = search_result or {"count": 0, "quotes": [], "news": []}
        self.quote_error = quote_error
        self.search_error = search_error
        self.quote_calls: list[list[str]] = []
        self.search_calls: list[str | None] = []

    async def quote(self, symbols: list[str]) -> list[dict[str, Any]]:
        self.quote_calls.append(list(symbols))
        if self.quote_error is not None:
            raise self.quote_error
        return [q for q in self.quotes if q["symbol"] in symbols]

    async def search(self, query: str | None) -> dict[str, Any]:
        self.search_calls.append(query)
        if self.search_error is not None:
            raise self.search_error
        return self.search_result


ETH_COINS = [
    {"id": "ethereum", "name": "Ethereum", "api_symbol": "ethereum", "symbol": "ETH", "market_cap_rank": 2},
    {"id": "ethereum-classic", "name": "Ethereum Classic", "api_symbol": "ethereum-classic", "symbol": "ETC", "market_cap_rank": 24},
]
ETH_DETAIL = {"id": "ethereum", "symbol": "eth", "market_data": {"current_price": {"usd": 1573.56, "eur": 1447.1}}}

APPLE_SEARCH = {
    "count": 3,
    "quotes": [
        {"exchange": "NMS", "shortname": "Apple Inc.", "quoteType": "EQUITY", "symbol": "AAPL"},
        {"exchange": "NYQ", "shortname": "Apple Hospitality REIT, Inc.", "quoteType": "EQUITY", "symbol": "APLE"},
        {"index": "d8c1b54896db4e148d5bff7bdd4778d0", "name": "Apple Tree Partners", "isYahooFinance": False},
    ],
    "news": [{"uuid": "5a7c7c40", "title": "Apple news"}],
}
APPLE_QUOTES = [
    {"symbol": "AAPL", "regularMarketPrice": 145.93, "quoteType": "EQUITY"},
    {"symbol": "APLE", "regularMarketPrice": 15.82, "quoteType": "EQUITY"},
]


@pytest.fixture
def crypto_provider() -> StubCryptoProvider:
    return StubCryptoProvider(coins=ETH_COINS, details={"ethereum": ETH_DETAIL})


@pytest.fixture
def stocks_provider() -> StubStocksProvider:
    return StubStocksProvider(quotes=APPLE_QUOTES, search_result=APPLE_SEARCH)


@pytest.fixture
def crypto_service(crypto_provider: StubCryptoProvider) -> CryptoService:
    return CryptoService(crypto_provider)


@pytest.fixture
def stocks_service(stocks_provider: StubStocksProvider) -> StocksService:
    return StocksService(stocks_provider)


@pytest.fixture
def app(crypto_service: CryptoService, stocks_service: StocksService):
    """App with the response cache disabled and stub services injected."""
    test_app = create_app(Settings(cache_ttl=0))
    test_app.dependency_overrides[get_crypto_service] = lambda: crypto_service
    test_app.dependency_overrides[get_stocks_service] = lambda: stocks_service
    yield test_app
    test_app.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app, raise_server_exceptions=False)
