"""Abstract base class for stock market data providers."""
from abc import abstractmethod
from typing import Any

from market_price_api.providers.core import MarketProviderABC


class StocksProviderABC(MarketProviderABC):
    """Base interface for stock market data providers.

    Extends MarketProviderABC with a batched quote lookup and a free-text
    search, mirroring the market data provider's REST surface.
    """

    @abstractmethod
    async def quote(self, symbols: list[str]) -> list[dict[str, Any]]:
        """Fetch quotes for all symbols in one provider call.

        Args:
            symbols: Stock tickers (e.g. ["AAPL", "MSFT"]).

        Returns:
            Raw quote dicts in provider order; each has "symbol" and, when
            priced, "regularMarketPrice". Unknown symbols are omitted.
        """

    @abstractmethod
    async def search(self, query: str | None) -> dict[str, Any]:
        """Free-text search (company name, ticker, keyword).

        Returns:
            Aggregate with at least a "quotes" list whose entries may carry
            a "symbol", plus related "news".
        """
