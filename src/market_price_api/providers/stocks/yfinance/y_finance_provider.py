"""Yahoo Finance market data provider for stocks."""
import asyncio
import logging
from typing import Any

import yfinance as yf

from market_price_api.providers.core import ProviderError, UpstreamError
from market_price_api.providers.stocks.stocks_provider_abc import \
    StocksProviderABC
from market_price_api.providers.stocks.yfinance.models import \
    YFinanceSearchParams

logger = logging.getLogger(__name__)


class YFinanceProvider(StocksProviderABC):
    """Market data provider for stocks via Yahoo Finance.

    Uses the yfinance library for quotes and search. No API key required.
    yfinance is synchronous, so every call runs in a worker thread.
    """

    def __init__(self, search_params: YFinanceSearchParams | None = None) -> None:
        """Initialize the YFinance provider.

        Args:
            search_params: Result limits passed to yfinance.Search.
        """
        self._search_params = search_params or YFinanceSearchParams()

    def _quote_sync(self, symbol: str) -> dict[str, Any] | None:
        """Single-symbol quote lookup (run in thread); None when Yahoo has no data."""
        info = yf.Ticker(symbol).info or {}
        if not info.get("symbol") and not info.get("quoteType"):
            return None
        return {**info, "symbol": info.get("symbol") or symbol}

    async def quote(self, symbols: list[str]) -> list[dict[str, Any]]:
        """Fetch quotes for the given symbols in parallel, keeping input order.

        Unknown symbols are omitted. Raises UpstreamError only when every
        lookup failed.
        """
        syms = [s for s in symbols if s]
        if not syms:
            return []
        results = await asyncio.gather(
            *[asyncio.to_thread(self._quote_sync, s) for s in syms],
            return_exceptions=True,
        )
        quotes: list[dict[str, Any]] = []
        errors: list[Exception] = []
        for sym, result in zip(syms, results):
            if isinstance(result, Exception):
                logger.debug("No quote for %s: %s", sym, result)
                errors.append(result)
            elif isinstance(result, BaseException):
                raise result
            elif result is not None:
                quotes.append(result)
        if len(errors) == len(syms):
            raise UpstreamError(f"Failed to fetch quotes: {errors[0]}") from errors[0]
        return quotes

    def _search_sync(self, query: str) -> dict[str, Any]:
        """Free-text search (run in thread)."""
        try:
            search = yf.Search(query, **self._search_params.model_dump())
        except Exception as e:
            raise UpstreamError(f"Failed to search for '{query}': {e}") from e
        quotes = list(search.quotes or [])
        return {
            "count": len(quotes),
            "quotes": quotes,
            "news": list(search.news or []),
        }

    async def search(self, query: str | None) -> dict[str, Any]:
        """Search Yahoo Finance for quotes and news matching query."""
        if not query:
            raise ProviderError("Missing search query")
        return await asyncio.to_thread(self._search_sync, query)
