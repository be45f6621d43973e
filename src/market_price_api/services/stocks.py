"""Stocks service: batched prices, search and company-name resolution."""
import logging
from typing import Any

from market_price_api.providers import ProviderErrorMapper, StocksProviderABC
from market_price_api.providers.core import PROVIDER_EXCEPTIONS
from market_price_api.result import Failure, Result, Success
from market_price_api.schemas import StockPrice

logger = logging.getLogger(__name__)

SYMBOL_NOT_FOUND = "symbol not found"


class StocksService:
    """Thin service over a stocks provider; maps provider errors to Failure."""

    def __init__(
        self,
        provider: StocksProviderABC,
        error_mapper: ProviderErrorMapper | None = None,
    ) -> None:
        self._provider = provider
        self._error_mapper = error_mapper or ProviderErrorMapper(api_name="Yahoo Finance")

    async def get_stock_price(self, symbols: list[str]) -> Result[list[StockPrice]]:
        """Quote all symbols in one call; result order follows the provider."""
        try:
            quotes = await self._provider.quote(symbols)
        except PROVIDER_EXCEPTIONS as e:
            return self._error_mapper.to_failure(e, symbol=",".join(filter(None, symbols)))
        if not quotes:
            return Failure(code=self._error_mapper.status_code, message=SYMBOL_NOT_FOUND)
        return Success(
            [
                StockPrice(
                    symbol=quote.get("symbol"),
                    current_price=quote.get("regularMarketPrice") or None,
                )
                for quote in quotes
            ]
        )

    async def search_stock(self, query: str | None) -> Result[dict[str, Any]]:
        """Free-text search; returns the provider aggregate unmodified."""
        try:
            return Success(await self._provider.search(query))
        except PROVIDER_EXCEPTIONS as e:
            return self._error_mapper.to_failure(e, symbol=query)

    async def resolve_company_symbols(self, company_name: str | None) -> list[str]:
        """Tickers of the search quotes for company_name; entries without one are dropped.

        A failed search resolves to no symbols, so the following price lookup
        reports "symbol not found".
        """
        match await self.search_stock(company_name):
            case Success(payload=result):
                return [q["symbol"] for q in result.get("quotes") or [] if q.get("symbol")]
            case Failure(message=message):
                logger.info("Could not resolve company %r: %s", company_name, message)
                return []
