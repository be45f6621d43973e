"""Crypto service: price by ticker and coin search with unified error mapping."""
import logging
from typing import Any

from market_price_api.providers import CryptoProviderABC, ProviderErrorMapper
from market_price_api.providers.core import PROVIDER_EXCEPTIONS
from market_price_api.result import Failure, Result, Success
from market_price_api.schemas import CryptoPrice

logger = logging.getLogger(__name__)

SYMBOL_NOT_FOUND = "symbol not found"


def _usd_price(detail: dict[str, Any]) -> float | None:
    """market_data.current_price.usd from a coin detail payload, or None."""
    market_data = (detail or {}).get("market_data") or {}
    price = (market_data.get("current_price") or {}).get("usd")
    return float(price) if price is not None else None


class CryptoService:
    """Thin service over a crypto provider; maps provider errors to Failure."""

    def __init__(
        self,
        provider: CryptoProviderABC,
        error_mapper: ProviderErrorMapper | None = None,
    ) -> None:
        self._provider = provider
        self._error_mapper = error_mapper or ProviderErrorMapper(api_name="CoinGecko")

    async def get_crypto_price(self, symbol: str | None) -> Result[CryptoPrice]:
        """Resolve a ticker to a coin id via search, then fetch its USD price.

        Only candidates whose ticker equals symbol exactly are considered; the
        first one wins. Callers uppercase the symbol beforehand.
        """
        try:
            coins = await self._provider.search(symbol)
            if not coins:
                return Failure(code=self._error_mapper.status_code, message=SYMBOL_NOT_FOUND)

            matches = [coin for coin in coins if symbol and coin.get("symbol") == symbol]
            if not matches or not matches[0].get("id"):
                logger.info("No exact ticker match for %r among %d coins", symbol, len(coins))
                return Failure(code=self._error_mapper.status_code, message=SYMBOL_NOT_FOUND)

            detail = await self._provider.get_coin(matches[0]["id"])
            return Success(CryptoPrice(symbol=symbol, current_price=_usd_price(detail)))
        except PROVIDER_EXCEPTIONS as e:
            return self._error_mapper.to_failure(e, symbol=symbol)

    async def get_crypto_list(self, query: str | None) -> Result[list[dict[str, Any]]]:
        """Search coins by free text; returns the provider's candidates unmodified."""
        try:
            return Success(await self._provider.search(query))
        except PROVIDER_EXCEPTIONS as e:
            return self._error_mapper.to_failure(e, symbol=query)
