"""Abstract base class for cryptocurrency data providers."""
from abc import abstractmethod
from typing import Any

from market_price_api.providers.core import MarketProviderABC


class CryptoProviderABC(MarketProviderABC):
    """Base interface for cryptocurrency market data providers.

    Extends MarketProviderABC with the two lookups the crypto service composes:
    free-text coin search and coin detail by provider id.
    """

    @abstractmethod
    async def search(self, query: str | None) -> list[dict[str, Any]]:
        """Search coins by free text (name or ticker).

        Args:
            query: Free-text query (e.g. "ETH", "solana").

        Returns:
            Candidate coins as returned by the provider; each has at least
            "id" and "symbol". Empty list when nothing matches.
        """

    @abstractmethod
    async def get_coin(self, coin_id: str) -> dict[str, Any]:
        """Fetch coin detail (including market data) by provider id.

        Args:
            coin_id: Provider coin id (e.g. "ethereum").

        Returns:
            Raw coin detail payload.
        """
