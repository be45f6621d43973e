"""Market data providers for stocks and crypto.

- YFinanceProvider: Stock quotes and search via Yahoo Finance
- CoinGeckoProvider: Cryptocurrency search and prices via CoinGecko API

Providers raise on failure; the service layer turns errors into results.

Example:
    async with CoinGeckoProvider() as provider:
        coins = await provider.search("ETH")
        detail = await provider.get_coin(coins[0]["id"])
"""
from market_price_api.providers.core import (MarketProviderABC,
                                             ProviderError,
                                             ProviderErrorMapper,
                                             UpstreamError)
from market_price_api.providers.crypto import (CoinGeckoProvider,
                                               CryptoProviderABC)
from market_price_api.providers.stocks import (StocksProviderABC,
                                               YFinanceProvider)

__all__ = [
    "MarketProviderABC",
    "CryptoProviderABC",
    "StocksProviderABC",
    "CoinGeckoProvider",
    "YFinanceProvider",
    "ProviderError",
    "ProviderErrorMapper",
    "UpstreamError",
]
