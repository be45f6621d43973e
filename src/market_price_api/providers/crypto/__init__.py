"""Cryptocurrency market data providers."""
from market_price_api.providers.crypto.coingecko.coin_gecko_provider import (
    CoinGeckoProvider,
)
from market_price_api.providers.crypto.crypto_provider_abc import CryptoProviderABC

__all__ = ["CryptoProviderABC", "CoinGeckoProvider"]
