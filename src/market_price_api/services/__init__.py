"""Service layer: provider orchestration and exception-to-result mapping."""
from market_price_api.services.crypto import CryptoService
from market_price_api.services.stocks import StocksService

__all__ = [
    "CryptoService",
    "StocksService",
]
