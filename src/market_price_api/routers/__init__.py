"""API routers for price endpoints.

Includes routes for:
- /crypto - Cryptocurrency price and search (CoinGecko)
- /stock - Stock price and search (Yahoo Finance)
"""
from market_price_api.routers.crypto import router as crypto_router
from market_price_api.routers.stocks import router as stocks_router

__all__ = [
    "crypto_router",
    "stocks_router",
]
