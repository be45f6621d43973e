"""FastAPI dependency injection: app.state holds singletons; Depends() resolves them.

The lifespan (main.py) creates providers and services once and attaches them
to app.state; these getters are used by Depends(). Tests override them through
app.dependency_overrides.
"""
from typing import Annotated

from fastapi import Depends, Request

from market_price_api.services import CryptoService as _CryptoService
from market_price_api.services import StocksService as _StocksService


def get_crypto_service(request: Request) -> _CryptoService:
    """Resolve the CryptoService from app.state (created at startup)."""
    return request.app.state.crypto_service


def get_stocks_service(request: Request) -> _StocksService:
    """Resolve the StocksService from app.state (created at startup)."""
    return request.app.state.stocks_service


# Type aliases for route injection
CryptoService = Annotated[_CryptoService, Depends(get_crypto_service)]
StocksService = Annotated[_StocksService, Depends(get_stocks_service)]
