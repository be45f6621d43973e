"""Cryptocurrency price and search routes (CoinGecko)."""
from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse

from market_price_api.deps import CryptoService
from market_price_api.routers.responses import to_response

router = APIRouter(prefix="/crypto", tags=["crypto"])


@router.get("/price")
async def get_crypto_price(
    service: CryptoService,
    symbol: str | None = Query(default=None, description="A ticker to get the current price in USD (e.g. ETH)."),
) -> JSONResponse:
    """Get the current USD price of a cryptocurrency by ticker.

    The ticker is uppercased and matched exactly against CoinGecko search
    results; the first exact match is priced.
    """
    result = await service.get_crypto_price(symbol.upper() if symbol else symbol)
    return to_response(result, "Get crypto price successfully.")


@router.get("/search")
async def get_crypto_list(
    service: CryptoService,
    query: str | None = Query(default=None, description="Query string to search the crypto list."),
) -> JSONResponse:
    """Search coins by name or ticker; returns CoinGecko candidates as-is."""
    result = await service.get_crypto_list(query)
    return to_response(result, "Search crypto list successfully.")
