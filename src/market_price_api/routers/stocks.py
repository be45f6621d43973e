"""Stock price and search routes (Yahoo Finance)."""
import logging

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse

from market_price_api.deps import StocksService
from market_price_api.routers.responses import to_response
from market_price_api.services.utils import parse_symbols_param

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/stock", tags=["stock"])


@router.get("/price")
async def get_stock_price(
    service: StocksService,
    symbols: str | None = Query(default=None, description="Comma-separated tickers (e.g. AAPL,MSFT)."),
    company_name: str | None = Query(
        default=None,
        alias="companyName",
        description="Company name to resolve into tickers when symbols is omitted.",
    ),
) -> JSONResponse:
    """Get current prices for tickers, or for the tickers matching a company name.

    Prices are returned in provider order, which need not match the request.
    """
    symbol_list = parse_symbols_param(symbols, normalizer=str.upper)
    if not symbol_list and company_name:
        symbol_list = await service.resolve_company_symbols(company_name)
        logger.debug("Resolved company %r to %s", company_name, symbol_list)
    result = await service.get_stock_price(symbol_list)
    return to_response(result, "Get stock price successfully.")


@router.get("/search")
async def search_stock_list(
    service: StocksService,
    query: str | None = Query(default=None, description="Query string for search."),
) -> JSONResponse:
    """Search quotes and news; returns the Yahoo Finance aggregate as-is."""
    result = await service.search_stock(query)
    return to_response(result, "Search stock list successfully.")
