"""Main module for the market price API."""
import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from market_price_api.cache import ResponseCache, ResponseCacheMiddleware
from market_price_api.config import Settings, get_settings
from market_price_api.providers import CoinGeckoProvider, YFinanceProvider
from market_price_api.providers.stocks.yfinance.models import \
    YFinanceSearchParams
from market_price_api.routers import crypto_router, stocks_router
from market_price_api.routers.responses import error_response
from market_price_api.services import CryptoService, StocksService

logger = logging.getLogger(__name__)


def build_lifespan(settings: Settings):
    """Lifespan that creates providers and services at startup and closes them on shutdown."""

    @asynccontextmanager
    async def lifespan(fastapi_app: FastAPI):
        # Providers (singletons)
        crypto_provider = CoinGeckoProvider(
            api_key=settings.coingecko_api_key or None,
            timeout=settings.coingecko_timeout,
        )
        stocks_provider = YFinanceProvider(
            search_params=YFinanceSearchParams(
                max_results=settings.stock_search_max_results,
                news_count=settings.stock_search_news_count,
            )
        )

        fastapi_app.state.crypto_service = CryptoService(crypto_provider)
        fastapi_app.state.stocks_service = StocksService(stocks_provider)

        # Keep provider refs for clean shutdown
        fastapi_app.state.providers_to_close = [crypto_provider, stocks_provider]

        yield

        for provider in fastapi_app.state.providers_to_close:
            try:
                await provider.close()
            except Exception as exc:  # pylint: disable=broad-except
                logger.warning("Error closing provider %s: %s", type(provider).__name__, exc)

    return lifespan


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render anything the services did not map as a generic 500 envelope."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return error_response(500, "Internal server error")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI app: routers, response cache and error handling."""
    settings = settings or get_settings()
    fastapi_app = FastAPI(
        title="Market Price API",
        description="Stock and crypto price API",
        version="0.1.0",
        docs_url="/api",
        lifespan=build_lifespan(settings),
    )

    fastapi_app.state.response_cache = ResponseCache(
        ttl=settings.cache_ttl, max_entries=settings.cache_max_entries
    )
    fastapi_app.add_middleware(ResponseCacheMiddleware, cache=fastapi_app.state.response_cache)
    fastapi_app.add_exception_handler(Exception, unhandled_exception_handler)

    fastapi_app.include_router(crypto_router)
    fastapi_app.include_router(stocks_router)

    @fastapi_app.get("/")
    def health():
        """Return health check status."""
        return {"status": "ok"}

    return fastapi_app


app = create_app()


def run():
    """Run the server (uvicorn). Use for `poetry run market-price-api`."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(
        "market_price_api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
