"""CoinGecko market data provider for cryptocurrencies."""
import logging
from typing import Any

import httpx

from market_price_api.providers.core import UpstreamError
from market_price_api.providers.crypto.coingecko.models import (
    CoinGeckoCoinParams, CoinGeckoSearchParams)
from market_price_api.providers.crypto.crypto_provider_abc import \
    CryptoProviderABC

logger = logging.getLogger(__name__)


def _error_message(response: httpx.Response) -> str:
    """Extract the error message from a CoinGecko error body.

    CoinGecko answers either {"error": "coin not found"} or
    {"status": {"error_code": 429, "error_message": "..."}}.
    """
    fallback = f"CoinGecko API error ({response.status_code})"
    try:
        body = response.json()
    except ValueError:
        return fallback
    if not isinstance(body, dict):
        return fallback
    if isinstance(body.get("error"), str) and body["error"]:
        return body["error"]
    status = body.get("status")
    if isinstance(status, dict) and status.get("error_message"):
        return str(status["error_message"])
    return fallback


class CoinGeckoProvider(CryptoProviderABC):
    """Market data provider for cryptocurrencies via CoinGecko API.

    Uses httpx for REST calls. Symbols are resolved to CoinGecko ids through
    /search; prices come from /coins/{id}.
    """

    BASE_URL = "https://api.coingecko.com/api/v3"
    PRO_BASE_URL = "https://pro-api.coingecko.com/api/v3"

    def __init__(
        self,
        api_key: str | None = None,
        use_pro_api: bool = False,
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the CoinGecko provider.

        Args:
            api_key: CoinGecko API key. Enables the Pro API when set.
            use_pro_api: Whether to use the Pro API endpoint.
            timeout: Request timeout in seconds.
            client: Preconfigured client (tests inject one with a mock transport).
        """
        self._api_key = api_key
        self._use_pro_api = use_pro_api or bool(self._api_key)

        if client is not None:
            self._client = client
            return

        headers: dict[str, str] = {
            "Accept": "application/json",
            "Accept-Encoding": "gzip, deflate",
        }
        if self._api_key:
            headers["x-cg-pro-api-key"] = self._api_key

        base = self.PRO_BASE_URL if self._use_pro_api else self.BASE_URL
        self._client = httpx.AsyncClient(base_url=base, headers=headers, timeout=timeout)

    async def _get(self, path: str, params: dict[str, Any]) -> Any:
        """GET a CoinGecko endpoint; non-2xx responses raise UpstreamError."""
        logger.debug("CoinGecko GET %s params=%s", path, params)
        response = await self._client.get(path, params=params)
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise UpstreamError(
                _error_message(e.response), status_code=e.response.status_code
            ) from e
        return response.json()

    async def search(self, query: str | None) -> list[dict[str, Any]]:
        """Search coins by free text; returns the raw "coins" list."""
        params = CoinGeckoSearchParams(query=query or "").model_dump()
        data = await self._get("/search", params)
        return (data or {}).get("coins") or []

    async def get_coin(self, coin_id: str) -> dict[str, Any]:
        """Fetch coin detail (market data only) by CoinGecko id."""
        params = CoinGeckoCoinParams().model_dump()
        return await self._get(f"/coins/{coin_id}", params)

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()
