"""Models for CoinGecko provider (API params)."""
from pydantic import BaseModel


class CoinGeckoSearchParams(BaseModel):
    """Params for /search (coin search by free text)."""

    query: str = ""


class CoinGeckoCoinParams(BaseModel):
    """Params for /coins/{id}. Only market data is needed for pricing."""

    localization: str = "false"
    tickers: str = "false"
    market_data: str = "true"
    community_data: str = "false"
    developer_data: str = "false"
    sparkline: str = "false"
