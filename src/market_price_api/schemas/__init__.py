"""Pydantic schemas for API responses. Request-scoped, never persisted."""
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys (statusCode, currentPrice)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CryptoPrice(CamelModel):
    """Current USD price of a cryptocurrency ticker."""

    symbol: str
    current_price: float | None = None


class StockPrice(CamelModel):
    """Current market price of a stock ticker."""

    symbol: str
    current_price: float | None = None


def utc_timestamp() -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. 2023-01-28T14:15:00.008Z."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class HTTPResponse(CamelModel):
    """Response envelope returned by every route.

    data is only present on success; failures carry statusCode and message.
    """

    status_code: int
    message: str
    timestamp: str = Field(default_factory=utc_timestamp)
    data: Any = None


__all__ = ["CryptoPrice", "HTTPResponse", "StockPrice", "utc_timestamp"]
