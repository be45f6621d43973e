"""Models for YFinance provider (search params)."""
from pydantic import BaseModel


class YFinanceSearchParams(BaseModel):
    """Keyword arguments for yfinance.Search."""

    max_results: int = 10
    news_count: int = 8
