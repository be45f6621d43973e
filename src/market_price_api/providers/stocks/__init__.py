"""Stock market data providers."""
from market_price_api.providers.stocks.stocks_provider_abc import StocksProviderABC
from market_price_api.providers.stocks.yfinance.y_finance_provider import \
    YFinanceProvider

__all__ = ["StocksProviderABC", "YFinanceProvider"]
