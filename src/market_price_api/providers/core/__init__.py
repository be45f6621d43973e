"""Core provider abstractions."""
from market_price_api.providers.core.error_mapper import (PROVIDER_EXCEPTIONS,
                                                          ProviderErrorMapper)
from market_price_api.providers.core.exceptions import (ProviderError,
                                                        UpstreamError)
from market_price_api.providers.core.market_provider_abc import MarketProviderABC

__all__ = [
    "MarketProviderABC",
    "PROVIDER_EXCEPTIONS",
    "ProviderError",
    "ProviderErrorMapper",
    "UpstreamError",
]
