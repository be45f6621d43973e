"""Domain concept for mapping provider exceptions to failure results."""
import asyncio
import logging
from dataclasses import dataclass

import httpx

from market_price_api.providers.core.exceptions import ProviderError
from market_price_api.result import Failure

logger = logging.getLogger(__name__)

# Exceptions from providers we map to Failure; all others propagate (e.g. bugs).
PROVIDER_EXCEPTIONS: tuple[type[Exception], ...] = (
    ProviderError,
    httpx.HTTPError,
    ValueError,
    KeyError,
    TypeError,
    TimeoutError,
    OSError,
    asyncio.TimeoutError,
)


@dataclass(frozen=True)
class ProviderErrorMapper:
    """Maps provider/backend exceptions to a Failure(code, message).

    Inject this into services to centralize error mapping per domain
    (crypto, stocks) with the appropriate API name for fallback messages.
    """

    api_name: str = "API"
    status_code: int = 400

    def message_for(self, exc: Exception) -> str:
        """Best-effort human readable message for a provider exception."""
        if isinstance(exc, ProviderError):
            return exc.message or f"{self.api_name} error"
        if isinstance(exc, httpx.HTTPStatusError):
            return f"{self.api_name} error ({exc.response.status_code})"
        if isinstance(exc, (httpx.TimeoutException, asyncio.TimeoutError, TimeoutError)):
            return f"Request to {self.api_name} timed out"
        if isinstance(exc, httpx.RequestError):
            return str(exc) or f"Request to {self.api_name} failed"
        if isinstance(exc, KeyError):
            return f"Unexpected response from {self.api_name}"
        return str(exc) or f"{self.api_name} error"

    def to_failure(self, exc: Exception, symbol: str | None = None) -> Failure:
        """Map a provider exception to a Failure and log it.

        Args:
            exc: The exception raised by the provider.
            symbol: Optional symbol/query the call was made for (logging only).

        Returns:
            Failure carrying the configured status code and extracted message.
        """
        message = self.message_for(exc)
        logger.warning(
            "%s call failed for %r: %s: %s",
            self.api_name,
            symbol,
            type(exc).__name__,
            message,
        )
        return Failure(code=self.status_code, message=message)
