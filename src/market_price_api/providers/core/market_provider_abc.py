"""Abstract base class for market data providers."""
from abc import ABC


class MarketProviderABC(ABC):
    """Base interface for all upstream market data providers.

    Providers talk to a single third-party API and raise ProviderError (or the
    HTTP client's own exceptions) on failure. Mapping to results is the
    service layer's job.
    """

    async def close(self) -> None:
        """Clean up resources (connections, clients).

        Override in subclasses if cleanup is needed.
        """

    async def __aenter__(self) -> "MarketProviderABC":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:  # noqa: ANN001
        """Async context manager exit - calls close()."""
        await self.close()
