"""Exceptions raised by market data providers."""


class ProviderError(Exception):
    """Base class for failures reported by an upstream provider."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UpstreamError(ProviderError):
    """Transport failure or non-success response from the provider."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
