"""Success/failure result returned by services to route handlers.

Services never raise for provider-level failures; they return a Failure with an
HTTP-style status code and message. Handlers match on the variant:

    match result:
        case Success(payload=data):
            ...
        case Failure(code=code, message=message):
            ...
        case _:
            assert_never(result)
"""
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful service call carrying its payload."""

    payload: T


@dataclass(frozen=True)
class Failure:
    """Failed service call with an HTTP-style status code and message."""

    code: int
    message: str


Result = Success[T] | Failure

__all__ = ["Failure", "Result", "Success"]
