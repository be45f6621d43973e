"""Mapping from service results to the HTTP response envelope."""
from typing import Any, assert_never

from fastapi.responses import JSONResponse

from market_price_api.result import Failure, Result, Success
from market_price_api.schemas import HTTPResponse


def to_response(result: Result[Any], success_message: str) -> JSONResponse:
    """Render a Result as a JSON envelope.

    Success -> 200 with data. Failure -> the failure's own status code and
    message, without a data field.
    """
    match result:
        case Success(payload=payload):
            envelope = HTTPResponse(status_code=200, message=success_message, data=payload)
            return JSONResponse(
                status_code=200,
                content=envelope.model_dump(mode="json", by_alias=True),
            )
        case Failure(code=code, message=message):
            return error_response(code, message)
        case _:
            assert_never(result)


def error_response(status_code: int, message: str) -> JSONResponse:
    """Failure envelope (no data field) with a matching HTTP status."""
    envelope = HTTPResponse(status_code=status_code, message=message)
    return JSONResponse(
        status_code=status_code,
        content=envelope.model_dump(mode="json", by_alias=True, exclude={"data"}),
    )
