"""Tests for ProviderErrorMapper and the result/response mapping."""

import json

import httpx

from market_price_api.providers import ProviderErrorMapper, UpstreamError
from market_price_api.result import Failure, Success
from market_price_api.routers.responses import to_response
from market_price_api.schemas import StockPrice
from market_price_api.services.utils import parse_symbols_param

REQUEST = httpx.Request("GET", "https://api.coingecko.com/api/v3/search")


def test_provider_error_keeps_message():
    mapper = ProviderErrorMapper(api_name="CoinGecko")

    assert mapper.to_failure(UpstreamError("coin not found")) == Failure(400, "coin not found")


def test_http_status_error_without_body_message():
    mapper = ProviderErrorMapper(api_name="CoinGecko")
    response = httpx.Response(503, request=REQUEST)
    exc = httpx.HTTPStatusError("503", request=REQUEST, response=response)

    assert mapper.to_failure(exc) == Failure(400, "CoinGecko error (503)")


def test_timeout_message():
    mapper = ProviderErrorMapper(api_name="CoinGecko")

    failure = mapper.to_failure(httpx.ReadTimeout("", request=REQUEST))

    assert failure == Failure(400, "Request to CoinGecko timed out")


def test_empty_message_falls_back_to_api_name():
    mapper = ProviderErrorMapper(api_name="Yahoo Finance")

    assert mapper.to_failure(ValueError()) == Failure(400, "Yahoo Finance error")


def test_to_response_success_serializes_camel_case():
    response = to_response(Success([StockPrice(symbol="AAPL", current_price=145.93)]), "ok")

    body = json.loads(response.body)
    assert response.status_code == 200
    assert body["statusCode"] == 200
    assert body["data"] == [{"symbol": "AAPL", "currentPrice": 145.93}]


def test_to_response_failure_has_no_data():
    response = to_response(Failure(404, "missing"), "ok")

    body = json.loads(response.body)
    assert response.status_code == 404
    assert body["statusCode"] == 404
    assert body["message"] == "missing"
    assert set(body) == {"statusCode", "message", "timestamp"}


def test_parse_symbols_param():
    assert parse_symbols_param(" aapl, msft ,,", normalizer=str.upper) == ["AAPL", "MSFT"]
    assert parse_symbols_param(None) == []
