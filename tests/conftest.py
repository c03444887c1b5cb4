"""Shared fixtures for the OrderDesk datastore tests."""

from __future__ import annotations

import json
from typing import Any, Callable

import httpx
import pytest

from orderdesk_datastore.config import Settings
from orderdesk_datastore.datastore.orderdesk.adapter import OrderDeskDataStore


def make_settings(**overrides: Any) -> Settings:
    """Settings isolated from the environment and any .env file."""
    values: dict[str, Any] = {
        "datastore_credentials": "",
        "orderdesk_store_id": "",
        "orderdesk_api_key": "",
        "foxy_webhook_encryption_key": "",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it answered."""

    def __init__(self, responder: Callable[[httpx.Request], httpx.Response]):
        self.requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return responder(request)

        super().__init__(handler)

    def json_bodies(self) -> list[Any]:
        return [json.loads(request.content) for request in self.requests]


@pytest.fixture
def settings() -> Settings:
    return make_settings(datastore_credentials="Store ID 12345 API Key abcDEF123")


@pytest.fixture
def json_transport() -> Callable[..., RecordingTransport]:
    def factory(body: Any = None, status_code: int = 200) -> RecordingTransport:
        return RecordingTransport(lambda request: httpx.Response(status_code, json=body if body is not None else {}))

    return factory


@pytest.fixture
def foxy_order() -> dict[str, Any]:
    return {
        "id": 1001,
        "status": "captured",
        "customer_email": "ada@example.com",
        "total_item_price": 40.0,
        "total_shipping": 5.0,
        "total_tax": 3.2,
        "total_discount": 0,
        "total_order": 48.2,
        "_embedded": {
            "fx:customer": {"id": 77, "first_name": "Ada", "last_name": "Lovelace", "email": "ada@example.com"},
            "fx:shipments": [
                {
                    "_links": {"self": {"href": "https://api.foxycart.com/shipments/5"}},
                    "first_name": "Ada",
                    "address1": "12 Analytical Way",
                    "city": "London",
                },
                {"first_name": "Second", "city": "Paris"},
            ],
            "fx:payments": [
                {
                    "cc_number_masked": "xxxxxxxxxxxx4242",
                    "cc_type": "Visa",
                    "cc_exp_month": "09",
                    "cc_exp_year": "2030",
                    "processor_response": "Authorize.net Transaction ID: 42",
                }
            ],
            "fx:items": [{"name": "Widget", "code": "SKU1", "price": 20.0, "quantity": 2}],
        },
    }


@pytest.fixture
def make_datastore(settings: Settings) -> Callable[[httpx.AsyncBaseTransport], OrderDeskDataStore]:
    def factory(transport: httpx.AsyncBaseTransport) -> OrderDeskDataStore:
        return OrderDeskDataStore(settings=settings, transport=transport)

    return factory
