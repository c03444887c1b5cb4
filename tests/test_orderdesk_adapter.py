"""OrderDeskDataStore operations against a mocked OrderDesk API."""

from __future__ import annotations

from typing import Any

import httpx
import pytest

from conftest import RecordingTransport, make_settings
from orderdesk_datastore.datastore.exceptions import DataStoreConfigurationError, InventoryValidationError
from orderdesk_datastore.datastore.orderdesk.adapter import OrderDeskDataStore


def test_construction_fails_without_credentials() -> None:
    with pytest.raises(DataStoreConfigurationError):
        OrderDeskDataStore(settings=make_settings())


def test_request_builder(make_datastore, json_transport) -> None:
    datastore = make_datastore(json_transport())

    assert datastore.get_name() == "orderdesk"
    assert datastore.build_endpoint("orders") == "https://app.orderdesk.me/api/v2/orders"
    assert datastore.get_default_header() == {
        "Content-Type": "application/json",
        "ORDERDESK-API-KEY": "abcDEF123",
        "ORDERDESK-STORE-ID": "12345",
    }


def test_request_builder_uses_configured_location() -> None:
    settings = make_settings(
        orderdesk_store_id="10001",
        orderdesk_api_key="k",
        orderdesk_domain="sandbox.orderdesk.test",
        orderdesk_api_prefix="api/v3/",
    )

    datastore = OrderDeskDataStore(settings=settings)

    assert datastore.build_endpoint("inventory-items") == "https://sandbox.orderdesk.test/api/v3/inventory-items"


@pytest.mark.asyncio
async def test_fetch_inventory_items(make_datastore, json_transport) -> None:
    items = [{"id": "1", "code": "SKU1", "stock": 3}, {"id": "2", "code": "SKU2", "stock": 0}]
    transport = json_transport({"status": "success", "inventory_items": items})

    async with make_datastore(transport) as datastore:
        result = await datastore.fetch_inventory_items(["SKU1", "SKU2"])

    assert result == items
    request = transport.requests[0]
    assert request.method == "GET"
    assert request.url.path == "/api/v2/inventory-items"
    assert request.url.params["code"] == "SKU1,SKU2"
    assert str(request.url) == "https://app.orderdesk.me/api/v2/inventory-items?code=SKU1%2CSKU2"
    assert request.headers["ORDERDESK-STORE-ID"] == "12345"
    assert request.headers["ORDERDESK-API-KEY"] == "abcDEF123"


@pytest.mark.asyncio
async def test_fetch_inventory_items_without_results(make_datastore, json_transport) -> None:
    async with make_datastore(json_transport({"status": "success"})) as datastore:
        assert await datastore.fetch_inventory_items(["SKU9"]) == []


@pytest.mark.asyncio
async def test_update_inventory_items_sends_one_batch(make_datastore, json_transport) -> None:
    items = [
        {"id": "1", "name": "A", "code": "SKU1", "price": 0, "stock": 0},
        {"id": "2", "name": "B", "code": "SKU2", "price": 12.5, "stock": 4},
    ]
    transport = json_transport({"status": "success", "message": "2 items updated"})

    async with make_datastore(transport) as datastore:
        result = await datastore.update_inventory_items(items)

    assert result == {"status": "success", "message": "2 items updated"}
    assert len(transport.requests) == 1
    assert transport.requests[0].method == "PUT"
    assert transport.requests[0].url.path == "/api/v2/batch-inventory-items"
    assert transport.json_bodies() == [items]


@pytest.mark.asyncio
async def test_update_inventory_items_rejects_batch_before_sending(make_datastore, json_transport) -> None:
    valid = {"id": "1", "name": "A", "code": "SKU1", "price": 1, "stock": 1}
    invalid = {"id": "2", "name": "", "code": "SKU-BAD", "price": 1, "stock": 1}
    transport = json_transport()

    async with make_datastore(transport) as datastore:
        with pytest.raises(InventoryValidationError) as exc_info:
            await datastore.update_inventory_items([valid, invalid])

    assert transport.requests == []
    assert exc_info.value.invalid_items == [invalid]
    assert "SKU-BAD" in str(exc_info.value)


@pytest.mark.asyncio
async def test_create_order_posts_mapped_order(make_datastore, json_transport, foxy_order: dict[str, Any]) -> None:
    transport = json_transport({"status": "success", "order": {"id": "9001"}})

    async with make_datastore(transport) as datastore:
        result = await datastore.create_order(foxy_order)

    assert result == {"status": "success", "order": {"id": "9001"}}
    request = transport.requests[0]
    assert request.method == "POST"
    assert request.url.path == "/api/v2/orders"
    assert request.headers["Content-Type"] == "application/json"
    body = transport.json_bodies()[0]
    assert body["id"] == 1001
    assert body["source_name"] == "Foxy.io"
    assert body["cc_exp"] == "09/2030"
    assert "_links" not in body["shipping"]
    assert "payment_sattus" not in body


@pytest.mark.asyncio
async def test_create_order_without_shipments_or_payments(make_datastore, json_transport, foxy_order) -> None:
    del foxy_order["_embedded"]["fx:shipments"]
    del foxy_order["_embedded"]["fx:payments"]
    transport = json_transport({"status": "success"})

    async with make_datastore(transport) as datastore:
        await datastore.create_order(foxy_order)

    body = transport.json_bodies()[0]
    assert body["shipping"] == {}
    assert body["cc_exp"] == "undefined/undefined"


@pytest.mark.asyncio
async def test_error_responses_propagate(make_datastore, json_transport, foxy_order) -> None:
    transport = json_transport({"status": "error", "message": "Invalid API key"}, status_code=401)

    async with make_datastore(transport) as datastore:
        with pytest.raises(httpx.HTTPStatusError) as exc_info:
            await datastore.create_order(foxy_order)

    assert exc_info.value.response.status_code == 401
    assert len(transport.requests) == 1


@pytest.mark.asyncio
async def test_transport_failures_propagate(make_datastore) -> None:
    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    async with make_datastore(RecordingTransport(refuse)) as datastore:
        with pytest.raises(httpx.ConnectError):
            await datastore.fetch_inventory_items(["SKU1"])


def test_convert_to_canonical_and_validate(make_datastore, json_transport) -> None:
    datastore = make_datastore(json_transport())

    canonical = datastore.convert_to_canonical({"code": "SKU1", "stock": 2})

    assert canonical == {"code": "SKU1", "stock": 2, "update_source": "Foxy-Orderdesk-Webhook", "inventory": 2}
    assert datastore.validate_inventory_item({"id": "1", "name": "A", "code": "SKU1", "price": 0, "stock": 0})


@pytest.mark.asyncio
@pytest.mark.parametrize("body", [[1], "ok", 7])
async def test_fetch_inventory_items_with_non_object_body(make_datastore, json_transport, body) -> None:
    transport = RecordingTransport(lambda request: httpx.Response(200, json=body))

    async with make_datastore(transport) as datastore:
        assert await datastore.fetch_inventory_items(["SKU1"]) == []
