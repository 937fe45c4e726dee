from datetime import date, timedelta

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio

BASE = "/api/v1/orders"


@pytest.fixture
async def catalog(make_product, make_location):
    store = await make_location("Store")
    bakery = await make_location("Bakery")
    bun = await make_product("Bun", 250)
    cake = await make_product("Cake", 1000)
    return {"store": store.id, "bakery": bakery.id, "bun": bun.id, "cake": cake.id}


def order_payload(catalog, **overrides):
    payload = {
        "due_date": "2026-03-12",
        "due_time": "10:30",
        "customer": {"full_name": "Jane Doe", "phone_number": "+358-40-1234567"},
        "items": [{"product_id": catalog["bun"], "quantity": 3}],
    }
    payload.update(overrides)
    return payload


async def test_requires_credentials(client: AsyncClient):
    assert (await client.get(BASE)).status_code == 401


async def test_place_order(client: AsyncClient, baker_auth, catalog):
    response = await client.post(BASE, json=order_payload(catalog), auth=baker_auth)

    assert response.status_code == 201
    order = response.json()
    assert order["state"] == "NEW"
    assert order["pickup_location"]["name"] == "Store"
    assert order["customer"] == {"full_name": "Jane Doe", "phone_number": "+358-40-1234567", "details": None}
    assert order["items"][0]["product"]["name"] == "Bun"
    assert order["items"][0]["total_price"] == 750
    assert order["total_price"] == 750
    assert order["paid"] is False
    assert [entry["message"] for entry in order["history"]] == ["Order placed"]
    assert order["history"][0]["created_by"]["email"] == "baker@bakery.local"


async def test_place_order_unknown_product(client: AsyncClient, baker_auth, catalog):
    payload = order_payload(catalog, items=[{"product_id": 999, "quantity": 1}])

    response = await client.post(BASE, json=payload, auth=baker_auth)

    assert response.status_code == 404
    assert response.json() == {"detail": "Product 999 not found"}


@pytest.mark.parametrize(
    "overrides",
    [
        {"items": []},
        {"items": [{"product_id": 1, "quantity": 0}]},
        {"customer": {"full_name": "Jane Doe", "phone_number": "call me"}},
    ],
)
async def test_place_order_validation(client: AsyncClient, baker_auth, catalog, overrides):
    response = await client.post(BASE, json=order_payload(catalog, **overrides), auth=baker_auth)

    assert response.status_code == 422


async def test_update_order(client: AsyncClient, baker_auth, catalog):
    order = (await client.post(BASE, json=order_payload(catalog), auth=baker_auth)).json()

    payload = order_payload(
        catalog,
        pickup_location_id=catalog["bakery"],
        items=[{"product_id": catalog["cake"], "quantity": 1, "comment": "Happy birthday"}],
        paid=True,
        version=order["version"],
    )
    response = await client.put(f"{BASE}/{order['id']}", json=payload, auth=baker_auth)

    assert response.status_code == 200
    updated = response.json()
    assert updated["version"] == 1
    assert updated["pickup_location"]["name"] == "Bakery"
    assert [(item["product"]["name"], item["comment"]) for item in updated["items"]] == [("Cake", "Happy birthday")]
    assert updated["paid"] is True

    response = await client.put(f"{BASE}/{order['id']}", json=payload, auth=baker_auth)
    assert response.status_code == 409


async def test_comment_and_state(client: AsyncClient, baker_auth, catalog):
    order = (await client.post(BASE, json=order_payload(catalog), auth=baker_auth)).json()

    response = await client.post(f"{BASE}/{order['id']}/state", json={"state": "CONFIRMED"}, auth=baker_auth)
    assert response.status_code == 200
    assert response.json()["state"] == "CONFIRMED"

    response = await client.post(
        f"{BASE}/{order['id']}/comments", json={"message": "Customer will be late"}, auth=baker_auth
    )
    assert response.status_code == 200
    history = response.json()["history"]
    assert [(entry["message"], entry["order_state"]) for entry in history] == [
        ("Order placed", "NEW"),
        ("Order Confirmed", "CONFIRMED"),
        ("Customer will be late", "CONFIRMED"),
    ]


async def test_search_and_count(client: AsyncClient, baker_auth, catalog):
    for name, due in [("Jane Doe", "2026-03-09"), ("John Smith", "2026-03-11"), ("Janet Jones", "2026-03-12")]:
        payload = order_payload(catalog, due_date=due, customer={"full_name": name, "phone_number": "123"})
        await client.post(BASE, json=payload, auth=baker_auth)

    response = await client.get(BASE, params={"filter": "jan", "due_after": "2026-03-10"}, auth=baker_auth)
    assert [order["customer"]["full_name"] for order in response.json()["items"]] == ["Janet Jones"]
    assert "history" not in response.json()["items"][0]

    response = await client.get(f"{BASE}/count", params={"filter": "jan"}, auth=baker_auth)
    assert response.json() == {"count": 2}


async def test_upcoming(client: AsyncClient, baker_auth, catalog):
    today = date.today()
    for offset in (1, -1, 0):
        payload = order_payload(catalog, due_date=(today + timedelta(days=offset)).isoformat())
        await client.post(BASE, json=payload, auth=baker_auth)

    response = await client.get(f"{BASE}/upcoming", auth=baker_auth)

    assert [order["due_date"] for order in response.json()] == [
        today.isoformat(),
        (today + timedelta(days=1)).isoformat(),
    ]


async def test_new_template(client: AsyncClient, baker_auth):
    response = await client.get(f"{BASE}/new", auth=baker_auth)

    order = response.json()
    assert order["id"] is None
    assert order["due_date"] == date.today().isoformat()
    assert order["state"] == "NEW"


async def test_delete(client: AsyncClient, baker_auth, catalog):
    order = (await client.post(BASE, json=order_payload(catalog), auth=baker_auth)).json()

    assert (await client.delete(f"{BASE}/{order['id']}", auth=baker_auth)).status_code == 204
    assert (await client.get(f"{BASE}/{order['id']}", auth=baker_auth)).status_code == 404


async def test_missing_order(client: AsyncClient, baker_auth):
    response = await client.post(f"{BASE}/42/state", json={"state": "READY"}, auth=baker_auth)

    assert response.status_code == 404
