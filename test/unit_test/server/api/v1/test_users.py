import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio

BASE = "/api/v1/users"

NEW_USER = {
    "email": "carol@bakery.local",
    "password": "croissant",
    "first_name": "Carol",
    "last_name": "Barista",
    "role": "barista",
}


async def test_only_admins(client: AsyncClient, baker_auth):
    response = await client.get(BASE, auth=baker_auth)

    assert response.status_code == 403


async def test_create_and_log_in(client: AsyncClient, admin_auth):
    response = await client.post(BASE, json=NEW_USER, auth=admin_auth)

    assert response.status_code == 201
    created = response.json()
    assert created["email"] == "carol@bakery.local"
    assert created["locked"] is False
    assert "password" not in created
    assert "password_hash" not in created

    response = await client.get("/api/v1/products", auth=("carol@bakery.local", "croissant"))
    assert response.status_code == 200


async def test_duplicate_email(client: AsyncClient, admin_auth):
    await client.post(BASE, json=NEW_USER, auth=admin_auth)

    response = await client.post(BASE, json=NEW_USER, auth=admin_auth)

    assert response.status_code == 409


async def test_email_differing_only_in_case_is_a_duplicate(client: AsyncClient, admin_auth):
    response = await client.post(BASE, json={**NEW_USER, "email": "Carol@bakery.local"}, auth=admin_auth)
    assert response.status_code == 201

    response = await client.post(BASE, json=NEW_USER, auth=admin_auth)
    assert response.status_code == 409
    assert response.json()["detail"] == "There is already an account for this email address."

    response = await client.get("/api/v1/products", auth=("carol@bakery.local", "croissant"))
    assert response.status_code == 200


async def test_invalid_email(client: AsyncClient, admin_auth):
    response = await client.post(BASE, json={**NEW_USER, "email": "not-an-email"}, auth=admin_auth)

    assert response.status_code == 422


async def test_list_filter(client: AsyncClient, admin_auth, baker):
    response = await client.get(BASE, params={"filter": "bob"}, auth=admin_auth)

    assert [user["email"] for user in response.json()["items"]] == ["baker@bakery.local"]

    response = await client.get(f"{BASE}/count", auth=admin_auth)
    assert response.json() == {"count": 2}


async def test_new_template(client: AsyncClient, admin_auth):
    response = await client.get(f"{BASE}/new", auth=admin_auth)

    assert response.json()["role"] == "barista"
    assert response.json()["locked"] is False


async def test_update_password(client: AsyncClient, admin_auth, baker):
    response = await client.put(f"{BASE}/{baker.id}", json={"password": "rye"}, auth=admin_auth)
    assert response.status_code == 200

    assert (await client.get("/api/v1/products", auth=("baker@bakery.local", "rye"))).status_code == 200
    assert (await client.get("/api/v1/products", auth=("baker@bakery.local", "secret"))).status_code == 401


async def test_null_fields_leave_user_unchanged(client: AsyncClient, admin_auth, baker):
    response = await client.put(f"{BASE}/{baker.id}", json={"email": None, "first_name": None}, auth=admin_auth)

    assert response.status_code == 200
    assert response.json()["email"] == "baker@bakery.local"
    assert response.json()["first_name"] == "Bob"


async def test_locked_user_cannot_be_changed_or_deleted(client: AsyncClient, admin_auth, make_user):
    locked = await make_user("locked@bakery.local", locked=True)
    locked_id = locked.id

    response = await client.put(f"{BASE}/{locked_id}", json={"first_name": "Changed"}, auth=admin_auth)
    assert response.status_code == 409

    response = await client.delete(f"{BASE}/{locked_id}", auth=admin_auth)
    assert response.status_code == 409

    response = await client.get(f"{BASE}/{locked_id}", auth=admin_auth)
    assert response.json()["first_name"] == "Test"


async def test_cannot_delete_self(client: AsyncClient, admin, admin_auth):
    response = await client.delete(f"{BASE}/{admin.id}", auth=admin_auth)

    assert response.status_code == 409
    assert response.json()["detail"] == "You cannot delete your own account"


async def test_delete_other_user(client: AsyncClient, admin_auth, baker):
    baker_id = baker.id

    assert (await client.delete(f"{BASE}/{baker_id}", auth=admin_auth)).status_code == 204
    assert (await client.get(f"{BASE}/{baker_id}", auth=admin_auth)).status_code == 404
