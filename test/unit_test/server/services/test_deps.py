"""Tests for the request dependencies: authentication, roles and paging."""

import pytest
from fastapi import HTTPException
from fastapi.security import HTTPBasicCredentials

from bakery_shop.core.errors import AccessDeniedError
from bakery_shop.core.models.domain.paging import Direction
from bakery_shop.server.services.deps import get_current_user, get_page_request, require_admin


class TestGetCurrentUser:
    async def test_valid_credentials(self, in_memory_session, baker):
        credentials = HTTPBasicCredentials(username="Baker@Bakery.local", password="secret")

        user = await get_current_user(in_memory_session, credentials)

        assert user.id == baker.id

    async def test_wrong_password(self, in_memory_session, baker):
        credentials = HTTPBasicCredentials(username="baker@bakery.local", password="wrong")

        with pytest.raises(HTTPException) as exc_info:
            await get_current_user(in_memory_session, credentials)

        assert exc_info.value.status_code == 401
        assert exc_info.value.headers == {"WWW-Authenticate": "Basic"}

    async def test_unknown_user(self, in_memory_session):
        credentials = HTTPBasicCredentials(username="nobody@bakery.local", password="secret")

        with pytest.raises(HTTPException) as exc_info:
            await get_current_user(in_memory_session, credentials)

        assert exc_info.value.status_code == 401

    async def test_locked_user_can_log_in(self, in_memory_session, make_user):
        locked = await make_user("locked@bakery.local", locked=True)
        credentials = HTTPBasicCredentials(username="locked@bakery.local", password="secret")

        assert (await get_current_user(in_memory_session, credentials)).id == locked.id


class TestRequireAdmin:
    async def test_admin_passes(self, admin):
        assert await require_admin(admin) is admin

    async def test_other_roles_denied(self, baker):
        with pytest.raises(AccessDeniedError):
            await require_admin(baker)


class TestGetPageRequest:
    def test_defaults(self):
        page = get_page_request()

        assert (page.page, page.size, page.sort) == (0, 20, ())

    def test_sort_expressions(self):
        page = get_page_request(page=2, size=5, sort=["name", "price,desc"])

        assert page.offset == 10
        assert page.sort == (("name", Direction.ASC), ("price", Direction.DESC))

    def test_invalid_direction(self):
        with pytest.raises(HTTPException) as exc_info:
            get_page_request(sort=["name,sideways"])

        assert exc_info.value.status_code == 422
