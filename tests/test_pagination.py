"""Tests for page-number pagination."""

import httpx
import pytest

from gitlab_sdk.errors import GitLabHTTPError
from gitlab_sdk.http import HTTPClient
from gitlab_sdk.models.member_roles import MemberRole
from gitlab_sdk.pagination import PaginatedIterator

PATH = "groups/84/member_roles"


def _role(role_id):
    return {"id": role_id, "name": f"Role {role_id}", "group_id": 84, "base_access_level": 10}


def _client(transport):
    client = HTTPClient("https://gitlab.test", token="t")
    client._client = httpx.AsyncClient(base_url=client.base_url, transport=transport)
    return client


@pytest.mark.asyncio
async def test_single_page():
    """Pagination with a single page (no next page header)."""

    class MockTransport(httpx.AsyncBaseTransport):
        async def handle_async_request(self, request):
            return httpx.Response(200, json=[_role(1), _role(2)])

    client = _client(MockTransport())
    items = await PaginatedIterator(client, PATH, MemberRole).flatten()

    assert len(items) == 2
    assert items[0].id == 1
    assert items[1].name == "Role 2"
    await client.close()


@pytest.mark.asyncio
async def test_multi_page():
    """Pagination across two pages."""
    call_count = {"n": 0}

    class MockTransport(httpx.AsyncBaseTransport):
        async def handle_async_request(self, request):
            call_count["n"] += 1
            if request.url.params["page"] == "2":
                return httpx.Response(200, json=[_role(3)], headers={"x-page": "2", "x-next-page": ""})
            return httpx.Response(200, json=[_role(1), _role(2)], headers={"x-page": "1", "x-next-page": "2"})

    client = _client(MockTransport())
    items = await PaginatedIterator(client, PATH, MemberRole).flatten()

    assert [i.id for i in items] == [1, 2, 3]
    assert call_count["n"] == 2
    await client.close()


@pytest.mark.asyncio
async def test_empty_result():
    """Pagination with zero results."""

    class MockTransport(httpx.AsyncBaseTransport):
        async def handle_async_request(self, request):
            return httpx.Response(200, json=[], headers={"x-next-page": "2"})

    client = _client(MockTransport())
    items = await PaginatedIterator(client, PATH, MemberRole).flatten()

    assert items == []
    await client.close()


@pytest.mark.asyncio
async def test_custom_params_and_per_page():
    """Extra params and per_page are sent with each page request."""
    urls: list[str] = []

    class MockTransport(httpx.AsyncBaseTransport):
        async def handle_async_request(self, request):
            urls.append(str(request.url))
            return httpx.Response(200, json=[])

    client = _client(MockTransport())
    await PaginatedIterator(
        client, PATH, MemberRole, params={"order_by": "name"}, per_page=100
    ).flatten()

    assert "order_by=name" in urls[0]
    assert "per_page=100" in urls[0]
    assert "page=1" in urls[0]
    await client.close()


@pytest.mark.asyncio
async def test_async_for():
    class MockTransport(httpx.AsyncBaseTransport):
        async def handle_async_request(self, request):
            return httpx.Response(200, json=[_role(5)])

    client = _client(MockTransport())
    seen = [role.id async for role in PaginatedIterator(client, PATH, MemberRole)]
    assert seen == [5]
    await client.close()


@pytest.mark.asyncio
async def test_error_during_pagination():
    """A 404 on page 2 raises GitLabHTTPError."""

    class MockTransport(httpx.AsyncBaseTransport):
        async def handle_async_request(self, request):
            if request.url.params["page"] == "2":
                return httpx.Response(404, json={"message": "404 Group Not Found"})
            return httpx.Response(200, json=[_role(1)], headers={"x-next-page": "2"})

    client = _client(MockTransport())
    with pytest.raises(GitLabHTTPError) as exc_info:
        await PaginatedIterator(client, PATH, MemberRole).flatten()
    assert exc_info.value.status == 404
    await client.close()
