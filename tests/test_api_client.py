# File: /tests/test_api_client.py | Version: 1.0 | Title: Users API client against the development API
import httpx
import pytest

from listview.api_client import UsersApiClient
from listview.core.errors import NetworkError
from listview.view.store import CollectionStore


async def _create(api_client, first="Ada", last="Lovelace", **extra):
    return await api_client.create_one({"firstName": first, "lastName": last, **extra})


@pytest.mark.asyncio
async def test_create_returns_camel_case_record_with_server_id(api_client):
    rec = await _create(api_client, id=999, email="ada@example.com", role="admin")
    assert isinstance(rec["id"], int)
    assert rec["id"] != 999
    assert rec["firstName"] == "Ada"
    assert rec["lastName"] == "Lovelace"
    assert rec["role"] == "admin"


@pytest.mark.asyncio
async def test_list_all_window_and_total(api_client):
    for name in ("A", "B", "C"):
        await _create(api_client, first=name)

    page = await api_client.list_all(limit=2, offset=0)
    assert page.total == 3
    assert len(page.items) == 2
    assert page.limit == 2 and page.skip == 0
    assert [r["firstName"] for r in page.records()] == ["A", "B"]

    rest = await api_client.list_all(limit=2, offset=2)
    assert [r["firstName"] for r in rest.records()] == ["C"]


@pytest.mark.asyncio
async def test_get_update_delete_roundtrip(api_client):
    rec = await _create(api_client, age=36)

    fetched = await api_client.get_one(rec["id"])
    assert fetched == rec

    updated = await api_client.update_one(rec["id"], {"age": 37, "id": 12345})
    assert updated["id"] == rec["id"]
    assert updated["age"] == 37
    assert updated["firstName"] == "Ada"

    assert await api_client.delete_one(rec["id"]) is None
    with pytest.raises(NetworkError):
        await api_client.get_one(rec["id"])


@pytest.mark.asyncio
async def test_missing_user_maps_to_network_error(api_client):
    with pytest.raises(NetworkError) as ei:
        await api_client.get_one(424242)
    assert ei.value.status_code == 404
    assert ei.value.message == "User with id '424242' not found"


@pytest.mark.asyncio
async def test_validation_failure_maps_to_network_error(api_client):
    with pytest.raises(NetworkError) as ei:
        await api_client.create_one({"firstName": ""})
    assert ei.value.status_code == 422


@pytest.mark.asyncio
async def test_search_matches_name_email_username(api_client):
    await _create(api_client, first="Grace", last="Hopper", username="ghopper")
    await _create(api_client, first="Alan", last="Turing", email="alan@bletchley.uk")

    assert [r["lastName"] for r in (await api_client.search("hop")).records()] == ["Hopper"]
    assert [r["firstName"] for r in (await api_client.search("BLETCH")).records()] == ["Alan"]


@pytest.mark.asyncio
async def test_transport_failure_maps_to_network_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    async with UsersApiClient(
        base_url="http://users.invalid", transport=httpx.MockTransport(handler)
    ) as c:
        with pytest.raises(NetworkError) as ei:
            await c.list_all()
    assert ei.value.status_code is None
    assert "connection refused" in ei.value.message


@pytest.mark.asyncio
async def test_error_message_falls_back_to_status_line():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503, text="upstream down")

    async with UsersApiClient(
        base_url="http://users.invalid", transport=httpx.MockTransport(handler)
    ) as c:
        with pytest.raises(NetworkError) as ei:
            await c.get_one(1)
    assert ei.value.status_code == 503
    assert ei.value.message == "503 Service Unavailable"


@pytest.mark.asyncio
async def test_store_over_real_client(api_client):
    a = await _create(api_client, first="Zed")
    b = await _create(api_client, first="Amy")

    store = CollectionStore(api_client)
    await store.fetch_all()
    assert [r["id"] for r in store.items] == [a["id"], b["id"]]
    assert store.total == 2

    assert await store.delete(a["id"]) is True
    assert [r["id"] for r in store.items] == [b["id"]]
    assert (await api_client.list_all()).total == 1
