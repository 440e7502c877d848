import httpx
import pytest
from postgrest import AsyncPostgrestClient

from app.core.exceptions import ErrorKind, StoreOperationError
from app.db.supabase import execute_query
from app.services import booking_service, location_service, user_service

REST_URL = "https://demo.supabase.co/rest/v1"


def make_client(handler):
    return AsyncPostgrestClient(
        REST_URL,
        headers={"apikey": "key", "Authorization": "Bearer key"},
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )


def store_error(status_code, message, code):
    return httpx.Response(
        status_code,
        json={"message": message, "code": code, "details": None, "hint": None},
    )


@pytest.mark.asyncio
async def test_store_error_message_becomes_store_operation_error():
    client = make_client(lambda request: store_error(
        409, 'duplicate key value violates unique constraint "users_email_key"', "23505"
    ))

    with pytest.raises(StoreOperationError) as exc_info:
        await execute_query(client.table("users").insert([{"name": "Asha"}]), "users")

    assert exc_info.value.message == 'duplicate key value violates unique constraint "users_email_key"'
    assert exc_info.value.kind == ErrorKind.STORE
    assert exc_info.value.status_code == 500


@pytest.mark.asyncio
async def test_transport_error_becomes_store_operation_error():
    def handler(request):
        raise httpx.ConnectError("connection refused")

    client = make_client(handler)

    with pytest.raises(StoreOperationError, match="connection refused"):
        await execute_query(client.table("storage_locations").select("*"), "storage_locations")


@pytest.mark.asyncio
async def test_failed_reads_are_not_retried():
    seen = []

    def handler(request):
        seen.append(request)
        return store_error(503, "Service Unavailable", "503")

    client = make_client(handler)

    with pytest.raises(StoreOperationError):
        await execute_query(client.table("storage_locations").select("*"), "storage_locations")

    assert len(seen) == 1


@pytest.mark.asyncio
async def test_requests_carry_project_key():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json=[])

    client = make_client(handler)
    await location_service.list_locations(client)

    [request] = seen
    assert request.method == "GET"
    assert str(request.url).startswith(f"{REST_URL}/storage_locations")
    assert request.headers["apikey"] == "key"
    assert request.headers["authorization"] == "Bearer key"


@pytest.mark.asyncio
async def test_booking_lookup_builds_embedded_select():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json=[{"id": "B1", "users": {"id": "U1"}, "storage_locations": {"id": "L1"}}])

    client = make_client(handler)
    result = await booking_service.get_booking_status(client, "B1")

    [request] = seen
    assert request.url.params["select"] == "*,users(*),storage_locations(*)"
    assert request.url.params["id"] == "eq.B1"
    assert result.data["users"] == {"id": "U1"}


@pytest.mark.asyncio
async def test_empty_location_table_maps_to_no_locations():
    client = make_client(lambda request: httpx.Response(200, json=[]))

    with pytest.raises(StoreOperationError, match="No locations available"):
        await location_service.get_any_location(client)


@pytest.mark.asyncio
async def test_insert_asks_for_inserted_rows():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(201, json=[{"id": "U9", "name": "Asha", "email": None, "phone": None}])

    client = make_client(handler)
    rows = await user_service.register_user(client, {"name": "Asha", "email": None, "phone": None})

    [request] = seen
    assert request.method == "POST"
    assert "return=representation" in request.headers["prefer"]
    assert rows == [{"id": "U9", "name": "Asha", "email": None, "phone": None}]
