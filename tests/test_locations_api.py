def test_liveness_route(client, gateway):
    response = client.get("/api/locations/test")

    assert response.status_code == 200
    assert response.json() == {"message": "API is working"}
    assert gateway.calls == []


def test_locations_returns_all_rows(client, gateway):
    gateway.tables["storage_locations"] = [
        {"id": "L1", "name": "Central Station", "capacity": 40},
        {"id": "L2", "name": "Airport T2", "capacity": 120},
    ]

    response = client.get("/api/locations/locations")

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Locations fetched successfully"
    assert [row["id"] for row in body["data"]] == ["L1", "L2"]
    assert body["data"][1]["capacity"] == 120


def test_locations_empty_table_returns_empty_list(client, gateway):
    response = client.get("/api/locations/locations")

    assert response.status_code == 200
    assert response.json()["data"] == []


def test_locations_store_error_returns_500(client, gateway):
    gateway.fail("storage_locations", "GET", "relation \"storage_locations\" does not exist")

    response = client.get("/api/locations/locations")

    assert response.status_code == 500
    assert response.json() == {"error": "relation \"storage_locations\" does not exist"}


def test_locations_unexpected_exception_returns_internal_error(client, gateway):
    gateway.explode_on = ("storage_locations", "GET")

    response = client.get("/api/locations/locations")

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error", "details": "gateway exploded"}


def test_cors_allows_configured_frontend(client):
    response = client.options(
        "/api/locations/locations",
        headers={
            "Origin": "http://localhost:3000",
            "Access-Control-Request-Method": "GET",
        },
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "http://localhost:3000"
    assert response.headers["access-control-allow-credentials"] == "true"


def test_cors_rejects_other_origins(client):
    response = client.options(
        "/api/locations/locations",
        headers={
            "Origin": "http://evil.example",
            "Access-Control-Request-Method": "GET",
        },
    )

    assert "access-control-allow-origin" not in response.headers
