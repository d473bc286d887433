import pytest
from azure.cosmos.exceptions import CosmosHttpResponseError
from fastapi.testclient import TestClient

from app.api import create_app
from app.services.backend_selection import select_backend
from app.services.cosmos_products import CosmosProductService


def test_select_backend_is_case_insensitive(backends):
    assert select_backend("COSMOS", backends) is backends["cosmos"]
    assert select_backend("postgres", backends) is backends["postgres"]


def test_unknown_backend_fails_at_startup(backends):
    with pytest.raises(ValueError):
        create_app(backends=backends, backend_name="mongo")


def test_health_reports_active_backend(postgres_client, cosmos_client):
    assert postgres_client.get("/health").json() == {
        "status": "ok",
        "service": "products-api",
        "backend": "postgres",
    }
    assert cosmos_client.get("/health").json()["backend"] == "cosmos"


def test_cosmos_surface_is_reachable_while_postgres_is_active(postgres_client, container):
    resp = postgres_client.post(
        "/cosmos/products",
        json={"id": "p1", "name": "Widget", "price": 2, "userId": "u1"},
    )

    assert resp.status_code == 201
    assert ("u1", "p1") in container.items
    # /products dalej idzie do bazy relacyjnej
    assert postgres_client.get("/products").json() == []
    assert postgres_client.get("/cosmos/products", params={"userId": "u1"}).json()[0]["id"] == "p1"


def test_db_health(postgres_client):
    assert postgres_client.get("/db/health").json() == {"ok": True}


def test_cosmos_health(postgres_client):
    assert postgres_client.get("/cosmos/health").json() == {"ok": True}


def test_cosmos_health_failure(backends):
    def broken_container():
        raise CosmosHttpResponseError(status_code=401, message="Unauthorized")

    backends["cosmos"] = CosmosProductService(container_factory=broken_container)
    client = TestClient(create_app(backends=backends, backend_name="postgres"))

    resp = client.get("/cosmos/health")

    assert resp.status_code == 500
    assert resp.json()["ok"] is False


def test_unknown_route_uses_error_body(postgres_client):
    resp = postgres_client.get("/nowhere")

    assert resp.status_code == 404
    assert resp.json() == {"error": "Not Found"}


def test_cors_is_permissive(postgres_client):
    resp = postgres_client.get("/health", headers={"Origin": "http://dashboard.local"})

    assert resp.headers["access-control-allow-origin"] == "*"


def test_unexpected_exception_uses_error_body(backends):
    def misconfigured_container():
        raise TypeError("credential must not be None")

    backends["cosmos"] = CosmosProductService(container_factory=misconfigured_container)
    client = TestClient(
        create_app(backends=backends, backend_name="cosmos"),
        raise_server_exceptions=False,
    )

    resp = client.get("/products", params={"userId": "u1"})

    assert resp.status_code == 500
    assert resp.json() == {"error": "internal error", "detail": "credential must not be None"}
