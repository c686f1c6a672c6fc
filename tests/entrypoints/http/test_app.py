"""
Unit tests for FastAPI application setup and configuration.

This test suite verifies the application structure and wiring:
- build_app() creates a properly configured FastAPI instance
- Application metadata (title, version, docs URLs)
- Router registration (health at the root, ships under /rest)
- OpenAPI schema documents the ship endpoints and their camelCase parameters

Schema checks go through app.openapi(), which never resolves the database dependency.
"""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.testclient import TestClient

from ship_catalog.entrypoints.http.app import build_app


# ==============================================================================
# Application Creation
# ==============================================================================


def test_build_app_returns_fastapi_instance() -> None:
    """build_app() returns a FastAPI application instance."""
    app = build_app()
    assert isinstance(app, FastAPI)


def test_build_app_creates_new_instance_each_call() -> None:
    app1 = build_app()
    app2 = build_app()

    assert app1 is not app2


# ==============================================================================
# Application Metadata
# ==============================================================================


def test_app_metadata() -> None:
    app = build_app()

    assert app.title == "Ship Catalog API"
    assert app.version == "0.1.0"
    assert "Catalog of space ships" in app.description


def test_app_documentation_urls() -> None:
    app = build_app()

    assert app.docs_url == "/docs"
    assert app.redoc_url == "/redoc"
    assert app.openapi_url == "/openapi.json"


def test_app_documentation_endpoints_are_accessible() -> None:
    """Documentation endpoints are accessible."""
    client = TestClient(build_app())

    assert client.get("/docs").status_code == 200
    assert client.get("/redoc").status_code == 200

    response = client.get("/openapi.json")
    assert response.status_code == 200
    assert response.headers["content-type"] == "application/json"


# ==============================================================================
# Router Registration
# ==============================================================================


def test_app_registers_ship_routes_under_rest_prefix() -> None:
    paths = build_app().openapi()["paths"]

    assert "/health" in paths
    assert "/rest/ships" in paths
    assert "/rest/ships/count" in paths
    assert "/rest/ships/{ship_id}" in paths
    assert "/ships" not in paths


def test_app_ship_methods() -> None:
    paths = build_app().openapi()["paths"]

    assert set(paths["/rest/ships"]) == {"get", "post"}
    assert set(paths["/rest/ships/{ship_id}"]) == {"get", "post", "delete"}
    assert set(paths["/rest/ships/count"]) == {"get"}


def test_app_list_endpoint_documents_query_parameters() -> None:
    """List endpoint exposes camelCase filter, sort and paging parameters."""
    schema = build_app().openapi()
    list_ships = schema["paths"]["/rest/ships"]["get"]

    assert list_ships["tags"] == ["Ships"]
    assert list_ships["summary"] == "List ships"

    param_names = {param["name"] for param in list_ships["parameters"]}
    assert {
        "name",
        "planet",
        "shipType",
        "after",
        "before",
        "isUsed",
        "minSpeed",
        "maxSpeed",
        "minCrewSize",
        "maxCrewSize",
        "minRating",
        "maxRating",
        "order",
        "pageNumber",
        "pageSize",
    } <= param_names


def test_app_count_endpoint_has_no_paging_parameters() -> None:
    schema = build_app().openapi()
    count_ships = schema["paths"]["/rest/ships/count"]["get"]

    param_names = {param["name"] for param in count_ships["parameters"]}
    assert "minRating" in param_names
    assert "pageSize" not in param_names
    assert "order" not in param_names


# ==============================================================================
# Route Accessibility
# ==============================================================================


def test_health_endpoint_responds() -> None:
    client = TestClient(build_app())

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_app_returns_404_for_unknown_routes() -> None:
    client = TestClient(build_app())

    assert client.get("/unknown").status_code == 404
    assert client.get("/rest/unknown").status_code == 404


# ==============================================================================
# Application Structure
# ==============================================================================


def test_app_module_exports_app_instance() -> None:
    """App module exports 'app' instance at module level."""
    from ship_catalog.entrypoints.http.app import app

    assert isinstance(app, FastAPI)
    assert app.title == "Ship Catalog API"
