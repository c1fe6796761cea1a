"""
Hotel Listing Backend — Application Wiring Tests
==================================================

What:  Health endpoint, request ID propagation, the error envelope, version
       headers on every /api response and the access log.
"""

import logging

import pytest


@pytest.mark.asyncio
async def test_health_reports_database(test_client):
    response = await test_client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["database"] == "connected"
    assert body["uptimeSeconds"] >= 0


@pytest.mark.asyncio
async def test_request_id_is_generated(test_client):
    response = await test_client.get("/api/hotel")

    assert response.headers["x-request-id"]


@pytest.mark.asyncio
async def test_request_id_is_echoed_into_errors(test_client):
    response = await test_client.get("/api/hotel/999", headers={"X-Request-ID": "trace-123"})

    assert response.headers["x-request-id"] == "trace-123"
    assert response.json()["requestId"] == "trace-123"


@pytest.mark.asyncio
async def test_unknown_route_is_404(test_client):
    response = await test_client.get("/api/nothing-here")

    assert response.status_code == 404
    assert response.headers["api-supported-versions"] == "1.0, 2.0"


@pytest.mark.asyncio
async def test_unsupported_version_response_advertises_versions(test_client):
    response = await test_client.get("/api/country", headers={"api-version": "3.0"})

    assert response.status_code == 400
    assert response.json()["error"] == "unsupported_api_version"
    assert response.headers["api-supported-versions"] == "1.0, 2.0"
    assert response.headers["api-deprecated-versions"] == "2.0"


@pytest.mark.asyncio
async def test_health_carries_no_version_headers(test_client):
    response = await test_client.get("/health")

    assert "api-supported-versions" not in response.headers


@pytest.mark.asyncio
async def test_access_log_line(test_client, caplog):
    with caplog.at_level(logging.INFO, logger="hotel_listing.access"):
        await test_client.get("/api/hotel", headers={"X-Request-ID": "trace-456"})
        await test_client.get("/api/hotel/999")

    records = [r for r in caplog.records if r.name == "hotel_listing.access"]
    assert len(records) == 2
    assert records[0].getMessage().startswith("GET /api/hotel v1.0 200 ")
    assert "[trace-456]" in records[0].getMessage()
    assert records[0].args[0] == "GET"
    assert records[0].levelno == logging.INFO
    assert records[1].status == 404
    assert records[1].levelno == logging.WARNING
