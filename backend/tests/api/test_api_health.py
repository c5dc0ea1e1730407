"""Smoke tests for the health endpoint."""

from __future__ import annotations


def test_health_reports_database(client):
    """Health check should report a reachable database."""

    response = client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.get_json() == {"status": "ok", "db": "ok", "version": "test"}


def test_health_in_memory_mode(memory_client):
    response = memory_client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.get_json()["db"] == "memory"
