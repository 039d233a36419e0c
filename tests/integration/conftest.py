"""Integration test fixtures — a Solr instance with an empty test collection.

Expects Solr to be running, e.g.:
    docker run -d -p 8983:8983 solr:9 solr-precreate documents

Tests are skipped when Solr is not reachable.
"""

from __future__ import annotations

import contextlib
import time

import httpx
import pytest

SOLR_HOST = "http://localhost:8983/solr"
SOLR_COLLECTION = "documents"


def _wait_for_service(url: str, timeout: float = 120.0) -> bool:
    """Block until *url* returns HTTP 200, or timeout."""
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        try:
            r = httpx.get(url, timeout=30)
            if r.status_code == 200:
                return True
        except httpx.HTTPError:
            pass
        time.sleep(2)
    return False


def _prepare_solr(host: str = SOLR_HOST, collection: str = SOLR_COLLECTION) -> None:
    with httpx.Client(base_url=host, timeout=30) as client:
        # Add fields to schema (Solr needs explicit schema for non-dynamic fields)
        for field in [
            {"name": "objectid", "type": "plong", "stored": True},
            {"name": "objectclass", "type": "string", "stored": True},
            {"name": "hash", "type": "string", "stored": True},
            {"name": "title", "type": "text_general", "stored": True},
        ]:
            with contextlib.suppress(httpx.HTTPError):
                client.post(f"/{collection}/schema", json={"add-field": field})

        resp = client.post(
            f"/{collection}/update",
            json={"delete": {"query": "*:*"}},
            params={"commit": "true"},
        )
        resp.raise_for_status()


@pytest.fixture(scope="session")
def solr_ready() -> str:
    """Ensure Solr is running and has the synchronization fields."""
    if not _wait_for_service(f"{SOLR_HOST}/{SOLR_COLLECTION}/admin/ping", timeout=30.0):
        pytest.skip(f"Solr not available at {SOLR_HOST}")
    _prepare_solr()
    return SOLR_HOST


@pytest.fixture
def clean_collection(solr_ready: str) -> str:
    _prepare_solr(solr_ready)
    return solr_ready
