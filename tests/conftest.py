"""Shared test fixtures and configuration."""

from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock

import pytest

from solrsync.client.solr import SolrClient
from solrsync.config.settings import Settings
from solrsync.models.query import SelectQuery, SelectResult, UpdateQuery, UpdateResult


@pytest.fixture
def settings() -> Settings:
    """Create a test Settings instance with defaults."""
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        solr={"base_url": "http://localhost:8983/solr", "collection": "test_content"},
        sync={"batch_size": 2},
    )


@pytest.fixture
def existing_docs() -> list[dict[str, Any]]:
    """Raw documents as returned by Solr for objectclass Foo-Bar."""
    return [
        {"id": "Foo-Bar:1", "objectid": 1, "objectclass": "Foo-Bar", "hash": "a1"},
        {"id": "Foo-Bar:2", "objectid": 2, "objectclass": "Foo-Bar", "hash": "b2"},
        {"id": "Foo-Bar:5", "objectid": 5, "objectclass": "Foo-Bar", "hash": "e5"},
    ]


@pytest.fixture
def solr_client(existing_docs: list[dict[str, Any]]) -> MagicMock:
    """SolrClient mock that builds real query objects and records executions."""
    client = MagicMock(spec=SolrClient)
    client.create_select.side_effect = lambda **kwargs: SelectQuery(**kwargs)
    client.create_update.side_effect = UpdateQuery
    client.select.return_value = SelectResult(num_found=len(existing_docs), documents=existing_docs)
    client.update.return_value = UpdateResult()
    return client
