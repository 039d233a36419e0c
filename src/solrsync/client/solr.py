"""Solr client — Synchronous access to Solr's select and update handlers.

Talks to Apache Solr (v8+) over HTTP using ``httpx``.  Selects go through
the JSON Request API; updates use the JSON update command format so that
deletions, additions and a commit travel in one request.

Usage::

    with SolrClient("http://localhost:8983/solr", collection="content") as client:
        result = client.select(client.create_select(query="objectclass:Foo-Bar"))
        for doc in result.iter_documents():
            print(doc["id"])
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

import httpx

from solrsync.adapters.base.exceptions import ConnectionError, QueryError
from solrsync.models.query import SelectQuery, SelectResult, UpdateQuery, UpdateResult

if TYPE_CHECKING:
    from solrsync.config.settings import SolrSettings

logger = logging.getLogger(__name__)


class SolrClient:
    """Client for a single Solr collection.

    Args:
        base_url: Solr base URL, e.g. ``"http://localhost:8983/solr"``.
        collection: Solr collection/core name.
        username: Optional basic-auth username.
        password: Optional basic-auth password.
        timeout: HTTP request timeout in seconds.
        http_client: Pre-built ``httpx.Client`` to use instead of creating one.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:8983/solr",
        collection: str = "documents",
        username: str | None = None,
        password: str | None = None,
        timeout: float = 30.0,
        http_client: httpx.Client | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._collection = collection

        if http_client is None:
            auth = None
            if username and password:
                auth = httpx.BasicAuth(username, password)
            http_client = httpx.Client(
                base_url=self._base_url,
                timeout=httpx.Timeout(timeout),
                auth=auth,
            )
        self._client = http_client

    @classmethod
    def from_settings(cls, settings: SolrSettings) -> SolrClient:
        return cls(
            base_url=settings.base_url,
            collection=settings.collection,
            username=settings.username,
            password=settings.password,
            timeout=settings.timeout,
        )

    @property
    def collection(self) -> str:
        return self._collection

    def __enter__(self) -> SolrClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._client.close()

    # ── Query factories ──────────────────────────────────────────────────

    def create_select(self, **kwargs: Any) -> SelectQuery:
        return SelectQuery(**kwargs)

    def create_update(self) -> UpdateQuery:
        return UpdateQuery()

    # ── Execution ────────────────────────────────────────────────────────

    def select(self, query: SelectQuery) -> SelectResult:
        """Run a select query.

        Raises:
            QueryError: If Solr rejects the query.
            ConnectionError: If Solr cannot be reached.
        """
        data = self._post("select", json=query.to_request_body())
        response_section = data.get("response", {})
        return SelectResult(
            num_found=response_section.get("numFound", 0),
            documents=response_section.get("docs", []),
            qtime_ms=data.get("responseHeader", {}).get("QTime", 0),
        )

    def update(self, query: UpdateQuery) -> UpdateResult:
        """Send a batch of update commands as a single request.

        Raises:
            QueryError: If Solr rejects the update.
            ConnectionError: If Solr cannot be reached.
        """
        start = time.monotonic()
        data = self._post(
            "update",
            content=query.to_json(),
            headers={"Content-Type": "application/json"},
        )
        header = data.get("responseHeader", {})
        logger.debug(
            "Solr update with %d deletes and %d documents took %d ms",
            len(query.delete_ids),
            len(query.documents),
            int((time.monotonic() - start) * 1000),
        )
        return UpdateResult(status=header.get("status", 0), qtime_ms=header.get("QTime", 0))

    def ping(self) -> bool:
        """Return True if the collection answers its ping handler with ``OK``."""
        try:
            resp = self._client.get(f"/{self._collection}/admin/ping")
            return resp.status_code == 200 and resp.json().get("status") == "OK"
        except (httpx.HTTPError, ValueError):
            logger.warning("Solr ping failed for collection '%s'", self._collection, exc_info=True)
            return False

    # ── Helpers ──────────────────────────────────────────────────────────

    def _post(self, handler: str, **kwargs: Any) -> dict[str, Any]:
        try:
            resp = self._client.post(f"/{self._collection}/{handler}", **kwargs)
            resp.raise_for_status()
            return resp.json()
        except httpx.HTTPStatusError as e:
            raise QueryError(
                f"Solr {handler} request failed with HTTP {e.response.status_code}: "
                f"{self._error_message(e.response)}"
            ) from e
        except httpx.TransportError as e:
            raise ConnectionError(f"Failed to connect to Solr at {self._base_url}: {e}") from e
        except httpx.HTTPError as e:
            raise QueryError(f"Solr {handler} request failed: {e}") from e
        except ValueError as e:
            raise QueryError(f"Solr {handler} returned a non-JSON response") from e

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        """Extract Solr's error text from an error response, if present."""
        try:
            data = response.json()
        except ValueError:
            return response.text
        error = data.get("error", {}) if isinstance(data, dict) else {}
        return str(error.get("msg") or response.text)
