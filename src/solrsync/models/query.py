"""Select and update request models for the Solr client."""

from __future__ import annotations

import json
from collections.abc import Iterable, Iterator
from datetime import UTC, date, datetime
from typing import Any, Literal

from pydantic import BaseModel, Field

from solrsync.models.document import ReadDocument, WriteDocument


def _json_default(value: Any) -> Any:
    """Encode values json cannot, using Solr's date format for datetimes."""
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(UTC)
        return value.strftime("%Y-%m-%dT%H:%M:%SZ")
    if isinstance(value, date):
        return f"{value.isoformat()}T00:00:00Z"
    if isinstance(value, (set, frozenset)):
        return list(value)
    return str(value)


class SelectQuery(BaseModel):
    """A query against Solr's ``/select`` handler (JSON Request API)."""

    query: str = Field(default="*:*", description="Lucene query string")
    start: int = Field(default=0, ge=0, description="Offset of the first returned document")
    rows: int = Field(default=10, ge=0, description="Maximum number of documents to return")
    fields: list[str] = Field(default_factory=list, description="Field projection; empty means all stored fields")
    sort: list[tuple[str, Literal["asc", "desc"]]] = Field(default_factory=list, description="Sort clauses")

    def add_sort(self, field: str, order: Literal["asc", "desc"] = "asc") -> SelectQuery:
        self.sort.append((field, order))
        return self

    def to_request_body(self) -> dict[str, Any]:
        body: dict[str, Any] = {
            "query": self.query,
            "offset": self.start,
            "limit": self.rows,
        }
        if self.fields:
            body["fields"] = list(self.fields)
        if self.sort:
            body["sort"] = ", ".join(f"{field} {order}" for field, order in self.sort)
        return body


class SelectResult(BaseModel):
    """Result of a select query."""

    num_found: int = Field(default=0, description="Total number of matching documents")
    documents: list[dict[str, Any]] = Field(default_factory=list, description="Raw result documents")
    qtime_ms: int = Field(default=0, description="Solr-reported query time in ms")

    def iter_documents(self) -> Iterator[ReadDocument]:
        """Lazily wrap the raw result documents."""
        for raw in self.documents:
            yield ReadDocument(raw)


class UpdateResult(BaseModel):
    """Result of an update request."""

    status: int = Field(default=0, description="Solr response status (0 on success)")
    qtime_ms: int = Field(default=0, description="Solr-reported processing time in ms")


class UpdateQuery:
    """A batch of update commands sent to Solr's ``/update`` handler.

    Deletions, additions and the commit directive are serialized into a
    single JSON command object, so the whole batch travels in one request.
    """

    def __init__(self) -> None:
        self.delete_ids: list[str | int] = []
        self.documents: list[WriteDocument] = []
        self.commit = False

    def create_document(self, fields: dict[str, Any] | None = None) -> WriteDocument:
        return WriteDocument(fields)

    def add_delete_by_ids(self, ids: Iterable[str | int]) -> UpdateQuery:
        self.delete_ids.extend(ids)
        return self

    def add_documents(self, documents: Iterable[WriteDocument]) -> UpdateQuery:
        self.documents.extend(documents)
        return self

    def add_commit(self) -> UpdateQuery:
        self.commit = True
        return self

    @property
    def is_empty(self) -> bool:
        return not (self.delete_ids or self.documents or self.commit)

    def to_json(self) -> str:
        """Serialize to Solr's JSON update command format.

        Solr expects one ``"add"`` key per document inside the same object,
        which ``json.dumps`` of a dict cannot express, so commands are
        rendered individually and joined.
        """
        commands: list[str] = []
        if self.delete_ids:
            commands.append(f'"delete": {json.dumps(self.delete_ids)}')
        for document in self.documents:
            commands.append(f'"add": {json.dumps({"doc": document.to_dict()}, default=_json_default)}')
        if self.commit:
            commands.append('"commit": {}')
        return "{" + ", ".join(commands) + "}"
