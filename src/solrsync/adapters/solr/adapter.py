"""Apache Solr destination adapter — Batched writes to a Solr collection.

Inserts, updates and deletes are collected in memory and sent to Solr in a
single update request (followed by a commit) whenever the number of pending
changes reaches ``batch_size`` after an object has been processed, and once
more when the run commits.

Usage::

    client = SolrClient(base_url="http://localhost:8983/solr", collection="content")
    adapter = SolrDestinationAdapter(client, batch_size=50)

    for existing in adapter.list_objects("\\App\\Entity\\Page"):
        ...
    adapter.commit()
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import TYPE_CHECKING

from solrsync.adapters.base.adapter import DestinationAdapter, ProgressListener, UpdateableObjectProvider
from solrsync.adapters.base.exceptions import ConfigurationError, InvalidArgumentError
from solrsync.client.solr import SolrClient
from solrsync.models.document import (
    HASH_FIELD,
    ID_FIELD,
    OBJECT_CLASS_FIELD,
    OBJECT_ID_FIELD,
    Document,
    ReadDocument,
    WriteDocument,
)

if TYPE_CHECKING:
    from solrsync.config.settings import Settings

MAX_ROWS = 1_000_000
DEFAULT_BATCH_SIZE = 20


def normalize_object_class(class_name: str) -> str:
    """Turn a namespaced class name into a flat token usable in queries and ids.

    >>> normalize_object_class("\\\\Foo\\\\Bar\\\\Baz")
    'Foo-Bar-Baz'
    """
    if class_name.startswith("\\"):
        class_name = class_name[1:]
    return class_name.replace("\\", "-")


class SolrDestinationAdapter(
    DestinationAdapter[ReadDocument, WriteDocument],
    UpdateableObjectProvider[ReadDocument, WriteDocument],
    ProgressListener,
):
    """Destination adapter writing to a Solr collection.

    Not thread-safe: use one instance per synchronization run.

    Args:
        solr_client: Client for the target collection.
        logger: Logger for progress messages; defaults to the module logger.
        batch_size: Number of pending changes that triggers a flush.
    """

    def __init__(
        self,
        solr_client: SolrClient,
        logger: logging.Logger | None = None,
        batch_size: int = DEFAULT_BATCH_SIZE,
    ) -> None:
        if isinstance(batch_size, bool) or not isinstance(batch_size, int) or batch_size < 1:
            raise ConfigurationError(f"batch_size must be a positive integer, got {batch_size!r}")

        self._solr_client = solr_client
        self._logger = logger or logging.getLogger(__name__)
        self._batch_size = batch_size
        self._new_or_updated_documents: list[WriteDocument] = []
        self._deleted_document_ids: list[str | int] = []

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        client: SolrClient | None = None,
        logger: logging.Logger | None = None,
    ) -> SolrDestinationAdapter:
        """Build an adapter (and, unless given, its client) from settings."""
        if client is None:
            client = SolrClient.from_settings(settings.solr)
        return cls(client, logger=logger, batch_size=settings.sync.batch_size)

    @property
    def batch_size(self) -> int:
        return self._batch_size

    @property
    def pending_updates(self) -> int:
        return len(self._new_or_updated_documents)

    @property
    def pending_deletes(self) -> int:
        return len(self._deleted_document_ids)

    # ── DestinationAdapter ───────────────────────────────────────────────

    def list_objects(self, class_name: str) -> Iterator[ReadDocument]:
        normalized = normalize_object_class(class_name)
        query = self._solr_client.create_select(
            query=f"{OBJECT_CLASS_FIELD}:{normalized}",
            start=0,
            rows=MAX_ROWS,
            fields=[ID_FIELD, OBJECT_ID_FIELD, OBJECT_CLASS_FIELD, HASH_FIELD],
        ).add_sort(OBJECT_ID_FIELD, "asc")

        result = self._solr_client.select(query)

        self._logger.info(
            "SolrDestinationAdapter found %d objects for objectClass %s",
            result.num_found,
            class_name,
        )
        return result.iter_documents()

    def create_document(self, object_id: int, class_name: str) -> WriteDocument:
        normalized = normalize_object_class(class_name)
        document = self._solr_client.create_update().create_document()
        document[ID_FIELD] = f"{normalized}:{object_id}"
        document[OBJECT_ID_FIELD] = object_id
        document[OBJECT_CLASS_FIELD] = normalized
        return document

    def delete(self, destination_object: Document) -> None:
        if ID_FIELD not in destination_object:
            raise InvalidArgumentError(f"Cannot delete a document without an '{ID_FIELD}' field")
        self._deleted_document_ids.append(destination_object[ID_FIELD])

    def updated(self, destination_object: WriteDocument) -> None:
        if not isinstance(destination_object, WriteDocument):
            raise InvalidArgumentError(
                f"Expected a WriteDocument, got {type(destination_object).__name__}; "
                "use prepare_update() to get a writable copy"
            )
        self._new_or_updated_documents.append(destination_object)

    mark_updated = updated

    def commit(self) -> None:
        self._flush()

    def id_of(self, destination_object: Document) -> int:
        if destination_object.get(OBJECT_ID_FIELD) is None:
            raise InvalidArgumentError(f"Document has no '{OBJECT_ID_FIELD}' field")
        return int(destination_object[OBJECT_ID_FIELD])

    # ── UpdateableObjectProvider ─────────────────────────────────────────

    def prepare_update(self, destination_object: Document) -> WriteDocument:
        return WriteDocument(destination_object.get_fields())

    # ── ProgressListener ─────────────────────────────────────────────────

    def after_object_processed(self) -> None:
        if self.pending_deletes + self.pending_updates >= self._batch_size:
            self._flush()

    # ── Helpers ──────────────────────────────────────────────────────────

    def _flush(self) -> None:
        self._logger.info(
            "Flushing %d inserts or updates and %d deletes",
            self.pending_updates,
            self.pending_deletes,
        )

        if not self._deleted_document_ids and not self._new_or_updated_documents:
            return

        update_query = self._solr_client.create_update()
        if self._deleted_document_ids:
            update_query.add_delete_by_ids(self._deleted_document_ids)
        if self._new_or_updated_documents:
            update_query.add_documents(self._new_or_updated_documents)
        update_query.add_commit()

        # Pending changes are kept if the update raises.
        self._solr_client.update(update_query)

        self._deleted_document_ids = []
        self._new_or_updated_documents = []

        self._logger.debug("Flushed")
