"""Solr document types — Read and write variants over a shared field mapping.

Documents returned by a select query are ``ReadDocument`` instances and can
only be inspected.  Documents submitted for indexing are ``WriteDocument``
instances; ``prepare_update()`` on the destination adapter converts one into
the other by copying the field mapping.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, MutableMapping
from typing import Any

ID_FIELD = "id"
OBJECT_ID_FIELD = "objectid"
OBJECT_CLASS_FIELD = "objectclass"
HASH_FIELD = "hash"


class Document(Mapping[str, Any]):
    """Field-name to value mapping shared by read and write documents."""

    def __init__(self, fields: Mapping[str, Any] | None = None) -> None:
        self._fields: dict[str, Any] = dict(fields or {})

    def __getitem__(self, key: str) -> Any:
        return self._fields[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._fields!r})"

    def get_fields(self) -> dict[str, Any]:
        """Return a shallow copy of the document's fields."""
        return dict(self._fields)


class ReadDocument(Document):
    """A document as returned by the search index. Immutable."""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ReadDocument):
            return NotImplemented
        return self._fields == other._fields


class WriteDocument(Document, MutableMapping[str, Any]):
    """A document that will be submitted to the search index.

    Example::

        doc = WriteDocument({"id": "Foo-Bar:42"})
        doc["title"] = "Hello"
    """

    def __setitem__(self, key: str, value: Any) -> None:
        self._fields[key] = value

    def __delitem__(self, key: str) -> None:
        del self._fields[key]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WriteDocument):
            return NotImplemented
        return self._fields == other._fields

    def to_dict(self) -> dict[str, Any]:
        """Serializable representation for an ``add`` update command."""
        return self.get_fields()
