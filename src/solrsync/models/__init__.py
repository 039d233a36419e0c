"""Document and query models shared by the client and the adapters."""

from solrsync.models.document import ReadDocument, WriteDocument
from solrsync.models.query import SelectQuery, SelectResult, UpdateQuery, UpdateResult

__all__ = ["ReadDocument", "SelectQuery", "SelectResult", "UpdateQuery", "UpdateResult", "WriteDocument"]
