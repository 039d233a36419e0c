"""Base destination adapter — Interfaces a synchronization framework drives.

A synchronization run compares objects from a source system with the objects
already present in a destination system.  The framework calls, per object:

  1. ``list_objects()`` once per class, to enumerate existing destination objects
  2. ``create_document()``, ``prepare_update()`` or ``delete()``
  3. ``updated()`` for every created or changed destination object
  4. ``after_object_processed()``

and finally ``commit()`` once at the end of the run.

``R`` is the type of objects read from the destination, ``W`` the type of
objects written to it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Generic, TypeVar

R = TypeVar("R")
W = TypeVar("W")


class DestinationAdapter(ABC, Generic[R, W]):
    """Abstract base class for synchronization destinations."""

    @abstractmethod
    def list_objects(self, class_name: str) -> Iterator[R]:
        """Enumerate existing destination objects of a class.

        Args:
            class_name: Name of the synchronized class.

        Returns:
            Iterator over destination objects, ordered by object id ascending.
        """

    @abstractmethod
    def create_document(self, object_id: int, class_name: str) -> W:
        """Create a new, empty destination object for ``object_id``."""

    @abstractmethod
    def delete(self, destination_object: R) -> None:
        """Schedule ``destination_object`` for deletion."""

    @abstractmethod
    def updated(self, destination_object: W) -> None:
        """Notify the adapter that ``destination_object`` was created or changed."""

    @abstractmethod
    def commit(self) -> None:
        """Persist all outstanding changes. Called once at the end of a run."""

    @abstractmethod
    def id_of(self, destination_object: R) -> int:
        """Return the numeric object id of ``destination_object``."""


class UpdateableObjectProvider(ABC, Generic[R, W]):
    """Destinations whose read objects must be converted before changing them."""

    @abstractmethod
    def prepare_update(self, destination_object: R) -> W:
        """Return a writable copy of ``destination_object``."""


class ProgressListener(ABC):
    """Receives a callback after the framework finishes each object."""

    @abstractmethod
    def after_object_processed(self) -> None:
        """Called once per processed source object."""
