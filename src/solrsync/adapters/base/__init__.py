"""Base adapter interfaces for synchronization destinations."""

from solrsync.adapters.base.adapter import DestinationAdapter, ProgressListener, UpdateableObjectProvider

__all__ = ["DestinationAdapter", "ProgressListener", "UpdateableObjectProvider"]
