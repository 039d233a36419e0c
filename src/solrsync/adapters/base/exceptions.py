"""Adapter-specific exceptions."""


class AdapterError(Exception):
    """Base exception for adapter errors."""


class ConnectionError(AdapterError):
    """Raised when the adapter cannot connect to the search backend."""


class QueryError(AdapterError):
    """Raised when a select or update request is rejected by the backend."""


class ConfigurationError(AdapterError):
    """Raised when adapter configuration is invalid."""


class InvalidArgumentError(AdapterError, ValueError):
    """Raised when an adapter operation receives an unusable document."""
