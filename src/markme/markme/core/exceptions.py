class DomainError(Exception):
    """Base exception for store-level failures."""


class StorageError(DomainError):
    """Raised when a JSON document cannot be written to disk."""
