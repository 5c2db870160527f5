# stock/errors.py
from __future__ import annotations


class StoreError(Exception):
    """Base class for every storage failure surfaced to callers."""


class StorageOpenError(StoreError):
    pass


class SchemaCreationError(StoreError):
    pass


class StatementError(StoreError):
    pass


class StoreNotInitializedError(StoreError):
    def __init__(self, message: str = "Database is not initialized."):
        super().__init__(message)


class ConfigurationError(Exception):
    """Raised when settings are missing or invalid."""
