"""
Storage error hierarchy.

Every error carries the underlying engine message and chains the
original exception. Catch StorageError to handle any failure.
"""


class StorageError(RuntimeError):
    """Base class for all project store failures."""


class OpenError(StorageError):
    """The database file could not be opened or created."""


class SchemaError(StorageError):
    """Creating the projects table failed."""


class QueryError(StorageError):
    """A read or write statement failed to execute."""


class DecodeError(StorageError):
    """A stored row could not be converted into a Project."""
