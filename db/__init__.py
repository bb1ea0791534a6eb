"""
Recent-projects database module.
"""
from .connection import get_db_connection
from .errors import (
    StorageError,
    OpenError,
    SchemaError,
    QueryError,
    DecodeError,
)
from .models import Project, ProjectUpdate
from .store import ProjectStore

__all__ = [
    # Connection
    'get_db_connection',
    # Errors
    'StorageError',
    'OpenError',
    'SchemaError',
    'QueryError',
    'DecodeError',
    # Models
    'Project',
    'ProjectUpdate',
    # Store
    'ProjectStore',
]
