"""
Recent-projects store.

A ProjectStore owns one SQLite connection to a single database file and
exposes CRUD access to the projects table. It does no locking of its own:
callers sharing a store between threads must serialize access.
"""
import sqlite3
from typing import Iterable, List, Optional

from pydantic import ValidationError

from utils.config import CFG
from utils.logger import get_logger
from .connection import get_db_connection
from .errors import DecodeError, QueryError, SchemaError
from .models import Project, ProjectUpdate

logger = get_logger(__name__)

SCHEMA = """
    CREATE TABLE IF NOT EXISTS projects (
        id TEXT PRIMARY KEY,
        name TEXT NOT NULL,
        path TEXT NOT NULL,
        last_opened TEXT NOT NULL
    )
"""

_COLUMNS = "id, name, path, last_opened"


def _row_to_project(row) -> Project:
    """Build a Project from a row; a table created outside open() may hold NULLs."""
    try:
        return Project(**dict(row))
    except ValidationError as e:
        raise DecodeError(str(e)) from e


class ProjectStore:
    """Handle on a projects database; use ProjectStore.open() to create one."""

    def __init__(self, conn: sqlite3.Connection, db_path: str):
        self._conn = conn
        self.db_path = db_path
        self._closed = False

    @classmethod
    def open(cls, db_path: Optional[str] = None) -> "ProjectStore":
        """
        Open (creating if absent) the database at db_path and ensure the
        projects table exists. Safe to call on an already initialized file.

        Args:
            db_path: Path to the database file (defaults to CFG["database_path"])

        Returns:
            An open ProjectStore

        Raises:
            OpenError: If the file cannot be opened
            SchemaError: If the projects table cannot be created
        """
        if db_path is None:
            db_path = CFG["database_path"]
        conn = get_db_connection(
            db_path,
            timeout=float(CFG["db_timeout"]),
            enable_wal=CFG["enable_wal"],
        )
        try:
            conn.execute(SCHEMA)
            conn.commit()
        except sqlite3.Error as e:
            logger.error(f"Failed to initialize projects table in {db_path}: {e}")
            conn.close()
            raise SchemaError(str(e)) from e

        logger.info(f"Opened project store at {db_path}")
        return cls(conn, db_path)

    def close(self):
        """Release the connection. Calling close twice is a no-op."""
        if self._closed:
            return
        self._closed = True
        self._conn.close()
        logger.info(f"Closed project store at {self.db_path}")

    @property
    def closed(self) -> bool:
        return self._closed

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    def _rollback(self):
        try:
            self._conn.rollback()
        except sqlite3.Error as e:
            logger.warning(f"Rollback failed on {self.db_path}: {e}")

    def _query(self, sql, params=()) -> List[sqlite3.Row]:
        try:
            return self._conn.execute(sql, params).fetchall()
        except sqlite3.Error as e:
            logger.error(f"Query failed on {self.db_path}: {e}")
            raise QueryError(str(e)) from e

    def _write(self, sql, params=()) -> int:
        """Execute and commit a single write, returning the affected row count."""
        try:
            cur = self._conn.execute(sql, params)
            self._conn.commit()
            return cur.rowcount
        except sqlite3.Error as e:
            self._rollback()
            logger.error(f"Write failed on {self.db_path}: {e}")
            raise QueryError(str(e)) from e

    def upsert(self, project: Project) -> None:
        """Insert the project, or replace every column of the row with its id."""
        self._write(
            f"INSERT OR REPLACE INTO projects ({_COLUMNS}) VALUES (?, ?, ?, ?)",
            (project.id, project.name, project.path, project.last_opened),
        )
        logger.debug(f"Upserted project {project.id}")

    def delete(self, project_id: str) -> None:
        """Remove the project with this id. A missing id is not an error."""
        removed = self._write("DELETE FROM projects WHERE id = ?", (project_id,))
        logger.debug(f"Deleted project {project_id} ({removed} row(s))")

    def get(self, project_id: str) -> Optional[Project]:
        rows = self._query(
            f"SELECT {_COLUMNS} FROM projects WHERE id = ?", (project_id,)
        )
        return _row_to_project(rows[0]) if rows else None

    def list_all(self) -> List[Project]:
        """All projects, most recently opened first."""
        rows = self._query(
            f"SELECT {_COLUMNS} FROM projects ORDER BY last_opened DESC"
        )
        return [_row_to_project(row) for row in rows]

    def get_by_path(self, path: str) -> Optional[Project]:
        rows = self._query(
            f"SELECT {_COLUMNS} FROM projects WHERE path = ? "
            "ORDER BY last_opened DESC LIMIT 1",
            (path,),
        )
        return _row_to_project(rows[0]) if rows else None

    def record_opened(self, project: Project) -> Project:
        """
        Register that a project was opened.

        If a record already exists for project.path, only its last_opened is
        bumped (its id and name are kept). Otherwise the project is inserted.

        Returns:
            The project as now stored
        """
        existing = self.get_by_path(project.path)
        if existing is None:
            self.upsert(project)
            return project

        self._write(
            "UPDATE projects SET last_opened = ? WHERE id = ?",
            (project.last_opened, existing.id),
        )
        logger.debug(f"Bumped last_opened for project {existing.id}")
        return Project(
            id=existing.id,
            name=existing.name,
            path=existing.path,
            last_opened=project.last_opened,
        )

    def update(self, project_id: str, changes: Optional[ProjectUpdate] = None, **fields) -> Optional[Project]:
        """
        Patch the given fields of an existing project.

        Args:
            project_id: Project ID
            changes: ProjectUpdate with the fields to change
            **fields: Alternatively, name/path/last_opened as keyword arguments

        Returns:
            The updated project, or None if no project has this id

        Raises:
            TypeError: If both changes and keyword fields are given, or a
                keyword is not a project field
        """
        if changes is not None and fields:
            raise TypeError("Pass either a ProjectUpdate or keyword fields, not both")
        if changes is None:
            unknown = set(fields) - {"name", "path", "last_opened"}
            if unknown:
                raise TypeError(f"Unknown project fields: {sorted(unknown)}")
            changes = ProjectUpdate(**fields)

        existing = self.get(project_id)
        if existing is None:
            return None

        values = {
            "name": existing.name,
            "path": existing.path,
            "last_opened": existing.last_opened,
        }
        values.update(changes.changes())
        self._write(
            "UPDATE projects SET name = ?, path = ?, last_opened = ? WHERE id = ?",
            (values["name"], values["path"], values["last_opened"], project_id),
        )
        logger.debug(f"Updated project {project_id}: {sorted(changes.changes())}")
        return Project(id=project_id, **values)

    def replace_all(self, projects: Iterable[Project]) -> None:
        """Replace the whole table with projects in one transaction."""
        rows = [(p.id, p.name, p.path, p.last_opened) for p in projects]
        try:
            self._conn.execute("DELETE FROM projects")
            self._conn.executemany(
                f"INSERT OR REPLACE INTO projects ({_COLUMNS}) VALUES (?, ?, ?, ?)",
                rows,
            )
            self._conn.commit()
        except sqlite3.Error as e:
            self._rollback()
            logger.error(f"Replacing projects failed on {self.db_path}: {e}")
            raise QueryError(str(e)) from e
        logger.debug(f"Replaced project list with {len(rows)} project(s)")
