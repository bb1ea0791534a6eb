"""
Database connection utilities.
Provides consistent connection configuration for the project store.
"""
import os
import sqlite3

from utils.logger import get_logger
from .errors import OpenError

logger = get_logger(__name__)


def get_db_connection(
    db_path: str,
    timeout: float = 30.0,
    enable_wal: bool = True,
    row_factory: bool = True
) -> sqlite3.Connection:
    """
    Create a database connection with consistent configuration.
    
    The parent directory of db_path is created if it does not exist.
    
    Args:
        db_path: Path to the SQLite database file
        timeout: Timeout in seconds for waiting on locks (default: 30.0)
        enable_wal: Enable Write-Ahead Logging mode (default: True)
        row_factory: Use sqlite3.Row factory for dict-like access (default: True)
        
    Returns:
        sqlite3.Connection object
        
    Raises:
        OpenError: If the directory or the database file cannot be opened
    """
    dirname = os.path.dirname(os.path.abspath(db_path))
    try:
        if dirname and not os.path.isdir(dirname):
            os.makedirs(dirname, exist_ok=True)
        # callers serialize access themselves, so the handle may cross threads
        conn = sqlite3.connect(db_path, timeout=timeout, check_same_thread=False)
    except (OSError, sqlite3.Error) as e:
        logger.error(f"Failed to open database {db_path}: {e}")
        raise OpenError(str(e)) from e
    
    if row_factory:
        conn.row_factory = sqlite3.Row
    
    if enable_wal:
        try:
            conn.execute("PRAGMA journal_mode = WAL;")
        except sqlite3.Error as e:
            logger.warning(f"Failed to enable WAL mode: {e}")
    
    try:
        conn.execute(f"PRAGMA busy_timeout = {int(timeout * 1000)};")
    except sqlite3.Error as e:
        logger.warning(f"Failed to set busy_timeout: {e}")
    
    return conn

