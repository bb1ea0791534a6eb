from dotenv import load_dotenv
import os

# Load .env from project root (if present). This populates os.environ.
load_dotenv(".env")

def _int_env(name, default):
    v = os.getenv(name)
    try:
        return int(v) if v is not None else default
    except Exception:
        return default

def _bool_env(name, default):
    v = os.getenv(name)
    if v is None:
        return default
    return v.lower() in ("1", "true", "yes")

# Expose a CFG dictionary for the rest of the app
CFG = {
    # location of the recent-projects database file
    "database_path": os.path.expanduser(
        os.getenv("DATABASE_PATH", "~/.projectstore/projects.db")
    ),

    # seconds to wait on a locked database file (also used for busy_timeout)
    "db_timeout": _int_env("DB_TIMEOUT", 30),
    "enable_wal": _bool_env("DB_ENABLE_WAL", True),

    "log_level": os.getenv("LOG_LEVEL", "INFO").upper(),
}
