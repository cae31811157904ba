"""Opening database connections for command-line use.

The introspection classes never open connections themselves; this module is
what the CLI uses to get one from a path.
"""

import logging
import sqlite3
from enum import Enum
from pathlib import Path
from typing import Any

from ..errors import ConnectionError

logger = logging.getLogger(__name__)

DUCKDB_SUFFIXES = {".duckdb", ".ddb"}


class Backend(str, Enum):
    """Supported database backends."""
    AUTO = "auto"
    SQLITE = "sqlite"
    DUCKDB = "duckdb"


def detect_backend(database: str) -> Backend:
    """Guess the backend from a database path or URL.

    Args:
        database: Path, ``:memory:`` or ``duckdb:///path`` / ``sqlite:///path``

    Returns:
        DUCKDB for ``duckdb:`` URLs and .duckdb/.ddb files, SQLITE otherwise
    """
    if database.startswith("duckdb:"):
        return Backend.DUCKDB
    if database.startswith("sqlite:"):
        return Backend.SQLITE
    if Path(database).suffix.lower() in DUCKDB_SUFFIXES:
        return Backend.DUCKDB
    return Backend.SQLITE


def _strip_url(database: str) -> str:
    """Remove a ``scheme:///`` prefix and query parameters."""
    for prefix in ("duckdb:///", "duckdb://", "sqlite:///", "sqlite://"):
        if database.startswith(prefix):
            database = database[len(prefix):]
            break
    if "?" in database:
        database = database.split("?")[0]
    return database or ":memory:"


def open_connection(database: str, backend: Backend = Backend.AUTO, read_only: bool = True) -> Any:
    """Open a connection; the caller is responsible for closing it.

    Args:
        database: Path to the database file, or a URL
        backend: Backend to use; AUTO guesses from the path
        read_only: Open in read-only mode

    Returns:
        A sqlite3 or duckdb connection
    """
    backend = Backend(backend)
    if backend == Backend.AUTO:
        backend = detect_backend(database)
    path = _strip_url(database)

    if path != ":memory:" and not Path(path).exists():
        raise ConnectionError(f"Database file not found: {path}", details={"database": path})

    logger.debug("Opening %s database %s (read_only=%s)", backend.value, path, read_only)
    if backend == Backend.DUCKDB:
        return _connect_duckdb(path, read_only)
    return _connect_sqlite(path, read_only)


def _connect_sqlite(path: str, read_only: bool) -> sqlite3.Connection:
    try:
        if read_only and path != ":memory:":
            return sqlite3.connect(f"{Path(path).resolve().as_uri()}?mode=ro", uri=True)
        return sqlite3.connect(path)
    except sqlite3.Error as e:
        raise ConnectionError(f"Cannot open SQLite database {path}: {e}", details={"database": path}) from e


def _connect_duckdb(path: str, read_only: bool) -> Any:
    try:
        import duckdb
    except ImportError:
        raise ImportError(
            "duckdb is required. "
            "Install it with: pip install duckdb"
        )

    try:
        if path == ":memory:":
            return duckdb.connect(":memory:")
        return duckdb.connect(path, read_only=read_only)
    except duckdb.Error as e:
        raise ConnectionError(f"Cannot open DuckDB database {path}: {e}", details={"database": path}) from e
