# stock/db.py
from __future__ import annotations
import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Iterator, Optional, Union

from stock.errors import (
    SchemaCreationError,
    StatementError,
    StorageOpenError,
    StoreNotInitializedError,
)

logger = logging.getLogger(__name__)

DEFAULT_DB_PATH = Path("stock.db")
SCHEMA_PATH = Path(__file__).resolve().parent / "schema.sql"

PathLike = Union[str, Path]


def connect(db_path: PathLike = DEFAULT_DB_PATH) -> sqlite3.Connection:
    db_path = Path(db_path)
    try:
        db_path.parent.mkdir(parents=True, exist_ok=True)
        conn = sqlite3.connect(str(db_path))
    except (OSError, sqlite3.Error) as e:
        logger.error("Could not open database %s: %s", db_path, e)
        raise StorageOpenError(f"Could not open database {db_path}: {e}") from e
    conn.row_factory = sqlite3.Row
    return conn


def init_db(conn: sqlite3.Connection) -> None:
    try:
        schema = SCHEMA_PATH.read_text(encoding="utf-8")
        conn.executescript(schema)
        conn.commit()
    except (OSError, sqlite3.Error) as e:
        logger.error("Could not create the products table: %s", e)
        raise SchemaCreationError(f"Could not create the products table: {e}") from e
    logger.debug("Products table ready")


def initialize(db_path: PathLike = DEFAULT_DB_PATH) -> sqlite3.Connection:
    """
    Open (creating if absent) the datastore at db_path and make sure the
    products table exists. The connection is closed again if the schema
    cannot be applied, so callers only ever receive a usable handle.
    """
    conn = connect(db_path)
    try:
        init_db(conn)
    except SchemaCreationError:
        conn.close()
        raise
    logger.info("Database initialized at %s", db_path)
    return conn


def close(conn: Optional[sqlite3.Connection]) -> None:
    if conn is None:
        return
    conn.close()
    logger.debug("Database connection closed")


def require_handle(conn: Optional[sqlite3.Connection]) -> sqlite3.Connection:
    if conn is None:
        raise StoreNotInitializedError()
    try:
        _ = conn.total_changes
    except sqlite3.ProgrammingError as e:
        # closed connection
        raise StoreNotInitializedError() from e
    return conn


@contextmanager
def statement(
    conn: Optional[sqlite3.Connection],
    action: str,
    sql: str,
    params: tuple = (),
    commit: bool = False,
) -> Iterator[sqlite3.Cursor]:
    """
    Run one parameterized statement and yield its cursor.

    The cursor is closed on every exit path. With commit=True the change is
    committed once the body finishes, or rolled back when it fails.
    sqlite3 errors surface as StatementError.
    """
    conn = require_handle(conn)
    cur: Optional[sqlite3.Cursor] = None
    try:
        cur = conn.execute(sql, params)
        yield cur
        if commit:
            conn.commit()
    except (sqlite3.Error, OverflowError) as e:
        # OverflowError: an int parameter outside the 64-bit INTEGER range
        if commit:
            conn.rollback()
        logger.error("Failed to %s: %s", action, e)
        raise StatementError(f"Failed to {action}: {e}") from e
    finally:
        if cur is not None:
            cur.close()


def exec_one(conn: Optional[sqlite3.Connection], action: str, sql: str, params: tuple = ()) -> Optional[Dict[str, Any]]:
    with statement(conn, action, sql, params) as cur:
        row = cur.fetchone()
    return dict(row) if row else None


def exec_all(conn: Optional[sqlite3.Connection], action: str, sql: str, params: tuple = ()) -> list[Dict[str, Any]]:
    with statement(conn, action, sql, params) as cur:
        rows = cur.fetchall()
    return [dict(r) for r in rows]


def exec_write(conn: Optional[sqlite3.Connection], action: str, sql: str, params: tuple = ()) -> tuple[Optional[int], int]:
    """Returns (lastrowid, rowcount) of the committed statement."""
    with statement(conn, action, sql, params, commit=True) as cur:
        result = (cur.lastrowid, cur.rowcount)
    return result
