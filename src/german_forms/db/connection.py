"""SQLite engines for the form index.

One engine is kept per resolved database path, so the index builder, lookups
and the CLI's stats command share a connection pool within a process.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

from sqlalchemy import Connection, Engine, create_engine, event
from sqlalchemy.pool import ConnectionPoolEntry

logger = logging.getLogger(__name__)

DEFAULT_DB_PATH = Path("german_forms.db")

_engines: dict[Path, Engine] = {}


def _enable_foreign_keys(dbapi_connection: Any, _connection_record: ConnectionPoolEntry) -> None:
    """Turn on FK enforcement so deleting a word can't leave orphaned forms."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def get_engine(db_path: Path | str = DEFAULT_DB_PATH) -> Engine:
    """Return the engine for a form index, creating its directory if needed.

    "forms.db" and "./forms.db" resolve to the same engine.
    """
    key = Path(db_path).resolve()

    engine = _engines.get(key)
    if engine is None:
        key.parent.mkdir(parents=True, exist_ok=True)
        engine = create_engine(f"sqlite:///{key}", echo=False)
        event.listen(engine, "connect", _enable_foreign_keys)
        _engines[key] = engine
        logger.debug("Opened form index %s", key)

    return engine


def dispose_engine(db_path: Path | str) -> bool:
    """Close and forget the engine for db_path.

    Needed before deleting or replacing the database file. Returns False if no
    engine was open for that path.
    """
    engine = _engines.pop(Path(db_path).resolve(), None)
    if engine is None:
        return False
    engine.dispose()
    return True


@contextmanager
def get_connection(db_path: Path | str = DEFAULT_DB_PATH) -> Iterator[Connection]:
    """Yield a connection to the form index; commit on success, roll back on error.

    Example:
        with get_connection("forms.db") as conn:
            matches = lookup_form(conn, "Hauptstädte")
    """
    with get_engine(db_path).connect() as conn:
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise
