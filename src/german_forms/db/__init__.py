"""Database modules for the German form index."""

from german_forms.db.connection import (
    DEFAULT_DB_PATH,
    dispose_engine,
    get_connection,
    get_engine,
)
from german_forms.db.schema import form_lookup, init_db, metadata, words

__all__ = [
    "DEFAULT_DB_PATH",
    "dispose_engine",
    "form_lookup",
    "get_connection",
    "get_engine",
    "init_db",
    "metadata",
    "words",
]
