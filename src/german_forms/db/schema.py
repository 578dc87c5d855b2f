"""Database schema definition using SQLAlchemy Core."""

from sqlalchemy import (
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.engine import Engine

metadata = MetaData()

# Indexed words with the stem computed for them
words = Table(
    "words",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("word", Text, nullable=False, unique=True),  # as given (e.g., "Hauptstadt")
    Column("stem", Text, nullable=False),  # stemmer output (e.g., "hauptstadt")
    # 'exception:full_form', 'exception:predictable_suffix' or 'regular'
    Column("origin", String(40), nullable=False),
)

# One row per generated form of a word
form_lookup = Table(
    "form_lookup",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("word_id", Integer, ForeignKey("words.id", ondelete="CASCADE"), nullable=False),
    Column("form", Text, nullable=False),  # generated form (e.g., "hauptstädte")
    Column("normalized", Text, nullable=False),  # case-folded form for matching
    UniqueConstraint("word_id", "form", name="uq_form_lookup_entry"),
)

Index("idx_form_lookup_normalized", form_lookup.c.normalized)
Index("idx_words_stem", words.c.stem)


def init_db(engine: Engine) -> None:
    """Initialize the database schema.

    Creates all tables and indexes if they don't exist.
    Safe to call multiple times.
    """
    metadata.create_all(engine)
