"""Store generated forms in a lookup table.

Indexing a word list lets a caller ask which indexed words a surface form
belongs to (e.g. "Hauptstädte" -> "Hauptstadt") without re-running the
generator over the whole list.
"""

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from sqlalchemy import Connection, delete, insert, select

from german_forms.db.schema import form_lookup, words
from german_forms.forms import get_forms
from german_forms.normalize import normalize
from german_forms.rules import RuleData
from german_forms.stem import Stemmer, stem

logger = logging.getLogger(__name__)


@dataclass
class FormIndexStats:
    """Statistics from building the form index."""

    total: int = 0
    indexed: int = 0
    replaced: int = 0
    forms: int = 0
    duplicates: int = 0


@dataclass(frozen=True)
class FormMatch:
    """An indexed word that the looked-up form was generated from."""

    word: str
    stem: str
    origin: str


def build_form_index(
    conn: Connection,
    word_list: Iterable[str],
    rule_data: RuleData,
    *,
    stemmer: Stemmer = stem,
    progress_callback: Callable[[int, int], None] | None = None,
) -> FormIndexStats:
    """Generate forms for every word and store them in the database.

    Re-indexing a word replaces its previous forms, so running the index
    twice over the same list is idempotent.

    Args:
        conn: SQLAlchemy connection
        word_list: Words to index; repeated words are indexed once
        rule_data: German morphology data
        stemmer: Function reducing a word to its stem
        progress_callback: Optional callback for progress reporting (current, total)

    Returns:
        FormIndexStats with:
        - total: Number of words given
        - indexed: Distinct words written
        - replaced: Words that were already indexed and got re-generated
        - forms: Form rows written
        - duplicates: Repeated words skipped
    """
    all_words = list(word_list)
    unique_words = list(dict.fromkeys(all_words))
    stats = FormIndexStats(total=len(all_words), duplicates=len(all_words) - len(unique_words))

    for idx, word in enumerate(unique_words, 1):
        if progress_callback and idx % 1000 == 0:
            progress_callback(idx, len(unique_words))

        existing = conn.execute(select(words.c.id).where(words.c.word == word)).scalar()
        if existing is not None:
            conn.execute(delete(form_lookup).where(form_lookup.c.word_id == existing))
            conn.execute(delete(words).where(words.c.id == existing))
            stats.replaced += 1

        result = get_forms(word, rule_data, stemmer=stemmer)
        word_id = conn.execute(
            insert(words).values(word=word, stem=result.stem, origin=str(result.origin))
        ).inserted_primary_key[0]

        conn.execute(
            insert(form_lookup),
            [
                {"word_id": word_id, "form": form, "normalized": normalize(form)}
                for form in result.forms
            ],
        )
        stats.indexed += 1
        stats.forms += len(result.forms)

    if progress_callback and unique_words:
        progress_callback(len(unique_words), len(unique_words))

    logger.info("Indexed %d words with %d forms", stats.indexed, stats.forms)
    return stats


def lookup_form(conn: Connection, form: str) -> list[FormMatch]:
    """Find the indexed words that have the given form.

    Matching is case-insensitive (see normalize()).
    """
    result = conn.execute(
        select(words.c.word, words.c.stem, words.c.origin)
        .distinct()
        .join(form_lookup, form_lookup.c.word_id == words.c.id)
        .where(form_lookup.c.normalized == normalize(form))
        .order_by(words.c.word)
    )
    return [FormMatch(word=row.word, stem=row.stem, origin=row.origin) for row in result]
