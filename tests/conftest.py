"""Shared fixtures for the German forms tests."""

import tempfile
from pathlib import Path

import pytest

from german_forms.db import dispose_engine, get_engine, init_db
from german_forms.rules import (
    FullFormException,
    NounRules,
    PredictableSuffixException,
    RuleData,
    StemChange,
    SuffixRule,
)
from german_forms.stem import Stemmer


@pytest.fixture
def identity_stemmer() -> Stemmer:
    """Treat the word as its own stem so tests control the stem exactly."""
    return lambda word: word


@pytest.fixture
def simple_rules() -> RuleData:
    """Small rule table with mixed-case endings, used with identity_stemmer."""
    return RuleData(
        nouns=NounRules(
            exception_stems_with_full_forms=(
                FullFormException(("stadt",), ("stadt", "städte")),
                FullFormException(("Kuh",), ("Kuh", "Kühe")),
                FullFormException(("dt",), ("dt", "dte")),
            ),
            exceptions_stems_predictable_suffixes=(
                PredictableSuffixException(
                    "nis",
                    stem_endings=("nis",),
                    suffixes=("se", "sen"),
                    exclusion_endings=("Tennis",),
                ),
                PredictableSuffixException(
                    "ung",
                    stem_endings=("ung",),
                    suffixes=("en",),
                ),
            ),
            regular_suffixes=("", "s", "n"),
            regular_suffix_additions=(SuffixRule("in", ("in",), ("nen",)),),
            regular_suffix_deletions=(SuffixRule("in", ("in",), ("n", "s")),),
            change_stem=(StemChange("inn", "inn", "in"),),
        )
    )


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        db_path = Path(f.name)

    try:
        engine = get_engine(db_path)
        init_db(engine)
        yield db_path
    finally:
        dispose_engine(db_path)
        db_path.unlink(missing_ok=True)
