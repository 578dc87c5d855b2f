"""Rule data structures for German noun form generation.

The tables are plain frozen dataclasses holding tuples so they can be shared
between callers without copying. Categories that behave as ordered rule sets
(earlier entries win) are tuples of named entries rather than dicts.

The JSON shape understood by RuleData.from_mapping() mirrors the morphology
data files distributed for German:

    {
        "nouns": {
            "exceptionStemsWithFullForms": [[["stadt"], ["stadt", "städte"]], ...],
            "exceptionsStemsPredictableSuffixes": {"name": [[endings], [suffixes], [exclusions]]},
            "regularSuffixes": ["", "e", ...],
            "regularSuffixAdditions": {"name": [[endings], [suffixes]]},
            "regularSuffixDeletions": {"name": [[endings], [suffixes]]},
            "changeStem": {"name": ["inn", "in"]}
        }
    }
"""

import json
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any


def ends_with_any(word: str, endings: Iterable[str]) -> bool:
    """Return True if word ends with at least one of the endings."""
    return any(word.endswith(ending) for ending in endings)


@dataclass(frozen=True)
class FullFormException:
    """Stem endings whose forms are listed in full.

    When the stem has material in front of the matched ending (a compound such
    as "Hauptstadt"), full_forms are appended to that material instead.
    """

    stem_endings: tuple[str, ...]
    full_forms: tuple[str, ...]


@dataclass(frozen=True)
class PredictableSuffixException:
    """Stem endings that take a fixed set of suffixes instead of the regular ones."""

    name: str
    stem_endings: tuple[str, ...]
    suffixes: tuple[str, ...]
    exclusion_endings: tuple[str, ...] = ()


@dataclass(frozen=True)
class SuffixRule:
    """Suffixes added to (or removed from) the regular list when a trigger ending matches."""

    name: str
    trigger_endings: tuple[str, ...]
    suffixes: tuple[str, ...]


@dataclass(frozen=True)
class StemChange:
    """Replace a final match_ending with replacement_ending (e.g. Ärztinn -> Ärztin)."""

    name: str
    match_ending: str
    replacement_ending: str


@dataclass(frozen=True)
class NounRules:
    """All noun tables used by the form generator."""

    exception_stems_with_full_forms: tuple[FullFormException, ...]
    exceptions_stems_predictable_suffixes: tuple[PredictableSuffixException, ...]
    regular_suffixes: tuple[str, ...]
    regular_suffix_additions: tuple[SuffixRule, ...]
    regular_suffix_deletions: tuple[SuffixRule, ...]
    change_stem: tuple[StemChange, ...]

    @classmethod
    def from_mapping(cls, nouns: Mapping[str, Any]) -> "NounRules":
        """Build noun rules from the JSON-shaped "nouns" mapping.

        Mapping key order is kept as rule precedence. No validation is done:
        missing keys raise KeyError, wrongly shaped entries raise
        TypeError/ValueError.
        """
        return cls(
            exception_stems_with_full_forms=tuple(
                FullFormException(tuple(endings), tuple(forms))
                for endings, forms in nouns["exceptionStemsWithFullForms"]
            ),
            exceptions_stems_predictable_suffixes=tuple(
                PredictableSuffixException(name, tuple(endings), tuple(suffixes), tuple(exclusions))
                for name, (endings, suffixes, exclusions) in nouns[
                    "exceptionsStemsPredictableSuffixes"
                ].items()
            ),
            regular_suffixes=tuple(nouns["regularSuffixes"]),
            regular_suffix_additions=_suffix_rules(nouns["regularSuffixAdditions"]),
            regular_suffix_deletions=_suffix_rules(nouns["regularSuffixDeletions"]),
            change_stem=tuple(
                StemChange(name, match, replacement)
                for name, (match, replacement) in nouns["changeStem"].items()
            ),
        )


def _suffix_rules(categories: Mapping[str, Sequence[Sequence[str]]]) -> tuple[SuffixRule, ...]:
    return tuple(
        SuffixRule(name, tuple(endings), tuple(suffixes))
        for name, (endings, suffixes) in categories.items()
    )


@dataclass(frozen=True)
class RuleData:
    """Morphology data for German. Only nouns are covered."""

    nouns: NounRules

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "RuleData":
        """Build rule data from a parsed morphology JSON document."""
        return cls(nouns=NounRules.from_mapping(data["nouns"]))


def load_rule_data(path: Path | str) -> RuleData:
    """Read a morphology JSON file and convert it to RuleData."""
    with Path(path).open(encoding="utf-8") as f:
        return RuleData.from_mapping(json.load(f))
