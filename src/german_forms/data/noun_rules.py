"""Default German noun rules.

Stems produced by the default stemmer are lowercase and have umlauts folded
(städte -> stadt), so every ending below is written in that form. Full forms
and suffixes are surface spellings and keep their umlauts.
"""

from german_forms.rules import (
    FullFormException,
    NounRules,
    PredictableSuffixException,
    RuleData,
    StemChange,
    SuffixRule,
)

# Checked in order; the first matching ending wins.
# Stems ending in one of these are often compounds ("hauptstadt", "krankenhaus"),
# in which case the forms are appended to the leading material.
EXCEPTION_STEMS_WITH_FULL_FORMS = (
    FullFormException(("stadt",), ("stadt", "städte", "städten")),
    FullFormException(("haus",), ("haus", "hauses", "hause", "häuser", "häusern")),
    FullFormException(("mutt",), ("mutter", "mütter", "müttern")),
    FullFormException(("brud",), ("bruder", "bruders", "brüder", "brüdern")),
    FullFormException(("toch",), ("tochter", "töchter", "töchtern")),
    FullFormException(("kuh",), ("kuh", "kühe", "kühen")),
    FullFormException(("baum",), ("baum", "baumes", "baums", "bäume", "bäumen")),
)

EXCEPTIONS_STEMS_PREDICTABLE_SUFFIXES = (
    # Ergebnis -> Ergebnisse, Ergebnisses, Ergebnissen
    PredictableSuffixException(
        "nis",
        stem_endings=("nis",),
        suffixes=("se", "ses", "sen"),
        exclusion_endings=("tennis",),
    ),
    # Feminine abstracts only ever take -en in the plural
    PredictableSuffixException(
        "feminine_abstract",
        stem_endings=("heit", "keit", "schaft", "ung", "ion", "itat"),
        suffixes=("en",),
    ),
)

REGULAR_SUFFIXES = ("", "e", "en", "n", "s", "es", "er", "ern", "ens")

# Stems of feminine -in nouns (Lehrerin, Studentin, Freundin, Ärztin, Königin).
# A bare "in" would also match Maschine (maschin), Wein and Termin.
FEMININE_IN_ENDINGS = ("erin", "entin", "ndin", "arztin", "igin")

REGULAR_SUFFIX_ADDITIONS = (
    # Lehrerin -> Lehrerinnen
    SuffixRule("feminine_in", trigger_endings=FEMININE_IN_ENDINGS, suffixes=("nen",)),
    # Schema -> Schemata
    SuffixRule("greek_ma", trigger_endings=("ma",), suffixes=("ta",)),
)

REGULAR_SUFFIX_DELETIONS = (
    SuffixRule(
        "vowel_final",
        trigger_endings=("a", "i", "o", "u", "y"),
        suffixes=("e", "es", "er", "ern", "ens"),
    ),
    SuffixRule(
        "feminine_in",
        trigger_endings=FEMININE_IN_ENDINGS,
        suffixes=("e", "en", "n", "es", "er", "ern", "ens"),
    ),
)

CHANGE_STEM = (
    # Ärztinnen is stemmed to "arztinn"
    StemChange("feminine_inn", match_ending="inn", replacement_ending="in"),
    # Zentren is stemmed to "zentr"
    StemChange("latin_trum", match_ending="tr", replacement_ending="trum"),
)

DEFAULT_RULES = RuleData(
    nouns=NounRules(
        exception_stems_with_full_forms=EXCEPTION_STEMS_WITH_FULL_FORMS,
        exceptions_stems_predictable_suffixes=EXCEPTIONS_STEMS_PREDICTABLE_SUFFIXES,
        regular_suffixes=REGULAR_SUFFIXES,
        regular_suffix_additions=REGULAR_SUFFIX_ADDITIONS,
        regular_suffix_deletions=REGULAR_SUFFIX_DELETIONS,
        change_stem=CHANGE_STEM,
    )
)
