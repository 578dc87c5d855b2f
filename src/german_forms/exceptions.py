"""Exception lists that override the regular suffix rules.

Two kinds of exceptions are checked, in this order:

1. Stems with full forms: the forms are listed verbatim (Stadt, Städte).
2. Stems with predictable suffixes: a fixed set of suffixes replaces the
   regular list (Ergebnis, Ergebnisse).

The first check with a non-empty result wins.
"""

import logging
from collections.abc import Callable, Sequence

from german_forms.enums import FormOrigin
from german_forms.rules import (
    FullFormException,
    NounRules,
    PredictableSuffixException,
    ends_with_any,
)

logger = logging.getLogger(__name__)


def check_full_form_exceptions(
    exceptions: Sequence[FullFormException],
    stem: str,
) -> list[str]:
    """Return the full forms of the first exception whose ending matches the stem.

    If the stem is a compound, i.e. the matched ending leaves some lexical
    material in front of it, the listed forms are appended to that material:
    "hauptstadt" minus "stadt" leaves "haupt", giving "hauptstädte".

    Examples:
        >>> stadt = FullFormException(("stadt",), ("stadt", "städte"))
        >>> check_full_form_exceptions([stadt], "stadt")
        ['stadt', 'städte']
        >>> check_full_form_exceptions([stadt], "hauptstadt")
        ['hauptstadt', 'hauptstädte']
        >>> check_full_form_exceptions([stadt], "dorf")
        []
    """
    for exception in exceptions:
        for ending in exception.stem_endings:
            if not stem.endswith(ending):
                continue

            preceding = stem[: len(stem) - len(ending)]
            if preceding:
                return [preceding + form for form in exception.full_forms]
            # The stem is the exception itself
            return list(exception.full_forms)

    return []


def check_predictable_suffix_exceptions(
    categories: Sequence[PredictableSuffixException],
    stem: str,
) -> list[str]:
    """Return the stem with each category suffix appended, plus the bare stem.

    A category is skipped when the stem ends with one of its exclusion endings.
    """
    for category in categories:
        if ends_with_any(stem, category.exclusion_endings):
            continue

        if ends_with_any(stem, category.stem_endings):
            # The stem is the singular form for these words
            return [stem + suffix for suffix in category.suffixes] + [stem]

    return []


ExceptionCheck = Callable[[NounRules, str], list[str]]

# Earlier checks take priority
EXCEPTION_CHECKS: tuple[tuple[FormOrigin, ExceptionCheck], ...] = (
    (
        FormOrigin.FULL_FORM_EXCEPTION,
        lambda rules, stem: check_full_form_exceptions(
            rules.exception_stems_with_full_forms, stem
        ),
    ),
    (
        FormOrigin.PREDICTABLE_SUFFIX_EXCEPTION,
        lambda rules, stem: check_predictable_suffix_exceptions(
            rules.exceptions_stems_predictable_suffixes, stem
        ),
    ),
)


def check_exceptions(rules: NounRules, stem: str) -> tuple[list[str], FormOrigin | None]:
    """Check the stem against all exception lists.

    Returns:
        Tuple of (forms, origin). forms is empty and origin is None when the
        stem is not an exception.
    """
    for origin, check in EXCEPTION_CHECKS:
        forms = check(rules, stem)
        if forms:
            logger.debug("Stem %r matched %s", stem, origin)
            return forms, origin

    return [], None
