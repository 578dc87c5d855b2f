"""Generate the surface forms of a German noun.

The generator is recall-oriented: it produces forms that plausibly belong to
the same noun so that text matching can treat "Hauptstadt" and "Hauptstädte"
as the same word. It is not a grammatically complete decliner.
"""

import logging
import unicodedata
from collections.abc import Iterable
from dataclasses import dataclass

from german_forms.enums import FormOrigin
from german_forms.exceptions import check_exceptions
from german_forms.rules import RuleData
from german_forms.stem import Stemmer, stem
from german_forms.suffixes import change_stem_forms, resolve_regular_suffixes

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FormsResult:
    """Forms generated for a word, together with its stem.

    forms is deduplicated and keeps first-seen order; treat it as a set.
    """

    forms: tuple[str, ...]
    stem: str
    origin: FormOrigin


def _unique(forms: Iterable[str]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(forms))


def get_forms(word: str, rule_data: RuleData, stemmer: Stemmer = stem) -> FormsResult:
    """Create the morphological forms of a German noun.

    Args:
        word: The word to create the forms for (e.g., "Hauptstadt")
        rule_data: German morphology data
        stemmer: Function reducing a word to its stem

    Returns:
        FormsResult with the forms, the stem and which branch produced them.
        The forms always include the original word, NFC-composed so that "a"
        followed by a combining diaeresis is read as "ä".

    With regular suffixes ("", "s", "n") and no matching exception, the stem
    "Lehrer" yields Lehrer, Lehrers and Lehrern.
    """
    nouns = rule_data.nouns
    word = unicodedata.normalize("NFC", word)
    stemmed = stemmer(word)

    exceptions, origin = check_exceptions(nouns, stemmed)
    if origin is not None:
        # Keep the original word as a safeguard
        return FormsResult(forms=_unique([*exceptions, word]), stem=stemmed, origin=origin)

    suffixes = resolve_regular_suffixes(nouns, nouns.regular_suffixes, stemmed)

    # The original word comes first; the stemmer may have lowercased it
    forms = [word]
    forms.extend(stemmed + suffix for suffix in suffixes)
    # The stem might be a valid word form on its own
    forms.append(stemmed)
    # Changes that aren't concatenations, e.g. "arztinn" -> "arztin"
    forms.extend(change_stem_forms(nouns.change_stem, stemmed))

    logger.debug("Generated %d regular forms for %r (stem %r)", len(forms), word, stemmed)
    return FormsResult(forms=_unique(forms), stem=stemmed, origin=FormOrigin.REGULAR)
