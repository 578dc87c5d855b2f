"""Regular suffix resolution and irregular stem changes.

Every function here returns a new tuple or list; the rule tables are never
modified.
"""

from collections.abc import Sequence

from german_forms.rules import NounRules, StemChange, SuffixRule, ends_with_any


def add_suffixes(
    additions: Sequence[SuffixRule],
    suffixes: Sequence[str],
    stem: str,
) -> tuple[str, ...]:
    """Append the suffixes of every addition rule triggered by the stem's ending."""
    result = tuple(suffixes)
    for rule in additions:
        if ends_with_any(stem, rule.trigger_endings):
            result = result + rule.suffixes
    return result


def remove_suffixes(
    deletions: Sequence[SuffixRule],
    suffixes: Sequence[str],
    stem: str,
) -> tuple[str, ...]:
    """Drop every occurrence of the suffixes of each deletion rule triggered by the stem."""
    result = tuple(suffixes)
    for rule in deletions:
        if ends_with_any(stem, rule.trigger_endings):
            result = tuple(suffix for suffix in result if suffix not in rule.suffixes)
    return result


def resolve_regular_suffixes(
    rules: NounRules,
    suffixes: Sequence[str],
    stem: str,
) -> tuple[str, ...]:
    """Tailor the regular suffix list to the stem's ending.

    All additions are applied before any deletion, so a deletion rule can
    cancel a suffix that an addition rule introduced. The result may contain
    duplicates.

    Example:
        >>> rules = NounRules((), (), ("", "e"), (), (SuffixRule("a", ("a",), ("e",)),), ())
        >>> resolve_regular_suffixes(rules, rules.regular_suffixes, "sofa")
        ('',)
    """
    suffixes = add_suffixes(rules.regular_suffix_additions, suffixes, stem)
    return remove_suffixes(rules.regular_suffix_deletions, suffixes, stem)


def change_stem_forms(changes: Sequence[StemChange], stem: str) -> list[str]:
    """Forms that replace a final ending instead of adding a suffix.

    Every matching change contributes one form, e.g. "arztinn" -> "arztin".
    """
    forms = []
    for change in changes:
        if stem.endswith(change.match_ending):
            without_ending = stem[: len(stem) - len(change.match_ending)]
            forms.append(without_ending + change.replacement_ending)
    return forms
