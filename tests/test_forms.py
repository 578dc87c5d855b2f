"""Tests for the form generator."""

from german_forms import DEFAULT_RULES, FormOrigin, get_forms
from german_forms.rules import NounRules, RuleData
from german_forms.stem import Stemmer


class TestGetFormsExceptions:
    """Tests for get_forms when the stem is on an exception list."""

    def test_compound_full_form_exception(
        self, simple_rules: RuleData, identity_stemmer: Stemmer
    ) -> None:
        result = get_forms("Hauptstadt", simple_rules, stemmer=identity_stemmer)
        assert result.stem == "Hauptstadt"
        assert result.origin == FormOrigin.FULL_FORM_EXCEPTION
        assert set(result.forms) == {"Hauptstadt", "Hauptstädte"}

    def test_original_word_is_added(self, simple_rules: RuleData) -> None:
        """Test that the raw word is kept even when it differs from the stem."""
        result = get_forms("Hauptstädte", simple_rules, stemmer=lambda word: "Hauptstadt")
        assert set(result.forms) == {"Hauptstadt", "Hauptstädte"}
        assert result.forms.count("Hauptstädte") == 1

    def test_original_word_added_when_not_generated(self, simple_rules: RuleData) -> None:
        result = get_forms("HAUPTSTADT", simple_rules, stemmer=lambda word: "hauptstadt")
        assert "HAUPTSTADT" in result.forms

    def test_predictable_suffix_exception(
        self, simple_rules: RuleData, identity_stemmer: Stemmer
    ) -> None:
        result = get_forms("Zeitung", simple_rules, stemmer=identity_stemmer)
        assert result.origin == FormOrigin.PREDICTABLE_SUFFIX_EXCEPTION
        assert set(result.forms) == {"Zeitung", "Zeitungen"}

    def test_exceptions_bypass_regular_suffixes(
        self, simple_rules: RuleData, identity_stemmer: Stemmer
    ) -> None:
        result = get_forms("Ergebnis", simple_rules, stemmer=identity_stemmer)
        assert set(result.forms) == {"Ergebnis", "Ergebnisse", "Ergebnissen"}
        assert "Ergebniss" not in result.forms

    def test_stem_equal_to_exception(
        self, simple_rules: RuleData, identity_stemmer: Stemmer
    ) -> None:
        result = get_forms("Kuh", simple_rules, stemmer=identity_stemmer)
        assert set(result.forms) == {"Kuh", "Kühe"}


class TestGetFormsRegular:
    """Tests for get_forms on regular words."""

    def test_regular_suffixes(self, simple_rules: RuleData, identity_stemmer: Stemmer) -> None:
        result = get_forms("Lehrer", simple_rules, stemmer=identity_stemmer)
        assert result.origin == FormOrigin.REGULAR
        assert set(result.forms) == {"Lehrer", "Lehrers", "Lehrern"}

    def test_addition_and_deletion(self, simple_rules: RuleData, identity_stemmer: Stemmer) -> None:
        result = get_forms("Lehrerin", simple_rules, stemmer=identity_stemmer)
        assert set(result.forms) == {"Lehrerin", "Lehrerinnen"}

    def test_stem_change_forms_added(
        self, simple_rules: RuleData, identity_stemmer: Stemmer
    ) -> None:
        result = get_forms("Ärztinn", simple_rules, stemmer=identity_stemmer)
        assert "Ärztin" in result.forms
        assert "Ärztinns" in result.forms

    def test_excluded_predictable_stem_is_regular(
        self, simple_rules: RuleData, identity_stemmer: Stemmer
    ) -> None:
        result = get_forms("Tennis", simple_rules, stemmer=identity_stemmer)
        assert result.origin == FormOrigin.REGULAR
        assert set(result.forms) == {"Tennis", "Tenniss", "Tennisn"}

    def test_stem_included_without_empty_suffix(self, identity_stemmer: Stemmer) -> None:
        rules = RuleData(
            nouns=NounRules(
                exception_stems_with_full_forms=(),
                exceptions_stems_predictable_suffixes=(),
                regular_suffixes=("e",),
                regular_suffix_additions=(),
                regular_suffix_deletions=(),
                change_stem=(),
            )
        )
        result = get_forms("Hund", rules, stemmer=identity_stemmer)
        assert set(result.forms) == {"Hund", "Hunde"}

    def test_forms_are_unique(self, simple_rules: RuleData, identity_stemmer: Stemmer) -> None:
        result = get_forms("Lehrer", simple_rules, stemmer=identity_stemmer)
        assert len(result.forms) == len(set(result.forms))

    def test_original_word_added_to_regular_forms(self, simple_rules: RuleData) -> None:
        result = get_forms("Lehrer", simple_rules, stemmer=str.lower)
        assert result.stem == "lehrer"
        assert set(result.forms) == {"Lehrer", "lehrer", "lehrers", "lehrern"}

    def test_repeated_calls_agree(self, simple_rules: RuleData, identity_stemmer: Stemmer) -> None:
        first = get_forms("Lehrerin", simple_rules, stemmer=identity_stemmer)
        second = get_forms("Lehrerin", simple_rules, stemmer=identity_stemmer)
        assert set(first.forms) == set(second.forms)
        assert first.stem == second.stem


class TestGetFormsDefaultRules:
    """Tests for get_forms with the built-in rules and the Snowball stemmer."""

    def test_compound_stadt(self) -> None:
        result = get_forms("Hauptstadt", DEFAULT_RULES)
        assert result.stem == "hauptstadt"
        assert result.origin == FormOrigin.FULL_FORM_EXCEPTION
        assert {"hauptstadt", "hauptstädte", "Hauptstadt"} <= set(result.forms)

    def test_plural_input_finds_exception(self) -> None:
        result = get_forms("Häuser", DEFAULT_RULES)
        assert result.stem == "haus"
        assert {"haus", "häuser", "Häuser"} <= set(result.forms)

    def test_nis_plural(self) -> None:
        result = get_forms("Ergebnisse", DEFAULT_RULES)
        assert result.stem == "ergebnis"
        assert result.origin == FormOrigin.PREDICTABLE_SUFFIX_EXCEPTION
        assert {"ergebnis", "ergebnisse", "ergebnissen"} <= set(result.forms)

    def test_tennis_is_excluded(self) -> None:
        result = get_forms("Tennis", DEFAULT_RULES)
        assert result.origin == FormOrigin.REGULAR

    def test_feminine_plural_stem_change(self) -> None:
        result = get_forms("Lehrerinnen", DEFAULT_RULES)
        assert result.stem == "lehrerinn"
        assert "lehrerin" in result.forms

    def test_common_plurals_and_input_word(self) -> None:
        """Test that the input, its lowercase spelling and the usual plural are generated."""
        cases = [
            ("Maschine", "maschinen"),
            ("Wein", "weine"),
            ("Termin", "termine"),
            ("Lehrer", "lehrern"),
            ("Kind", "kinder"),
            ("Auto", "autos"),
            ("Freiheit", "freiheiten"),
            ("Zeitung", "zeitungen"),
            ("Lehrerin", "lehrerinnen"),
        ]
        for word, plural in cases:
            forms = get_forms(word, DEFAULT_RULES).forms
            assert word in forms, word
            assert word.casefold() in forms, word
            assert plural in forms, word

    def test_words_ending_in_in_keep_their_stem(self) -> None:
        """Test that -in endings other than the feminine suffix get regular forms."""
        maschine = get_forms("Maschine", DEFAULT_RULES)
        assert maschine.stem == "maschin"
        assert {"maschine", "maschinen"} <= set(maschine.forms)

        assert "weine" in get_forms("Wein", DEFAULT_RULES).forms
        assert "termine" in get_forms("Termin", DEFAULT_RULES).forms

    def test_plural_input_is_kept(self) -> None:
        result = get_forms("Weine", DEFAULT_RULES)
        assert result.stem == "wein"
        assert {"Weine", "wein", "weine"} <= set(result.forms)

    def test_feminine_in_plural(self) -> None:
        result = get_forms("Lehrerin", DEFAULT_RULES)
        assert "lehrerinnen" in result.forms
        assert "lehrerine" not in result.forms

    def test_regular_word_is_kept_as_written(self) -> None:
        result = get_forms("Lehrer", DEFAULT_RULES)
        assert result.origin == FormOrigin.REGULAR
        assert result.forms[0] == "Lehrer"

    def test_decomposed_umlaut_is_composed(self) -> None:
        """Test that "a" + combining diaeresis stems the same as a precomposed "ä"."""
        result = get_forms("Sta\u0308dte", DEFAULT_RULES)
        assert result.stem == "stadt"
        assert result.origin == FormOrigin.FULL_FORM_EXCEPTION
        assert "St\u00e4dte" in result.forms
        assert "Sta\u0308dte" not in result.forms
