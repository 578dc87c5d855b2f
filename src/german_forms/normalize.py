"""Text normalization utilities for matching German word forms."""

import unicodedata


def normalize(text: str) -> str:
    """Normalize German text for matching/lookup.

    Composes combining characters and case-folds, which also rewrites "ß"
    as "ss". Umlauts are kept since they distinguish forms (Mutter, Mütter).

    Examples:
        >>> normalize("Städte")
        'städte'
        >>> normalize("Straße")
        'strasse'
    """
    return unicodedata.normalize("NFC", text).casefold()


def tokenize(text: str) -> list[str]:
    """Split German text into word tokens.

    Keeps the original case and hyphens inside words (E-Mail). Does NOT
    normalize (use normalize() separately if needed).

    Examples:
        >>> tokenize("Die Hauptstädte, die E-Mail.")
        ['Die', 'Hauptstädte', 'die', 'E-Mail']
    """
    result: list[str] = []
    current_word: list[str] = []

    for char in unicodedata.normalize("NFC", text):
        if char.isalpha() or char == "-":
            current_word.append(char)
        else:
            if current_word:
                word = "".join(current_word).strip("-")
                if word:
                    result.append(word)
                current_word = []

    # Don't forget the last word
    if current_word:
        word = "".join(current_word).strip("-")
        if word:
            result.append(word)

    return result
