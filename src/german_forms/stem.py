"""Default German stemmer.

Wraps NLTK's Snowball German stemmer. The result is lowercase, "ß" is
rewritten as "ss" and umlauts are folded (Häuser -> haus), which is what the
endings in the default rule data expect.
"""

from collections.abc import Callable
from functools import lru_cache

from nltk.stem.snowball import GermanStemmer

Stemmer = Callable[[str], str]

_stemmer = GermanStemmer()


@lru_cache(maxsize=10000)
def stem(word: str) -> str:
    """Reduce a German word to its stem.

    Examples:
        >>> stem("Lehrer")
        'lehr'
        >>> stem("Städte")
        'stadt'
    """
    return _stemmer.stem(word)
