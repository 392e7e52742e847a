"""Word extraction and normalisation used by the profanity checker."""

from __future__ import annotations

import re
from collections.abc import Iterable

WORD_REGEX = re.compile(r"\b[\w']+\b", re.IGNORECASE)

# Characters that are commonly used to disguise letters, with the letters they
# may stand for. An empty tuple means the character is kept as it is.
CHAR_REPLACEMENTS: dict[str, tuple[str, ...]] = {
    "0": ("о", "о"),
    "1": ("і", "l", "ӏ", "|"),
    "3": ("е", "з", "э", "€"),
    "4": ("ч", "ҷ", "ћ"),
    "5": ("ѕ", "s", "$"),
    "6": ("б", "b"),
    "7": ("т", "t"),
    "8": ("в", "ъ"),
    "9": ("д", "g"),
    "@": ("а", "a"),
    "$": ("ѕ", "s"),
    "!": ("і", "i"),
    "*": (),
    "#": (),
    "ё": ("е",),
    "ў": ("у",),
    "ї": ("i",),
    "a": ("а", "@"),
    "b": ("б", "6"),
    "c": ("ц", "с"),
    "d": ("д",),
    "e": ("е", "ё"),
    "f": ("ф",),
    "g": ("г", "9"),
    "h": ("х",),
    "i": ("і", "1", "!"),
    "j": ("й",),
    "k": ("к",),
    "l": ("л",),
    "m": ("м",),
    "n": ("н",),
    "o": ("о", "0"),
    "p": ("п", "р"),
    "q": ("к",),
    "r": ("р",),
    "s": ("с", "5"),
    "t": ("т", "7"),
    "u": ("у",),
    "v": ("в", "8"),
    "w": ("в",),
    "x": ("кс", "х"),
    "y": ("ы", "у"),
    "z": ("з",),
}

TRANSLIT_MAP: dict[str, str] = {
    "a": "а",
    "b": "б",
    "c": "ц",
    "d": "д",
    "e": "е",
    "f": "ф",
    "g": "г",
    "h": "х",
    "i": "и",
    "j": "й",
    "k": "к",
    "l": "л",
    "m": "м",
    "n": "н",
    "o": "о",
    "p": "п",
    "q": "к",
    "r": "р",
    "s": "с",
    "t": "т",
    "u": "у",
    "v": "в",
    "w": "в",
    "x": "кс",
    "y": "ы",
    "z": "з",
    "sh": "ш",
    "shch": "щ",
    "ch": "ч",
    "zh": "ж",
    "yu": "ю",
    "ya": "я",
}


def extract_words(text: str) -> list[str]:
    """Return the words of ``text`` in the order they appear."""
    return WORD_REGEX.findall(text)


def process_words(words: Iterable[str]) -> list[str]:
    """Normalise every word and return all variants, word by word."""
    return [variant for word in words for variant in normalize_word(word)]


def normalize_word(word: str) -> list[str]:
    """Return the lower-cased, non-empty spelling variants of ``word``."""
    variants = generate_variants(transliterate(word))
    return [lowered for lowered in (v.lower() for v in variants) if lowered]


def transliterate(word: str) -> str:
    """Replace Latin letters by their Cyrillic counterparts, one character at a time."""
    return "".join(TRANSLIT_MAP.get(char, char) for char in word)


def generate_variants(word: str) -> list[str]:
    """Expand every disguising character of ``word`` into all the letters it may mean."""
    variants = [""]
    for char in word:
        replacements = CHAR_REPLACEMENTS.get(char) or (char,)
        variants = [prefix + replacement for replacement in replacements for prefix in variants]
    return variants