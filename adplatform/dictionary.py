"""Loading of bad-word dictionaries and word lookup."""

from __future__ import annotations

import gzip
import os
from collections.abc import Collection, Iterable
from pathlib import Path


def parse_lines(lines: Iterable[str]) -> list[str]:
    """Return the distinct words of a dictionary file, trimmed and lower-cased.

    Empty lines and lines starting with ``#`` are skipped.
    """
    seen: set[str] = set()
    words: list[str] = []
    for line in lines:
        word = line.strip().lower()
        if not word or word.startswith("#") or word in seen:
            continue
        seen.add(word)
        words.append(word)
    return words


def _read_file(path: Path) -> list[str]:
    if path.suffix == ".txt":
        with path.open(encoding="utf-8") as handle:
            return parse_lines(handle)
    if path.suffix == ".gz":
        with gzip.open(path, "rt", encoding="utf-8") as handle:
            return parse_lines(handle)
    return []


def _walk(directory: Path) -> Iterable[str]:
    with os.scandir(directory) as entries:
        paths = sorted(Path(entry.path) for entry in entries)
    for path in paths:
        if path.is_dir():
            yield from _walk(path)
        else:
            yield from _read_file(path)


def load_dictionary(path: str | os.PathLike[str]) -> frozenset[str]:
    """Read every ``.txt`` and ``.gz`` file under ``path``, recursively."""
    return frozenset(_walk(Path(path)))


def levenshtein(a: str, b: str) -> int:
    """Edit distance between two strings, counted in characters."""
    if len(a) < len(b):
        a, b = b, a
    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current = [i]
        for j, char_b in enumerate(b, start=1):
            current.append(
                min(
                    previous[j] + 1,
                    current[j - 1] + 1,
                    previous[j - 1] + (char_a != char_b),
                )
            )
        previous = current
    return previous[-1]


def _encoded_length(word: str) -> int:
    # Word lengths are measured in UTF-8 bytes, not characters.
    return len(word.encode("utf-8"))


def _check_typos(
    word: str,
    bad_words: Collection[str],
    typo_check: bool,
    min_length_for_typo: int,
    max_typo_distance: int,
) -> bool:
    if not typo_check or _encoded_length(word) < min_length_for_typo:
        return False
    return any(
        _encoded_length(bad_word) >= min_length_for_typo
        and levenshtein(bad_word, word) <= max_typo_distance
        for bad_word in bad_words
    )


def is_profane(
    word: str,
    bad_words: Collection[str],
    typo_check: bool,
    min_length_for_typo: int,
    max_typo_distance: int,
) -> bool:
    """Tell whether ``word`` is in ``bad_words`` or, with typo checking, close to one."""
    return word in bad_words or _check_typos(
        word, bad_words, typo_check, min_length_for_typo, max_typo_distance
    )