"""Exercises on strings."""

from __future__ import annotations

import string
from collections import Counter
from collections.abc import Iterable

_NUL = "\0"


def until_nul(chars: Iterable[str]) -> str:
    """Return the characters before the first NUL."""
    return "".join(chars).partition(_NUL)[0]


def sort_chars(s: str) -> str:
    """Return the characters of s ordered by code point."""
    return "".join(sorted(s))


def compress(s: str) -> str:
    """Run-length encode s in place.

    Each run is written as its character followed by its length when the
    length is between 2 and 9; longer runs keep only the character.
    Positions past the encoded prefix keep the original characters.
    """
    pieces = []
    i = 0
    while i < len(s):
        j = i + 1
        while j < len(s) and s[j] == s[i]:
            j += 1
        count = j - i
        pieces.append(s[i])
        if 1 < count < 10:
            pieces.append(str(count))
        i = j
    encoded = "".join(pieces)
    return encoded + s[len(encoded):]


def concatenate(first: str, second: str) -> str:
    """Return second appended to first."""
    return first + second


def n_concatenate(first: str, second: str, n: int) -> str:
    """Append at most n characters of second to first, stopping at a NUL."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    return until_nul(first) + until_nul(second)[:n]


def copy_string(source: str, destination: str) -> str:
    """Write source over the start of destination and return the result."""
    return source + destination[len(source):]


def max_occurring_char(s: str) -> tuple[str, int]:
    """Return the most frequent letter, ignoring case, and its count.

    Ties go to the letter earliest in the alphabet.
    """
    invalid = [ch for ch in s if ch not in string.ascii_letters]
    if invalid:
        raise ValueError(f"only ASCII letters are counted, got {invalid[0]!r}")
    counts = Counter(s.lower())
    best = max(string.ascii_lowercase, key=lambda letter: counts[letter])
    return best, counts[best]


def dictionary_order(first: str, second: str) -> tuple[str, str]:
    """Return the two words ordered by their first characters."""
    if first[:1] > second[:1]:
        return second, first
    return first, second


def remove_adjacent_duplicates(s: str) -> str:
    """Repeatedly remove pairs of equal adjacent characters."""
    kept: list[str] = []
    for ch in s:
        if kept and kept[-1] == ch:
            kept.pop()
        else:
            kept.append(ch)
    return "".join(kept)


def replace_spaces(s: str) -> str:
    """Replace every space with '@40'."""
    return s.replace(" ", "@40")


def string_length(s: str) -> int:
    """Return the number of characters before the first NUL."""
    return len(until_nul(s))


def reverse_string(s: str) -> str:
    """Return s reversed."""
    return "".join(reversed(s))


def reverse_each_word(s: str) -> str:
    """Reverse every space-separated word, keeping the words in place."""
    return " ".join(reverse_string(word) for word in s.split(" "))


def reverse_word_order(s: str) -> str:
    """Reverse the order of space-separated words, keeping each word intact."""
    return reverse_each_word(reverse_string(s))


def has_permutation(pattern: str, text: str) -> bool:
    """Whether text opens with a rearrangement of pattern.

    Both pattern and the compared window must be lowercase ASCII letters.
    """
    window = text[: len(pattern)]
    for ch in pattern + window:
        if ch not in string.ascii_lowercase:
            raise ValueError(f"only lowercase ASCII letters are allowed, got {ch!r}")
    return Counter(pattern) == Counter(window)