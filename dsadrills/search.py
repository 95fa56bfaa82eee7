"""Substring search with a rolling hash."""

from __future__ import annotations

DEFAULT_MODULUS = 2**31 - 1
_RADIX = 10


def rabin_karp(pattern: str, text: str, modulus: int = DEFAULT_MODULUS) -> list[int]:
    """Return every index at which pattern occurs in text, overlaps included.

    Windows whose hash equals the pattern's are confirmed character by
    character, so hash collisions never produce false matches.
    """
    if not pattern:
        raise ValueError("pattern must not be empty")
    if modulus < 1:
        raise ValueError(f"modulus must be positive, got {modulus}")

    m, n = len(pattern), len(text)
    if m > n:
        return []

    high = pow(_RADIX, m - 1, modulus)
    pattern_hash = 0
    window_hash = 0
    for p_ch, t_ch in zip(pattern, text):
        pattern_hash = (_RADIX * pattern_hash + ord(p_ch)) % modulus
        window_hash = (_RADIX * window_hash + ord(t_ch)) % modulus

    matches = []
    for i in range(n - m + 1):
        if pattern_hash == window_hash and text[i:i + m] == pattern:
            matches.append(i)
        if i < n - m:
            window_hash = (
                _RADIX * (window_hash - ord(text[i]) * high) + ord(text[i + m])
            ) % modulus
    return matches