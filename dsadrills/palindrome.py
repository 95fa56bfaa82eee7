"""Palindrome checks."""

from __future__ import annotations

import string

_ASCII_FOLD = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_KEPT = frozenset(string.ascii_letters + string.digits)


def is_palindrome(s: str) -> bool:
    """Whether s reads the same reversed, comparing characters exactly."""
    return s == s[::-1]


def is_palindrome_ignore_case(s: str) -> bool:
    """Whether s reads the same reversed when ASCII letter case is ignored."""
    return is_palindrome(s.translate(_ASCII_FOLD))


def is_alnum_palindrome(s: str) -> bool:
    """Whether the ASCII letters and digits of s form a palindrome, ignoring case."""
    kept = "".join(ch for ch in s if ch in _KEPT)
    return is_palindrome_ignore_case(kept)