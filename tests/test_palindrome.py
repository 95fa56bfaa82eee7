from hypothesis import given
from hypothesis import strategies as st

from dsadrills.palindrome import (
    is_alnum_palindrome,
    is_palindrome,
    is_palindrome_ignore_case,
)

_TEXT = st.text(max_size=20)


def test_exact_check_is_case_sensitive():
    assert not is_palindrome("Abhiihba")
    assert is_palindrome("abhiihba")


def test_ignore_case_check():
    assert is_palindrome_ignore_case("Abhiihba")
    assert not is_palindrome_ignore_case("abhijeet")


def test_alnum_check_skips_punctuation_and_spaces():
    assert is_alnum_palindrome("A man, a plan, a canal: Panama")
    assert is_alnum_palindrome("Abhiihba")
    assert not is_alnum_palindrome("race a car")


def test_alnum_check_keeps_digits():
    assert not is_alnum_palindrome("1a2")
    assert is_alnum_palindrome("1a1")


def test_empty_string_is_a_palindrome():
    assert is_palindrome("")
    assert is_palindrome_ignore_case("")
    assert is_alnum_palindrome("")


@given(_TEXT)
def test_mirrored_strings_are_palindromes(s):
    mirrored = s + s[::-1]
    assert is_palindrome(mirrored)
    assert is_palindrome_ignore_case(mirrored)
    assert is_alnum_palindrome(mirrored)


@given(st.text(alphabet="abcXYZ", max_size=10))
def test_ignore_case_agrees_with_swapcase_mirror(s):
    assert is_palindrome_ignore_case(s + s[::-1].swapcase())


@given(_TEXT)
def test_exact_palindrome_implies_looser_checks(s):
    if is_palindrome(s):
        assert is_palindrome_ignore_case(s)
    assert is_palindrome(s) == (s == "".join(reversed(s)))