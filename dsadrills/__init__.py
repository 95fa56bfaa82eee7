"""Drills on arrays, strings, searching, palindromes, linked lists, stacks and binary trees."""

__version__ = "0.1.0"