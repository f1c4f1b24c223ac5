"""Checks on strings: balanced brackets and palindromes."""

from __future__ import annotations

_CLOSERS = {"(": ")", "[": "]", "{": "}"}


def is_valid_brackets(s: str) -> bool:
    """Tell whether ``s`` is a well-nested sequence of (), [] and {}.

    Any other character makes the string invalid.
    """
    expected: list[str] = []
    for ch in s:
        if ch in _CLOSERS:
            expected.append(_CLOSERS[ch])
        elif not expected or expected.pop() != ch:
            return False
    return not expected


def is_palindrome(s: str) -> bool:
    """Tell whether ``s`` reads the same both ways, ignoring case and non-alphanumerics.

    Only ASCII letters and digits are compared.
    """
    cleaned = [ch.lower() for ch in s if ch.isascii() and ch.isalnum()]
    return cleaned == cleaned[::-1]