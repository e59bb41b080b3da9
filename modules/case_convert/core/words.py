from __future__ import annotations

from typing import Any, List


ASCII_LOWER = frozenset("abcdefghijklmnopqrstuvwxyz")
ASCII_UPPER = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZ")
ASCII_DIGITS = frozenset("0123456789")
ASCII_LETTERS = ASCII_LOWER | ASCII_UPPER
WORD_CHARS = ASCII_LETTERS | ASCII_DIGITS


def is_word_char(char: str) -> bool:
    return char in WORD_CHARS


def is_camel_boundary(prev: str, char: str) -> bool:
    """``myVariable`` splits between ``y`` and ``V``."""
    return prev in ASCII_LOWER and char in ASCII_UPPER


def is_acronym_boundary(prev: str, char: str, following: str) -> bool:
    """``HTTPRequest`` splits between ``P`` and ``R`` because ``R`` opens a word."""
    return prev in ASCII_UPPER and char in ASCII_UPPER and following in ASCII_LOWER


def is_letter_digit_boundary(prev: str, char: str) -> bool:
    return prev in ASCII_LETTERS and char in ASCII_DIGITS


def is_digit_letter_boundary(prev: str, char: str) -> bool:
    return prev in ASCII_DIGITS and char in ASCII_LETTERS


def _is_split(text: str, index: int) -> bool:
    prev = text[index - 1]
    char = text[index]
    following = text[index + 1] if index + 1 < len(text) else ""
    return (
        is_camel_boundary(prev, char)
        or is_acronym_boundary(prev, char, following)
        or is_letter_digit_boundary(prev, char)
        or is_digit_letter_boundary(prev, char)
    )


def split_points(text: str) -> List[int]:
    """Indices inside alphanumeric runs where a new word starts.

    Delimiter runs are not reported; only the case and digit transitions are.
    """
    return [index for index in range(1, len(text)) if _is_split(text, index)]


def extract_words(text: Any) -> List[str]:
    """Split ``text`` into ASCII alphanumeric words.

    Handles camelCase, PascalCase, snake_case, kebab-case, acronyms
    (``XMLHttpRequest``) and letter/digit transitions (``v2``, ``2nd``).
    Anything that is not a string, or holds no word characters, gives ``[]``.
    """
    if not isinstance(text, str) or not text.strip():
        return []

    words: List[str] = []
    current: List[str] = []
    for index, char in enumerate(text):
        if not is_word_char(char):
            if current:
                words.append("".join(current))
                current = []
            continue
        if current and _is_split(text, index):
            words.append("".join(current))
            current = []
        current.append(char)

    if current:
        words.append("".join(current))

    return [word.strip() for word in words if word.strip()]
