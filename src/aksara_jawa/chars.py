"""
Character classes and small string helpers shared by both directions.

The predicates work on a single character and are plain membership tests
against fixed alphabets, so accented Latin letters used for Javanese
romanisation (ê, é, ṭ, ḍ, ñ, ŋ ...) are classified explicitly.
"""

from __future__ import annotations

import re


VOWELS = "AaEeÈèÉéIiOoUuÊêĚěĔĕṚṛXxôâāīūō"

CONSONANTS = "BCDFGHJKLMNPRSTVWYZbcdfghjklmnpqrstvwxyzḌḍṆṇṢṣṬṭŊŋÑñɲ"

DIGITS = "0123456789"

PUNCTUATION = ",.><?/+=-_}{[]*&^%$#@!~`\"'\\|:;()"

# Letters that never take a pangkon on their own: wignyan, layar, cecak
SIGN_LETTERS = "HhRrŊŋ"

_SPACE_RUN_RE = re.compile(r"\s+")
_INVISIBLE_RE = re.compile(r"[\s\u00a0\u2000-\u200f\u2028-\u202f]")


def is_vowel(c: str) -> bool:
    return c != "" and c in VOWELS


def is_consonant(c: str) -> bool:
    return c != "" and c in CONSONANTS


def is_digit(c: str) -> bool:
    return c != "" and c in DIGITS


def is_punct(c: str) -> bool:
    return c != "" and c in PUNCTUATION


def is_sign_letter(c: str) -> bool:
    """True for letters written as a sign (ꦃ ꦂ ꦁ) when they close a syllable."""
    return c != "" and c in SIGN_LETTERS


def trim(text: str | None) -> str:
    """Strip both ends and collapse inner whitespace runs to one space."""
    if not text:
        return ""
    return _SPACE_RUN_RE.sub(" ", text.strip())


def remove_invisible_chars(text: str) -> str:
    """Drop whitespace, no-break spaces and the U+2000 to U+202F range."""
    return _INVISIBLE_RE.sub("", text)
