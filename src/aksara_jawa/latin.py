"""
Latin -> Aksara Jawa.

The scanner walks the text once, cutting it into syllable tokens ("ka",
"nggro", "k" ...) and handing each to the compositor. Spaces,
punctuation and digits are emitted directly.

A token ends at a space, punctuation, a digit, or a consonant that
cannot continue the current cluster. While a token has no vowel yet, a
consonant is appended when the result is still a known cluster head
("n" -> "ng" -> "ngg" -> "nggr"). A vowel is always appended.

Two vowels in a row get a glide letter inserted between them first, so
"kia" is read as "kiya" and "buah" as "buwah".

Usage:
    from aksara_jawa.latin import latin_to_aksara

    latin_to_aksara("aksara jawa", DEFAULT_CONFIG)  # "ꦲꦏ꧀ꦱꦫ ꦗꦮ"
"""

from __future__ import annotations

import logging

from aksara_jawa.chars import is_consonant, is_digit, is_punct, is_vowel, trim
from aksara_jawa.config import TranslateConfig
from aksara_jawa.shift import is_cluster_head
from aksara_jawa.syllable import compose_syllable
from aksara_jawa.tables import (
    CECAK,
    DIGITS,
    DOUBLE_NGA,
    NUMERAL_CLOSE,
    NUMERAL_DELIMITER,
    PUNCTUATION,
)

logger = logging.getLogger(__name__)

# Longest run of letters kept in one token before it is cut regardless
_MAX_TOKEN_SPAN = 5

# Vowel pairs read straight from the vowel-sign table (ai -> ꦻ) unless
# they open the text
_LONG_VOWEL_PAIRS = frozenset({"aa", "ii", "uu", "ai", "au"})


def hiatus_glide(prev: str, cur: str) -> str:
    """Letter to insert between two adjacent vowels, or "" for none.

    The long-vowel pairs (aa, ii, uu, ai, au) are handled by the caller.
    """
    if prev in "eèé" and cur in "ao":
        return "y"
    if prev == "i" and cur in "aeèéou":
        return "y"
    if prev == "o" and cur in "aeèé":
        return "w"
    if prev == "u" and cur in "aeèéio":
        return "w"
    return "h"


class _LatinScanner:
    def __init__(self, text: str, config: TranslateConfig):
        self.config = config
        self.chars = list(trim(text))
        self.out: list[str] = []
        self.pi = 0               # start of the current token
        self.numeral_open = False
        self.cecak_pending = False

    def run(self) -> str:
        i = 0
        while i < len(self.chars):
            if i > 0 and is_vowel(self.chars[i]) and is_vowel(self.chars[i - 1]):
                self._insert_glide(i)
            self._step(i)
            i += 1

        if self.pi < len(self.chars):
            self._flush(len(self.chars))
        return trim("".join(self.out))

    def _insert_glide(self, i: int) -> None:
        prev, cur = self.chars[i - 1], self.chars[i]
        if prev + cur in _LONG_VOWEL_PAIRS:
            if i > 1 and not is_consonant(self.chars[i - 2]):
                self.chars.insert(i, "h")
            return
        self.chars.insert(i, hiatus_glide(prev, cur))

    def _step(self, i: int) -> None:
        c = self.chars[i]

        if self.numeral_open and not is_digit(c):
            self.out.append(NUMERAL_CLOSE)
            self.numeral_open = False

        if c == " ":
            self._flush(i)
            if self.config.keep_spaces:
                self.out.append(" ")
            self.pi = i + 1
        elif is_punct(c):
            self._flush(i)
            self.out.append(PUNCTUATION.get(c, c))
            self.pi = i + 1
        elif is_digit(c):
            self._flush(i)
            if not self.numeral_open:
                self.out.append(NUMERAL_DELIMITER)
                self.numeral_open = True
            self.out.append(DIGITS[c])
            self.pi = i + 1
        elif is_vowel(c):
            if i - self.pi > _MAX_TOKEN_SPAN:
                self._flush(i)
                self.pi = i
        elif i > self.pi and not self._extends_cluster(i):
            self._flush(i)
            self.pi = i
        elif i - self.pi > _MAX_TOKEN_SPAN:
            self._flush(i)
            self.pi = i

    def _extends_cluster(self, i: int) -> bool:
        window = self.chars[self.pi:i]
        if any(is_vowel(ch) for ch in window):
            return False
        c = self.chars[i]
        return is_consonant(c) and is_cluster_head("".join(window) + c)

    def _flush(self, end: int) -> None:
        if self.pi >= end:
            return

        token = "".join(self.chars[self.pi:end])
        vowel_prev = self.pi > 0 and is_vowel(self.chars[self.pi - 1])
        sound = compose_syllable(token, self.config, vowel_prev)
        logger.debug("token %r (after vowel: %s) -> %r", token, vowel_prev, sound)

        if sound == CECAK:
            # a second cecak in a row spells the nasal out: ngng -> ꦁꦔ꧀ꦔ
            self.out.append(DOUBLE_NGA if self.cecak_pending else CECAK)
            self.cecak_pending = not self.cecak_pending
        else:
            self.out.append(sound)
            self.cecak_pending = False


def latin_to_aksara(text: str, config: TranslateConfig) -> str:
    """Transliterate Latin text into Javanese script."""
    return _LatinScanner(text, config).run()
