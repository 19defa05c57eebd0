"""
Aksara Jawa -> Latin.

Javanese is read one codepoint at a time. A consonant letter brings its
inherent "a" ("ka"), and the signs that follow edit the tail of what was
already written: a wulu turns "ka" into "ki", a pangkon removes the "a",
a cakra turns it into "kra".

Carrier ha (ꦲ) standing for a bare vowel is written as a placeholder
and dropped in the final cleanup, so "ꦲꦶꦏꦸ" reads "iku".
"""

from __future__ import annotations

import logging

from aksara_jawa.chars import remove_invisible_chars
from aksara_jawa.tables import (
    CECAK,
    CECAK_TELU,
    GLYPHS,
    HA,
    LAYAR,
    NGA,
    PANGKON,
    PROPER_NOUN_MARKER,
    TALING,
    TARUNG,
    ZWSP,
)

logger = logging.getLogger(__name__)

# Placeholder for a carrier ha that stands for a bare vowel
_SILENT = "_"

_SHORT_SIGNS = frozenset("ꦴꦶꦸꦺꦼ")
_LONG_SIGNS = frozenset("ꦽꦾꦿꦷꦹꦻ")
_INDEPENDENT_VOWELS = frozenset("ꦄꦌꦆꦎꦈ")
_VOWEL_SIGNS = _SHORT_SIGNS | _LONG_SIGNS

_CONSONANTS = frozenset("ꦏꦐꦑꦒꦓꦕꦖꦗꦙꦟꦠꦡꦢꦣꦤꦥꦦꦧꦨꦩꦪꦫꦬꦭꦮꦯꦱꦉꦊꦁꦲ" "ꦔꦘꦚꦛꦜꦝꦞꦋ" "ꦰ")

# Letters after which a ha is only a vowel carrier
_HA_SILENT_AFTER = frozenset({" ", ZWSP, PANGKON, CECAK_TELU}) | _VOWEL_SIGNS

# Capitalised forms after the proper-noun marker ꧊
_PROPER_NOUN_FORMS: dict[str, str] = {
    "ꦐ": "Qa",
    "ꦧ": "Ba", "ꦨ": "Ba",
    "ꦕ": "Ca", "ꦖ": "Ca",
    "ꦢ": "Da", "ꦣ": "Da",
    "ꦒ": "Ga", "ꦓ": "Ga",
    "ꦲ": "Ha",
    "ꦗ": "Ja", "ꦙ": "Ja",
    "ꦏ": "Ka", "ꦑ": "Ka",
    "ꦭ": "La",
    "ꦩ": "Ma",
    "ꦤ": "Na", "ꦟ": "Na",
    "ꦥ": "Pa", "ꦦ": "Pa",
    "ꦫ": "Ra", "ꦬ": "Ra",
    "ꦱ": "Sa", "ꦯ": "Sa",
    "ꦠ": "Ta", "ꦡ": "Ta",
    "ꦮ": "Wa",
    "ꦪ": "Ya",
    "ꦔ": "Nga",
    "ꦚ": "Nya",
    "ꦛ": "Tha",
    "ꦝ": "Dha",
}

# Letter taking a cecak telu -> loan sound
_CECAK_TELU_SOUNDS: dict[str, str] = {
    "ꦗ": "za",
    "ꦥ": "fa",
    "ꦮ": "va",
}

# Second half of a -nc-/-nj- cluster written with nya + pangkon
_NYA_CLUSTERS: dict[str, str] = {
    "ꦕ": "nca",
    "ꦗ": "nja",
}


class OutputBuffer:
    """Latin text under construction, editable at its tail."""

    def __init__(self):
        self._text = ""

    def push(self, text: str, capitalize: bool = False) -> None:
        if capitalize:
            text = text[:1].upper() + text[1:]
        self._text += text

    def replace_last(self, n: int, text: str) -> None:
        """Replace the last ``n`` characters (1 to 3) with ``text``."""
        if n not in (1, 2, 3):
            raise ValueError(f"replace_last expects 1, 2 or 3 characters, got {n}")
        logger.debug("rewrite %r -> %r", self._text[-n:], text)
        self._text = self._text[:-n] + text

    def __str__(self) -> str:
        return self._text


def aksara_to_latin(text: str) -> str:
    """Transliterate Javanese script into Latin."""
    buf = OutputBuffer()

    for i, ch in enumerate(text):
        prev = text[i - 1] if i > 0 else ""
        prev2 = text[i - 2] if i > 1 else ""
        _read_glyph(buf, ch, prev, prev2, at_start=i == 0)

    result = _cleanup(str(buf))
    logger.debug("aksara %r -> %r", text, result)
    return result


def _read_glyph(buf: OutputBuffer, ch: str, prev: str, prev2: str, at_start: bool) -> None:
    if ch not in GLYPHS:
        buf.push(ch)
        return

    if (ch == "ꦫ" and prev == LAYAR) or (ch == NGA and prev == CECAK):
        # the sign already wrote the consonant: ꦂꦫ -> "ra", ꦁꦔ -> "nga"
        buf.push("a")
    elif ch in _SHORT_SIGNS:
        _read_short_sign(buf, ch, prev)
    elif ch in _LONG_SIGNS:
        buf.replace_last(1, GLYPHS[ch])
    elif ch == CECAK_TELU:
        if prev in _CECAK_TELU_SOUNDS:
            sound = _CECAK_TELU_SOUNDS[prev]
            if prev2 == PROPER_NOUN_MARKER:
                sound = sound.capitalize()
            buf.replace_last(2, sound)
        else:
            buf.replace_last(1, ZWSP)
    elif ch == PANGKON:
        buf.replace_last(1, ZWSP)
    elif ch in _NYA_CLUSTERS and prev == PANGKON and prev2 == "ꦚ":
        buf.replace_last(3, _NYA_CLUSTERS[ch])
    elif ch in _CONSONANTS:
        _read_consonant(buf, ch, prev, at_start)
    elif ch == PROPER_NOUN_MARKER:
        pass
    else:
        buf.push(GLYPHS[ch])


def _read_short_sign(buf: OutputBuffer, ch: str, prev: str) -> None:
    # no vowel merging across a written ha: "ꦏꦲꦺ" reads "kahe", not "kae"
    if ch == TARUNG:
        if prev == TALING:
            buf.replace_last(1, "o")
        elif prev == "ꦻ":
            buf.replace_last(2, "au")
        else:
            buf.push("a")
    elif prev in _INDEPENDENT_VOWELS:
        buf.push(GLYPHS[ch])
    else:
        buf.replace_last(1, GLYPHS[ch])


def _read_consonant(buf: OutputBuffer, ch: str, prev: str, at_start: bool) -> None:
    if prev == PROPER_NOUN_MARKER:
        form = _PROPER_NOUN_FORMS.get(ch)
        if form is not None:
            buf.push(form)
        else:
            buf.push(GLYPHS[ch], capitalize=True)
    elif ch == HA and (at_start or prev in _HA_SILENT_AFTER):
        buf.push(_SILENT + "a")
    else:
        buf.push(GLYPHS[ch])


def _cleanup(text: str) -> str:
    words = (remove_invisible_chars(word.replace(_SILENT, "")) for word in text.split(" "))
    return " ".join(word for word in words if word)
