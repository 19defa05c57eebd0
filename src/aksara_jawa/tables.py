"""
Static glyph tables for Latin <-> Aksara Jawa transliteration.

Principles:
- One reverse table (GLYPHS) maps every Javanese codepoint the engine knows
  to its Latin reading; it also drives script detection
- Two letter-form tables (plain / murda) and two vowel-sign tables
  (taling / pepet) are selected by TranslateConfig, never mutated
- Both letter-form tables cover every ASCII letter and ACCENTED_LETTERS

Usage:
    from aksara_jawa.tables import GLYPHS, CONSONANTS, MATRAS
"""

from __future__ import annotations

from aksara_jawa.config import ConsonantTable, VowelTable


# ── Named glyphs ────────────────────────────────────────────────────

CECAK = "ꦁ"               # final -ng
LAYAR = "ꦂ"               # final -r
WIGNYAN = "ꦃ"             # final -h
CECAK_TELU = "꦳"          # loan-sound modifier (f, v, z)
TARUNG = "ꦴ"
TALING = "ꦺ"
PEPET = "ꦼ"
KERET = "ꦽ"               # -rê-
PENGKAL = "ꦾ"             # -y- conjunct
CAKRA = "ꦿ"               # -r- conjunct
PANGKON = "꧀"             # virama
NUMERAL_DELIMITER = "꧇"   # pada pangkat
PROPER_NOUN_MARKER = "꧊"
ZWSP = "\u200b"

NGA = "ꦔ"
HA = "ꦲ"
DOUBLE_NGA = NGA + PANGKON + NGA
NUMERAL_CLOSE = NUMERAL_DELIMITER + ZWSP


# ── Reverse table: Javanese -> Latin ────────────────────────────────
# Keys are single codepoints except taling tarung, which is only needed
# for script detection (the reverse scan reads it sign by sign).

GLYPHS: dict[str, str] = {
    "ꦀ": "",         # panyangga -- archaic
    "ꦁ": "ng",       # cecak
    "ꦂ": "r",        # layar
    "ꦃ": "h",        # wignyan
    "ꦄ": "A",
    "ꦅ": "I",        # I Kawi -- archaic
    "ꦆ": "I",
    "ꦇ": "Ii",       # archaic
    "ꦈ": "U",
    "ꦉ": "rê",       # pa cêrêk
    "ꦊ": "lê",       # nga lêlêt
    "ꦋ": "lêu",      # nga lêlêt Raswadi -- archaic
    "ꦌ": "E",
    "ꦍ": "Ai",
    "ꦎ": "O",

    "ꦏ": "ka",
    "ꦐ": "qa",       # ka Sasak
    "ꦑ": "kʰa",      # murda
    "ꦒ": "ga",
    "ꦓ": "gʰa",      # murda
    "ꦔ": "nga",
    "ꦕ": "ca",
    "ꦖ": "cʰa",      # murda
    "ꦗ": "ja",
    "ꦘ": "Nya",      # ja Sasak, nya murda
    "ꦙ": "jʰa",      # ja mahaprana
    "ꦚ": "nya",
    "ꦛ": "tha",
    "ꦜ": "ṭʰa",      # murda
    "ꦝ": "dha",
    "ꦞ": "ḍʰa",      # murda
    "ꦟ": "ṇa",       # murda
    "ꦠ": "ta",
    "ꦡ": "ṭa",       # murda
    "ꦢ": "da",
    "ꦣ": "ḍa",       # murda
    "ꦤ": "na",
    "ꦥ": "pa",
    "ꦦ": "pʰa",      # murda
    "ꦧ": "ba",
    "ꦨ": "bʰa",      # murda
    "ꦩ": "ma",
    "ꦪ": "ya",
    "ꦫ": "ra",
    "ꦬ": "Ra",       # ra agung
    "ꦭ": "la",
    "ꦮ": "wa",
    "ꦯ": "śa",       # murda
    "ꦰ": "ṣa",       # sa mahaprana
    "ꦱ": "sa",
    "ꦲ": "ha",       # also the carrier of a bare vowel

    "꦳": ZWSP,        # cecak telu
    "ꦺꦴ": "o",       # taling tarung
    "ꦴ": "a",
    "ꦶ": "i",
    "ꦷ": "ii",
    "ꦸ": "u",
    "ꦹ": "uu",
    "ꦺ": "e",
    "ꦻ": "ai",
    "ꦼ": "ê",
    "ꦽ": "rê",
    "ꦾ": "ya",
    "ꦿ": "ra",

    "꧀": ZWSP,        # pangkon

    "꧁": "—",
    "꧂": "—",
    "꧃": "–",
    "꧄": "–",
    "꧅": "–",
    "꧆": "",
    "꧇": ZWSP,        # pada pangkat
    "꧈": ",",
    "꧉": ".",
    "꧊": "",         # proper-noun marker, consumed by the reverse scan
    "꧋": "–",
    "꧌": "–",
    "꧍": "–",
    "ꧏ": "²",
    "꧐": "0",
    "꧑": "1",
    "꧒": "2",
    "꧓": "3",
    "꧔": "4",
    "꧕": "5",
    "꧖": "6",
    "꧗": "7",
    "꧘": "8",
    "꧙": "9",
    "꧞": "—",
    "꧟": "—",
    ZWSP: " ",
}


# ── Letter forms: Latin -> Javanese ─────────────────────────────────
# Lower-case vowels ride on the ha carrier in the plain table and use the
# independent vowel letters in the murda table.

ACCENTED_LETTERS = "ÈÉÊĚèéêěĕūôñśṇḍṭṣṛŊŋ"

_PLAIN_CONSONANTS: dict[str, str] = {
    "A": "ꦄ", "B": "ꦧ", "C": "ꦕ", "D": "ꦢ", "E": "ꦌ", "F": "ꦥ꦳",
    "G": "ꦒ", "H": "ꦲ", "I": "ꦆ", "J": "ꦗ", "K": "ꦏ", "L": "ꦭ",
    "M": "ꦩ", "N": "ꦤ", "O": "ꦎ", "P": "ꦥ", "Q": "꧀", "R": "ꦂ",
    "S": "ꦱ", "T": "ꦠ", "U": "ꦈ", "V": "ꦮ꦳", "W": "ꦮ", "X": "ꦼ",
    "Y": "ꦪ", "Z": "ꦗ꦳",
    "a": "ꦲ", "b": "ꦧ", "c": "ꦕ", "d": "ꦢ", "e": "ꦲꦺ", "f": "ꦥ꦳",
    "g": "ꦒ", "h": "ꦃ", "i": "ꦲꦶ", "j": "ꦗ", "k": "ꦏ", "l": "ꦭ",
    "m": "ꦩ", "n": "ꦤ", "o": "ꦲꦺꦴ", "p": "ꦥ", "q": "꧀", "r": "ꦂ",
    "s": "ꦱ", "t": "ꦠ", "u": "ꦲꦸ", "v": "ꦮ꦳", "w": "ꦮ", "x": "ꦲꦼ",
    "y": "ꦪ", "z": "ꦗ꦳",
    "È": "ꦌ", "É": "ꦌ", "Ê": "ꦄꦼ", "Ě": "ꦄꦼ",
    "è": "ꦲꦺ", "é": "ꦲꦺ", "ê": "ꦲꦼ", "ě": "ꦲꦼ", "ĕ": "ꦲꦼ",
    "ū": "ꦲꦹ", "ô": "ꦲ",
    "ñ": "ꦚ", "ś": "ꦯ",
    "ṇ": "ꦟ", "ḍ": "ꦝ", "ṭ": "ꦛ", "ṣ": "ꦰ", "ṛ": "ꦽ",
    "Ŋ": "ꦁ", "ŋ": "ꦁ",
}

_MURDA_CONSONANTS: dict[str, str] = {
    "A": "ꦄ", "B": "ꦨ", "C": "ꦖ", "D": "ꦣ", "E": "ꦌ", "F": "ꦦ꦳",
    "G": "ꦓ", "H": "ꦲ꦳", "I": "ꦆ", "J": "ꦙ", "K": "ꦑ", "L": "ꦭ",
    "M": "ꦩ", "N": "ꦟ", "O": "ꦎ", "P": "ꦦ", "Q": "꧀", "R": "ꦬ",
    "S": "ꦯ", "T": "ꦡ", "U": "ꦈ", "V": "ꦮ꦳", "W": "ꦮ", "X": "ꦼ",
    "Y": "ꦪ", "Z": "ꦗ꦳",
    "a": "ꦄ", "b": "ꦧ", "c": "ꦕ", "d": "ꦢ", "e": "ꦌ", "f": "ꦥ꦳",
    "g": "ꦒ", "h": "ꦃ", "i": "ꦆ", "j": "ꦗ", "k": "ꦏ", "l": "ꦭ",
    "m": "ꦩ", "n": "ꦤ", "o": "ꦎ", "p": "ꦥ", "q": "꧀", "r": "ꦂ",
    "s": "ꦱ", "t": "ꦠ", "u": "ꦈ", "v": "ꦮ꦳", "w": "ꦮ", "x": "ꦼ",
    "y": "ꦪ", "z": "ꦗ꦳",
    "È": "ꦌ", "É": "ꦌ", "Ê": "ꦄꦼ", "Ě": "ꦄꦼ",
    "è": "ꦌ", "é": "ꦌ", "ê": "ꦼ", "ě": "ꦼ", "ĕ": "ꦼ",
    "ū": "ꦹ", "ô": "ꦄ",
    "ñ": "ꦚ", "ś": "ꦯ",
    "ṇ": "ꦟ", "ḍ": "ꦝ", "ṭ": "ꦛ", "ṣ": "ꦰ", "ṛ": "ꦽ",
    "Ŋ": "ꦁ", "ŋ": "ꦁ",
}

CONSONANTS: dict[ConsonantTable, dict[str, str]] = {
    ConsonantTable.PLAIN: _PLAIN_CONSONANTS,
    ConsonantTable.MURDA: _MURDA_CONSONANTS,
}


# ── Vowel signs (sandhangan swara) ──────────────────────────────────
# Bare "a" has no sign: it is the inherent vowel.

_TALING_MATRAS: dict[str, str] = {
    "ā": "ꦴ", "â": "ꦴ",
    "e": "ꦺ", "è": "ꦺ", "é": "ꦺ",
    "i": "ꦶ", "ī": "ꦷ",
    "o": "ꦺꦴ", "ō": "ꦼꦴ", "ô": "",
    "u": "ꦸ", "ū": "ꦹ",
    "x": "ꦼ", "ě": "ꦼ", "ĕ": "ꦼ", "ê": "ꦼ",
    "A": "ꦄ", "E": "ꦌ", "È": "ꦌ", "É": "ꦌ",
    "I": "ꦆ", "U": "ꦈ", "O": "ꦎ",
    "X": "ꦄꦼ", "Ě": "ꦄꦼ", "Ê": "ꦄꦼ",
    "ṛ": "ꦽ",
    "aa": "ꦴ", "ai": "ꦻ", "au": "ꦻꦴ", "ii": "ꦷ", "uu": "ꦹ",
}

_PEPET_MATRAS: dict[str, str] = {
    **_TALING_MATRAS,
    "e": "ꦼ",
    "E": "ꦄꦼ",
}

MATRAS: dict[VowelTable, dict[str, str]] = {
    VowelTable.TALING: _TALING_MATRAS,
    VowelTable.PEPET: _PEPET_MATRAS,
}


# ── One-letter syllables with a fixed rendering ─────────────────────

SPECIAL_SOUNDS: dict[str, str] = {
    "f": "ꦥ꦳꧀",
    "v": "ꦮ꦳꧀",
    "z": "ꦗ꦳꧀",
    "ś": "ꦯ",
    "q": PANGKON,
}


# ── Digits and punctuation ──────────────────────────────────────────

DIGITS: dict[str, str] = {
    "0": "꧐", "1": "꧑", "2": "꧒", "3": "꧓", "4": "꧔",
    "5": "꧕", "6": "꧖", "7": "꧗", "8": "꧘", "9": "꧙",
}

# Anything punctuation-like that is missing here is copied through as is.
PUNCTUATION: dict[str, str] = {
    ".": "꧉" + ZWSP,   # pada lungsi
    ",": "꧈" + ZWSP,   # pada lingsa
    "|": "꧋",          # pada adeg-adeg
    "(": "꧌",
    ")": "꧍" + ZWSP,
    "-": ZWSP,
    "?": ZWSP,
    "!": ZWSP,
    '"': ZWSP,
    "'": ZWSP,
}
