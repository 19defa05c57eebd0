"""
Syllable compositor: one Latin syllable token -> Javanese glyphs.

The latin driver cuts text into tokens like "ka", "nggro" or "k". Each
token is split into its cluster (see shift.py) and its vowel sign (see
matra.py), then a fixed, ordered list of spelling rules turns that pair
into the final glyphs. The order matters: several rules look at the same
cluster and the first one that applies wins.

``vowel_prev`` tells whether the token directly follows a vowel. Some
clusters are written differently inside a word than at its start:
"tunggal" takes a cecak (ꦠꦸꦁꦒꦭ꧀) where "nggambar" spells out the
nasal (ꦔ꧀ꦒꦩ꧀ꦧꦂ).
"""

from __future__ import annotations

from aksara_jawa.chars import trim
from aksara_jawa.config import TranslateConfig
from aksara_jawa.matra import resolve_matra
from aksara_jawa.shift import resolve_character_sound, resolve_core_sound
from aksara_jawa.tables import (
    CAKRA,
    CECAK,
    KERET,
    LAYAR,
    PANGKON,
    PENGKAL,
    PEPET,
    SPECIAL_SOUNDS,
    WIGNYAN,
)


# ── Spelling rules ──────────────────────────────────────────────────

# Token prefixes with a fixed spelling: (prefix, after a vowel, otherwise)
_PREFIX_SPELLINGS: tuple[tuple[str, str, str], ...] = (
    ("nggr", "ꦁꦒꦿ", "ꦔ꧀ꦒꦿ"),    # panggrahita / nggronjal
    ("nggl", "ꦔ꧀ꦒ꧀ꦭ", "ꦔ꧀ꦒ꧀ꦭ"),
    ("nggw", "ꦔ꧀ꦒ꧀ꦮ", "ꦔ꧀ꦒ꧀ꦮ"),
    ("nggy", "ꦔ꧀ꦒꦾ", "ꦔ꧀ꦒꦾ"),
    ("ngg", "ꦁꦒ", "ꦔ꧀ꦒ"),        # tunggal / nggambar
    ("ngl", "ꦔ꧀ꦭ", "ꦔ꧀ꦭ"),
    ("ngw", "ꦔ꧀ꦮ", "ꦔ꧀ꦮ"),
    ("ncl", "ꦚ꧀ꦕ꧀ꦭ", "ꦚ꧀ꦕ꧀ꦭ"),
    ("ncr", "ꦚ꧀ꦕꦿ", "ꦚ꧀ꦕꦿ"),
    ("njl", "ꦚ꧀ꦗ꧀ꦭ", "ꦚ꧀ꦗ꧀ꦭ"),
    ("njr", "ꦚ꧀ꦗꦿ", "ꦚ꧀ꦗꦿ"),
)

# Clusters whose doubled head letter is dropped
_HEADED_CLUSTERS: dict[str, str] = {
    "ꦤꦚ꧀ꦕ꧀ꦭ": "ꦚ꧀ꦕ꧀ꦭ",
    "ꦤꦚ꧀ꦕꦿ": "ꦚ꧀ꦕꦿ",
    "ꦤꦚ꧀ꦕ": "ꦚ꧀ꦕ",
    "ꦤꦚ꧀ꦗ꧀ꦭ": "ꦚ꧀ꦗ꧀ꦭ",
    "ꦤꦚ꧀ꦗꦿ": "ꦚ꧀ꦗꦿ",
    "ꦤꦚ꧀ꦗ": "ꦚ꧀ꦗ",
    "ꦢꦝ꧀ꦮ": "ꦝ꧀ꦮ",
    "ꦢꦝꦾ": "ꦝꦾ",
    "ꦠꦛ꧀ꦮ": "ꦛ꧀ꦮ",
    "ꦠꦛꦾ": "ꦛꦾ",
}

# Clusters that keep their cakra even without a vowel (nyruput)
_STANDALONE_CAKRA = frozenset({"ꦛꦿ", "ꦝꦿ", "ꦔꦿ", "ꦚꦿ"})

# Clusters built on a doubled sign letter (ꦂ ꦃ) or a doubled la
_DOUBLED_SIGNS: dict[str, str] = {
    "ꦭꦭ꧀ꦭ": "ꦭ꧀ꦭ",
    "ꦂꦂꦫ": "ꦂꦫ",
    "ꦂꦂꦲ": "ꦂꦲ",
    "ꦂꦂꦭ": "ꦂꦭ",
    "ꦂꦂꦕ": "ꦂꦕ",
    "ꦃꦃꦲ": "ꦃꦲ",
    "ꦃꦃꦽ": "ꦲꦿ",
}

# Same, but spelled differently after a vowel: (after a vowel, otherwise)
_DOUBLED_SIGNS_IN_WORD: dict[str, tuple[str, str]] = {
    "ꦂꦂꦮ": ("ꦂꦮ", "ꦫ꧀ꦮ"),   # arwana / rwa
    "ꦃꦃꦭ": ("ꦃꦭ", "ꦲ꧀ꦭ"),   # hlam
    "ꦃꦃꦮ": ("ꦃꦮ", "ꦲ꧀ꦮ"),   # hwab
    "ꦃꦲꦾ": ("ꦃꦪ", "ꦲꦾ"),    # sembahyang / hyang
}

_HA_CAKRA = frozenset({"ꦃꦃꦿ", "ꦃꦲꦿ"})

# Two-letter heads that are a single consonant
_DIGRAPH_HEADS = ("ny", "th", "dh")


# ── Compositor ──────────────────────────────────────────────────────

def compose_syllable(token: str, config: TranslateConfig, vowel_prev: bool) -> str:
    """Render one syllable token as Javanese glyphs.

    Returns "" for an empty or all-whitespace token.
    """
    token = trim(token)
    if not token:
        return ""

    if len(token) == 1:
        special = SPECIAL_SOUNDS.get(token)
        if special is not None:
            return special
        return resolve_character_sound(token, config)

    shift = resolve_core_sound(token, config)
    core = shift.glyph
    matra = resolve_matra(token[shift.length:], config)
    low = token.lower()

    for prefix, after_vowel, otherwise in _PREFIX_SPELLINGS:
        if low.startswith(prefix):
            return (after_vowel if vowel_prev else otherwise) + matra

    if core in _HEADED_CLUSTERS:
        return _HEADED_CLUSTERS[core] + matra

    if PENGKAL in core and matra == PANGKON:
        return core
    if CAKRA in core and matra == PANGKON:
        return core

    if CAKRA in core and matra == PEPET:
        return _cakra_keret(token, low, config)
    if "ꦭ" in core and matra == PEPET:
        return _nga_lelet(token, low, config)

    if core in _STANDALONE_CAKRA:
        return core + ("" if matra == PANGKON else matra)

    if core in _DOUBLED_SIGNS:
        return _DOUBLED_SIGNS[core] + matra
    if core in _DOUBLED_SIGNS_IN_WORD:
        after_vowel, otherwise = _DOUBLED_SIGNS_IN_WORD[core]
        return (after_vowel if vowel_prev else otherwise) + matra
    if core in _HA_CAKRA:
        return ("ꦲꦽ" if matra == PEPET else "ꦲꦿ") + matra

    if core == WIGNYAN:
        return "ꦲ" + matra
    if core == LAYAR:
        if matra == PEPET:
            return "ꦉ"  # pa cêrêk
        if matra != PANGKON:
            return "ꦫ" + matra
    if core == CECAK:
        if matra == PANGKON:
            return CECAK
        return "ꦔ" + matra

    return core + matra


def _cakra_keret(token: str, low: str, config: TranslateConfig) -> str:
    """Cluster + r + ê, written with the keret sign (krêta, nyrêmpêt)."""
    if low.startswith(_DIGRAPH_HEADS):
        return resolve_core_sound(token[:2], config).glyph + KERET
    if low.startswith("ng"):
        return "ꦔ꧀ꦒꦽ" if low[2:3] == "g" else "ꦔꦽ"
    return resolve_core_sound(token[0], config).glyph + KERET


def _nga_lelet(token: str, low: str, config: TranslateConfig) -> str:
    """Cluster + l + ê (plêsêt); a bare "lê" is the nga lêlêt letter."""
    if low.startswith(_DIGRAPH_HEADS):
        return resolve_core_sound(token[:2], config).glyph + "꧀ꦭꦼ"
    if low.startswith("ng"):
        return "ꦔ꧀ꦒ꧀ꦭꦼ" if low[2:3] == "g" else "ꦔ꧀ꦭꦼ"
    if low.startswith("l"):
        return "ꦊ"
    return resolve_core_sound(token[0], config).glyph + "꧀ꦭꦼ"
