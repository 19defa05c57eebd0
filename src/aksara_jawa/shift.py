"""
Consonant-cluster ("shift") resolution for Latin -> Aksara Jawa.

A syllable token such as "nggro" starts with a consonant cluster that is
written as one conjunct. resolve_shift() finds that cluster and reports
the glyphs it becomes together with how many Latin letters it used up.

Rules are grouped in families keyed by the letter that makes the cluster
(h, g, y, r, l, w, c, j) and checked strictly in order: longer prefixes
first, then the family's generic "consonant + trigger" form, then the
fallback that spells out every leading consonant with a pangkon.

Usage:
    from aksara_jawa.shift import resolve_shift, resolve_core_sound

    resolve_shift("kha", config)        # Shift(glyph="ꦑ", length=2)
    resolve_core_sound("ka", config)    # Shift(glyph="ꦏ", length=1)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from aksara_jawa.chars import is_consonant, is_digit, is_sign_letter, is_vowel
from aksara_jawa.config import TranslateConfig
from aksara_jawa.tables import CONSONANTS, DIGITS, NUMERAL_DELIMITER, PANGKON


@dataclass(frozen=True, slots=True)
class Shift:
    """Glyphs for the cluster at the start of a token.

    ``glyph`` is None when no cluster was recognised; the caller then
    falls back to the single-letter form of the first character.
    """

    glyph: str | None
    length: int


_Builder = Callable[[str, TranslateConfig], str]


@dataclass(frozen=True, slots=True)
class _Rule:
    prefix: str
    length: int
    build: _Builder


@dataclass(frozen=True, slots=True)
class _Family:
    rules: tuple[_Rule, ...]
    trigger: str | None = None  # letter that forms a conjunct when not leading
    joiner: str = ""            # glyphs put after the head consonant for it


def _fixed(glyph: str) -> _Builder:
    return lambda s, config: glyph


def _headed(glyph: str) -> _Builder:
    """Prefix the cluster with the letter form of its first character.

    The syllable compositor recognises these composed strings (for example
    "ꦠꦛꦾ" for "thy") and rewrites them, so the doubled head is intended.
    """
    return lambda s, config: _head(s, config) + glyph


# ── Rule families, in precedence order ──────────────────────────────

_FAMILIES: tuple[_Family, ...] = (
    # aspirates and h-clusters
    _Family(
        rules=(
            _Rule("thr", 3, _fixed("ꦛꦿ")),
            _Rule("thl", 3, _fixed("ꦛ꧀ꦭ")),
            _Rule("thy", 3, _headed("ꦛꦾ")),
            _Rule("thw", 3, _headed("ꦛ꧀ꦮ")),
            _Rule("th", 2, _fixed("ꦛ")),
            _Rule("dhr", 3, _fixed("ꦝꦿ")),
            _Rule("dhl", 3, _fixed("ꦝ꧀ꦭ")),
            _Rule("dhy", 3, _headed("ꦝꦾ")),   # dhyaksa
            _Rule("dhw", 3, _headed("ꦝ꧀ꦮ")),  # dhwani
            _Rule("dh", 2, _fixed("ꦝ")),
            _Rule("hy", 2, _headed("ꦲꦾ")),    # hyang
            _Rule("hh", 2, _headed("ꦃꦲ")),
            _Rule("rh", 2, _headed("ꦂꦲ")),
            _Rule("kh", 2, _fixed("ꦑ")),
            _Rule("gh", 2, _fixed("ꦓ")),
            _Rule("ch", 2, _fixed("ꦖ")),
            _Rule("jh", 2, _fixed("ꦙ")),
            _Rule("ṭh", 2, _fixed("ꦜ")),
            _Rule("ḍh", 2, _fixed("ꦞ")),
            _Rule("ph", 2, _fixed("ꦦ")),
            _Rule("bh", 2, _fixed("ꦨ")),
            _Rule("sh", 2, _fixed("ꦯ")),
        ),
        trigger="h",
        joiner="꧀ꦲ",
    ),
    # velar nasal
    _Family(
        rules=(
            _Rule("ngr", 3, _fixed("ꦔꦿ")),
            _Rule("ngy", 3, _fixed("ꦔꦾ")),
            _Rule("nggr", 4, _headed("ꦔ꧀ꦒꦿ")),  # nggronjal
            _Rule("nggl", 4, _headed("ꦔ꧀ꦒ꧀ꦭ")),
            _Rule("nggw", 4, _headed("ꦔ꧀ꦒ꧀ꦮ")),  # munggwing
            _Rule("nggy", 4, _headed("ꦔ꧀ꦒꦾ")),  # anggyat
            _Rule("ngg", 3, _headed("ꦔ꧀ꦒ")),
            _Rule("ngl", 3, _headed("ꦔ꧀ꦭ")),   # ngluwari
            _Rule("ngw", 3, _headed("ꦔ꧀ꦮ")),   # ngwiru
            _Rule("ng", 2, _fixed("ꦁ")),
            _Rule("rg", 2, _fixed("ꦂꦒ")),       # amarga
            _Rule("hg", 2, _fixed("ꦃꦒ")),       # dahgene
            _Rule("gg", 2, _fixed("ꦒ꧀ꦒ")),
        ),
        trigger="g",
        joiner="꧀ꦒ",
    ),
    # Kawi jña
    _Family(
        rules=(
            _Rule("jñ", 2, _fixed("ꦘ")),
            _Rule("jny", 3, _fixed("ꦘ")),
        ),
    ),
    # palatal nasal and pengkal
    _Family(
        rules=(
            _Rule("nyr", 3, _fixed("ꦚꦿ")),
            _Rule("nyl", 3, _fixed("ꦚ꧀ꦭ")),    # nylonong
            _Rule("ny", 2, _fixed("ꦚ")),
            _Rule("ryy", 3, _fixed("ꦂꦪꦾ")),
            _Rule("ry", 2, _fixed("ꦂꦪ")),       # Suryati
            _Rule("yy", 2, _fixed("ꦪꦾ")),       # Duryyodhana
            _Rule("qy", 1, _fixed("ꦾ")),
        ),
        trigger="y",
        joiner="ꦾ",
    ),
    # cakra
    _Family(
        rules=(
            _Rule("hr", 2, _headed("ꦃꦿ")),
            _Rule("rr", 2, _headed("ꦂꦫ")),
            _Rule("wr", 2, _fixed("ꦮꦿ")),
            _Rule("qr", 1, _fixed("ꦿ")),
        ),
        trigger="r",
        joiner="ꦿ",
    ),
    # panjingan -l-
    _Family(
        rules=(
            _Rule("ll", 2, _headed("ꦭ꧀ꦭ")),
            _Rule("rl", 2, _headed("ꦂꦭ")),
            _Rule("hl", 2, _headed("ꦃꦭ")),
            _Rule("ql", 2, _fixed("꧀ꦭ")),
        ),
        trigger="l",
        joiner="꧀ꦭ",
    ),
    # panjingan -w-
    _Family(
        rules=(
            _Rule("rw", 2, _headed("ꦂꦮ")),
            _Rule("hw", 2, _headed("ꦃꦮ")),
            _Rule("qw", 2, _fixed("꧀ꦮ")),
        ),
        trigger="w",
        joiner="꧀ꦮ",
    ),
    # -nc-
    _Family(
        rules=(
            _Rule("ncr", 3, _headed("ꦚ꧀ꦕꦿ")),  # kencrung
            _Rule("ncl", 3, _headed("ꦚ꧀ꦕ꧀ꦭ")),  # kinclong
            _Rule("nc", 2, _headed("ꦚ꧀ꦕ")),
            _Rule("rc", 2, _headed("ꦂꦕ")),      # arca
        ),
        trigger="c",
        joiner="꧀ꦕ",
    ),
    # -nj-
    _Family(
        rules=(
            _Rule("njr", 3, _headed("ꦚ꧀ꦗꦿ")),  # anjrah
            _Rule("njl", 3, _headed("ꦚ꧀ꦗ꧀ꦭ")),  # anjlog
            _Rule("nj", 2, _headed("ꦚ꧀ꦗ")),
            _Rule("rj", 2, _fixed("ꦂꦗ")),
        ),
        trigger="j",
        joiner="꧀ꦗ",
    ),
)

_CLUSTER_HEADS = frozenset(rule.prefix for family in _FAMILIES for rule in family.rules)
_TRIGGERS = frozenset(family.trigger for family in _FAMILIES if family.trigger)


# ── Resolvers ───────────────────────────────────────────────────────

def resolve_shift(text: str, config: TranslateConfig) -> Shift:
    """Find the consonant cluster at the start of ``text``.

    Matching is case-insensitive. Returns ``Shift(None, 1)`` when the
    token does not start with a cluster.
    """
    s = text.lower()

    for family in _FAMILIES:
        for rule in family.rules:
            if s.startswith(rule.prefix):
                return Shift(rule.build(s, config), rule.length)

        if family.trigger is None:
            continue

        pos = s.find(family.trigger)
        if pos == 1:
            return Shift(_head(s, config) + family.joiner, 2)
        if pos > 1:
            # the trigger is not at the cluster head: spell out every
            # leading consonant on its own
            return _spell_leading_consonants(s, config)

    return Shift(None, 1)


def resolve_core_sound(text: str, config: TranslateConfig) -> Shift:
    """Resolve a token's cluster, or the letter form of its first character.

    Characters missing from the letter-form table come back unchanged so
    foreign text survives the translation.
    """
    shift = resolve_shift(text, config)
    if shift.glyph is not None:
        return shift

    table = CONSONANTS[config.consonants]
    return Shift(table.get(text[:1], text), 1)


def resolve_character_sound(c: str, config: TranslateConfig) -> str:
    """Render a lone character: digit, closing sign, dead consonant or vowel."""
    if is_digit(c):
        return NUMERAL_DELIMITER + DIGITS[c]

    core = resolve_core_sound(c, config).glyph
    if is_sign_letter(c):
        # wignyan, layar, cecak
        return core
    if is_consonant(c):
        return core + PANGKON
    return core


def is_cluster_head(text: str) -> bool:
    """True if ``text`` can begin a cluster the resolver knows about.

    Either one of the explicit rule prefixes, or a consonant followed by
    a family's trigger letter ("kr", "sy", "kl" ...).
    """
    s = text.lower()
    if s in _CLUSTER_HEADS:
        return True
    return len(s) == 2 and is_consonant(s[0]) and s[1] in _TRIGGERS


# ── Helpers ─────────────────────────────────────────────────────────

def _head(s: str, config: TranslateConfig) -> str:
    return resolve_core_sound(s[0], config).glyph


def _spell_leading_consonants(s: str, config: TranslateConfig) -> Shift:
    glyphs = []
    for c in s:
        if is_vowel(c):
            break
        glyphs.append(resolve_character_sound(c, config))

    if not glyphs:
        return Shift(None, 1)
    return Shift("".join(glyphs), len(glyphs))
