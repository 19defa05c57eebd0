"""
Vowel sign (sandhangan) lookup for the vowel part of a syllable token.
"""

from __future__ import annotations

from aksara_jawa.config import TranslateConfig
from aksara_jawa.tables import MATRAS, PANGKON


def resolve_matra(residual: str, config: TranslateConfig) -> str:
    """Return the vowel sign for what is left of a token after its cluster.

    An empty residual means the syllable has no vowel and gets a pangkon.
    Leading "h"s are skipped unless nothing else remains. A bare "a" and
    anything unknown give "" (the inherent vowel).
    """
    if not residual:
        return PANGKON

    stripped = residual.lstrip("h")
    if stripped:
        residual = stripped

    return MATRAS[config.vowels].get(residual, "")
