"""
Public entry point: detect the script of a text and transliterate it.

Usage:
    from aksara_jawa import translate

    translate("aksara jawa")      # "ꦲꦏ꧀ꦱꦫ ꦗꦮ"
    translate("ꦲꦏ꧀ꦱꦫ ꦗꦮ")       # "aksara jawa"
"""

from __future__ import annotations

import logging

from aksara_jawa.aksara import aksara_to_latin
from aksara_jawa.config import DEFAULT_CONFIG, TranslateConfig
from aksara_jawa.latin import latin_to_aksara
from aksara_jawa.tables import GLYPHS

logger = logging.getLogger(__name__)


def has_aksara(text: str) -> bool:
    """True if ``text`` contains any Javanese glyph (or a zero-width space)."""
    return any(glyph in text for glyph in GLYPHS)


def translate(text: str, config: TranslateConfig | None = None) -> str:
    """Transliterate ``text`` in whichever direction its script implies.

    Javanese input is read back to Latin and ``config`` is ignored. Latin
    input is written in Javanese using ``config`` or DEFAULT_CONFIG.
    """
    if has_aksara(text):
        logger.debug("Javanese input, reading back to Latin")
        return aksara_to_latin(text)

    logger.debug("Latin input, writing Javanese")
    return latin_to_aksara(text, config or DEFAULT_CONFIG)
