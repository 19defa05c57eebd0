"""Bidirectional Latin <-> Aksara Jawa (Javanese script) transliteration."""

from aksara_jawa.config import (
    DEFAULT_CONFIG,
    ConsonantTable,
    TranslateConfig,
    VowelTable,
    load_config,
)
from aksara_jawa.translate import has_aksara, translate

__all__ = [
    "DEFAULT_CONFIG",
    "ConsonantTable",
    "TranslateConfig",
    "VowelTable",
    "has_aksara",
    "load_config",
    "translate",
]
