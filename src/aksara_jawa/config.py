"""
Translation options and their TOML loader.

Usage:
    from aksara_jawa.config import TranslateConfig, ConsonantTable, load_config

    config = TranslateConfig(consonants=ConsonantTable.MURDA)
    config = load_config("aksara_jawa.toml")

The TOML file holds a single ``[translate]`` table:

    [translate]
    vowels = "pepet"        # or "taling" (default)
    consonants = "murda"    # or "plain" (default)
    keep_spaces = false     # default true
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class VowelTable(Enum):
    """Which vowel sign a bare Latin "e" becomes."""

    TALING = "taling"  # e -> ꦺ (é)
    PEPET = "pepet"    # e -> ꦼ (ê)


class ConsonantTable(Enum):
    """Which letter forms stand for upper-case and aspirated consonants."""

    PLAIN = "plain"
    MURDA = "murda"


@dataclass(frozen=True, slots=True)
class TranslateConfig:
    vowels: VowelTable = VowelTable.TALING
    keep_spaces: bool = True
    consonants: ConsonantTable = ConsonantTable.PLAIN

    @classmethod
    def from_dict(cls, data: dict) -> TranslateConfig:
        """Build a config from a ``[translate]`` table, rejecting unknown keys."""
        unknown = set(data) - {"vowels", "keep_spaces", "consonants"}
        if unknown:
            raise ValueError(f"Unknown [translate] key(s): {', '.join(sorted(unknown))}")

        kwargs = {}
        if "vowels" in data:
            kwargs["vowels"] = _parse_enum(VowelTable, "vowels", data["vowels"])
        if "consonants" in data:
            kwargs["consonants"] = _parse_enum(ConsonantTable, "consonants", data["consonants"])
        if "keep_spaces" in data:
            if not isinstance(data["keep_spaces"], bool):
                raise ValueError(f"keep_spaces must be true or false, got {data['keep_spaces']!r}")
            kwargs["keep_spaces"] = data["keep_spaces"]
        return cls(**kwargs)


DEFAULT_CONFIG = TranslateConfig()


def load_config(config_path: str | Path) -> TranslateConfig:
    """Read a TranslateConfig from a TOML file."""
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config not found: {config_path}")

    with config_path.open("rb") as f:
        cfg = tomllib.load(f)

    return TranslateConfig.from_dict(cfg.get("translate", {}))


def _parse_enum(enum_cls, key: str, value):
    try:
        return enum_cls(str(value).lower())
    except ValueError:
        choices = ", ".join(repr(m.value) for m in enum_cls)
        raise ValueError(f"{key} must be one of {choices}, got {value!r}") from None
