#!/usr/bin/env python3
"""
Latin <-> Aksara Jawa transliteration CLI.

Reads options from aksara_jawa.toml by default; flags override the file:

    python -m aksara_jawa.cli "aksara jawa"
    python -m aksara_jawa.cli "ꦲꦏ꧀ꦱꦫ ꦗꦮ"
    python -m aksara_jawa.cli --pepet --murda "Sega"
    echo "sugeng enjing" | python -m aksara_jawa.cli
    python -m aksara_jawa.cli --detect "ꦗꦮ"
"""

import argparse
import dataclasses
import logging
import sys
from pathlib import Path

from aksara_jawa.config import DEFAULT_CONFIG, ConsonantTable, TranslateConfig, VowelTable, load_config
from aksara_jawa.translate import has_aksara, translate


def _find_default_config() -> Path | None:
    """Look for aksara_jawa.toml in CWD."""
    candidate = Path("aksara_jawa.toml")
    if candidate.exists():
        return candidate
    return None


def _build_config(args: argparse.Namespace) -> TranslateConfig:
    config_path = Path(args.config) if args.config else _find_default_config()
    config = load_config(config_path) if config_path is not None else DEFAULT_CONFIG

    overrides = {}
    if args.pepet:
        overrides["vowels"] = VowelTable.PEPET
    if args.murda:
        overrides["consonants"] = ConsonantTable.MURDA
    if args.no_spaces:
        overrides["keep_spaces"] = False
    return dataclasses.replace(config, **overrides)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Transliterate between Latin and Javanese script (Aksara Jawa)"
    )
    parser.add_argument(
        "text",
        nargs="*",
        help="Text to transliterate (default: read lines from stdin)",
    )
    parser.add_argument(
        "--config",
        metavar="FILE",
        help="Path to TOML config file (default: auto-detect aksara_jawa.toml)",
    )
    parser.add_argument(
        "--pepet",
        action="store_true",
        help='Write a bare "e" as pepet (ê) instead of taling (é)',
    )
    parser.add_argument(
        "--murda",
        action="store_true",
        help="Use murda letters for capitals and independent vowels",
    )
    parser.add_argument(
        "--no-spaces",
        action="store_true",
        help="Drop spaces between words in Javanese output",
    )
    parser.add_argument(
        "--detect",
        action="store_true",
        help="Only report whether each input contains Javanese script",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log each syllable as it is transliterated",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(message)s",
    )

    try:
        config = _build_config(args)
    except (FileNotFoundError, ValueError) as e:
        parser.error(str(e))

    lines = args.text or (line.rstrip("\n") for line in sys.stdin)
    for line in lines:
        if args.detect:
            print(has_aksara(line))
        else:
            print(translate(line, config))
    return 0


if __name__ == "__main__":
    sys.exit(main())
