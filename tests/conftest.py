"""Shared test fixtures."""

from pathlib import Path

import pytest

from aksara_jawa.config import DEFAULT_CONFIG, ConsonantTable, TranslateConfig, VowelTable


@pytest.fixture
def config() -> TranslateConfig:
    return DEFAULT_CONFIG


@pytest.fixture
def pepet_config() -> TranslateConfig:
    return TranslateConfig(vowels=VowelTable.PEPET)


@pytest.fixture
def murda_config() -> TranslateConfig:
    return TranslateConfig(consonants=ConsonantTable.MURDA)


@pytest.fixture
def write_toml(tmp_path):
    """Write a TOML file into tmp_path and return its path."""

    def _write(body: str, name: str = "aksara_jawa.toml") -> Path:
        path = tmp_path / name
        path.write_text(body, encoding="utf-8")
        return path

    return _write
