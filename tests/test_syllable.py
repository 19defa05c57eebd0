"""Tests for the syllable compositor (syllable.py)."""

import pytest

from aksara_jawa.syllable import compose_syllable


# ── Plain syllables ───────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "token, expected",
    [
        ("ka", "ꦏ"),
        ("ki", "ꦏꦶ"),
        ("ko", "ꦏꦺꦴ"),
        ("k", "ꦏ꧀"),
        ("kh", "ꦑ꧀"),
        ("f", "ꦥ꦳꧀"),
        ("q", "꧀"),
        ("ha", "ꦲ"),
        ("he", "ꦲꦺ"),
        ("ra", "ꦫ"),
        ("nga", "ꦔ"),
        ("ng", "ꦁ"),
        ("nya", "ꦚ"),
        ("dhu", "ꦝꦸ"),
    ],
)
def test_plain_syllables(config, token, expected):
    assert compose_syllable(token, config, vowel_prev=False) == expected


def test_empty_and_blank_tokens(config):
    assert compose_syllable("", config, vowel_prev=False) == ""
    assert compose_syllable("   ", config, vowel_prev=True) == ""


# ── Clusters ──────────────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "token, expected",
    [
        ("kr", "ꦏꦿ"),
        ("ky", "ꦏꦾ"),
        ("kra", "ꦏꦿ"),
        ("kla", "ꦏ꧀ꦭ"),
        ("thya", "ꦛꦾ"),
        ("dhwa", "ꦝ꧀ꦮ"),
        ("nca", "ꦚ꧀ꦕ"),
        ("nja", "ꦚ꧀ꦗ"),
        ("ncla", "ꦚ꧀ꦕ꧀ꦭ"),
        ("lla", "ꦭ꧀ꦭ"),
        ("rra", "ꦂꦫ"),
        ("nyr", "ꦚꦿ"),
        ("nyru", "ꦚꦿꦸ"),
    ],
)
def test_clusters(config, token, expected):
    assert compose_syllable(token, config, vowel_prev=False) == expected


@pytest.mark.parametrize(
    "token, after_vowel, word_initial",
    [
        ("nggro", "ꦁꦒꦿꦺꦴ", "ꦔ꧀ꦒꦿꦺꦴ"),
        ("ngga", "ꦁꦒ", "ꦔ꧀ꦒ"),
        ("hya", "ꦃꦪ", "ꦲꦾ"),
        ("rwa", "ꦂꦮ", "ꦫ꧀ꦮ"),
        ("hwa", "ꦃꦮ", "ꦲ꧀ꦮ"),
    ],
)
def test_spelling_depends_on_preceding_vowel(config, token, after_vowel, word_initial):
    assert compose_syllable(token, config, vowel_prev=True) == after_vowel
    assert compose_syllable(token, config, vowel_prev=False) == word_initial


def test_fixed_prefix_spellings_ignore_preceding_vowel(config):
    assert compose_syllable("ngla", config, vowel_prev=True) == "ꦔ꧀ꦭ"
    assert compose_syllable("nggla", config, vowel_prev=False) == "ꦔ꧀ꦒ꧀ꦭ"


# ── Pepet rewrites ────────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "token, expected",
    [
        ("rê", "ꦉ"),
        ("lê", "ꦊ"),
        ("krê", "ꦏꦽ"),
        ("thrê", "ꦛꦽ"),
        ("ngrê", "ꦔꦽ"),
        ("klê", "ꦏ꧀ꦭꦼ"),
        ("nylê", "ꦚ꧀ꦭꦼ"),
    ],
)
def test_pepet_rewrites(config, token, expected):
    assert compose_syllable(token, config, vowel_prev=False) == expected


def test_pepet_vowel_table_drives_cerek(pepet_config):
    assert compose_syllable("re", pepet_config, vowel_prev=False) == "ꦉ"
