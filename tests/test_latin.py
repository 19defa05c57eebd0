"""Tests for Latin -> Aksara Jawa (latin.py)."""

import pytest

from aksara_jawa.config import TranslateConfig
from aksara_jawa.latin import hiatus_glide, latin_to_aksara


# ── Words ─────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "latin, expected",
    [
        ("aksara jawa", "ꦲꦏ꧀ꦱꦫ ꦗꦮ"),
        ("kraton", "ꦏꦿꦠꦺꦴꦤ꧀"),
        ("tunggal", "ꦠꦸꦁꦒꦭ꧀"),
        ("nggronjal", "ꦔ꧀ꦒꦿꦺꦴꦚ꧀ꦗꦭ꧀"),
        ("sembahyang", "ꦱꦺꦩ꧀ꦧꦃꦪꦁ"),
        ("dhuwit", "ꦝꦸꦮꦶꦠ꧀"),
        ("iku", "ꦲꦶꦏꦸ"),
        ("utan", "ꦲꦸꦠꦤ꧀"),
        ("kh", "ꦑ꧀"),
    ],
)
def test_words(config, latin, expected):
    assert latin_to_aksara(latin, config) == expected


def test_outer_whitespace_is_trimmed(config):
    assert latin_to_aksara("  jawa  ", config) == "ꦗꦮ"


def test_empty_input(config):
    assert latin_to_aksara("", config) == ""


def test_spaces_can_be_dropped():
    config = TranslateConfig(keep_spaces=False)
    assert latin_to_aksara("aksara jawa", config) == "ꦲꦏ꧀ꦱꦫꦗꦮ"


def test_pepet_table(pepet_config):
    assert latin_to_aksara("sega", pepet_config) == "ꦱꦼꦒ"


def test_murda_table(config, murda_config):
    assert latin_to_aksara("Naga", config) == "ꦤꦒ"
    assert latin_to_aksara("Naga", murda_config) == "ꦟꦒ"


# ── Cecak ─────────────────────────────────────────────────────────────────────

def test_second_cecak_in_a_row_spells_out_nga(config):
    assert latin_to_aksara("ngng", config) == "ꦁꦔ꧀ꦔ"


# ── Vowel hiatus ──────────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "latin, expected",
    [
        ("kae", "ꦏꦲꦺ"),
        ("kia", "ꦏꦶꦪ"),
        ("buah", "ꦧꦸꦮꦃ"),
    ],
)
def test_hiatus(config, latin, expected):
    assert latin_to_aksara(latin, config) == expected


@pytest.mark.parametrize(
    "prev, cur, glide",
    [
        ("e", "a", "y"),
        ("i", "o", "y"),
        ("o", "e", "w"),
        ("u", "i", "w"),
        ("a", "e", "h"),
        ("o", "o", "h"),
    ],
)
def test_hiatus_glide(prev, cur, glide):
    assert hiatus_glide(prev, cur) == glide


# ── Token length cap ──────────────────────────────────────────────────────────

def test_longest_token_is_kept_whole(config):
    # four-letter cluster plus a long vowel pair is one syllable
    assert latin_to_aksara("nggrau", config) == "ꦔ꧀ꦒꦿꦻꦴ"


def test_token_is_cut_at_the_length_cap(config, monkeypatch):
    monkeypatch.setattr("aksara_jawa.latin._MAX_TOKEN_SPAN", 2)
    # "nggro" is cut into "ngg" + "ro"
    assert latin_to_aksara("nggro", config) == "ꦔ꧀ꦒ꧀ꦫꦺꦴ"


def test_vowel_run_is_cut_at_the_length_cap(config, monkeypatch):
    monkeypatch.setattr("aksara_jawa.latin._MAX_TOKEN_SPAN", 1)
    # "kau" is cut into "ka" + "u"
    assert latin_to_aksara("kau", config) == "ꦏꦲꦸ"


# ── Digits and punctuation ────────────────────────────────────────────────────

def test_digits(config):
    assert latin_to_aksara("123", config) == "꧇꧑꧒꧓"


def test_digits_closed_before_text(config):
    assert latin_to_aksara("2 jawa", config) == "꧇꧒꧇\u200b ꦗꦮ"


def test_digits_closed_before_letter(config):
    assert latin_to_aksara("2ka", config) == "꧇꧒꧇\u200bꦏ"


@pytest.mark.parametrize(
    "latin, expected",
    [
        ("jawa.", "ꦗꦮ꧉\u200b"),
        ("jawa, basa", "ꦗꦮ꧈\u200b ꦧꦱ"),
        ("(jawa)", "꧌ꦗꦮ꧍\u200b"),
        ("jawa?", "ꦗꦮ\u200b"),
        ("jawa:", "ꦗꦮ:"),
    ],
)
def test_punctuation(config, latin, expected):
    assert latin_to_aksara(latin, config) == expected


def test_unknown_characters_pass_through(config):
    assert latin_to_aksara("ß", config) == "ß"
