"""Tests for Aksara Jawa -> Latin (aksara.py)."""

import pytest

from aksara_jawa.aksara import OutputBuffer, aksara_to_latin
from aksara_jawa.latin import latin_to_aksara


# ── OutputBuffer ──────────────────────────────────────────────────────────────

def test_buffer_push_and_replace():
    buf = OutputBuffer()
    buf.push("ka")
    buf.push("ta", capitalize=True)
    assert str(buf) == "kaTa"
    buf.replace_last(1, "i")
    assert str(buf) == "kaTi"
    buf.replace_last(3, "nca")
    assert str(buf) == "knca"


@pytest.mark.parametrize("n", [0, 4, -1])
def test_buffer_rejects_other_arities(n):
    buf = OutputBuffer()
    buf.push("kata")
    with pytest.raises(ValueError):
        buf.replace_last(n, "x")


# ── Words ─────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "aksara, expected",
    [
        ("ꦲꦏ꧀ꦱꦫ ꦗꦮ", "aksara jawa"),
        ("ꦏꦿꦠꦺꦴꦤ꧀", "kraton"),
        ("ꦠꦸꦁꦒꦭ꧀", "tunggal"),
        ("ꦱꦺꦩ꧀ꦧꦃꦪꦁ", "sembahyang"),
        ("ꦝꦸꦮꦶꦠ꧀", "dhuwit"),
        ("ꦲꦶꦏꦸ", "iku"),
        ("ꦏꦚ꧀ꦕ", "kanca"),
        ("ꦏꦻꦴ", "kau"),
        ("ꦏꦶꦲꦺ", "kie"),
        ("ꦑ", "kʰa"),
    ],
)
def test_words(aksara, expected):
    assert aksara_to_latin(aksara) == expected


def test_digits():
    assert aksara_to_latin("꧇꧑꧒꧓") == "123"
    assert aksara_to_latin("꧇꧒꧇\u200b ꦗꦮ") == "2 jawa"


def test_ha_between_consonant_and_vowel_is_kept():
    # ambiguous with the glide inserted for "kae"
    assert aksara_to_latin("ꦏꦲꦺ") == "kahe"


def test_ha_after_independent_vowel_is_pronounced():
    assert aksara_to_latin("ꦄꦲ") == "Aha"
    assert aksara_to_latin("ꦎꦲꦶ") == "Ohi"


def test_murda_round_trip_keeps_ha(murda_config):
    assert aksara_to_latin(latin_to_aksara("aha", murda_config)) == "Aha"


def test_non_javanese_text_passes_through():
    assert aksara_to_latin("ꦗꦮ abc") == "jawa abc"


# ── Proper nouns and loan sounds ──────────────────────────────────────────────

def test_proper_noun_marker_capitalises():
    assert aksara_to_latin("꧊ꦑ") == "Ka"
    assert aksara_to_latin("꧊ꦔꦺꦴ") == "Ngo"


def test_cecak_telu_loan_sounds():
    assert aksara_to_latin("꧊ꦥ꦳ꦠꦶꦩꦃ") == "Fatimah"
    assert aksara_to_latin("ꦗ꦳ꦩꦤ꧀") == "zaman"


def test_doubled_letters_after_signs():
    assert aksara_to_latin("ꦧꦂꦫꦱ") == "barasa"
    assert aksara_to_latin("ꦧꦁꦔꦺꦠ꧀") == "banget"
