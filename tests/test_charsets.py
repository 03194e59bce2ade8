import pytest

from asciipaint.charsets import BINARY, HEXADECIMAL, LATIN, PLAYING_CARDS, get_charset, read_custom_charset
from asciipaint.errors import InvalidConfigurationError


def test_latin_is_ascii_letters():
    assert LATIN == "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"


def test_small_charsets():
    assert BINARY == "01"
    assert HEXADECIMAL == "0123456789ABCDEF"


def test_playing_cards_skip_unassigned():
    assert "\U0001f0a1" in PLAYING_CARDS
    assert "\U0001f0af" not in PLAYING_CARDS
    assert "\U0001f0c0" not in PLAYING_CARDS


def test_get_charset_is_case_insensitive():
    assert get_charset("Cyrillic") == get_charset("cyrillic")
    assert all(c.isalpha() for c in get_charset("greek"))


def test_unknown_charset():
    with pytest.raises(InvalidConfigurationError, match="Unknown charset"):
        get_charset("klingon")


def test_custom_charset(tmp_path):
    path = tmp_path / "chars.txt"
    path.write_text("  ab ba\ncd \n", encoding="utf-8")
    assert read_custom_charset(path) == "abcd"


def test_custom_charset_missing_file(tmp_path):
    with pytest.raises(InvalidConfigurationError, match="Unable to read"):
        read_custom_charset(tmp_path / "nope.txt")


def test_custom_charset_empty(tmp_path):
    path = tmp_path / "blank.txt"
    path.write_text(" \n\t", encoding="utf-8")
    with pytest.raises(InvalidConfigurationError, match="empty"):
        read_custom_charset(path)
