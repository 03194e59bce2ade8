import random

import pytest

from asciipaint.charsets import LATIN
from asciipaint.errors import EmptyTextSourceError, InvalidConfigurationError
from asciipaint.source import CharacterSource, CharacterStream, SourceKind


def test_text_keeps_only_letters():
    source = CharacterSource.from_text("Hello, World!\n42 times\tover")
    assert source.kind is SourceKind.TEXT
    assert source.characters == "HelloWorldtimesover"
    assert all(c.isalpha() for c in source.characters)


def test_text_keeps_non_latin_letters():
    source = CharacterSource.from_text("Ærø — привет 1")
    assert source.characters == "Ærøпривет"


def test_text_cycles():
    source = CharacterSource.from_text("a-b c")
    stream = CharacterStream(source)
    assert stream.take(7) == list("abcabca")
    assert stream.position == 7


def test_text_index_independent_of_order():
    source = CharacterSource.from_text("The quick brown fox")
    buffer = source.characters
    for i in reversed(range(50)):
        assert source.char_at(i) == buffer[i % len(buffer)]


def test_stream_is_iterable():
    stream = CharacterStream(CharacterSource.from_text("xyz"), position=1)
    assert next(stream) == "y"
    assert next(stream) == "z"
    assert next(stream) == "x"


@pytest.mark.parametrize("text", ["", "   \n\t", "1234 !?., -- 99"])
def test_empty_after_filtering(text):
    with pytest.raises(EmptyTextSourceError):
        CharacterSource.from_text(text)


def test_fixed_always_same():
    stream = CharacterStream(CharacterSource.fixed("A"))
    assert set(stream.take(100)) == {"A"}


@pytest.mark.parametrize("char", ["", "AB"])
def test_fixed_needs_one_character(char):
    with pytest.raises(InvalidConfigurationError):
        CharacterSource.fixed(char)


def test_random_draws_from_alphabet():
    stream = CharacterStream(CharacterSource.random(), rng=random.Random(1))
    chars = stream.take(500)
    assert set(chars) <= set(LATIN)
    assert len(set(chars)) > 20


def test_random_custom_alphabet():
    stream = CharacterStream(CharacterSource.random("01"))
    assert set(stream.take(200)) == {"0", "1"}


def test_random_seeded_is_repeatable():
    source = CharacterSource.random()
    assert CharacterStream(source, random.Random(3)).take(50) == CharacterStream(source, random.Random(3)).take(50)


def test_random_needs_alphabet():
    with pytest.raises(InvalidConfigurationError):
        CharacterSource.random("")


def test_source_is_immutable():
    source = CharacterSource.fixed("A")
    with pytest.raises(AttributeError):
        source.characters = "B"


def test_char_at_with_explicit_rng():
    source = CharacterSource.random("xyz")
    assert isinstance(CharacterSource.__dict__["random"], classmethod)
    assert source.char_at(0, random.Random(4)) in "xyz"
    assert source.char_at(0, random.Random(4)) == source.char_at(9, random.Random(4))
