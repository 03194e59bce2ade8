from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum

from asciipaint.charsets import LATIN
from asciipaint.errors import EmptyTextSourceError, InvalidConfigurationError


class SourceKind(Enum):
    RANDOM = "random"
    FIXED = "fixed"
    TEXT = "textfile"


@dataclass(frozen=True)
class CharacterSource:
    """Policy deciding which character fills each cell.

    The source itself is immutable. The position in a text is an explicit
    index, so cell ``n`` always receives the same character no matter in which
    order cells are rendered.
    """

    kind: SourceKind
    characters: str

    @classmethod
    def random(cls, alphabet: str = LATIN) -> "CharacterSource":
        if not alphabet:
            raise InvalidConfigurationError("Random mode needs at least one character")
        return cls(SourceKind.RANDOM, alphabet)

    @classmethod
    def fixed(cls, char: str) -> "CharacterSource":
        if len(char) != 1:
            raise InvalidConfigurationError(f"Fixed mode needs exactly one character, got {char!r}")
        return cls(SourceKind.FIXED, char)

    @classmethod
    def from_text(cls, text: str) -> "CharacterSource":
        """Keep only the letters of a text; whitespace, digits and punctuation are dropped."""
        letters = "".join(c for c in text if c.isalpha())
        if not letters:
            raise EmptyTextSourceError("Text contains no alphabetic characters")
        return cls(SourceKind.TEXT, letters)

    def char_at(self, index: int, rng: random.Random | None = None) -> str:
        if self.kind is SourceKind.TEXT:
            return self.characters[index % len(self.characters)]
        if self.kind is SourceKind.FIXED:
            return self.characters
        if self.kind is SourceKind.RANDOM:
            return (rng or random).choice(self.characters)
        raise AssertionError(f"Unhandled source kind: {self.kind}")


class CharacterStream:
    """Cursor over a CharacterSource, advanced once per cell."""

    def __init__(self, source: CharacterSource, rng: random.Random | None = None, position: int = 0):
        self.source = source
        self.rng = rng if rng is not None else random.Random()
        self.position = position

    def next(self) -> str:
        char = self.source.char_at(self.position, self.rng)
        self.position += 1
        return char

    def __iter__(self):
        return self

    def __next__(self) -> str:
        return self.next()

    def take(self, count: int) -> list[str]:
        """Characters for the next ``count`` cells, in order."""
        return [self.next() for _ in range(count)]
