from pathlib import Path

from asciipaint.errors import InvalidConfigurationError


def _alphabetic(first: int, last: int) -> str:
    return "".join(c for c in map(chr, range(first, last + 1)) if c.isalpha())


def _span(first: int, last: int) -> str:
    return "".join(map(chr, range(first, last + 1)))


# A-z minus the punctuation between the two cases
LATIN = _alphabetic(0x41, 0x7A)

CYRILLIC = _alphabetic(0x0400, 0x04FF)

RUNIC = _alphabetic(0x16A0, 0x16FF)

HEBREW = _alphabetic(0x0590, 0x05FF)

HIRAGANA = _alphabetic(0x3040, 0x309F)

KATAKANA = _alphabetic(0x30A0, 0x30FF)

# Hangul Jamo: U+1100-U+11FF
HANGUL = _alphabetic(0x1100, 0x11FF)

CJK_UNIFIED = _alphabetic(0x4E00, 0x9FFF)

GREEK = _alphabetic(0x0370, 0x03E1)

EMOTICONS = _span(0x1F600, 0x1F64F)

DECIMAL = "0123456789"

HEXADECIMAL = DECIMAL + "ABCDEF"

BINARY = "01"

# Braille patterns: U+2800 to U+28FF (256 characters, 2x4 dot grid)
BRAILLE = _span(0x2800, 0x28FF)

# Playing cards without the unassigned slots at the start of each suit
PLAYING_CARDS = "".join(c for c in _span(0x1F0A0, 0x1F0DF) if c not in "\U0001f0af\U0001f0b0\U0001f0c0\U0001f0d0")

CHARSETS = {
    "latin": LATIN,
    "cyrillic": CYRILLIC,
    "runic": RUNIC,
    "hebrew": HEBREW,
    "hiragana": HIRAGANA,
    "katakana": KATAKANA,
    "hangul": HANGUL,
    "cjkunified": CJK_UNIFIED,
    "greek": GREEK,
    "emoticons": EMOTICONS,
    "decimal": DECIMAL,
    "hexadecimal": HEXADECIMAL,
    "binary": BINARY,
    "braille": BRAILLE,
    "playingcards": PLAYING_CARDS,
}


def get_charset(name: str) -> str:
    try:
        return CHARSETS[name.lower()]
    except KeyError:
        raise InvalidConfigurationError(f"Unknown charset: {name}") from None


def read_custom_charset(path: str | Path) -> str:
    """Read an alphabet from a file, dropping whitespace and repeated characters."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise InvalidConfigurationError(f"Unable to read custom charset file: {e}") from e
    charset = "".join(dict.fromkeys(c for c in text.strip() if not c.isspace()))
    if not charset:
        raise InvalidConfigurationError(f"Custom charset file is empty: {path}")
    return charset
