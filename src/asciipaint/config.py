import random
import re
from dataclasses import dataclass, field
from pathlib import Path

from PIL import ImageColor

from asciipaint.charsets import get_charset, read_custom_charset
from asciipaint.errors import InvalidConfigurationError
from asciipaint.font import FontFace
from asciipaint.source import CharacterSource

_BARE_HEX = re.compile(r"[0-9a-fA-F]{6}")


def parse_colour(value: str) -> tuple[int, int, int]:
    """Parse a background colour; ``#rrggbb``, bare ``rrggbb`` and CSS names are accepted."""
    if _BARE_HEX.fullmatch(value):
        value = "#" + value
    try:
        return ImageColor.getrgb(value)[:3]
    except ValueError:
        raise InvalidConfigurationError(f"Invalid background color: {value}") from None


@dataclass
class RenderConfig:
    font: str | Path
    font_size: float = 12.0
    scale: float = 1.0
    character: str | None = None
    textfile: str | Path | None = None
    charset: str = "latin"
    custom_charset: str | Path | None = None
    background: str = "#000000"
    seed: int | None = None
    workers: int = 1
    progress: bool = False
    background_rgb: tuple[int, int, int] = field(init=False)

    def __post_init__(self):
        if not self.font_size > 0:
            raise InvalidConfigurationError(f"Font size must be positive, got {self.font_size}")
        if not self.scale > 0:
            raise InvalidConfigurationError(f"Scale must be positive, got {self.scale}")
        if self.character is not None and self.textfile is not None:
            raise InvalidConfigurationError("You cannot have both options at the same time: --character, --textfile")
        if self.character is not None and len(self.character) != 1:
            raise InvalidConfigurationError(f"Character must be a single character, got {self.character!r}")
        if self.workers < 1:
            raise InvalidConfigurationError(f"Workers must be at least 1, got {self.workers}")
        get_charset(self.charset)
        self.background_rgb = parse_colour(self.background)

    @property
    def mode(self) -> str:
        if self.character is not None:
            return "fixed"
        if self.textfile is not None:
            return "textfile"
        return "random"

    def build_source(self) -> CharacterSource:
        if self.mode == "fixed":
            return CharacterSource.fixed(self.character)
        if self.mode == "textfile":
            try:
                text = Path(self.textfile).read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                raise InvalidConfigurationError(f"Could not read text file: {e}") from e
            return CharacterSource.from_text(text)
        if self.custom_charset is not None:
            return CharacterSource.random(read_custom_charset(self.custom_charset))
        return CharacterSource.random(get_charset(self.charset))

    def load_face(self) -> FontFace:
        return FontFace.load(self.font, self.font_size)

    def make_rng(self) -> random.Random:
        return random.Random(self.seed)
