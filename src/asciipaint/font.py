import io
import math
from pathlib import Path

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from asciipaint.errors import FontLoadError, GlyphRasterError, InvalidConfigurationError

# Highest code point; no font maps it, so it renders as the .notdef glyph
NOTDEF_PROBE = "\U0010ffff"

# Reference character for the advance width of a monospaced font
ADVANCE_REFERENCE = "M"


class FontFace:
    """A font loaded at one point size, with a fixed character cell.

    The cell is derived once from the font: the advance width of ``"M"`` and
    the line height (ascent + descent, without line gap). Every glyph is drawn
    into a cell of that size, which is why monospaced fonts give the best
    results.
    """

    def __init__(self, data: bytes, size: float, name: str = "<memory>"):
        if not size > 0:
            raise InvalidConfigurationError(f"Font size must be positive, got {size}")
        self.data = data
        self.size = size
        self.name = name
        self._font = self._open(size)

        ascent, descent = self._font.getmetrics()
        self.ascent = ascent
        self.cell_height = ascent + descent
        self.cell_width = int(self._font.getlength(ADVANCE_REFERENCE))
        if self.cell_width <= 0 or self.cell_height <= 0:
            raise FontLoadError(f"{name}: font has no usable cell size at {size}pt")

    @classmethod
    def load(cls, path: str | Path, size: float) -> "FontFace":
        path = Path(path)
        try:
            data = path.read_bytes()
        except OSError as e:
            raise FontLoadError(f"Unable to read font file: {e}") from e
        return cls(data, size, name=str(path))

    def _open(self, size: float) -> ImageFont.FreeTypeFont:
        try:
            return ImageFont.truetype(io.BytesIO(self.data), size)
        except (OSError, ValueError) as e:
            raise FontLoadError(f"{self.name}: {e}") from e

    def cell_size(self, scale: float = 1.0) -> tuple[int, int]:
        """Pixel (width, height) a glyph mask occupies at the given scale."""
        return math.ceil(self.cell_width * scale), math.ceil(self.cell_height * scale)

    def _draw(self, char: str, font: ImageFont.FreeTypeFont, scale: float) -> np.ndarray:
        img = Image.new("L", self.cell_size(scale), 0)
        draw = ImageDraw.Draw(img)
        draw.text((0, 0), char, fill=255, font=font)
        return np.asarray(img, dtype=np.float32) / 255.0

    def scaled_font(self, scale: float) -> ImageFont.FreeTypeFont:
        if scale == 1.0:
            return self._font
        return self._open(self.size * scale)

    def notdef_mask(self, scale: float = 1.0, font: ImageFont.FreeTypeFont | None = None) -> np.ndarray:
        """Mask of the glyph the font draws for characters it does not map."""
        if font is None:
            font = self.scaled_font(scale)
        return self._draw(NOTDEF_PROBE, font, scale)

    def rasterize(
        self,
        char: str,
        scale: float = 1.0,
        font: ImageFont.FreeTypeFont | None = None,
        notdef: np.ndarray | None = None,
    ) -> np.ndarray:
        """Render one character as a float32 coverage mask of shape ``cell_size(scale)[::-1]``.

        Raises GlyphRasterError when the font has no glyph for the character,
        detected by the character rendering exactly like the .notdef glyph.
        """
        if font is None:
            font = self.scaled_font(scale)
        if notdef is None:
            notdef = self.notdef_mask(scale, font)
        mask = self._draw(char, font, scale)
        if not char.isspace() and np.array_equal(mask, notdef):
            raise GlyphRasterError(char)
        return mask
