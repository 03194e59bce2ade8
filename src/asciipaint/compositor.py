import numpy as np

from asciipaint.glyph_atlas import GlyphAtlas
from asciipaint.grid import Box


class GlyphCompositor:
    """Draws tinted glyphs onto an (h, w, 3) uint8 canvas in place."""

    def __init__(self, canvas: np.ndarray, atlas: GlyphAtlas):
        self.canvas = canvas
        self.atlas = atlas

    def draw(self, char: str, colour, box: Box) -> None:
        """Blend ``colour`` into ``box`` weighted by the glyph's coverage.

        An alpha channel in ``colour`` scales the coverage. Pixels the glyph
        does not touch keep their value; the mask is clipped to the box.
        Raises GlyphRasterError if the atlas has no glyph for ``char``.
        """
        mask = self.atlas.mask(char)
        x0, y0, x1, y1 = box
        h = min(y1 - y0, mask.shape[0])
        w = min(x1 - x0, mask.shape[1])
        if h <= 0 or w <= 0:
            return

        colour = np.asarray(colour, dtype=np.float32)
        coverage = mask[:h, :w, None]
        if colour.shape[0] == 4:
            coverage = coverage * (colour[3] / 255.0)

        region = self.canvas[y0 : y0 + h, x0 : x0 + w]
        blended = region * (1.0 - coverage) + colour[:3] * coverage
        region[:] = np.clip(np.rint(blended), 0, 255).astype(np.uint8)
