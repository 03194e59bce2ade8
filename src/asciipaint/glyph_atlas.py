import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

import numpy as np

from asciipaint.errors import GlyphRasterError
from asciipaint.font import FontFace

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GlyphAtlas:
    """Coverage masks for every character a render will use, built before drawing starts.

    The table is never modified after ``build``, so any number of workers can
    read it while drawing.
    """

    scale: float
    masks: dict[str, np.ndarray] = field(default_factory=dict)
    missing: frozenset[str] = frozenset()

    @classmethod
    def build(cls, face: FontFace, characters: Iterable[str], scale: float = 1.0) -> "GlyphAtlas":
        font = face.scaled_font(scale)
        notdef = face.notdef_mask(scale, font)
        masks: dict[str, np.ndarray] = {}
        missing: set[str] = set()
        for char in dict.fromkeys(characters):
            try:
                mask = face.rasterize(char, scale, font=font, notdef=notdef)
            except GlyphRasterError:
                missing.add(char)
                continue
            mask.flags.writeable = False
            masks[char] = mask
        if missing:
            logger.warning("%d character(s) have no glyph in %s: %s", len(missing), face.name, "".join(sorted(missing)))
        return cls(scale=scale, masks=masks, missing=frozenset(missing))

    def mask(self, char: str) -> np.ndarray:
        try:
            return self.masks[char]
        except KeyError:
            reason = "no renderable glyph in font" if char in self.missing else "not in glyph atlas"
            raise GlyphRasterError(char, reason) from None
