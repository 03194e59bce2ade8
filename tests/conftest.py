import math
import shutil
import subprocess

import numpy as np
import pytest

from asciipaint.errors import GlyphRasterError

_FONT_CANDIDATES = [
    "/usr/share/fonts/truetype/dejavu/DejaVuSansMono.ttf",
    "/usr/share/fonts/truetype/liberation/LiberationMono-Regular.ttf",
    "/usr/share/fonts/TTF/DejaVuSansMono.ttf",
    "/usr/share/fonts/dejavu-sans-mono-fonts/DejaVuSansMono.ttf",
]


def _find_monospace_font():
    """Find a monospace font on the system."""
    for path in _FONT_CANDIDATES:
        if shutil.os.path.exists(path):
            return path
    result = shutil.which("fc-match")
    if result:
        out = subprocess.run(["fc-match", "-f", "%{file}", "monospace"], capture_output=True, text=True)
        if out.returncode == 0 and out.stdout.strip():
            return out.stdout.strip()
    return None


FONT_PATH = _find_monospace_font()
needs_font = pytest.mark.skipif(FONT_PATH is None, reason="No monospace font found on system")


class BlockFace:
    """Stand-in font whose glyphs fill the top-left ``ink`` fraction of the cell."""

    def __init__(self, cell_width=10, cell_height=10, missing="", ink=1.0):
        self.name = "block"
        self.cell_width = cell_width
        self.cell_height = cell_height
        self.missing = set(missing)
        self.ink = ink
        self.rasterized = []

    def scaled_font(self, scale):
        return None

    def notdef_mask(self, scale=1.0, font=None):
        w, h = math.ceil(self.cell_width * scale), math.ceil(self.cell_height * scale)
        return np.zeros((h, w), dtype=np.float32)

    def rasterize(self, char, scale=1.0, font=None, notdef=None):
        self.rasterized.append(char)
        if char in self.missing:
            raise GlyphRasterError(char)
        w, h = math.ceil(self.cell_width * scale), math.ceil(self.cell_height * scale)
        mask = np.zeros((h, w), dtype=np.float32)
        mask[: round(h * self.ink), : round(w * self.ink)] = 1.0
        return mask


@pytest.fixture
def block_face():
    return BlockFace()
