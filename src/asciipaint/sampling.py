import numpy as np
from PIL import Image

from asciipaint.grid import Box, Grid


def prepare_image(image: Image.Image) -> np.ndarray:
    """Convert an image to an (h, w, channels) uint8 array, RGBA only when it has transparency."""
    mode = "RGBA" if image.has_transparency_data else "RGB"
    return np.asarray(image.convert(mode), dtype=np.uint8)


def average_colour(pixels: np.ndarray, box: Box) -> tuple[int, ...]:
    """Mean of every channel over a rectangle, rounded down."""
    x0, y0, x1, y1 = box
    region = pixels[y0:y1, x0:x1].reshape(-1, pixels.shape[2]).astype(np.int64)
    return tuple(int(v) for v in region.sum(axis=0) // len(region))


def sample_colours(pixels: np.ndarray, grid: Grid) -> np.ndarray:
    """Average colour of every cell at once.

    Returns array of shape (rows, cols, channels) as uint8, matching
    ``average_colour`` cell by cell.
    """
    cw, ch = grid.cell_width, grid.cell_height
    channels = pixels.shape[2]
    width, height = grid.source_size

    # Trim to exact grid and reshape into (rows, cols, cell_h, cell_w, channels)
    trimmed = pixels[:height, :width].astype(np.int64)
    cells = trimmed.reshape(grid.rows, ch, grid.cols, cw, channels).transpose(0, 2, 1, 3, 4)

    totals = cells.sum(axis=(2, 3))
    return (totals // (cw * ch)).astype(np.uint8)
