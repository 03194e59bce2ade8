from __future__ import annotations

import logging
import random
from concurrent.futures import ThreadPoolExecutor
from contextlib import nullcontext
from enum import Enum
from typing import Protocol

import numpy as np
from PIL import Image
from tqdm import tqdm

from asciipaint.compositor import GlyphCompositor
from asciipaint.errors import AsciiPaintError, GlyphRasterError, InvalidConfigurationError
from asciipaint.glyph_atlas import GlyphAtlas
from asciipaint.grid import Grid, plan_grid
from asciipaint.sampling import prepare_image, sample_colours
from asciipaint.source import CharacterSource, CharacterStream

logger = logging.getLogger(__name__)


class Face(Protocol):
    name: str
    cell_width: int
    cell_height: int

    def scaled_font(self, scale: float): ...

    def notdef_mask(self, scale: float = 1.0, font=None) -> np.ndarray: ...

    def rasterize(self, char: str, scale: float = 1.0, font=None, notdef=None) -> np.ndarray:
        """Coverage mask for one character, raising GlyphRasterError if the font lacks it."""
        ...


class RenderState(Enum):
    INITIALIZING = "initializing"
    PLANNING = "planning"
    RENDERING = "rendering"
    DONE = "done"
    FAILED = "failed"


class RenderEngine:
    """Re-draws an image as a grid of tinted characters.

    One engine performs a single pass: ``render`` may only be called once.
    """

    def __init__(
        self,
        face: Face,
        source: CharacterSource,
        scale: float = 1.0,
        background: tuple[int, int, int] = (0, 0, 0),
        rng: random.Random | None = None,
        workers: int = 1,
        progress: bool = False,
    ):
        self.face = face
        self.source = source
        self.scale = scale
        self.background = background
        self.rng = rng
        self.workers = workers
        self.progress = progress

        self.state = RenderState.INITIALIZING
        self.error: AsciiPaintError | None = None
        self.grid: Grid | None = None
        self.characters: list[str] = []
        self.skipped = 0

    def _validate(self, image: Image.Image | None) -> None:
        if image is None:
            raise InvalidConfigurationError("No image to render")
        if self.face is None:
            raise InvalidConfigurationError("No font loaded")
        if self.source is None:
            raise InvalidConfigurationError("No character source")
        if self.workers < 1:
            raise InvalidConfigurationError(f"Workers must be at least 1, got {self.workers}")

    def render(self, image: Image.Image) -> Image.Image:
        if self.state is not RenderState.INITIALIZING:
            raise InvalidConfigurationError(f"Engine already used (state: {self.state.value})")
        try:
            self._validate(image)
            return self._render(image)
        except AsciiPaintError as e:
            self.state = RenderState.FAILED
            self.error = e
            raise

    def _render(self, image: Image.Image) -> Image.Image:
        self.state = RenderState.PLANNING
        pixels = prepare_image(image)
        grid = plan_grid(image.width, image.height, self.face.cell_width, self.face.cell_height, self.scale)
        self.grid = grid
        logger.debug(
            "Grid %dx%d cells of %dx%d px, output %dx%d",
            grid.cols,
            grid.rows,
            grid.cell_width,
            grid.cell_height,
            grid.width,
            grid.height,
        )

        # Characters are fixed per cell index up front so row order does not matter
        self.characters = CharacterStream(self.source, self.rng).take(len(grid))
        colours = sample_colours(pixels, grid)
        atlas = GlyphAtlas.build(self.face, self.characters, grid.scale)

        self.state = RenderState.RENDERING
        canvas = np.empty((grid.height, grid.width, 3), dtype=np.uint8)
        canvas[:] = self.background
        compositor = GlyphCompositor(canvas, atlas)

        def render_row(row: int) -> int:
            skipped = 0
            for cell in grid.row(row):
                try:
                    compositor.draw(self.characters[cell.index], colours[cell.row, cell.col], cell.target)
                except GlyphRasterError as e:
                    logger.debug("Skipping cell (%d, %d): %s", cell.row, cell.col, e)
                    skipped += 1
            return skipped

        rows = range(grid.rows)
        with (
            tqdm(total=grid.rows, desc="Rendering", unit="row", disable=not self.progress) as pbar,
            ThreadPoolExecutor(max_workers=self.workers) if self.workers > 1 else nullcontext() as executor,
        ):
            results = executor.map(render_row, rows) if executor is not None else map(render_row, rows)
            for skipped in results:
                self.skipped += skipped
                pbar.update(1)

        if self.skipped:
            logger.info("Left %d cell(s) blank for missing glyphs", self.skipped)
        self.state = RenderState.DONE
        return Image.fromarray(canvas)
