import math
from collections.abc import Iterator
from dataclasses import dataclass

from asciipaint.errors import DegenerateGridError, InvalidConfigurationError

Box = tuple[int, int, int, int]  # (x0, y0, x1, y1), exclusive end


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


@dataclass(frozen=True)
class Cell:
    index: int
    row: int
    col: int
    source: Box  # sampling rectangle in source pixels
    target: Box  # destination rectangle on the canvas


@dataclass(frozen=True)
class Grid:
    cols: int
    rows: int
    cell_width: int
    cell_height: int
    scale: float

    @property
    def width(self) -> int:
        return round_half_up(self.cols * self.cell_width * self.scale)

    @property
    def height(self) -> int:
        return round_half_up(self.rows * self.cell_height * self.scale)

    @property
    def source_size(self) -> tuple[int, int]:
        """Part of the source image covered by the grid; the remainder is dropped."""
        return self.cols * self.cell_width, self.rows * self.cell_height

    def __len__(self) -> int:
        return self.rows * self.cols

    def cell(self, row: int, col: int) -> Cell:
        cw, ch, s = self.cell_width, self.cell_height, self.scale
        # Edges are rounded from absolute positions so neighbouring cells share them
        return Cell(
            index=row * self.cols + col,
            row=row,
            col=col,
            source=(col * cw, row * ch, (col + 1) * cw, (row + 1) * ch),
            target=(
                round_half_up(col * cw * s),
                round_half_up(row * ch * s),
                round_half_up((col + 1) * cw * s),
                round_half_up((row + 1) * ch * s),
            ),
        )

    def row(self, row: int) -> list[Cell]:
        return [self.cell(row, col) for col in range(self.cols)]

    def cells(self) -> Iterator[Cell]:
        """All cells in row-major order."""
        for row in range(self.rows):
            yield from self.row(row)


def plan_grid(image_width: int, image_height: int, cell_width: int, cell_height: int, scale: float = 1.0) -> Grid:
    """Tile an image with font cells.

    Rows and columns are counted on the unscaled source, so the number of
    cells does not depend on ``scale``; only the output canvas does.
    """
    if not (math.isfinite(scale) and scale > 0):
        raise InvalidConfigurationError(f"Scale must be a positive number, got {scale}")
    if cell_width <= 0 or cell_height <= 0:
        raise DegenerateGridError(f"Invalid cell size {cell_width}x{cell_height}")

    grid = Grid(
        cols=image_width // cell_width,
        rows=image_height // cell_height,
        cell_width=cell_width,
        cell_height=cell_height,
        scale=scale,
    )
    if grid.cols == 0 or grid.rows == 0:
        raise DegenerateGridError(
            f"Image of {image_width}x{image_height} is smaller than one {cell_width}x{cell_height} character cell"
        )
    if grid.width == 0 or grid.height == 0:
        raise DegenerateGridError(f"Scale {scale} leaves an empty {grid.width}x{grid.height} output")
    return grid
