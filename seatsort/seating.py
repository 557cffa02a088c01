"""
Seat Mapping

Maps a sorted odd sequence and a sorted even sequence onto a 2D seat grid.

Two layout modes are supported:

- LEFT_RIGHT: columns are split into a left and a right half; every row
  receives odd values in one half and even values in the other
- FRONT_BACK: rows are split into a front and a back half; one half is
  filled row-major with odd values, the other with even values

Each sequence is consumed through a cursor that only moves forward. Values
that do not fit in their region are dropped silently; overflow is not an
error.
"""

import logging
import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Sequence, Tuple

import numpy as np

from .errors import InvalidConfiguration

logger = logging.getLogger(__name__)

# Grid limits
MAX_ROWS = 32
MAX_COLS = 32

# Auto-derived dimensions
DEFAULT_COLUMNS = 6   # left-right mode
DEFAULT_ROWS = 2      # front-back mode

EMPTY_SEAT = 0


class LayoutMode(Enum):
    """How the grid is split between odd and even values"""
    LEFT_RIGHT = "left_right"
    FRONT_BACK = "front_back"


class OddSide(Enum):
    """Which half of the grid receives the odd values"""
    FIRST = "first"     # left or front
    SECOND = "second"   # right or back


@dataclass(frozen=True)
class SeatConfig:
    """
    Layout configuration

    rows/cols of None (or 0) mean "derive from the data size".
    """
    rows: Optional[int] = None
    cols: Optional[int] = None
    mode: LayoutMode = LayoutMode.LEFT_RIGHT
    odd_side: OddSide = OddSide.FIRST

    @property
    def is_resolved(self) -> bool:
        return bool(self.rows) and bool(self.cols)

    def validate(self):
        """
        Check explicit dimensions and enum values

        Raises:
            InvalidConfiguration: On negative or oversized dimensions or
                unknown mode / odd side values
        """
        if not isinstance(self.mode, LayoutMode):
            raise InvalidConfiguration(f"Unknown layout mode: {self.mode!r}")
        if not isinstance(self.odd_side, OddSide):
            raise InvalidConfiguration(f"Unknown odd side: {self.odd_side!r}")

        for name, value, limit in (("rows", self.rows, MAX_ROWS), ("cols", self.cols, MAX_COLS)):
            if value is None or value == 0:
                continue
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidConfiguration(f"{name} must be an integer, got {value!r}")
            if value < 0:
                raise InvalidConfiguration(f"{name} must be positive, got {value}")
            if value > limit:
                raise InvalidConfiguration(f"{name} must not exceed {limit}, got {value}")


def resolve_dimensions(config: SeatConfig, total: int) -> SeatConfig:
    """
    Fill in unspecified rows/cols for a data set of the given size

    If either dimension is unspecified both are derived: left-right fixes
    the width to DEFAULT_COLUMNS, front-back fixes the depth to
    DEFAULT_ROWS. Results are clamped to MAX_ROWS x MAX_COLS, which can
    leave fewer seats than values.

    Returns:
        A resolved copy of config
    """
    config.validate()
    if config.is_resolved:
        return config

    if config.mode is LayoutMode.LEFT_RIGHT:
        cols = DEFAULT_COLUMNS
        rows = math.ceil(total / cols)
    else:
        rows = DEFAULT_ROWS
        cols = math.ceil(total / rows)

    # An empty data set still gets a one-seat-deep grid
    rows = min(max(rows, 1), MAX_ROWS)
    cols = min(max(cols, 1), MAX_COLS)

    if rows * cols < total:
        logger.debug("Grid %dx%d holds fewer seats than %d values", rows, cols, total)
    logger.debug("Resolved grid dimensions: rows=%d, cols=%d (%s)", rows, cols, config.mode.value)

    return replace(config, rows=rows, cols=cols)


@dataclass
class SeatMap:
    """
    Result of a seating run

    Attributes:
        grid: rows x cols integer array, EMPTY_SEAT for unoccupied cells
        config: The resolved configuration used to build the grid
        placed_odd: Number of odd values seated
        placed_even: Number of even values seated
        total_odd: Length of the odd sequence offered
        total_even: Length of the even sequence offered
    """
    grid: np.ndarray
    config: SeatConfig
    placed_odd: int = 0
    placed_even: int = 0
    total_odd: int = 0
    total_even: int = 0

    @property
    def rows(self) -> int:
        return self.grid.shape[0]

    @property
    def cols(self) -> int:
        return self.grid.shape[1]

    @property
    def unplaced_odd(self) -> int:
        return self.total_odd - self.placed_odd

    @property
    def unplaced_even(self) -> int:
        return self.total_even - self.placed_even

    @property
    def unplaced(self) -> int:
        return self.unplaced_odd + self.unplaced_even

    def occupant(self, row: int, col: int) -> Optional[int]:
        """Value seated at (row, col), or None if the seat is empty"""
        value = int(self.grid[row, col])
        return None if value == EMPTY_SEAT else value

    def to_rows(self):
        """Grid as a list of row lists of plain ints"""
        return [[int(v) for v in row] for row in self.grid]


def split_halves(size: int, odd_side: OddSide) -> Tuple[range, range]:
    """
    Index ranges of the odd and even halves along one axis

    The first half spans size // 2 indices and the second half takes the
    rest, so an odd leftover line belongs to the second half.

    Returns:
        (odd_range, even_range)
    """
    first = range(0, size // 2)
    second = range(size // 2, size)
    if odd_side is OddSide.SECOND:
        return second, first
    return first, second


def _fill_left_right(grid: np.ndarray, odd: Sequence[int], even: Sequence[int],
                     odd_side: OddSide):
    odd_cols, even_cols = split_halves(grid.shape[1], odd_side)

    idx_odd = idx_even = 0
    for r in range(grid.shape[0]):
        for c in odd_cols:
            if idx_odd >= len(odd):
                break
            grid[r, c] = odd[idx_odd]
            idx_odd += 1
        for c in even_cols:
            if idx_even >= len(even):
                break
            grid[r, c] = even[idx_even]
            idx_even += 1

    return idx_odd, idx_even


def _fill_rows_row_major(grid: np.ndarray, values: Sequence[int], rows: range) -> int:
    """Fill the given rows, all columns of a row first"""
    idx = 0
    for r in rows:
        for c in range(grid.shape[1]):
            if idx >= len(values):
                return idx
            grid[r, c] = values[idx]
            idx += 1
    return idx


def _fill_front_back(grid: np.ndarray, odd: Sequence[int], even: Sequence[int],
                     odd_side: OddSide):
    odd_rows, even_rows = split_halves(grid.shape[0], odd_side)

    idx_odd = _fill_rows_row_major(grid, odd, odd_rows)
    idx_even = _fill_rows_row_major(grid, even, even_rows)
    return idx_odd, idx_even


def gen_seat_map(odd: Sequence[int], even: Sequence[int],
                 config: Optional[SeatConfig] = None) -> SeatMap:
    """
    Seat the sorted odd and even values on a grid

    Args:
        odd: Sorted odd values
        even: Sorted even values
        config: Layout configuration; unspecified dimensions are derived
            from len(odd) + len(even)

    Returns:
        SeatMap holding the filled grid and the resolved configuration

    Raises:
        InvalidConfiguration: If the configuration is invalid
    """
    if config is None:
        config = SeatConfig()

    resolved = resolve_dimensions(config, len(odd) + len(even))
    grid = np.full((resolved.rows, resolved.cols), EMPTY_SEAT, dtype=np.int64)

    if resolved.mode is LayoutMode.LEFT_RIGHT:
        placed_odd, placed_even = _fill_left_right(grid, odd, even, resolved.odd_side)
    else:
        placed_odd, placed_even = _fill_front_back(grid, odd, even, resolved.odd_side)

    seat_map = SeatMap(
        grid=grid,
        config=resolved,
        placed_odd=placed_odd,
        placed_even=placed_even,
        total_odd=len(odd),
        total_even=len(even)
    )

    if seat_map.unplaced:
        logger.info("%d values did not fit the %dx%d grid (odd=%d, even=%d)",
                    seat_map.unplaced, resolved.rows, resolved.cols,
                    seat_map.unplaced_odd, seat_map.unplaced_even)

    return seat_map
