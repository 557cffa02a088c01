"""
Seat Map Rendering

Text and matplotlib depictions of a seat map. Neither touches the seat map
itself.
"""

from typing import Optional, Tuple

import matplotlib.pyplot as plt
import numpy as np

from .classification import is_odd
from .seating import EMPTY_SEAT, LayoutMode, OddSide, SeatMap

TITLE = "Seat Map"
AISLE_LEGEND = "Left   Aisle   Right"


def edge_labels(seat_map: SeatMap) -> Tuple[str, str]:
    """
    Labels printed above and below the grid

    Left-right layouts always show Front on top. Front-back layouts flip
    the labels when the odd values sit in the second (back) half.
    """
    config = seat_map.config
    if config.mode is LayoutMode.FRONT_BACK and config.odd_side is OddSide.SECOND:
        return "Rear", "Front"
    return "Front", "Rear"


def _cell_width(grid: np.ndarray) -> int:
    occupied = grid[grid != EMPTY_SEAT]
    if occupied.size == 0:
        return 2
    return max(2, max(len(str(int(v))) for v in occupied))


def render_ascii(seat_map: SeatMap) -> str:
    """
    Render the seat map as a framed text block

    Occupied seats print as [NN] (zero padded), empty seats as --.
    """
    width = _cell_width(seat_map.grid)
    empty = " " + "-" * width + "  "
    inner = seat_map.cols * (width + 3) + 1
    border = "+" + "-" * inner + "+"
    top, bottom = edge_labels(seat_map)

    lines = [border, "|" + TITLE.center(inner) + "|", border, "|" + top.center(inner) + "|"]

    for row in seat_map.grid:
        cells = "".join(
            empty if int(v) == EMPTY_SEAT else f"[{int(v):0{width}d}] "
            for v in row
        )
        lines.append("| " + cells + "|")

    lines.append("|" + bottom.center(inner) + "|")
    lines.append(border)

    if seat_map.config.mode is LayoutMode.LEFT_RIGHT:
        lines.append(AISLE_LEGEND.center(inner + 2).rstrip())

    return "\n".join(lines)


class SeatMapVisualizer:
    """matplotlib visualization of a seat map"""

    def __init__(self, odd_color: str = "orange", even_color: str = "cyan"):
        self.odd_color = odd_color
        self.even_color = even_color

    def plot_seat_map(self,
                      seat_map: SeatMap,
                      ax: plt.Axes = None,
                      figsize: Tuple[int, int] = (10, 6),
                      save_path: Optional[str] = None,
                      show: bool = False):
        """
        Plot occupied seats as coloured squares annotated with their values

        Args:
            seat_map: Seat map to draw
            ax: Optional axes to draw into
            figsize: Figure size when a new figure is created
            save_path: Optional path to save the figure
            show: Call plt.show() after drawing

        Returns:
            The matplotlib Figure
        """
        if ax is None:
            fig, ax = plt.subplots(figsize=figsize)
        else:
            fig = ax.figure

        # Draw grid
        for c in range(seat_map.cols + 1):
            ax.axvline(c - 0.5, color="lightgray", linewidth=0.5, alpha=0.5)
        for r in range(seat_map.rows + 1):
            ax.axhline(r - 0.5, color="lightgray", linewidth=0.5, alpha=0.5)

        rows, cols = np.nonzero(seat_map.grid != EMPTY_SEAT)
        values = [int(seat_map.grid[r, c]) for r, c in zip(rows, cols)]

        for label, color, wanted in (("odd", self.odd_color, True), ("even", self.even_color, False)):
            points = [(c, r, v) for r, c, v in zip(rows, cols, values) if is_odd(v) == wanted]
            if not points:
                continue
            xs, ys, _ = zip(*points)
            ax.scatter(xs, ys, c=color, s=400, marker="s",
                       label=f"{label} ({len(points)})",
                       edgecolors="black", linewidth=1.0, alpha=0.9)

        for r, c, v in zip(rows, cols, values):
            ax.text(c, r, str(v), ha='center', va='center', fontsize=8)

        # Middle split of the layout
        config = seat_map.config
        if config.mode is LayoutMode.LEFT_RIGHT:
            ax.axvline(seat_map.cols // 2 - 0.5, color="purple", linewidth=2, linestyle='--', alpha=0.7)
        else:
            ax.axhline(seat_map.rows // 2 - 0.5, color="purple", linewidth=2, linestyle='--', alpha=0.7)

        top, bottom = edge_labels(seat_map)
        ax.set_xlim(-0.5, seat_map.cols - 0.5)
        ax.set_ylim(-0.5, seat_map.rows - 0.5)
        ax.set_aspect("equal")
        ax.invert_yaxis()
        ax.set_title(f"{TITLE} ({config.mode.value}, odd side {config.odd_side.value})\n{top}")
        ax.set_xlabel(bottom)
        if len(values):
            ax.legend(bbox_to_anchor=(1.05, 1), loc='upper left')

        if save_path:
            fig.savefig(save_path, dpi=150, bbox_inches='tight')

        if show:
            plt.show()

        return fig
