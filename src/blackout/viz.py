import matplotlib.pyplot as plt
import numpy as np
from matplotlib.patches import Rectangle

from .patterns import display_name, offsets


def _outline(ax, cells, color, linewidth=2):
    for r, c in cells:
        ax.add_patch(
            Rectangle(
                (c - 0.5, r - 0.5),
                1,
                1,
                edgecolor=color,
                facecolor="none",
                linewidth=linewidth,
            )
        )


def show_board(
    board,
    solution=None,
    ax=None,
    click_color="red",
    cmap="Greys_r",
    title=None,
):
    """
    Draw the lit cells of a board, optionally outlining a set of clicks.

    Parameters
    ----------
    board : Board
        Board to draw; lit cells are drawn bright.
    solution : iterable[(int, int)], optional
        Cells to outline, e.g. a Solution or a hint wrapped in a list.
    """
    if ax is None:
        _, ax = plt.subplots(figsize=(3.5, 3.5))
    grid = board.get_board_snapshot().astype(float)
    ax.imshow(grid, cmap=cmap, vmin=0.0, vmax=1.0)
    if solution is not None:
        _outline(ax, list(solution), click_color)
    ax.set_xticks(range(board.cols))
    ax.set_yticks(range(board.rows))
    ax.set_xlabel("col")
    ax.set_ylabel("row")
    if title is None:
        title = f"{board.count_on()} on, {board.move_count} moves"
    ax.set_title(title)
    return ax


def show_pattern(pattern, ax=None, cmap="viridis", pressed_color="red"):
    """
    Footprint of one click for a toggle pattern, centered on the pressed cell.
    """
    offs = offsets(pattern)
    radius = max(max(abs(dr), abs(dc)) for dr, dc in offs)
    side = 2 * radius + 1
    grid = np.zeros((side, side), dtype=float)
    for dr, dc in offs:
        grid[radius + dr, radius + dc] = 1.0

    if ax is None:
        _, ax = plt.subplots(figsize=(3.5, 3.5))
    ax.imshow(grid, cmap=cmap, vmin=0.0, vmax=1.0)
    _outline(ax, [(radius, radius)], pressed_color)
    ax.set_xticks(range(side))
    ax.set_xticklabels(range(-radius, radius + 1))
    ax.set_yticks(range(side))
    ax.set_yticklabels(range(-radius, radius + 1))
    ax.set_xlabel("dc")
    ax.set_ylabel("dr")
    ax.set_title(display_name(pattern))
    return ax
