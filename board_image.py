"""
Board snapshot rendering for TicTacToe.
Draws the current board (and the winning line, if any) to a PIL image
so a game can be saved as a PNG.
"""

from typing import Optional, Sequence, Tuple

import numpy as np
from PIL import Image, ImageDraw, ImageColor

from game import GameConfig, Mark
from game.win_checker import WinLine


def _rgb(color: str) -> Tuple[int, int, int]:
    return ImageColor.getrgb(color)[:3]


def render_board(
    board: Sequence[Optional[Mark]],
    winning_line: Optional[WinLine] = None,
    size: int = GameConfig.SNAPSHOT_SIZE
) -> Image.Image:
    """
    Create a picture of the board with X and O marks.

    Args:
        board: The 9-cell board.
        winning_line: Cells to highlight, if the game was won.
        size: Size of the output image (square).

    Returns:
        RGB PIL image.
    """
    n = GameConfig.BOARD_SIZE
    cell_size = size // n
    line_thickness = max(2, size // 100)

    # Background, with winning cells filled in
    pixels = np.empty((size, size, 3), dtype=np.uint8)
    pixels[:] = _rgb(GameConfig.CELL_COLOR)
    if winning_line:
        for index in winning_line:
            row, col = divmod(index, n)
            pixels[row * cell_size:(row + 1) * cell_size,
                   col * cell_size:(col + 1) * cell_size] = _rgb(GameConfig.WIN_CELL_COLOR)

    image = Image.fromarray(pixels)
    draw = ImageDraw.Draw(image)

    # Grid lines
    grid_color = _rgb(GameConfig.BG_COLOR)
    for i in range(1, n):
        x = i * cell_size
        draw.line([(x, 0), (x, size)], fill=grid_color, width=line_thickness)
        draw.line([(0, x), (size, x)], fill=grid_color, width=line_thickness)

    # Marks
    pad = cell_size // 5
    mark_width = max(3, cell_size // 12)
    for index, mark in enumerate(board):
        if mark is None:
            continue
        row, col = divmod(index, n)
        left, top = col * cell_size + pad, row * cell_size + pad
        right, bottom = (col + 1) * cell_size - pad, (row + 1) * cell_size - pad

        if mark == Mark.X:
            color = _rgb(GameConfig.X_COLOR)
            draw.line([(left, top), (right, bottom)], fill=color, width=mark_width)
            draw.line([(left, bottom), (right, top)], fill=color, width=mark_width)
        else:
            draw.ellipse([left, top, right, bottom], outline=_rgb(GameConfig.O_COLOR), width=mark_width)

    return image


def save_board(
    board: Sequence[Optional[Mark]],
    path: str,
    winning_line: Optional[WinLine] = None,
    size: int = GameConfig.SNAPSHOT_SIZE
) -> str:
    """Render the board and write it to path. Returns the path."""
    render_board(board, winning_line, size).save(path)
    return path
