# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Shape presets and text shape parsing.

Text shapes use one line per row: '#' marks a blocked cell, anything
else ('.', '_', a letter) an open cell.
"""

from pathlib import Path
from typing import Iterable, List

from grid_models import BLOCK, Shape


class ShapeFormatError(Exception):
    """Raised when a text shape cannot be parsed."""
    pass


# Default shapes for each preset size, one string per row
PRESET_ROWS = {
    # 5x5 grid - all open cells
    5: [
        ".....",
        ".....",
        ".....",
        ".....",
        ".....",
    ],

    # 7x7 grid - cut corners and a center block
    7: [
        "##...##",
        "#.....#",
        ".......",
        "...#...",
        ".......",
        "#.....#",
        "##...##",
    ],

    # 9x9 grid - cut corners and a 3x3 center block
    9: [
        "##.....##",
        "#.......#",
        ".........",
        "...###...",
        "...###...",
        "...###...",
        ".........",
        "#.......#",
        "##.....##",
    ],

    # 11x11 grid - diamond outline around a center block
    11: [
        "###.....###",
        "##.......##",
        "#.........#",
        ".....#.....",
        "....###....",
        "...#####...",
        "....###....",
        ".....#.....",
        "#.........#",
        "##.......##",
        "###.....###",
    ],
}

PRESET_SIZES = sorted(PRESET_ROWS)


def parse_shape(lines: Iterable[str]) -> Shape:
    """
    Parse text rows into a shape.

    Blank lines are ignored, as are surrounding spaces.

    Raises:
        ShapeFormatError: If there are no rows or rows differ in width
    """
    rows = [line.strip() for line in lines]
    rows = [row for row in rows if row]
    if not rows:
        raise ShapeFormatError("Shape has no rows")

    widths = {len(row) for row in rows}
    if len(widths) > 1:
        raise ShapeFormatError(f"Shape rows have differing widths: {sorted(widths)}")

    return [[ch != BLOCK for ch in row] for row in rows]


def load_shape(path: str) -> Shape:
    """Read a text shape file."""
    path = Path(path)
    if not path.exists():
        raise ShapeFormatError(f"Shape file not found: {path}")
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return parse_shape(f)
    except UnicodeDecodeError as e:
        raise ShapeFormatError(f"Shape file {path} is not valid UTF-8: {e}") from e
    except OSError as e:
        raise ShapeFormatError(f"Cannot read shape file {path}: {e}") from e


def shape_to_rows(shape: Shape) -> List[str]:
    return ["".join("." if cell else BLOCK for cell in row) for row in shape]


def create_default_shape(size: int) -> Shape:
    """
    Return the default shape for a preset size.

    Sizes without a preset get a fully open square.
    """
    rows = PRESET_ROWS.get(size)
    if rows is None:
        return [[True] * size for _ in range(size)]
    return parse_shape(rows)
