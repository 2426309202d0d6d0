# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Data models for the grid filler.

A shape is a rectangular matrix of booleans (True = open cell).
A working grid is a matrix of strings: '#' for blocked cells, '' for
open cells that have no letter yet, or a single uppercase letter.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple


BLOCK = "#"
EMPTY = ""

Coord = Tuple[int, int]
Shape = List[List[bool]]
WorkingGrid = List[List[str]]


class Direction(Enum):
    ACROSS = "across"
    DOWN = "down"

    @property
    def prefix(self) -> str:
        return "A" if self is Direction.ACROSS else "D"


@dataclass(frozen=False)
class WordSlot:
    """Represents a slot where a word can be placed."""
    direction: Direction
    start_row: int
    start_col: int
    length: int
    cells: List[Coord] = field(default_factory=list)

    def __hash__(self):
        return hash((self.direction, self.start_row, self.start_col))

    def __eq__(self, other):
        if not isinstance(other, WordSlot):
            return False
        return (self.direction == other.direction and
                self.start_row == other.start_row and
                self.start_col == other.start_col and
                self.length == other.length)

    def __post_init__(self):
        if not self.cells:
            self.cells = self._calculate_cells()

    def _calculate_cells(self) -> List[Coord]:
        """Calculate all cell positions for this slot."""
        cells = []
        for i in range(self.length):
            if self.direction == Direction.ACROSS:
                cells.append((self.start_row, self.start_col + i))
            else:
                cells.append((self.start_row + i, self.start_col))
        return cells

    @property
    def slot_id(self) -> str:
        """Stable key used by assignment maps, e.g. 'A:0:2' or 'D:1:4'."""
        return f"{self.direction.prefix}:{self.start_row}:{self.start_col}"

    def get_pattern(self, grid: WorkingGrid) -> str:
        """Get the current pattern (letters and wildcards) for this slot."""
        pattern = ""
        for row, col in self.cells:
            letter = grid[row][col]
            if letter:
                pattern += letter
            else:
                pattern += "."
        return pattern

    def overlaps_with(self, other: 'WordSlot') -> Optional[Tuple[int, int]]:
        """
        Check if this slot overlaps with another.
        Returns (index_in_self, index_in_other) if they overlap, None otherwise.
        """
        for i, (r1, c1) in enumerate(self.cells):
            for j, (r2, c2) in enumerate(other.cells):
                if r1 == r2 and c1 == c2:
                    return (i, j)
        return None


def shape_width(shape: Shape) -> int:
    """Width of the first row, 0 for an empty shape."""
    return len(shape[0]) if shape else 0


def is_rectangular(shape: Shape) -> bool:
    """Check that every row has the same width."""
    if not shape:
        return True
    width = len(shape[0])
    return all(len(row) == width for row in shape)


def count_open_cells(shape: Shape) -> int:
    return sum(1 for row in shape for cell in row if cell)


def make_working_grid(shape: Shape) -> WorkingGrid:
    """Create an unfilled working grid for a shape."""
    return [[EMPTY if cell else BLOCK for cell in row] for row in shape]


def clone_grid(grid: WorkingGrid) -> WorkingGrid:
    return [list(row) for row in grid]


def grid_to_string(grid: WorkingGrid) -> str:
    """Convert grid to string representation."""
    result = []
    for row in grid:
        line = ""
        for letter in row:
            if letter == BLOCK:
                line += "■ "
            elif letter:
                line += f"{letter} "
            else:
                line += "_ "
        result.append(line.rstrip())
    return "\n".join(result)


# Pattern matching utilities
def matches_pattern(word: str, pattern: str) -> bool:
    """
    Check if a word matches a pattern.
    Pattern uses '.' for unknown letters.
    Example: 'A.P.E' matches 'APPLE'
    """
    if len(word) != len(pattern):
        return False
    for w, p in zip(word, pattern):
        if p != '.' and w != p:
            return False
    return True
