# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Slot extraction and clue numbering for black/white shapes.
"""

from typing import Dict, List, Mapping, Tuple

from grid_models import Coord, Direction, Shape, WordSlot, shape_width


def extract_slots(shape: Shape, min_length: int = 2) -> List[WordSlot]:
    """
    Identify all word slots (across and down) in a shape.

    A slot is a maximal run of open cells of at least min_length.
    Across slots come first in row-major order, then down slots in
    column-major order.
    """
    slots = []
    height = len(shape)
    width = shape_width(shape)

    for row in range(height):
        col = 0
        while col < width:
            start = col
            while col < width and shape[row][col]:
                col += 1
            if col - start >= min_length:
                slots.append(WordSlot(
                    direction=Direction.ACROSS,
                    start_row=row,
                    start_col=start,
                    length=col - start,
                ))
            col += 1

    for col in range(width):
        row = 0
        while row < height:
            start = row
            while row < height and shape[row][col]:
                row += 1
            if row - start >= min_length:
                slots.append(WordSlot(
                    direction=Direction.DOWN,
                    start_row=start,
                    start_col=col,
                    length=row - start,
                ))
            row += 1

    return slots


def _is_open(shape: Shape, row: int, col: int) -> bool:
    return 0 <= row < len(shape) and 0 <= col < len(shape[row]) and shape[row][col]


def clue_numbers(shape: Shape) -> Dict[Coord, int]:
    """
    Standard crossword numbering.

    Scanning row-major, a cell gets the next number if it starts an
    across run (closed on the left, open on the right) or a down run
    (closed above, open below). A cell starting both gets one number.
    """
    numbers = {}
    number = 1

    for row in range(len(shape)):
        for col in range(shape_width(shape)):
            if not _is_open(shape, row, col):
                continue

            starts_across = (not _is_open(shape, row, col - 1)
                             and _is_open(shape, row, col + 1))
            starts_down = (not _is_open(shape, row - 1, col)
                           and _is_open(shape, row + 1, col))

            if starts_across or starts_down:
                numbers[(row, col)] = number
                number += 1

    return numbers


def clue_list(
    shape: Shape,
    assignments: Mapping[str, str],
    min_length: int = 2,
) -> Dict[str, List[Tuple[int, str]]]:
    """
    Build numbered across/down entries for a filled grid.

    Only slots with an assignment are listed. Entries are sorted by
    clue number.
    """
    numbers = clue_numbers(shape)
    entries: Dict[str, List[Tuple[int, str]]] = {"across": [], "down": []}

    for slot in extract_slots(shape, min_length):
        word = assignments.get(slot.slot_id)
        number = numbers.get((slot.start_row, slot.start_col))
        if word and number:
            entries[slot.direction.value].append((number, word))

    for direction in entries:
        entries[direction].sort()

    return entries
