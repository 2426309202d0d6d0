# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Shape Analyzer

Read-only diagnostics for a shape and dictionary, run before a fill:
1. Structural checks (empty / non-rectangular shape, no slots)
2. Orphan cells not covered by any slot
3. Vocabulary coverage for every slot length
4. Connectivity of the open cells

Only linear scans are performed, so the analysis is cheap enough to
run after every edit of the shape.
"""

import logging
from collections import Counter, deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Set

from dictionary_index import DictionaryIndex
from grid_models import (
    Coord, Direction, Shape, count_open_cells, is_rectangular, shape_width,
)
from slot_extractor import extract_slots


logger = logging.getLogger(__name__)

# Issue codes
EMPTY_SHAPE = "empty_shape"
NON_RECTANGULAR = "non_rectangular"
NO_SLOTS = "no_slots"
ORPHAN_CELLS = "orphan_cells"
NO_CANDIDATES_FOR_SLOT_LENGTH = "no_candidates_for_slot_length"
NOT_ENOUGH_UNIQUE_WORDS_FOR_LENGTH = "not_enough_unique_words_for_length"
DISCONNECTED_COMPONENTS = "disconnected_components"


class IssueSeverity(Enum):
    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class ShapeIssue:
    """A single diagnostic produced by the analyzer."""
    code: str
    severity: IssueSeverity
    message: str
    details: Dict[str, Any] = field(default_factory=dict, compare=True, hash=False)

    @property
    def is_error(self) -> bool:
        return self.severity == IssueSeverity.ERROR


@dataclass
class ShapeAnalysis:
    """Result of shape analysis."""
    issues: List[ShapeIssue] = field(default_factory=list)
    stats: Dict[str, Any] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return not any(issue.is_error for issue in self.issues)

    @property
    def errors(self) -> List[ShapeIssue]:
        return [issue for issue in self.issues if issue.is_error]

    @property
    def warnings(self) -> List[ShapeIssue]:
        return [issue for issue in self.issues if not issue.is_error]

    def codes(self) -> List[str]:
        return [issue.code for issue in self.issues]

    def __str__(self):
        status = "VALID" if self.is_valid else "INVALID"
        lines = [f"Shape: {status}"]

        if self.errors:
            lines.append("\nErrors:")
            for e in self.errors:
                lines.append(f"  [{e.code}] {e.message}")

        if self.warnings:
            lines.append("\nWarnings:")
            for w in self.warnings:
                lines.append(f"  [{w.code}] {w.message}")

        if self.stats:
            lines.append("\nStats:")
            for k, v in self.stats.items():
                lines.append(f"  {k}: {v}")

        return "\n".join(lines)


class ShapeAnalyzer:
    """
    Reports structural problems of a shape before a fill is attempted.
    """

    def __init__(
        self,
        shape: Shape,
        index: DictionaryIndex,
        min_length: int = 2,
        allow_reuse: bool = False,
    ):
        """
        Initialize analyzer.

        Args:
            shape: Rectangular boolean matrix (True = open cell)
            index: Dictionary index used to fill the shape
            min_length: Minimum word length of a slot
            allow_reuse: Whether the same word may fill several slots
        """
        self.shape = shape
        self.index = index
        self.min_length = min_length
        self.allow_reuse = allow_reuse

    def analyze(self) -> ShapeAnalysis:
        result = ShapeAnalysis()

        if not self._check_structure(result):
            return result

        slots = extract_slots(self.shape, self.min_length)
        result.stats["open_cells"] = count_open_cells(self.shape)
        result.stats["blocked_cells"] = (
            len(self.shape) * shape_width(self.shape) - result.stats["open_cells"]
        )
        result.stats["total_slots"] = len(slots)
        result.stats["across_slots"] = sum(1 for s in slots if s.direction == Direction.ACROSS)
        result.stats["down_slots"] = sum(1 for s in slots if s.direction == Direction.DOWN)

        if not slots:
            self._add(
                result, NO_SLOTS, IssueSeverity.ERROR,
                f"No runs of {self.min_length}+ open cells found",
            )

        self._check_orphans(result, slots)
        self._check_length_coverage(result, slots)
        self._check_connectivity(result)

        logger.debug(f"Shape analysis: {len(result.issues)} issues, valid={result.is_valid}")
        return result

    def _add(self, result: ShapeAnalysis, code: str, severity: IssueSeverity,
             message: str, **details):
        result.issues.append(ShapeIssue(code, severity, message, details))

    def _check_structure(self, result: ShapeAnalysis) -> bool:
        """Empty and non-rectangular shapes stop the analysis."""
        if not self.shape:
            self._add(result, EMPTY_SHAPE, IssueSeverity.ERROR, "Shape has no rows")
            return False

        if not is_rectangular(self.shape):
            widths = sorted({len(row) for row in self.shape})
            self._add(
                result, NON_RECTANGULAR, IssueSeverity.ERROR,
                f"Rows have differing widths: {widths}",
                widths=widths,
            )
            return False

        if count_open_cells(self.shape) == 0:
            self._add(result, EMPTY_SHAPE, IssueSeverity.ERROR, "Shape has no open cells")
            return False

        return True

    def _check_orphans(self, result: ShapeAnalysis, slots):
        """Find open cells that no slot covers."""
        covered: Set[Coord] = set()
        for slot in slots:
            covered.update(slot.cells)

        orphans = [
            (row, col)
            for row, cells in enumerate(self.shape)
            for col, is_open in enumerate(cells)
            if is_open and (row, col) not in covered
        ]
        if orphans:
            self._add(
                result, ORPHAN_CELLS, IssueSeverity.ERROR,
                f"Found {len(orphans)} open cells not part of any word",
                count=len(orphans), cells=orphans,
            )

    def _check_length_coverage(self, result: ShapeAnalysis, slots):
        """Check the dictionary has enough words for every slot length."""
        slots_per_length = Counter(slot.length for slot in slots)

        for length in sorted(slots_per_length):
            needed = slots_per_length[length]
            available = len(self.index.words_of_length(length))

            if available == 0:
                self._add(
                    result, NO_CANDIDATES_FOR_SLOT_LENGTH, IssueSeverity.ERROR,
                    f"No {length}-letter words for {needed} slots",
                    length=length, slot_count=needed,
                )
                continue

            if not self.allow_reuse:
                unique = self.index.unique_count(length)
                if unique < needed:
                    self._add(
                        result, NOT_ENOUGH_UNIQUE_WORDS_FOR_LENGTH, IssueSeverity.ERROR,
                        f"{needed} slots of length {length} but only {unique} unique words",
                        length=length, slot_count=needed, unique_words=unique,
                    )

    def _check_connectivity(self, result: ShapeAnalysis):
        """Flood-fill open cells; more than one region is flagged."""
        visited: Set[Coord] = set()
        sizes = []
        height = len(self.shape)
        width = shape_width(self.shape)

        for row in range(height):
            for col in range(width):
                if not self.shape[row][col] or (row, col) in visited:
                    continue

                # BFS over this component
                queue = deque([(row, col)])
                visited.add((row, col))
                size = 0
                while queue:
                    r, c = queue.popleft()
                    size += 1
                    for dr, dc in [(-1, 0), (1, 0), (0, -1), (0, 1)]:
                        nr, nc = r + dr, c + dc
                        if (0 <= nr < height and 0 <= nc < width and
                                self.shape[nr][nc] and (nr, nc) not in visited):
                            visited.add((nr, nc))
                            queue.append((nr, nc))
                sizes.append(size)

        result.stats["components"] = len(sizes)
        if len(sizes) > 1:
            self._add(
                result, DISCONNECTED_COMPONENTS, IssueSeverity.WARNING,
                f"Open cells form {len(sizes)} separate regions",
                components=len(sizes), sizes=sizes,
            )


def analyze_shape(
    shape: Shape,
    index: DictionaryIndex,
    min_length: int = 2,
    allow_reuse: bool = False,
) -> ShapeAnalysis:
    """
    Convenience function to analyze a shape.

    Args:
        shape: The black/white shape
        index: Dictionary index
        min_length: Minimum slot length
        allow_reuse: Whether words may repeat across slots

    Returns:
        ShapeAnalysis
    """
    analyzer = ShapeAnalyzer(shape, index, min_length=min_length, allow_reuse=allow_reuse)
    return analyzer.analyze()
