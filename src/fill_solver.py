# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Backtracking grid filler.

Depth-first search with forward checking and the most-constrained-slot
(MRV) heuristic. The working grid is mutated in place; each placement
records the cells it wrote so that backtracking restores exactly those
cells and never touches letters owned by a crossing word.

Every outcome of a search is returned as a value (FillSuccess or
FillFailure). Only broken internal invariants raise.
"""

import logging
import random
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Iterable, List, Optional, Set, Tuple, Union

from dictionary_index import DictionaryIndex
from grid_models import (
    EMPTY, Coord, Shape, WordSlot, WorkingGrid, clone_grid, count_open_cells,
    is_rectangular, make_working_grid, matches_pattern, shape_width,
)
from slot_extractor import extract_slots


logger = logging.getLogger(__name__)

DEFAULT_MAX_STEPS = 2_000_000
DEFAULT_PROGRESS_INTERVAL = 100

# (steps, partial grid copy) -> False to stop the search
ProgressCallback = Callable[[int, WorkingGrid], bool]


class SolverInvariantError(Exception):
    """Raised when the solver's internal state is inconsistent (a bug, not a bad input)."""
    pass


class FailureReason(Enum):
    EMPTY_SHAPE = "empty_shape"
    NON_RECTANGULAR = "non_rectangular"
    NO_SLOTS = "no_slots"
    STEP_BUDGET_EXCEEDED = "step_budget_exceeded"
    CANCELLED = "cancelled"
    NO_SOLUTION = "no_solution"

    @property
    def is_structural(self) -> bool:
        """Structural failures are detected before any search step."""
        return self in (
            FailureReason.EMPTY_SHAPE,
            FailureReason.NON_RECTANGULAR,
            FailureReason.NO_SLOTS,
        )


@dataclass(frozen=True)
class FillOptions:
    """Options for a single fill attempt."""
    min_word_length: int = 2
    allow_reuse_words: bool = False
    randomize_candidates: bool = True
    max_steps: int = DEFAULT_MAX_STEPS
    progress_interval: int = DEFAULT_PROGRESS_INTERVAL

    def __post_init__(self):
        if self.min_word_length < 1:
            raise ValueError("min_word_length must be at least 1")
        if self.max_steps < 0:
            raise ValueError("max_steps must be non-negative")
        if self.progress_interval < 1:
            raise ValueError("progress_interval must be at least 1")


@dataclass(frozen=True)
class FillSuccess:
    """A complete, consistent filling."""
    grid: WorkingGrid
    assignments: Dict[str, str]
    steps: int

    @property
    def succeeded(self) -> bool:
        return True


@dataclass(frozen=True)
class FillFailure:
    """A fill attempt that ended without a solution."""
    reason: FailureReason
    steps: int
    message: str = ""

    @property
    def succeeded(self) -> bool:
        return False


FillOutcome = Union[FillSuccess, FillFailure]


class CancellationToken:
    """Cooperative cancellation flag, safe to set from another thread."""

    def __init__(self):
        self._event = threading.Event()

    def cancel(self):
        self._event.set()

    @property
    def is_cancelled(self) -> bool:
        return self._event.is_set()


class _SearchAborted(Exception):
    """Unwinds the recursion when the budget runs out or the caller cancels."""

    def __init__(self, reason: FailureReason):
        super().__init__(reason.value)
        self.reason = reason


class GridFiller:
    """
    Fills a shape with dictionary words.

    Variables: WordSlots extracted from the shape
    Domains: Dictionary words of the slot's length
    Constraints:
        - Crossing slots must agree on the shared letter
        - Words are distinct unless reuse is allowed
    """

    def __init__(
        self,
        shape: Shape,
        dictionary: Union[DictionaryIndex, Iterable[str]],
        options: Optional[FillOptions] = None,
        progress_callback: Optional[ProgressCallback] = None,
        rng: Optional[random.Random] = None,
        cancel_token: Optional[CancellationToken] = None,
    ):
        """
        Initialize the filler.

        Args:
            shape: Rectangular boolean matrix (True = open cell)
            dictionary: DictionaryIndex, or raw words to index
            options: Fill options (defaults if None)
            progress_callback: Called every progress_interval steps with
                               (steps, partial grid copy); returning False cancels.
            rng: Random source for candidate shuffling
            cancel_token: Checked at the progress interval
        """
        self.shape = shape
        self.options = options or FillOptions()
        if isinstance(dictionary, DictionaryIndex):
            self.index = dictionary
        else:
            self.index = DictionaryIndex.build(dictionary)
        self.progress_callback = progress_callback
        self.rng = rng or random.Random()
        self.cancel_token = cancel_token

        self.slots: List[WordSlot] = []
        self.grid: WorkingGrid = []
        self.assignments: Dict[str, str] = {}
        self.used_words: Set[str] = set()

        self.stats = {
            "steps": 0,
            "placements": 0,
            "backtracks": 0,
        }

    def _check_shape(self) -> Optional[FillFailure]:
        """Structural validation, mirroring the shape analyzer."""
        if not self.shape:
            return FillFailure(FailureReason.EMPTY_SHAPE, 0, "Shape has no rows")
        if not is_rectangular(self.shape):
            return FillFailure(FailureReason.NON_RECTANGULAR, 0, "Shape rows have differing widths")
        if count_open_cells(self.shape) == 0:
            return FillFailure(FailureReason.EMPTY_SHAPE, 0, "Shape has no open cells")

        self.slots = extract_slots(self.shape, self.options.min_word_length)
        if not self.slots:
            return FillFailure(
                FailureReason.NO_SLOTS, 0,
                f"No runs of {self.options.min_word_length}+ open cells found",
            )

        for slot in self.slots:
            if len(slot.cells) != slot.length:
                raise SolverInvariantError(
                    f"Slot {slot.slot_id} covers {len(slot.cells)} cells but has length {slot.length}"
                )
        return None

    def solve(self) -> FillOutcome:
        """
        Run the search.

        Returns:
            FillSuccess with copies of the grid and assignments, or FillFailure
        """
        failure = self._check_shape()
        if failure is not None:
            logger.info(f"Fill rejected: {failure.message}")
            return failure

        self.grid = make_working_grid(self.shape)
        self.assignments = {}
        self.used_words = set()
        self.stats = {"steps": 0, "placements": 0, "backtracks": 0}

        logger.info(
            f"Filling {len(self.shape)}x{shape_width(self.shape)} shape: "
            f"{len(self.slots)} slots, {len(self.index)} words"
        )

        try:
            result = self._backtrack()
        except _SearchAborted as aborted:
            steps = self.stats["steps"]
            if aborted.reason == FailureReason.CANCELLED:
                message = f"Cancelled after {steps} steps"
            else:
                message = f"Step budget of {self.options.max_steps} exceeded"
            logger.info(message)
            return FillFailure(aborted.reason, steps, message)

        steps = self.stats["steps"]
        if result is None:
            message = f"No solution found after {steps} steps"
            logger.info(message)
            return FillFailure(FailureReason.NO_SOLUTION, steps, message)

        logger.info(f"Fill succeeded after {steps} steps ({self.stats['backtracks']} backtracks)")
        return result

    def _backtrack(self) -> Optional[FillSuccess]:
        """One recursive search step."""
        self.stats["steps"] += 1
        steps = self.stats["steps"]

        if steps > self.options.max_steps:
            raise _SearchAborted(FailureReason.STEP_BUDGET_EXCEEDED)

        if steps % self.options.progress_interval == 0:
            self._report_progress(steps)

        if len(self.assignments) == len(self.slots):
            return FillSuccess(
                grid=clone_grid(self.grid),
                assignments=dict(self.assignments),
                steps=steps,
            )

        selected = self.select_unassigned_slot()
        if selected is None:
            return None

        slot, candidates = selected
        if self.options.randomize_candidates:
            candidates = list(candidates)
            self.rng.shuffle(candidates)

        for word in candidates:
            changes = self.place_word(slot, word)
            if changes is None:
                continue

            self.stats["placements"] += 1
            self.assignments[slot.slot_id] = word
            if not self.options.allow_reuse_words:
                self.used_words.add(word)

            result = self._backtrack()
            if result is not None:
                return result

            # Backtrack
            self.stats["backtracks"] += 1
            del self.assignments[slot.slot_id]
            if not self.options.allow_reuse_words:
                self.used_words.discard(word)
            self.undo_placement(changes)

        return None

    def _report_progress(self, steps: int):
        if self.progress_callback is not None:
            keep_going = self.progress_callback(steps, clone_grid(self.grid))
            if keep_going is False:
                raise _SearchAborted(FailureReason.CANCELLED)
        if self.cancel_token is not None and self.cancel_token.is_cancelled:
            raise _SearchAborted(FailureReason.CANCELLED)
        logger.debug(f"Step {steps}: {len(self.assignments)}/{len(self.slots)} slots assigned")

    def get_candidates(self, slot: WordSlot) -> List[str]:
        """Words of the slot's length that match its filled cells."""
        pattern = slot.get_pattern(self.grid)
        words = self.index.words_of_length(slot.length)
        if pattern.strip('.'):
            words = [w for w in words if matches_pattern(w, pattern)]
        if not self.options.allow_reuse_words:
            words = [w for w in words if w not in self.used_words]
        return list(words)

    def select_unassigned_slot(self) -> Optional[Tuple[WordSlot, List[str]]]:
        """
        Select next slot using the MRV heuristic.

        Returns None if any unassigned slot has no candidates left.
        Ties keep extraction order.
        """
        best: Optional[Tuple[WordSlot, List[str]]] = None

        for slot in self.slots:
            if slot.slot_id in self.assignments:
                continue

            candidates = self.get_candidates(slot)
            if not candidates:
                return None

            if best is None or len(candidates) < len(best[1]):
                best = (slot, candidates)

        return best

    def place_word(self, slot: WordSlot, word: str) -> Optional[List[Coord]]:
        """
        Write a word into the grid.

        Returns the cells that were empty before the write, or None if a
        filled cell disagrees (the grid is left unchanged in that case).
        """
        if len(word) != slot.length:
            raise SolverInvariantError(
                f"Word {word!r} does not fit slot {slot.slot_id} of length {slot.length}"
            )

        changes: List[Coord] = []
        for (row, col), letter in zip(slot.cells, word):
            existing = self.grid[row][col]
            if existing == EMPTY:
                self.grid[row][col] = letter
                changes.append((row, col))
            elif existing != letter:
                self.undo_placement(changes)
                return None
        return changes

    def undo_placement(self, changes: List[Coord]):
        for row, col in changes:
            self.grid[row][col] = EMPTY


def fill_grid(
    shape: Shape,
    dictionary: Union[DictionaryIndex, Iterable[str]],
    options: Optional[FillOptions] = None,
    progress_callback: Optional[ProgressCallback] = None,
    rng: Optional[random.Random] = None,
    cancel_token: Optional[CancellationToken] = None,
) -> FillOutcome:
    """
    Convenience function to fill a shape.

    Args:
        shape: The black/white shape
        dictionary: DictionaryIndex or raw word list
        options: Fill options
        progress_callback: Progress hook; returning False cancels
        rng: Random source for candidate order
        cancel_token: Cooperative cancellation token

    Returns:
        FillSuccess or FillFailure
    """
    filler = GridFiller(
        shape,
        dictionary,
        options=options,
        progress_callback=progress_callback,
        rng=rng,
        cancel_token=cancel_token,
    )
    return filler.solve()
