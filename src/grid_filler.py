#!/usr/bin/env python3
# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Crossword Grid Filler

Fills a black/white crossword shape with dictionary words:
1. Load the shape (preset, text file, or YAML rows)
2. Load and index the word list
3. Analyze the shape for structural problems
4. Fill the grid on a background worker with progress logging
5. Print the filled grid and clue list, optionally save them as YAML

Usage:
    # With YAML configuration:
    python grid_filler.py --config filler.yaml

    # With command-line arguments:
    python grid_filler.py --preset 7 --words words.txt --seed 7
"""

import logging
import os
import random
import sys
import time
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import yaml

# Add src to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from dictionary_index import DictionaryIndex, create_sample_word_list
from fill_config import (
    FillerConfig, create_argument_parser, load_config, ConfigValidationError
)
from fill_solver import FillOutcome, FillSuccess
from fill_worker import FillWorker, FillWorkerError, ProgressMessage
from grid_models import Shape, grid_to_string
from logging_config import setup_logging
from shape_analyzer import ShapeAnalysis, analyze_shape
from shape_presets import (
    ShapeFormatError, create_default_shape, load_shape, parse_shape, shape_to_rows
)
from slot_extractor import clue_list
from word_normalizer import WordListFormatError, load_word_list


EXIT_OK = 0
EXIT_ERROR = 1
EXIT_NOT_FILLED = 2

# Progress messages between INFO log lines
PROGRESS_LOG_EVERY = 100


class PuzzleFiller:
    """
    Runs one fill from configuration to printed result.

    Workflow:
    1. Load shape
    2. Build dictionary index
    3. Analyze shape (errors are logged, the fill still runs)
    4. Fill on a FillWorker thread
    5. Report / save result
    """

    def __init__(self, config: FillerConfig):
        """
        Initialize the filler.

        Args:
            config: FillerConfig instance with all settings
        """
        self.config = config
        self.log_file_path = setup_logging(
            output_dir=config.output.directory,
            log_level=config.output.log_level,
            log_file_prefix=config.output.log_file_prefix,
            enable_console=config.output.enable_console_logging,
        )
        self.logger = logging.getLogger(__name__)
        self.worker = FillWorker()

        self.shape: Shape = []
        self.index: Optional[DictionaryIndex] = None
        self.analysis: Optional[ShapeAnalysis] = None

    def load_shape(self) -> Shape:
        shape_config = self.config.shape
        if shape_config.rows:
            self.logger.info("Using shape rows from configuration")
            self.shape = parse_shape(shape_config.rows)
        elif shape_config.path:
            self.logger.info(f"Loading shape from {shape_config.path}")
            self.shape = load_shape(shape_config.path)
        else:
            self.logger.info(f"Using {shape_config.preset}x{shape_config.preset} preset shape")
            self.shape = create_default_shape(shape_config.preset)
        return self.shape

    def load_dictionary(self) -> DictionaryIndex:
        dict_config = self.config.dictionary
        if dict_config.path:
            words = load_word_list(
                dict_config.path,
                min_length=dict_config.min_word_length,
                max_length=dict_config.max_word_length,
            )
        else:
            self.logger.info("No word list configured, using built-in sample words")
            words = create_sample_word_list()

        self.index = DictionaryIndex.build(words)
        self.logger.info(f"   - {len(self.index)} words indexed, lengths {self.index.lengths()}")
        return self.index

    def analyze(self) -> ShapeAnalysis:
        solver_config = self.config.solver
        self.analysis = analyze_shape(
            self.shape,
            self.index,
            min_length=solver_config.min_word_length,
            allow_reuse=solver_config.allow_reuse_words,
        )

        for issue in self.analysis.errors:
            self.logger.error(f"   X [{issue.code}] {issue.message}")
        for issue in self.analysis.warnings:
            self.logger.warning(f"   ! [{issue.code}] {issue.message}")
        if self.analysis.is_valid:
            self.logger.info(f"   - Shape valid ({self.analysis.stats.get('total_slots', 0)} slots)")
        return self.analysis

    def fill(self) -> FillOutcome:
        solver_config = self.config.solver
        rng = random.Random(solver_config.seed)

        self.worker.start(
            self.shape,
            self.index,
            options=solver_config.to_options(),
            rng=rng,
        )

        progress_count = 0
        try:
            for message in self.worker.messages():
                if isinstance(message, ProgressMessage):
                    progress_count += 1
                    self.logger.debug(f"   ... step {message.steps} ({message.elapsed:.1f}s)")
                    if progress_count % PROGRESS_LOG_EVERY == 0:
                        self.logger.info(
                            f"   ... {message.steps} steps, {message.elapsed:.1f}s elapsed"
                        )
        except KeyboardInterrupt:
            self.logger.warning("Interrupted, cancelling fill...")
            self.worker.cancel()

        return self.worker.wait()

    def run(self) -> int:
        """
        Run the whole workflow.

        Returns:
            Process exit code
        """
        start_time = time.time()

        self.logger.info("=" * 60)
        self.logger.info("GRID FILLER")
        self.logger.info("=" * 60)

        self.logger.info("Step 1: Loading shape...")
        self.load_shape()
        self.logger.info(f"   - {len(self.shape)} rows")

        self.logger.info("Step 2: Building dictionary index...")
        self.load_dictionary()

        self.logger.info("Step 3: Analyzing shape...")
        self.analyze()

        self.logger.info("Step 4: Filling grid...")
        outcome = self.fill()
        elapsed = time.time() - start_time

        if not outcome.succeeded:
            self.logger.error(f"   X {outcome.message} [{outcome.reason.value}]")
            if outcome.reason.is_structural:
                self.logger.error("   Fix the shape and try again.")
            else:
                self.logger.error("   Try relaxing the shape or adding more words.")
            self.logger.info(f"Elapsed time: {elapsed:.2f} seconds")
            return EXIT_NOT_FILLED

        self.logger.info(f"   - Filled {len(outcome.assignments)} slots in {outcome.steps} steps")

        self.logger.info("Step 5: Result")
        print(grid_to_string(outcome.grid))
        clues = clue_list(self.shape, outcome.assignments, self.config.solver.min_word_length)
        for direction in ("across", "down"):
            print(f"\n{direction.upper()}")
            for number, word in clues[direction]:
                print(f"  {number:>3}. {word}")

        if self.config.output.result_file:
            data = build_result_data(
                self.shape, outcome, self.config.solver.min_word_length
            )
            write_result(self.config.output.result_file, data)
            self.logger.info(f"   - Saved result to {self.config.output.result_file}")

        self.logger.info(f"Elapsed time: {elapsed:.2f} seconds")
        return EXIT_OK


def build_result_data(shape: Shape, outcome: FillSuccess, min_length: int = 2) -> Dict[str, Any]:
    """Structured summary of a filled grid."""
    clues = clue_list(shape, outcome.assignments, min_length)
    return {
        'version': 1,
        'created_at': datetime.now(timezone.utc).isoformat(),
        'grid_size': {'rows': len(shape), 'cols': len(shape[0]) if shape else 0},
        'shape': shape_to_rows(shape),
        'filled_grid': ["".join(ch or "." for ch in row) for row in outcome.grid],
        'steps': outcome.steps,
        'clues': {
            direction: [{'number': number, 'word': word} for number, word in entries]
            for direction, entries in clues.items()
        },
    }


def write_result(path: str, data: Dict[str, Any]):
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        yaml.safe_dump(data, f, sort_keys=False, allow_unicode=True)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    try:
        # Load configuration
        config = load_config(args)

        # Handle dry-run
        if args.dry_run:
            print("Configuration valid:")
            print(yaml.safe_dump(config.to_dict(), sort_keys=False))
            return EXIT_OK

        filler = PuzzleFiller(config)
        if args.analyze_only:
            filler.load_shape()
            filler.load_dictionary()
            analysis = filler.analyze()
            print(analysis)
            return EXIT_OK if analysis.is_valid else EXIT_NOT_FILLED

        return filler.run()

    except ConfigValidationError as e:
        print(f"Configuration error: {e}")
        return EXIT_ERROR
    except (ShapeFormatError, WordListFormatError) as e:
        print(f"Input error: {e}")
        return EXIT_ERROR
    except FillWorkerError as e:
        print(f"Fill error: {e}")
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
