# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""Unit tests for shape_analyzer module."""

import os
import sys
import unittest

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from dictionary_index import DictionaryIndex
from shape_analyzer import (
    DISCONNECTED_COMPONENTS, EMPTY_SHAPE, NO_CANDIDATES_FOR_SLOT_LENGTH,
    NO_SLOTS, NON_RECTANGULAR, NOT_ENOUGH_UNIQUE_WORDS_FOR_LENGTH, ORPHAN_CELLS,
    IssueSeverity, analyze_shape,
)
from shape_presets import parse_shape


class TestStructuralChecks(unittest.TestCase):
    """Tests for the short-circuiting structural checks."""

    def setUp(self):
        self.index = DictionaryIndex.build(["AB", "CD", "AC", "BD"])

    def test_zero_rows(self):
        analysis = analyze_shape([], self.index)

        self.assertFalse(analysis.is_valid)
        self.assertEqual(analysis.codes(), [EMPTY_SHAPE])

    def test_all_blocked(self):
        analysis = analyze_shape(parse_shape(["##", "##"]), self.index)

        self.assertEqual(analysis.codes(), [EMPTY_SHAPE])

    def test_non_rectangular_stops(self):
        analysis = analyze_shape([[True, True], [True]], self.index)

        self.assertFalse(analysis.is_valid)
        self.assertEqual(analysis.codes(), [NON_RECTANGULAR])
        self.assertEqual(analysis.issues[0].details["widths"], [1, 2])

    def test_no_slots(self):
        shape = parse_shape([
            ".#.",
            "#.#",
        ])
        analysis = analyze_shape(shape, self.index)

        self.assertIn(NO_SLOTS, analysis.codes())
        self.assertFalse(analysis.is_valid)

    def test_valid_square(self):
        analysis = analyze_shape(parse_shape(["..", ".."]), self.index)

        self.assertTrue(analysis.is_valid)
        self.assertEqual(analysis.issues, [])
        self.assertEqual(analysis.stats["total_slots"], 4)


class TestOrphanCells(unittest.TestCase):
    """Tests for open cells outside every slot."""

    def test_isolated_cell(self):
        shape = parse_shape([
            "...#.",
            "...##",
            "...##",
        ])
        index = DictionaryIndex.build(["BAT", "ARE", "TEN", "CAT", "APE", "ORE"])

        analysis = analyze_shape(shape, index)

        orphan = [i for i in analysis.issues if i.code == ORPHAN_CELLS]
        self.assertEqual(len(orphan), 1)
        self.assertEqual(orphan[0].details["count"], 1)
        self.assertEqual(orphan[0].details["cells"], [(0, 4)])
        self.assertEqual(orphan[0].severity, IssueSeverity.ERROR)

    def test_short_nub_respects_min_length(self):
        shape = parse_shape([
            "..#",
            "###",
        ])
        index = DictionaryIndex.build(["AB"])

        self.assertNotIn(ORPHAN_CELLS, analyze_shape(shape, index, min_length=2).codes())
        self.assertIn(ORPHAN_CELLS, analyze_shape(shape, index, min_length=3).codes())


class TestLengthCoverage(unittest.TestCase):
    """Tests for vocabulary coverage per slot length."""

    def test_no_candidates_for_length(self):
        shape = parse_shape(["..."])
        index = DictionaryIndex.build(["AB", "CD"])

        analysis = analyze_shape(shape, index)

        issue = analysis.issues[0]
        self.assertEqual(issue.code, NO_CANDIDATES_FOR_SLOT_LENGTH)
        self.assertEqual(issue.details, {"length": 3, "slot_count": 1})

    def test_reports_every_length(self):
        shape = parse_shape([
            "...#....",
        ])
        index = DictionaryIndex.build(["AB"])

        analysis = analyze_shape(shape, index)

        lengths = [i.details["length"] for i in analysis.issues
                   if i.code == NO_CANDIDATES_FOR_SLOT_LENGTH]
        self.assertEqual(lengths, [3, 4])

    def test_not_enough_unique_words(self):
        shape = parse_shape(["..", ".."])
        index = DictionaryIndex.build(["AA", "AA", "BB"])

        analysis = analyze_shape(shape, index, allow_reuse=False)

        issue = [i for i in analysis.issues if i.code == NOT_ENOUGH_UNIQUE_WORDS_FOR_LENGTH][0]
        self.assertEqual(issue.details, {"length": 2, "slot_count": 4, "unique_words": 2})

    def test_reuse_allowed_skips_unique_check(self):
        shape = parse_shape(["..", ".."])
        index = DictionaryIndex.build(["AA"])

        analysis = analyze_shape(shape, index, allow_reuse=True)

        self.assertNotIn(NOT_ENOUGH_UNIQUE_WORDS_FOR_LENGTH, analysis.codes())
        self.assertTrue(analysis.is_valid)


class TestConnectivity(unittest.TestCase):
    """Tests for region detection."""

    def test_disconnected_regions_warn(self):
        shape = parse_shape([
            "..#..",
            "..#..",
        ])
        index = DictionaryIndex.build(["AB", "CD", "AC", "BD", "EF", "GH", "EG", "FH"])

        analysis = analyze_shape(shape, index)

        self.assertEqual(analysis.codes(), [DISCONNECTED_COMPONENTS])
        self.assertTrue(analysis.is_valid)
        self.assertEqual(analysis.issues[0].severity, IssueSeverity.WARNING)
        self.assertEqual(analysis.issues[0].details["sizes"], [4, 4])

    def test_idempotent(self):
        shape = parse_shape([
            "..#.",
            "..##",
        ])
        index = DictionaryIndex.build(["AB"])

        first = analyze_shape(shape, index)
        second = analyze_shape(shape, index)

        self.assertEqual(first.issues, second.issues)
        self.assertEqual(str(first), str(second))


if __name__ == '__main__':
    unittest.main()
