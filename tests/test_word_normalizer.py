# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""Unit tests for word_normalizer module."""

import os
import sys
import tempfile
import unittest

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from word_normalizer import (
    WordListFormatError, load_word_list, normalize_entry, normalize_word_list
)


class TestNormalizeEntry(unittest.TestCase):
    """Tests for single entry normalization."""

    def test_strips_separators(self):
        self.assertEqual(normalize_entry("ice_cream"), "icecream")
        self.assertEqual(normalize_entry("o'clock"), "oclock")
        self.assertEqual(normalize_entry("x-ray"), "xray")
        self.assertEqual(normalize_entry("new york"), "newyork")
        self.assertEqual(normalize_entry("a.k.a"), "aka")
        self.assertEqual(normalize_entry("and/or"), "andor")
        self.assertEqual(normalize_entry("e=mc"), "emc")

    def test_rejects_digits_with_line_number(self):
        with self.assertRaises(WordListFormatError) as ctx:
            normalize_entry("route66", line_number=12)

        message = str(ctx.exception)
        self.assertIn("Line 12", message)
        self.assertIn("route66", message)
        self.assertIn("6", message)


class TestNormalizeWordList(unittest.TestCase):
    """Tests for whole list normalization."""

    def test_skips_blank_and_comment_lines(self):
        words = normalize_word_list(["# header", "", "cat", "  ", "hot dog"])

        self.assertEqual(words, ["cat", "hotdog"])

    def test_length_bounds(self):
        words = normalize_word_list(["a", "to", "tree", "elephant"], min_length=2, max_length=4)

        self.assertEqual(words, ["to", "tree"])

    def test_error_reports_source_line(self):
        with self.assertRaises(WordListFormatError) as ctx:
            normalize_word_list(["cat", "", "d0g"])

        self.assertIn("Line 3", str(ctx.exception))


class TestLoadWordList(unittest.TestCase):
    """Tests for reading word files."""

    def setUp(self):
        self.temp_file = tempfile.NamedTemporaryFile(
            mode='w', suffix='.txt', delete=False, encoding='utf-8'
        )
        self.temp_file.write("apple\nbanana split\n\n# fruit\nkiwi\n")
        self.temp_file.close()

    def tearDown(self):
        os.unlink(self.temp_file.name)

    def test_load(self):
        words = load_word_list(self.temp_file.name)

        self.assertEqual(words, ["apple", "bananasplit", "kiwi"])

    def test_missing_file(self):
        with self.assertRaises(WordListFormatError):
            load_word_list("/nonexistent/words.txt")

    def test_non_utf8_file(self):
        with open(self.temp_file.name, 'wb') as f:
            f.write(b"apple\ncaf\xe9\n")

        with self.assertRaises(WordListFormatError) as ctx:
            load_word_list(self.temp_file.name)

        self.assertIn(self.temp_file.name, str(ctx.exception))

    def test_directory_path(self):
        with self.assertRaises(WordListFormatError):
            load_word_list(tempfile.gettempdir())


if __name__ == '__main__':
    unittest.main()
