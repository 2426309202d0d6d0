# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""Unit tests for fill_config module."""

import os
import sys
import tempfile
import unittest

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from fill_config import (
    ConfigValidationError, FillerConfig, SolverConfig, create_argument_parser,
    load_config,
)
from fill_solver import DEFAULT_MAX_STEPS, FillOptions


class TestFillerConfig(unittest.TestCase):
    """Tests for FillerConfig dataclass."""

    def test_default_config(self):
        """Test default configuration values."""
        config = FillerConfig()

        self.assertEqual(config.shape.preset, 7)
        self.assertEqual(config.shape.rows, [])
        self.assertIsNone(config.dictionary.path)
        self.assertEqual(config.solver.min_word_length, 2)
        self.assertFalse(config.solver.allow_reuse_words)
        self.assertTrue(config.solver.randomize_candidates)
        self.assertEqual(config.solver.max_steps, DEFAULT_MAX_STEPS)
        self.assertEqual(config.output.log_level, "INFO")

    def test_nested_config_from_dict(self):
        """Test that section dicts are converted to dataclasses."""
        config = FillerConfig(
            shape={'preset': 9},
            solver={'allow_reuse_words': True, 'seed': 5},
        )

        self.assertEqual(config.shape.preset, 9)
        self.assertTrue(config.solver.allow_reuse_words)
        self.assertEqual(config.solver.seed, 5)

    def test_validation_valid_config(self):
        """Test validation passes for valid config."""
        self.assertEqual(FillerConfig().validate(), [])

    def test_validation_invalid_preset(self):
        """Test validation fails for a preset without a shape."""
        config = FillerConfig(shape={'preset': 6})

        errors = config.validate()

        self.assertTrue(any("preset" in e for e in errors))

    def test_explicit_rows_skip_preset_check(self):
        config = FillerConfig(shape={'preset': 6, 'rows': ["..", ".."]})

        self.assertEqual(config.validate(), [])

    def test_validation_solver_bounds(self):
        config = FillerConfig(solver={'max_steps': 0, 'progress_interval': 0})

        errors = config.validate()

        self.assertEqual(len(errors), 2)

    def test_validation_log_level(self):
        config = FillerConfig(output={'log_level': 'LOUD'})

        self.assertTrue(any("log level" in e for e in config.validate()))

    def test_to_dict(self):
        """Test conversion to dictionary."""
        data = FillerConfig().to_dict()

        self.assertEqual(set(data), {'shape', 'dictionary', 'solver', 'output'})
        self.assertEqual(data['solver']['max_steps'], DEFAULT_MAX_STEPS)


class TestSolverConfig(unittest.TestCase):
    """Tests for SolverConfig."""

    def test_to_options(self):
        options = SolverConfig(
            min_word_length=3, allow_reuse_words=True, max_steps=50
        ).to_options()

        self.assertIsInstance(options, FillOptions)
        self.assertEqual(options.min_word_length, 3)
        self.assertTrue(options.allow_reuse_words)
        self.assertEqual(options.max_steps, 50)


class TestYAMLLoading(unittest.TestCase):
    """Tests for YAML configuration loading."""

    def setUp(self):
        """Create a temporary YAML file for testing."""
        self.temp_file = tempfile.NamedTemporaryFile(
            mode='w', suffix='.yaml', delete=False
        )
        self.temp_file.write('''
shape:
  rows:
    - "..#"
    - "..."
    - "#.."

dictionary:
  path: "words.txt"
  max_word_length: 8

solver:
  allow_reuse_words: true
  seed: 42

output:
  directory: "./test_output"
''')
        self.temp_file.close()

    def tearDown(self):
        """Clean up temporary file."""
        os.unlink(self.temp_file.name)

    def test_load_from_yaml(self):
        """Test loading configuration from YAML file."""
        config = FillerConfig.from_yaml(self.temp_file.name)

        self.assertEqual(config.shape.rows, ["..#", "...", "#.."])
        self.assertEqual(config.dictionary.path, "words.txt")
        self.assertEqual(config.dictionary.max_word_length, 8)
        self.assertEqual(config.dictionary.min_word_length, 2)
        self.assertTrue(config.solver.allow_reuse_words)
        self.assertEqual(config.solver.seed, 42)
        self.assertEqual(config.output.directory, "./test_output")

    def test_load_nonexistent_file(self):
        """Test error when loading non-existent file."""
        with self.assertRaises(ConfigValidationError):
            FillerConfig.from_yaml("/nonexistent/path.yaml")

    def test_unknown_key_rejected(self):
        with self.assertRaises(ConfigValidationError) as ctx:
            FillerConfig._from_dict({'solver': {'max_step': 10}})

        self.assertIn("max_step", str(ctx.exception))

    def test_section_must_be_mapping(self):
        with self.assertRaises(ConfigValidationError):
            FillerConfig._from_dict({'shape': ["..", ".."]})


class TestConfigMerge(unittest.TestCase):
    """Tests for configuration merging."""

    def test_merge_prefers_cli(self):
        """Test that CLI config takes precedence over YAML."""
        yaml_config = FillerConfig(solver={'max_steps': 500})
        cli_config = FillerConfig(solver={'max_steps': 1000})

        merged = FillerConfig.merge(yaml_config, cli_config)

        self.assertEqual(merged.solver.max_steps, 1000)

    def test_merge_keeps_yaml_when_cli_default(self):
        """Test that YAML values are kept when CLI uses defaults."""
        yaml_config = FillerConfig(
            shape={'preset': 11},
            solver={'allow_reuse_words': True, 'seed': 3},
        )
        cli_config = FillerConfig()  # All defaults

        merged = FillerConfig.merge(yaml_config, cli_config)

        self.assertEqual(merged.shape.preset, 11)
        self.assertTrue(merged.solver.allow_reuse_words)
        self.assertEqual(merged.solver.seed, 3)


class TestCommandLine(unittest.TestCase):
    """Tests for argument parsing and config resolution."""

    def test_from_args(self):
        parser = create_argument_parser()
        args = parser.parse_args([
            "--preset", "9", "--allow-reuse", "--no-randomize",
            "--max-steps", "250", "--seed", "0", "--log-level", "DEBUG",
        ])

        config = FillerConfig.from_args(args)

        self.assertEqual(config.shape.preset, 9)
        self.assertTrue(config.solver.allow_reuse_words)
        self.assertFalse(config.solver.randomize_candidates)
        self.assertEqual(config.solver.max_steps, 250)
        self.assertEqual(config.solver.seed, 0)
        self.assertEqual(config.output.log_level, "DEBUG")

    def test_load_config_rejects_invalid_values(self):
        parser = create_argument_parser()
        args = parser.parse_args(["--max-steps", "-5"])

        with self.assertRaises(ConfigValidationError):
            load_config(args)

    def test_zero_values_are_not_ignored(self):
        """Zero on the command line reaches validation."""
        parser = create_argument_parser()

        config = FillerConfig.from_args(
            parser.parse_args(["--max-steps", "0", "--min-word-length", "0"])
        )
        self.assertEqual(config.solver.max_steps, 0)
        self.assertEqual(config.solver.min_word_length, 0)

        with self.assertRaises(ConfigValidationError) as ctx:
            load_config(parser.parse_args(["--max-steps", "0"]))
        self.assertIn("max_steps", str(ctx.exception))

        with self.assertRaises(ConfigValidationError) as ctx:
            load_config(parser.parse_args(["--min-word-length", "0"]))
        self.assertIn("min_word_length", str(ctx.exception))


if __name__ == '__main__':
    unittest.main()
