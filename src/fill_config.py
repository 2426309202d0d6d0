# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Configuration module for the grid filler.

Handles loading configuration from YAML files and command-line arguments,
with proper merging and validation.
"""

import argparse
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Optional, List, Dict, Any

import yaml

from fill_solver import DEFAULT_MAX_STEPS, DEFAULT_PROGRESS_INTERVAL, FillOptions
from shape_presets import PRESET_SIZES


VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""
    pass


@dataclass
class ShapeConfig:
    """Where the shape comes from: explicit rows, a text file, or a preset."""
    preset: int = 7
    rows: List[str] = field(default_factory=list)
    path: Optional[str] = None


@dataclass
class DictionaryConfig:
    """Word list source and length bounds."""
    path: Optional[str] = None
    min_word_length: int = 2
    max_word_length: int = 15


@dataclass
class SolverConfig:
    """Configuration for the backtracking search."""
    min_word_length: int = 2
    allow_reuse_words: bool = False
    randomize_candidates: bool = True
    max_steps: int = DEFAULT_MAX_STEPS
    progress_interval: int = DEFAULT_PROGRESS_INTERVAL
    seed: Optional[int] = None

    def to_options(self) -> FillOptions:
        return FillOptions(
            min_word_length=self.min_word_length,
            allow_reuse_words=self.allow_reuse_words,
            randomize_candidates=self.randomize_candidates,
            max_steps=self.max_steps,
            progress_interval=self.progress_interval,
        )


@dataclass
class OutputConfig:
    """Configuration for output and logging."""
    directory: str = "./output"
    result_file: Optional[str] = None
    log_level: str = "INFO"
    log_file_prefix: str = "grid_filler"
    enable_console_logging: bool = True


@dataclass
class FillerConfig:
    """Complete configuration for a fill run."""
    shape: ShapeConfig = field(default_factory=ShapeConfig)
    dictionary: DictionaryConfig = field(default_factory=DictionaryConfig)
    solver: SolverConfig = field(default_factory=SolverConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    def __post_init__(self):
        """Convert dicts to dataclass instances if needed."""
        if isinstance(self.shape, dict):
            self.shape = ShapeConfig(**self.shape)
        if isinstance(self.dictionary, dict):
            self.dictionary = DictionaryConfig(**self.dictionary)
        if isinstance(self.solver, dict):
            self.solver = SolverConfig(**self.solver)
        if isinstance(self.output, dict):
            self.output = OutputConfig(**self.output)

    @classmethod
    def from_yaml(cls, path: str) -> 'FillerConfig':
        """
        Load configuration from a YAML file.

        Args:
            path: Path to YAML configuration file

        Returns:
            FillerConfig instance

        Raises:
            ConfigValidationError: If file doesn't exist or is invalid
        """
        path = Path(path)
        if not path.exists():
            raise ConfigValidationError(f"Configuration file not found: {path}")

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigValidationError(f"Invalid YAML in {path}: {e}")

        if not isinstance(data, dict):
            raise ConfigValidationError(
                f"Configuration file must contain a YAML mapping, got {type(data)}"
            )

        return cls._from_dict(data)

    @classmethod
    def _from_dict(cls, data: Dict[str, Any]) -> 'FillerConfig':
        """Create FillerConfig from dictionary."""
        config = cls()
        sections = {
            'shape': ShapeConfig,
            'dictionary': DictionaryConfig,
            'solver': SolverConfig,
            'output': OutputConfig,
        }

        for name, section_cls in sections.items():
            section_data = data.get(name) or {}
            if not isinstance(section_data, dict):
                raise ConfigValidationError(f"Section '{name}' must be a mapping")
            current = asdict(getattr(config, name))
            unknown = set(section_data) - set(current)
            if unknown:
                raise ConfigValidationError(
                    f"Unknown keys in section '{name}': {sorted(unknown)}"
                )
            current.update(section_data)
            setattr(config, name, section_cls(**current))

        return config

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> 'FillerConfig':
        """
        Create configuration from command-line arguments.

        Args:
            args: Parsed command-line arguments

        Returns:
            FillerConfig instance
        """
        config = cls()

        # Map CLI arguments to config
        if getattr(args, 'preset', None):
            config.shape.preset = args.preset
        if getattr(args, 'shape_file', None):
            config.shape.path = args.shape_file
        if getattr(args, 'words', None):
            config.dictionary.path = args.words
        if getattr(args, 'min_word_length', None) is not None:
            config.solver.min_word_length = args.min_word_length
        if getattr(args, 'allow_reuse', False):
            config.solver.allow_reuse_words = True
        if getattr(args, 'no_randomize', False):
            config.solver.randomize_candidates = False
        if getattr(args, 'max_steps', None) is not None:
            config.solver.max_steps = args.max_steps
        if getattr(args, 'seed', None) is not None:
            config.solver.seed = args.seed
        if getattr(args, 'output', None):
            config.output.directory = args.output
        if getattr(args, 'result_file', None):
            config.output.result_file = args.result_file
        if getattr(args, 'log_level', None):
            config.output.log_level = args.log_level

        return config

    @classmethod
    def merge(
        cls,
        yaml_config: 'FillerConfig',
        cli_config: 'FillerConfig'
    ) -> 'FillerConfig':
        """
        Merge configurations with CLI taking precedence over YAML.

        A CLI value only overrides when it differs from the default.
        """
        default = cls()
        merged = cls._from_dict(yaml_config.to_dict())
        cli_data = cli_config.to_dict()
        default_data = default.to_dict()

        for section, values in cli_data.items():
            target = getattr(merged, section)
            for key, value in values.items():
                if value != default_data[section][key]:
                    setattr(target, key, value)

        return merged

    def validate(self) -> List[str]:
        """
        Validate configuration values.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        if not self.shape.rows and not self.shape.path and self.shape.preset not in PRESET_SIZES:
            errors.append(
                f"Invalid shape preset {self.shape.preset}. Must be one of: {PRESET_SIZES}"
            )

        if self.dictionary.min_word_length < 1:
            errors.append("dictionary.min_word_length must be at least 1")
        if self.dictionary.max_word_length < self.dictionary.min_word_length:
            errors.append("dictionary.max_word_length must not be below min_word_length")

        if self.solver.min_word_length < 1:
            errors.append("solver.min_word_length must be at least 1")
        if self.solver.max_steps < 1:
            errors.append("solver.max_steps must be positive")
        if self.solver.progress_interval < 1:
            errors.append("solver.progress_interval must be positive")

        if self.output.log_level.upper() not in VALID_LOG_LEVELS:
            errors.append(
                f"Invalid log level '{self.output.log_level}'. "
                f"Must be one of: {VALID_LOG_LEVELS}"
            )

        return errors

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            'shape': asdict(self.shape),
            'dictionary': asdict(self.dictionary),
            'solver': asdict(self.solver),
            'output': asdict(self.output),
        }


def create_argument_parser() -> argparse.ArgumentParser:
    """
    Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Fill a black/white crossword shape with dictionary words",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Fill the 7x7 preset with the built-in word list
  grid-filler --preset 7

  # Using YAML configuration
  grid-filler --config filler.yaml

  # Custom shape and word list, reproducible order
  grid-filler --shape-file shape.txt --words words.txt --seed 42
"""
    )

    # Configuration file
    parser.add_argument(
        "--config", "-c",
        metavar="PATH",
        help="YAML configuration file"
    )

    # Shape
    parser.add_argument(
        "--preset", "-p",
        type=int,
        choices=PRESET_SIZES,
        help="Preset shape size (default: 7)"
    )
    parser.add_argument(
        "--shape-file",
        metavar="PATH",
        help="Text shape file ('#' = blocked, '.' = open)"
    )

    # Dictionary
    parser.add_argument(
        "--words", "-w",
        metavar="PATH",
        help="Word list file, one word per line"
    )

    # Solver
    parser.add_argument(
        "--min-word-length",
        type=int,
        metavar="INT",
        help="Minimum slot length (default: 2)"
    )
    parser.add_argument(
        "--allow-reuse",
        action="store_true",
        help="Allow the same word in several slots"
    )
    parser.add_argument(
        "--no-randomize",
        action="store_true",
        help="Try candidates in dictionary order"
    )
    parser.add_argument(
        "--max-steps",
        type=int,
        metavar="INT",
        help=f"Search step budget (default: {DEFAULT_MAX_STEPS})"
    )
    parser.add_argument(
        "--seed",
        type=int,
        metavar="INT",
        help="Random seed for reproducible candidate order"
    )

    # Output settings
    parser.add_argument(
        "--output", "-o",
        metavar="PATH",
        help="Output directory for logs"
    )
    parser.add_argument(
        "--result-file",
        metavar="PATH",
        help="Write the filled grid and clue list to this YAML file"
    )
    parser.add_argument(
        "--log-level",
        choices=VALID_LOG_LEVELS,
        help="Console log level"
    )

    # Other options
    parser.add_argument(
        "--analyze-only",
        action="store_true",
        help="Report shape issues without filling"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Validate config without filling"
    )

    return parser


def load_config(args: Optional[argparse.Namespace] = None) -> FillerConfig:
    """
    Load configuration from command-line and/or YAML file.

    Args:
        args: Parsed command-line arguments (if None, parses sys.argv)

    Returns:
        Fully resolved FillerConfig

    Raises:
        ConfigValidationError: If configuration is invalid
    """
    if args is None:
        parser = create_argument_parser()
        args = parser.parse_args()

    # Load from YAML if specified
    yaml_config = None
    if getattr(args, 'config', None):
        yaml_config = FillerConfig.from_yaml(args.config)

    # Load from CLI
    cli_config = FillerConfig.from_args(args)

    # Merge configurations
    if yaml_config:
        config = FillerConfig.merge(yaml_config, cli_config)
    else:
        config = cli_config

    # Validate
    errors = config.validate()
    if errors:
        raise ConfigValidationError(
            "Configuration validation failed:\n" +
            "\n".join(f"  - {e}" for e in errors)
        )

    return config
