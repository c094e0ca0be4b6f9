# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Configuration module for crossword generator.

Handles loading configuration from YAML files and command-line arguments,
with proper merging and validation.
"""

import argparse
import logging
import random
from pathlib import Path
from dataclasses import dataclass, field, asdict, replace
from typing import Optional, List, Dict, Any

import yaml

from models import ValidationLevel


logger = logging.getLogger(__name__)

# Defaults for generation
DEFAULT_WORD_COUNT = 10
DEFAULT_MAX_ATTEMPTS = 1000
DEFAULT_MAX_GRID_SIZE = 15
DEFAULT_MIN_WORD_LENGTH = 3
DEFAULT_VALIDATION_LEVEL = "normal"

# A word is dropped from an attempt's pool after this many failed placements
DEFAULT_MAX_FAILURES_PER_WORD = 5
# An attempt stops after this many failed placements in a row
DEFAULT_MAX_CONSECUTIVE_FAILURES = 20

VALID_VALIDATION_LEVELS = [level.value for level in ValidationLevel]
VALID_OUTPUT_FORMATS = ["grid", "yaml"]
VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""
    pass


@dataclass
class GeneratorOptions:
    """Options controlling word selection and the placement search."""
    word_count: int = DEFAULT_WORD_COUNT
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    max_grid_size: int = DEFAULT_MAX_GRID_SIZE
    validation_level: str = DEFAULT_VALIDATION_LEVEL
    min_word_length: int = DEFAULT_MIN_WORD_LENGTH
    max_word_length: Optional[int] = None  # defaults to max_grid_size
    max_failures_per_word: int = DEFAULT_MAX_FAILURES_PER_WORD
    max_consecutive_failures: int = DEFAULT_MAX_CONSECUTIVE_FAILURES
    seed: Optional[int] = None

    @property
    def level(self) -> ValidationLevel:
        return ValidationLevel(self.validation_level)

    def normalized(self) -> 'GeneratorOptions':
        """
        Return a copy with malformed values clamped to safe defaults.

        Generation never fails on bad options; each correction is logged.
        """
        fixes: Dict[str, Any] = {}

        def _clamp(name: str, value: Any, minimum: int, default: int):
            if not isinstance(value, int) or isinstance(value, bool):
                fixes[name] = default
            elif value < minimum:
                fixes[name] = default

        _clamp("word_count", self.word_count, 1, DEFAULT_WORD_COUNT)
        _clamp("max_attempts", self.max_attempts, 1, DEFAULT_MAX_ATTEMPTS)
        _clamp("max_grid_size", self.max_grid_size, 1, DEFAULT_MAX_GRID_SIZE)
        _clamp("min_word_length", self.min_word_length, 1, DEFAULT_MIN_WORD_LENGTH)
        _clamp("max_failures_per_word", self.max_failures_per_word, 1,
               DEFAULT_MAX_FAILURES_PER_WORD)
        _clamp("max_consecutive_failures", self.max_consecutive_failures, 1,
               DEFAULT_MAX_CONSECUTIVE_FAILURES)

        level = str(self.validation_level).lower()
        if level not in VALID_VALIDATION_LEVELS:
            fixes["validation_level"] = DEFAULT_VALIDATION_LEVEL
        elif level != self.validation_level:
            fixes["validation_level"] = level

        grid_size = fixes.get("max_grid_size", self.max_grid_size)
        max_len = self.max_word_length
        if not isinstance(max_len, int) or isinstance(max_len, bool) or max_len < 1:
            max_len = grid_size
        max_len = min(max_len, grid_size)
        if max_len != self.max_word_length:
            fixes["max_word_length"] = max_len

        for name, value in fixes.items():
            if name == "max_word_length" and self.max_word_length is None:
                continue
            logger.warning(
                f"Invalid option {name}={getattr(self, name)!r}, using {value!r}"
            )

        return replace(self, **fixes)

    def create_rng(self) -> random.Random:
        """Random source seeded from the options (unseeded when seed is None)."""
        return random.Random(self.seed)


@dataclass
class OutputConfig:
    """Configuration for output and logging."""
    format: str = "grid"
    log_directory: Optional[str] = None
    log_level: str = "INFO"
    log_file_prefix: str = "crossword_generator"
    enable_console_logging: bool = True


@dataclass
class CrosswordConfig:
    """Complete configuration for a generation run."""
    words_file: Optional[str] = None
    words: List[str] = field(default_factory=list)

    # Sub-configurations
    generation: GeneratorOptions = field(default_factory=GeneratorOptions)
    output: OutputConfig = field(default_factory=OutputConfig)

    def __post_init__(self):
        """Convert dicts to dataclass instances if needed."""
        if isinstance(self.generation, dict):
            self.generation = GeneratorOptions(**self.generation)
        if isinstance(self.output, dict):
            self.output = OutputConfig(**self.output)

    @classmethod
    def from_yaml(cls, path: str) -> 'CrosswordConfig':
        """
        Load configuration from a YAML file.

        Args:
            path: Path to YAML configuration file

        Returns:
            CrosswordConfig instance

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
    def _from_dict(cls, data: Dict[str, Any]) -> 'CrosswordConfig':
        """Create CrosswordConfig from dictionary."""
        words_data = data.get('words', {}) or {}
        if isinstance(words_data, list):
            words_data = {'list': words_data}

        config = cls(
            words_file=words_data.get('file'),
            words=[str(w) for w in words_data.get('list', []) or []],
        )

        if 'generation' in data:
            gen_data = data['generation'] or {}
            known = set(GeneratorOptions.__dataclass_fields__)
            unknown = sorted(set(gen_data) - known)
            if unknown:
                raise ConfigValidationError(
                    f"Unknown generation options: {', '.join(unknown)}"
                )
            config.generation = GeneratorOptions(**gen_data)

        if 'output' in data:
            out_data = data['output'] or {}
            defaults = OutputConfig()
            config.output = OutputConfig(
                format=out_data.get('format', defaults.format),
                log_directory=out_data.get('log_directory'),
                log_level=out_data.get('log_level', defaults.log_level),
                log_file_prefix=out_data.get(
                    'log_file_prefix', defaults.log_file_prefix
                ),
                enable_console_logging=out_data.get(
                    'enable_console_logging', defaults.enable_console_logging
                ),
            )

        return config

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> 'CrosswordConfig':
        """
        Create configuration from command-line arguments.

        Args:
            args: Parsed command-line arguments

        Returns:
            CrosswordConfig instance
        """
        config = cls()

        # Map CLI arguments to config
        if getattr(args, 'words_file', None):
            config.words_file = args.words_file
        if getattr(args, 'words', None):
            config.words = list(args.words)
        if getattr(args, 'word_count', None):
            config.generation.word_count = args.word_count
        if getattr(args, 'max_attempts', None):
            config.generation.max_attempts = args.max_attempts
        if getattr(args, 'max_grid_size', None):
            config.generation.max_grid_size = args.max_grid_size
        if getattr(args, 'validation_level', None):
            config.generation.validation_level = args.validation_level
        if getattr(args, 'min_word_length', None):
            config.generation.min_word_length = args.min_word_length
        if getattr(args, 'max_word_length', None):
            config.generation.max_word_length = args.max_word_length
        if getattr(args, 'seed', None) is not None:
            config.generation.seed = args.seed
        if getattr(args, 'format', None):
            config.output.format = args.format
        if getattr(args, 'log_dir', None):
            config.output.log_directory = args.log_dir
        if getattr(args, 'verbose', False):
            config.output.log_level = "DEBUG"

        return config

    @classmethod
    def merge(
        cls,
        yaml_config: 'CrosswordConfig',
        cli_config: 'CrosswordConfig'
    ) -> 'CrosswordConfig':
        """
        Merge configurations with CLI taking precedence over YAML.

        Args:
            yaml_config: Configuration loaded from YAML file
            cli_config: Configuration from command-line arguments

        Returns:
            Merged CrosswordConfig instance
        """
        merged = CrosswordConfig(
            words_file=yaml_config.words_file,
            words=list(yaml_config.words),
            generation=replace(yaml_config.generation),
            output=replace(yaml_config.output),
        )

        # Override with CLI values (non-default values)
        default = cls()

        if cli_config.words_file:
            merged.words_file = cli_config.words_file
        if cli_config.words:
            merged.words = list(cli_config.words)

        for name in GeneratorOptions.__dataclass_fields__:
            value = getattr(cli_config.generation, name)
            if value != getattr(default.generation, name):
                setattr(merged.generation, name, value)

        for name in OutputConfig.__dataclass_fields__:
            value = getattr(cli_config.output, name)
            if value != getattr(default.output, name):
                setattr(merged.output, name, value)

        return merged

    def validate(self) -> List[str]:
        """
        Validate configuration values.

        Generation options are clamped rather than rejected, so only the
        inputs and output settings are checked here.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        if not self.words_file and not self.words:
            errors.append("No words given: use --words-file or --words")

        if self.words_file and not Path(self.words_file).exists():
            errors.append(f"Words file not found: {self.words_file}")

        if self.output.format not in VALID_OUTPUT_FORMATS:
            errors.append(
                f"Invalid output format '{self.output.format}'. "
                f"Must be one of: {VALID_OUTPUT_FORMATS}"
            )

        if self.output.log_level.upper() not in VALID_LOG_LEVELS:
            errors.append(
                f"Invalid log level '{self.output.log_level}'. "
                f"Must be one of: {VALID_LOG_LEVELS}"
            )

        return errors

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            'words': {
                'file': self.words_file,
                'list': list(self.words),
            },
            'generation': asdict(self.generation),
            'output': asdict(self.output),
        }


def load_word_list(path: str) -> List[str]:
    """
    Read a word list from disk.

    Plain text files hold one word per line; blank lines and lines starting
    with '#' are skipped. Files ending in .yaml/.yml must contain a YAML list.

    Raises:
        ConfigValidationError: If the file is missing or malformed
    """
    path = Path(path)
    if not path.exists():
        raise ConfigValidationError(f"Words file not found: {path}")

    text = path.read_text(encoding='utf-8')

    if path.suffix.lower() in ('.yaml', '.yml'):
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ConfigValidationError(f"Invalid YAML in {path}: {e}")
        if not isinstance(data, list):
            raise ConfigValidationError(
                f"Words file {path} must contain a YAML list, got {type(data)}"
            )
        return [str(w) for w in data if w is not None]

    words = []
    for line in text.splitlines():
        line = line.strip()
        if line and not line.startswith('#'):
            words.append(line)
    return words


def create_argument_parser() -> argparse.ArgumentParser:
    """
    Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Generate a crossword layout from a word list",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Using command-line arguments
  crossword-generator --words CAT CAR ART --word-count 3 --max-grid-size 5

  # Using a word file and a fixed seed
  crossword-generator --words-file words.txt --seed 42

  # Using YAML configuration, CLI arguments override YAML
  crossword-generator --config crossword.yaml --validation-level strict
"""
    )

    # Configuration file
    parser.add_argument(
        "--config", "-c",
        metavar="PATH",
        help="YAML configuration file"
    )

    # Input
    parser.add_argument(
        "--words-file", "-f",
        metavar="PATH",
        help="Word list (one word per line, or a YAML list)"
    )
    parser.add_argument(
        "--words", "-w",
        nargs="+",
        metavar="WORD",
        help="Words given inline"
    )

    # Generation settings
    parser.add_argument(
        "--word-count", "-n",
        type=int,
        metavar="INT",
        help=f"Target number of placed words (default: {DEFAULT_WORD_COUNT})"
    )
    parser.add_argument(
        "--max-attempts",
        type=int,
        metavar="INT",
        help=f"Maximum placement attempts (default: {DEFAULT_MAX_ATTEMPTS})"
    )
    parser.add_argument(
        "--max-grid-size", "-s",
        type=int,
        metavar="INT",
        help=f"Working grid size (default: {DEFAULT_MAX_GRID_SIZE})"
    )
    parser.add_argument(
        "--validation-level",
        choices=VALID_VALIDATION_LEVELS,
        help=f"Placement strictness (default: {DEFAULT_VALIDATION_LEVEL})"
    )
    parser.add_argument(
        "--min-word-length",
        type=int,
        metavar="INT",
        help=f"Shortest usable word (default: {DEFAULT_MIN_WORD_LENGTH})"
    )
    parser.add_argument(
        "--max-word-length",
        type=int,
        metavar="INT",
        help="Longest usable word (default: grid size)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        metavar="INT",
        help="Random seed for reproducible layouts"
    )

    # Output settings
    parser.add_argument(
        "--format",
        choices=VALID_OUTPUT_FORMATS,
        help="Output format (default: grid)"
    )
    parser.add_argument(
        "--log-dir",
        metavar="PATH",
        help="Directory for the rotating log file"
    )

    # Other options
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Validate config without generating"
    )

    return parser


def load_config(args: Optional[argparse.Namespace] = None) -> CrosswordConfig:
    """
    Load configuration from command-line and/or YAML file.

    Args:
        args: Parsed command-line arguments (if None, parses sys.argv)

    Returns:
        Fully resolved CrosswordConfig

    Raises:
        ConfigValidationError: If configuration is invalid
    """
    if args is None:
        parser = create_argument_parser()
        args = parser.parse_args()

    # Load from YAML if specified
    yaml_config = None
    if getattr(args, 'config', None):
        yaml_config = CrosswordConfig.from_yaml(args.config)

    # Load from CLI
    cli_config = CrosswordConfig.from_args(args)

    # Merge configurations
    if yaml_config:
        config = CrosswordConfig.merge(yaml_config, cli_config)
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
