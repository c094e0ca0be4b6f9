# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""Unit tests for config module."""

import os
import sys
import tempfile
import unittest

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from config import (
    CrosswordConfig, GeneratorOptions, OutputConfig, ConfigValidationError,
    create_argument_parser, load_config, load_word_list,
    VALID_VALIDATION_LEVELS
)
from models import ValidationLevel


def _write_temp(content, suffix):
    temp = tempfile.NamedTemporaryFile(mode='w', suffix=suffix, delete=False)
    temp.write(content)
    temp.close()
    return temp.name


class TestGeneratorOptions(unittest.TestCase):
    """Tests for GeneratorOptions."""

    def test_default_values(self):
        options = GeneratorOptions()

        self.assertEqual(options.word_count, 10)
        self.assertEqual(options.max_attempts, 1000)
        self.assertEqual(options.max_grid_size, 15)
        self.assertEqual(options.validation_level, "normal")
        self.assertEqual(options.min_word_length, 3)
        self.assertIsNone(options.max_word_length)
        self.assertEqual(options.max_failures_per_word, 5)
        self.assertEqual(options.max_consecutive_failures, 20)
        self.assertIsNone(options.seed)

    def test_max_word_length_defaults_to_grid_size(self):
        options = GeneratorOptions(max_grid_size=9).normalized()

        self.assertEqual(options.max_word_length, 9)

    def test_max_word_length_capped_by_grid_size(self):
        options = GeneratorOptions(max_grid_size=5, max_word_length=10).normalized()

        self.assertEqual(options.max_word_length, 5)

    def test_shorter_max_word_length_kept(self):
        options = GeneratorOptions(max_grid_size=15, max_word_length=6).normalized()

        self.assertEqual(options.max_word_length, 6)

    def test_negative_values_clamped(self):
        options = GeneratorOptions(
            word_count=-1, max_attempts=-5, max_failures_per_word=0,
            max_consecutive_failures=-2,
        ).normalized()

        self.assertEqual(options.word_count, 10)
        self.assertEqual(options.max_attempts, 1000)
        self.assertEqual(options.max_failures_per_word, 5)
        self.assertEqual(options.max_consecutive_failures, 20)

    def test_non_integer_values_clamped(self):
        options = GeneratorOptions(word_count="many", max_grid_size=None).normalized()

        self.assertEqual(options.word_count, 10)
        self.assertEqual(options.max_grid_size, 15)

    def test_validation_level_case_insensitive(self):
        options = GeneratorOptions(validation_level="STRICT").normalized()

        self.assertEqual(options.validation_level, "strict")
        self.assertEqual(options.level, ValidationLevel.STRICT)

    def test_unknown_validation_level(self):
        options = GeneratorOptions(validation_level="paranoid").normalized()

        self.assertEqual(options.level, ValidationLevel.NORMAL)

    def test_normalized_returns_copy(self):
        options = GeneratorOptions(word_count=-1)
        options.normalized()

        self.assertEqual(options.word_count, -1)

    def test_seeded_rng(self):
        first = GeneratorOptions(seed=4).create_rng()
        second = GeneratorOptions(seed=4).create_rng()

        self.assertEqual(first.random(), second.random())

    def test_valid_levels(self):
        self.assertEqual(VALID_VALIDATION_LEVELS, ["strict", "normal", "lenient"])


class TestCrosswordConfig(unittest.TestCase):
    """Tests for CrosswordConfig."""

    def test_default_config(self):
        config = CrosswordConfig()

        self.assertIsNone(config.words_file)
        self.assertEqual(config.words, [])
        self.assertEqual(config.output.format, "grid")
        self.assertIsNone(config.output.log_directory)

    def test_nested_config_from_dict(self):
        config = CrosswordConfig(
            words=["cat"],
            generation={'word_count': 4},
            output={'format': 'yaml'}
        )

        self.assertEqual(config.generation.word_count, 4)
        self.assertEqual(config.output.format, 'yaml')

    def test_validation_requires_words(self):
        errors = CrosswordConfig().validate()

        self.assertTrue(any("words" in e.lower() for e in errors))

    def test_validation_valid_config(self):
        self.assertEqual(CrosswordConfig(words=["cat", "dog"]).validate(), [])

    def test_validation_missing_words_file(self):
        errors = CrosswordConfig(words_file="/nonexistent/words.txt").validate()

        self.assertTrue(any("not found" in e for e in errors))

    def test_validation_invalid_format(self):
        config = CrosswordConfig(words=["cat"], output=OutputConfig(format="pdf"))

        self.assertTrue(any("format" in e.lower() for e in config.validate()))

    def test_validation_invalid_log_level(self):
        config = CrosswordConfig(words=["cat"], output=OutputConfig(log_level="LOUD"))

        self.assertTrue(any("log level" in e.lower() for e in config.validate()))

    def test_to_dict(self):
        config = CrosswordConfig(words=["cat"], generation=GeneratorOptions(seed=3))

        result = config.to_dict()

        self.assertEqual(result['words']['list'], ["cat"])
        self.assertEqual(result['generation']['seed'], 3)
        self.assertEqual(result['output']['format'], "grid")


class TestYAMLLoading(unittest.TestCase):
    """Tests for YAML configuration loading."""

    def setUp(self):
        self.path = _write_temp('''
words:
  list: [cat, car, art]

generation:
  word_count: 3
  max_grid_size: 5
  validation_level: strict
  seed: 11

output:
  format: yaml
  log_level: DEBUG
''', '.yaml')

    def tearDown(self):
        os.unlink(self.path)

    def test_load_from_yaml(self):
        config = CrosswordConfig.from_yaml(self.path)

        self.assertEqual(config.words, ["cat", "car", "art"])
        self.assertEqual(config.generation.word_count, 3)
        self.assertEqual(config.generation.max_grid_size, 5)
        self.assertEqual(config.generation.validation_level, "strict")
        self.assertEqual(config.generation.seed, 11)
        self.assertEqual(config.output.format, "yaml")
        self.assertEqual(config.output.log_level, "DEBUG")

    def test_words_as_plain_list(self):
        path = _write_temp("words: [one, two, three]\n", '.yaml')
        try:
            config = CrosswordConfig.from_yaml(path)
        finally:
            os.unlink(path)

        self.assertEqual(config.words, ["one", "two", "three"])

    def test_load_nonexistent_file(self):
        with self.assertRaises(ConfigValidationError):
            CrosswordConfig.from_yaml("/nonexistent/path.yaml")

    def test_load_non_mapping(self):
        path = _write_temp("- just\n- a list\n", '.yaml')
        try:
            with self.assertRaises(ConfigValidationError):
                CrosswordConfig.from_yaml(path)
        finally:
            os.unlink(path)

    def test_invalid_yaml(self):
        path = _write_temp("generation: [unclosed\n", '.yaml')
        try:
            with self.assertRaises(ConfigValidationError):
                CrosswordConfig.from_yaml(path)
        finally:
            os.unlink(path)

    def test_unknown_generation_option(self):
        path = _write_temp("generation:\n  wordcount: 3\n", '.yaml')
        try:
            with self.assertRaises(ConfigValidationError):
                CrosswordConfig.from_yaml(path)
        finally:
            os.unlink(path)


class TestWordList(unittest.TestCase):
    """Tests for load_word_list."""

    def test_text_file(self):
        path = _write_temp("# animals\ncat\n\n  dog  \n#bird\nemu\n", '.txt')
        try:
            self.assertEqual(load_word_list(path), ["cat", "dog", "emu"])
        finally:
            os.unlink(path)

    def test_yaml_file(self):
        path = _write_temp("- cat\n- dog\n", '.yml')
        try:
            self.assertEqual(load_word_list(path), ["cat", "dog"])
        finally:
            os.unlink(path)

    def test_yaml_file_must_be_list(self):
        path = _write_temp("cat: dog\n", '.yaml')
        try:
            with self.assertRaises(ConfigValidationError):
                load_word_list(path)
        finally:
            os.unlink(path)

    def test_missing_file(self):
        with self.assertRaises(ConfigValidationError):
            load_word_list("/nonexistent/words.txt")


class TestArguments(unittest.TestCase):
    """Tests for command-line parsing and merging."""

    def setUp(self):
        self.parser = create_argument_parser()

    def test_from_args(self):
        args = self.parser.parse_args([
            "--words", "cat", "dog", "--word-count", "3",
            "--validation-level", "lenient", "--seed", "0", "--verbose",
        ])

        config = CrosswordConfig.from_args(args)

        self.assertEqual(config.words, ["cat", "dog"])
        self.assertEqual(config.generation.word_count, 3)
        self.assertEqual(config.generation.validation_level, "lenient")
        self.assertEqual(config.generation.seed, 0)
        self.assertEqual(config.output.log_level, "DEBUG")

    def test_invalid_level_rejected_by_parser(self):
        with self.assertRaises(SystemExit):
            self.parser.parse_args(["--validation-level", "extreme"])

    def test_load_config_without_words(self):
        with self.assertRaises(ConfigValidationError):
            load_config(self.parser.parse_args([]))

    def test_merge_prefers_cli(self):
        yaml_config = CrosswordConfig(
            words=["yaml"], generation=GeneratorOptions(word_count=5, seed=1)
        )
        cli_config = CrosswordConfig(
            words=["cli"], generation=GeneratorOptions(word_count=7)
        )

        merged = CrosswordConfig.merge(yaml_config, cli_config)

        self.assertEqual(merged.words, ["cli"])
        self.assertEqual(merged.generation.word_count, 7)
        self.assertEqual(merged.generation.seed, 1)

    def test_merge_keeps_yaml_when_cli_default(self):
        yaml_config = CrosswordConfig(
            words_file="words.txt",
            generation=GeneratorOptions(max_grid_size=9, validation_level="strict"),
            output=OutputConfig(format="yaml"),
        )

        merged = CrosswordConfig.merge(yaml_config, CrosswordConfig())

        self.assertEqual(merged.words_file, "words.txt")
        self.assertEqual(merged.generation.max_grid_size, 9)
        self.assertEqual(merged.generation.validation_level, "strict")
        self.assertEqual(merged.output.format, "yaml")

    def test_load_config_with_yaml_and_cli(self):
        path = _write_temp("words:\n  list: [cat, art]\ngeneration:\n  word_count: 2\n",
                           '.yaml')
        try:
            args = self.parser.parse_args(["--config", path, "--word-count", "4"])
            config = load_config(args)
        finally:
            os.unlink(path)

        self.assertEqual(config.words, ["cat", "art"])
        self.assertEqual(config.generation.word_count, 4)


if __name__ == '__main__':
    unittest.main()
