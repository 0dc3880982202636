"""Expectation and actual value file exports."""

from .yaml_matchers import (
    ExpectationFileError,
    ExpectationLoader,
    load_actual,
    load_expectation,
    parse_expectation,
)

__all__ = [
    "ExpectationFileError",
    "ExpectationLoader",
    "load_actual",
    "load_expectation",
    "parse_expectation",
]
