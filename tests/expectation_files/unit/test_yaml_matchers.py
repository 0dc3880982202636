"""Expectation file loader tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from matcher_combinators.expectation_files import (
    ExpectationFileError,
    load_actual,
    load_expectation,
    parse_expectation,
)
from matcher_combinators.matchers import (
    ABSENT,
    Embeds,
    Equals,
    InAnyOrder,
    MatchWith,
    Prefix,
    Regex,
    SetEmbeds,
    SetEquals,
    WithinDelta,
)
from matcher_combinators.matching_engine import evaluate


def _write_file(path: Path, contents: str) -> Path:
    path.write_text(contents, encoding="utf-8")
    return path


def test_untagged_values_stay_raw() -> None:
    assert parse_expectation("a: 1\nb: [x, y]\n") == {"a": 1, "b": ["x", "y"]}


def test_variant_tags_build_matchers() -> None:
    parsed = parse_expectation(
        """
exact: !equals {id: 1}
embedded: !embeds [1, 3]
head: !prefix [1, 2]
roles: !in-any-order [admin, dev]
members: !set-equals [1, 2]
some: !set-embeds [1]
count: !equals 5
"""
    )

    assert parsed["exact"] == Equals({"id": 1})
    assert parsed["embedded"] == Embeds([1, 3])
    assert parsed["head"] == Prefix((1, 2))
    assert parsed["roles"] == InAnyOrder(("admin", "dev"))
    assert parsed["members"] == SetEquals((1, 2))
    assert parsed["some"] == SetEmbeds((1,))
    assert parsed["count"] == Equals(5)


def test_tagged_scalars_keep_their_resolved_types() -> None:
    parsed = parse_expectation("a: !equals 5\nb: !equals '5'\nc: !equals true\nd: !equals null\n")

    assert parsed == {"a": Equals(5), "b": Equals("5"), "c": Equals(True), "d": Equals(None)}


def test_leaf_tags_build_matchers() -> None:
    parsed = parse_expectation(
        """
email: !regex '@example\\.com$'
deleted: !absent
score: !within-delta {center: 10, delta: 2}
ratio: !within-delta [1.5, 0.5]
"""
    )

    assert isinstance(parsed["email"], Regex)
    assert parsed["email"].pattern.pattern == "@example\\.com$"
    assert parsed["deleted"] is ABSENT
    assert parsed["score"] == WithinDelta(10, 2)
    assert parsed["ratio"] == WithinDelta(1.5, 0.5)


def test_nested_tags_are_built_inside_tagged_containers() -> None:
    parsed = parse_expectation("user: !equals {roles: !in-any-order [a, b]}\n")

    assert parsed["user"] == Equals({"roles": InAnyOrder(("a", "b"))})


def test_instance_of_builds_type_predicates() -> None:
    parsed = parse_expectation(
        "id: !instance-of integer\nname: !instance-of string\nflag: !instance-of boolean\n"
    )

    assert evaluate(parsed, {"id": 7, "name": "Ada", "flag": False}).passed
    assert not evaluate(parsed, {"id": True, "name": "Ada", "flag": False}).passed
    assert not evaluate(parsed, {"id": 7, "name": 1, "flag": False}).passed


def test_match_with_tag_builds_override_table() -> None:
    parsed = parse_expectation(
        """
--- !match-with
overrides: {mapping: equals, sequence: in-any-order}
expected:
  user: {id: 1}
  tags: [b, a]
"""
    )

    assert isinstance(parsed, MatchWith)
    assert evaluate(parsed, {"user": {"id": 1}, "tags": ["a", "b"]}).passed
    assert not evaluate(parsed, {"user": {"id": 1, "x": 0}, "tags": ["a", "b"]}).passed


@pytest.mark.parametrize(
    ("text", "message"),
    [
        ("a: !regex '(unclosed'\n", "Invalid matcher"),
        ("a: !within-delta {center: 1}\n", "Invalid matcher"),
        ("a: !instance-of widget\n", "Invalid matcher"),
        ("a: !match-with {expected: 1}\n", "Invalid matcher"),
        ("a: !match-with {overrides: {mapping: nope}, expected: 1}\n", "Invalid matcher"),
        ("a: !prefix 5\n", "Invalid matcher"),
        ("a: [unclosed\n", "Failed to parse"),
        ("a: !unknown-tag 1\n", "Failed to parse"),
    ],
)
def test_invalid_expectations_raise_expectation_file_error(text: str, message: str) -> None:
    with pytest.raises(ExpectationFileError, match=message):
        parse_expectation(text)


def test_load_expectation_and_actual_from_files(tmp_path: Path) -> None:
    expected_path = _write_file(tmp_path / "expected.yaml", "tags: !in-any-order [a, b]\n")
    actual_path = _write_file(tmp_path / "actual.json", '{"tags": ["b", "a"], "id": 3}')

    assert evaluate(load_expectation(expected_path), load_actual(actual_path)).passed


def test_actual_files_do_not_understand_matcher_tags(tmp_path: Path) -> None:
    actual_path = _write_file(tmp_path / "actual.yaml", "a: !equals 1\n")

    with pytest.raises(ExpectationFileError, match="Failed to parse"):
        load_actual(actual_path)


def test_missing_files_raise_expectation_file_error(tmp_path: Path) -> None:
    with pytest.raises(ExpectationFileError, match="File not found"):
        load_expectation(tmp_path / "missing.yaml")
    with pytest.raises(ExpectationFileError, match="File not found"):
        load_actual(tmp_path / "missing.json")
