"""Matching engine entry point tests."""

from __future__ import annotations

import copy
import re
from dataclasses import dataclass

from matcher_combinators.diff_tree import DiffTag, Outcome, mismatch_leaf, ok_leaf, to_outcome
from matcher_combinators.matchers import (
    Embeds,
    Equals,
    Predicate,
    Regex,
    equals,
    in_any_order,
)
from matcher_combinators.matching_engine import MatchContext, default_matcher, evaluate, match


@dataclass(frozen=True)
class _StartsWith:
    prefix: str

    def attempt_match(self, actual: object, context) -> Outcome:
        if isinstance(actual, str) and actual.startswith(self.prefix):
            return to_outcome(ok_leaf(actual, expected=self))
        return to_outcome(mismatch_leaf(self, actual, note="wrong prefix"))


def test_default_matcher_follows_classification() -> None:
    assert isinstance(default_matcher({"a": 1}), Embeds)
    assert isinstance(default_matcher([1]), Equals)
    assert isinstance(default_matcher(1), Equals)
    assert isinstance(default_matcher(re.compile("a")), Regex)
    assert isinstance(default_matcher(len), Predicate)


def test_match_returns_pass_flag_and_diff() -> None:
    passed, diff = match({"id": 1}, {"id": 1, "name": "Ada"})

    assert passed is True
    assert diff.is_ok
    assert set(diff.children) == {"id", "name"}


def test_user_defined_matcher_works_without_engine_changes() -> None:
    outcome = evaluate({"code": _StartsWith("ERR-")}, {"code": "OK-1"})

    assert not outcome.passed
    assert outcome.diff.children["code"].note == "wrong prefix"
    assert evaluate(in_any_order([_StartsWith("b"), _StartsWith("a")]), ["ab", "ba"]).passed


def test_matchers_are_reusable_and_deterministic() -> None:
    matcher = in_any_order([1, 2, 2, 3])
    actual = [2, 3, 9, 1]

    first = evaluate(matcher, actual)
    second = evaluate(matcher, actual)

    assert first == second
    assert not first.passed


def test_evaluation_never_mutates_inputs() -> None:
    expected = {"tags": in_any_order(["a", "b"]), "meta": {"ids": {1, 2}}}
    actual = {"tags": ["b", "a"], "meta": {"ids": {2, 1}, "x": [1]}}
    actual_copy = copy.deepcopy(actual)

    assert evaluate(expected, actual).passed
    assert actual == actual_copy


def test_mismatch_is_data_not_an_exception() -> None:
    outcome = evaluate(equals({"a": [1, {"b": 2}]}), {"a": [1, {"b": 3}], "c": None})

    assert not outcome.passed
    failures = {path: node.tag for path, node in outcome.diff.failures()}
    assert failures == {("a", 1, "b"): DiffTag.MISMATCH, ("c",): DiffTag.UNEXPECTED}


def test_context_with_overrides_is_a_new_context() -> None:
    base = MatchContext()
    scoped = base.with_overrides({"scalar": lambda value: Equals(value + 1)})

    assert base.overrides == ()
    assert scoped.evaluate(1, 2).passed
    assert not base.evaluate(1, 2).passed
