"""Multiset assignment solver tests."""

from __future__ import annotations

import logging

from matcher_combinators.assignment import Coverage, solve_assignment


def _grid(rows: list[str]) -> list[list[bool]]:
    return [[cell == "x" for cell in row] for row in rows]


def test_finds_complete_assignment_that_greedy_pairing_would_miss() -> None:
    # Entry 0 matches both elements, entry 1 only the first one.
    assignment = solve_assignment(_grid(["xx", "x."]), 2, Coverage.COMPLETE)

    assert assignment.pairs == {0: 1, 1: 0}
    assert assignment.unmatched_matchers == ()
    assert assignment.unmatched_actuals == ()
    assert assignment.is_satisfying


def test_reports_unmatched_entries_and_elements_for_best_effort_pairing() -> None:
    assignment = solve_assignment(_grid(["x..", "x..", "..."]), 3, Coverage.COMPLETE)

    assert assignment.pairs == {0: 0}
    assert assignment.unmatched_matchers == (1, 2)
    assert assignment.unmatched_actuals == (1, 2)
    assert not assignment.is_satisfying


def test_partial_coverage_tolerates_leftover_actuals_only() -> None:
    satisfied = solve_assignment(_grid([".x."]), 3, Coverage.PARTIAL)
    unsatisfied = solve_assignment(_grid(["..."]), 3, Coverage.PARTIAL)

    assert satisfied.is_satisfying
    assert satisfied.unmatched_actuals == (0, 2)
    assert not unsatisfied.is_satisfying


def test_complete_coverage_rejects_leftover_actuals() -> None:
    assignment = solve_assignment(_grid(["x."]), 2, Coverage.COMPLETE)

    assert assignment.pairs == {0: 0}
    assert assignment.unmatched_actuals == (1,)
    assert not assignment.is_satisfying


def test_tie_break_prefers_lowest_actual_positions() -> None:
    assignment = solve_assignment(_grid(["xxx", "xxx"]), 3, Coverage.PARTIAL)

    assert assignment.pairs == {0: 0, 1: 1}


def test_assignment_is_deterministic_across_calls() -> None:
    grid = _grid(["xx.x", ".xx.", "x..x", "xxxx"])

    first = solve_assignment(grid, 4, Coverage.COMPLETE)
    second = solve_assignment(grid, 4, Coverage.COMPLETE)

    assert first == second
    assert first.is_satisfying


def test_ordered_search_requires_increasing_positions() -> None:
    in_order = solve_assignment(_grid(["x..", "..x"]), 3, Coverage.PARTIAL, ordered=True)
    reversed_order = solve_assignment(_grid(["..x", "x.."]), 3, Coverage.PARTIAL, ordered=True)

    assert in_order.pairs == {0: 0, 1: 2}
    assert in_order.is_satisfying
    assert len(reversed_order.pairs) == 1
    assert not reversed_order.is_satisfying


def test_empty_inputs_produce_trivial_assignment() -> None:
    assignment = solve_assignment([], 0, Coverage.COMPLETE)

    assert assignment.pairs == {}
    assert assignment.is_satisfying


def test_matcher_for_actual_inverts_pairs() -> None:
    assignment = solve_assignment(_grid([".x", "x."]), 2, Coverage.COMPLETE)

    assert assignment.matcher_for_actual() == {1: 0, 0: 1}


def test_search_statistics_are_logged_at_debug(caplog) -> None:
    with caplog.at_level(logging.DEBUG, logger="matcher_combinators.assignment"):
        solve_assignment(_grid(["x"]), 1, Coverage.COMPLETE)

    assert "assignment search" in caplog.text


def test_long_collections_do_not_exhaust_the_call_stack() -> None:
    size = 1500
    diagonal = [[row == column for column in range(size)] for row in range(size)]

    unordered = solve_assignment(diagonal, size, Coverage.COMPLETE)
    ordered = solve_assignment(diagonal, size, Coverage.PARTIAL, ordered=True)

    assert unordered.is_satisfying
    assert ordered.is_satisfying
    assert ordered.pairs == {index: index for index in range(size)}
