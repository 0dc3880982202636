"""Backtracking search pairing matcher entries with actual elements.

The search always looks for a maximum pairing. A satisfying assignment
exists exactly when the maximum pairs every matcher entry (and, for
complete coverage, every actual element too), so one search serves both the
verdict and the best-effort diff.

Tie-break between equally large pairings: the first one found when entries
are visited in ascending order of compatible-element count (ties by entry
position), each entry tries actual elements in ascending position, and
pairing an entry is tried before leaving it unpaired. The ordered variant
visits entries in their own order and only pairs strictly increasing actual
positions.

Worst case is exponential in the number of elements. No iteration cap is
applied; the solver is meant for the small collections found in test
fixtures.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Generator, Sequence

from .assignment_models import Assignment, Coverage

_LOGGER = logging.getLogger(__name__)

_Pairs = tuple[tuple[int, int], ...]
_SubSearch = Generator[tuple[int, int], _Pairs, _Pairs]


def solve_assignment(
    compatibility: Sequence[Sequence[bool]],
    actual_count: int,
    coverage: Coverage,
    *,
    ordered: bool = False,
) -> Assignment:
    """Pair matcher entries (rows) with actual elements (columns).

    Args:
      compatibility: ``compatibility[i][j]`` is True when entry ``i`` matches
        actual element ``j``.
      actual_count: Number of actual elements (columns).
      coverage: Coverage the caller requires; it decides ``is_satisfying``.
      ordered: Require strictly increasing actual positions across entries.

    Returns:
      The deterministic maximum assignment.
    """
    candidates = [
        tuple(actual for actual in range(actual_count) if row[actual]) for row in compatibility
    ]
    search = _AssignmentSearch(candidates, actual_count)
    pairs = search.ordered_best(0, 0) if ordered else search.unordered_best(0, 0)
    _LOGGER.debug(
        "assignment search: %d entries, %d actual elements, %d states, %d pairs",
        len(candidates),
        actual_count,
        search.visited_states,
        len(pairs),
    )
    return _build_assignment(dict(pairs), len(candidates), actual_count, coverage)


class _AssignmentSearch:
    """Memoized search over explicit index sets.

    Remaining actual elements are tracked as a bit set, so a sub-search is
    identified by ``(position, used_actuals)`` and solved at most once.
    Sub-searches are generators driven from an explicit stack, so the depth
    of the search is not limited by the interpreter's recursion limit.
    """

    def __init__(self, candidates: Sequence[tuple[int, ...]], actual_count: int) -> None:
        self._candidates = candidates
        self._actual_count = actual_count
        self._order = sorted(
            range(len(candidates)), key=lambda entry: (len(candidates[entry]), entry)
        )
        self._unordered_memo: dict[tuple[int, int], _Pairs] = {}
        self._ordered_memo: dict[tuple[int, int], _Pairs] = {}
        self.visited_states = 0

    def unordered_best(self, position: int, used: int) -> _Pairs:
        return _drive(self._unordered_memo, self._unordered_state, (position, used))

    def ordered_best(self, entry: int, start: int) -> _Pairs:
        return _drive(self._ordered_memo, self._ordered_state, (entry, start))

    def _unordered_state(self, position: int, used: int) -> _SubSearch:
        if position == len(self._order):
            return ()
        self.visited_states += 1

        entry = self._order[position]
        free_actuals = self._actual_count - used.bit_count()
        bound = min(len(self._order) - position, free_actuals)
        best: _Pairs = ()
        for actual in self._candidates[entry]:
            bit = 1 << actual
            if used & bit:
                continue
            paired = ((entry, actual),) + (yield (position + 1, used | bit))
            if len(paired) > len(best):
                best = paired
                if len(best) == bound:
                    break
        if len(best) < bound:
            skipped = yield (position + 1, used)
            if len(skipped) > len(best):
                best = skipped
        return best

    def _ordered_state(self, entry: int, start: int) -> _SubSearch:
        if entry == len(self._candidates):
            return ()
        self.visited_states += 1

        bound = min(len(self._candidates) - entry, self._actual_count - start)
        best: _Pairs = ()
        for actual in self._candidates[entry]:
            if actual < start:
                continue
            paired = ((entry, actual),) + (yield (entry + 1, actual + 1))
            if len(paired) > len(best):
                best = paired
                if len(best) == bound:
                    break
        if len(best) < bound:
            skipped = yield (entry + 1, start)
            if len(skipped) > len(best):
                best = skipped
        return best


def _drive(
    memo: dict[tuple[int, int], _Pairs],
    expand: Callable[[int, int], _SubSearch],
    root: tuple[int, int],
) -> _Pairs:
    """Run the sub-search for ``root``, resolving nested states iteratively.

    Each sub-search yields the key of the state it needs next and receives
    that state's best pairing back.
    """
    if root in memo:
        return memo[root]
    stack = [(root, expand(*root))]
    result: _Pairs | None = None
    while stack:
        key, search = stack[-1]
        try:
            needed = search.send(result)
        except StopIteration as finished:
            stack.pop()
            memo[key] = finished.value
            result = finished.value
            continue
        result = memo.get(needed)
        if result is None:
            stack.append((needed, expand(*needed)))
    return memo[root]


def _build_assignment(
    pairs: dict[int, int], entry_count: int, actual_count: int, coverage: Coverage
) -> Assignment:
    paired_actuals = set(pairs.values())
    return Assignment(
        pairs=dict(sorted(pairs.items())),
        unmatched_matchers=tuple(entry for entry in range(entry_count) if entry not in pairs),
        unmatched_actuals=tuple(
            actual for actual in range(actual_count) if actual not in paired_actuals
        ),
        coverage=coverage,
    )
