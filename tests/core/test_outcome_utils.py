"""Tests for recourse.core.outcome utility functions.

Covers try_outcome, outcome_from_optional, collect_outcomes and
partition_outcomes.
"""

from __future__ import annotations

import pytest

from recourse.core.outcome import (
    Failure,
    Success,
    collect_outcomes,
    outcome_from_optional,
    partition_outcomes,
    try_outcome,
)


# ── try_outcome ──────────────────────────────────────────────────────

class TestTryOutcome:
    def test_success(self):
        assert try_outcome(lambda: 42) == Success(42)

    def test_failure_captures_exception(self):
        r = try_outcome(lambda: 1 / 0)
        assert r.is_err()
        assert isinstance(r.error, ZeroDivisionError)

    def test_returns_none_success(self):
        assert try_outcome(lambda: None) == Success(None)

    def test_only_listed_types_captured(self):
        r = try_outcome(lambda: int("x"), ValueError)
        assert isinstance(r.error, ValueError)

    def test_unlisted_types_propagate(self):
        with pytest.raises(ZeroDivisionError):
            try_outcome(lambda: 1 / 0, KeyError)


# ── outcome_from_optional ────────────────────────────────────────────

class TestOutcomeFromOptional:
    def test_value(self):
        assert outcome_from_optional(5, "missing") == Success(5)

    def test_none(self):
        assert outcome_from_optional(None, "missing") == Failure("missing")

    def test_falsy_value_is_success(self):
        assert outcome_from_optional(0, "missing") == Success(0)


# ── collect_outcomes ─────────────────────────────────────────────────

class TestCollectOutcomes:
    def test_all_success(self):
        assert collect_outcomes([Success(1), Success(2), Success(3)]) == Success([1, 2, 3])

    def test_first_failure_wins(self):
        assert collect_outcomes([Success(1), Failure("a"), Failure("b")]) == Failure("a")

    def test_empty(self):
        assert collect_outcomes([]) == Success([])

    def test_stops_at_first_failure(self):
        consumed = []

        def generate():
            for outcome in [Success(1), Failure("a"), Success(3)]:
                consumed.append(outcome)
                yield outcome

        collect_outcomes(generate())
        assert len(consumed) == 2


# ── partition_outcomes ───────────────────────────────────────────────

class TestPartitionOutcomes:
    def test_mixed(self):
        values, errors = partition_outcomes([Success(1), Failure("a"), Success(2), Failure("b")])
        assert values == [1, 2]
        assert errors == ["a", "b"]

    def test_empty(self):
        assert partition_outcomes([]) == ([], [])
