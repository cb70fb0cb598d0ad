"""Tests for evaluation tracing."""

import pytest

from patterns import (
    MatchTrace,
    Patterns,
    equals_to,
    or_else_throw,
    patterns,
    then,
    when,
)


class TestMatchTrace:
    def test_create_trace(self):
        trace = MatchTrace(key=1)

        assert trace.key == 1
        assert trace.outcome is None
        assert trace.steps == []
        assert trace.matched is False

    def test_add_and_complete(self):
        trace = MatchTrace(key=1)
        trace.add_step(0, "equals_to(1)", True)
        trace.complete("matched", 0, "one")

        assert len(trace.steps) == 1
        assert trace.steps[0].result is True
        assert trace.matched_index == 0
        assert trace.value == "one"
        assert trace.completed_at is not None


class TestExplain:
    def test_records_steps_until_match(self, full_table: Patterns):
        trace = full_table.explain(2)

        assert [s.result for s in trace.steps] == [False, False, True]
        assert trace.outcome == "matched"
        assert trace.matched_index == 2
        assert trace.value == "2"
        assert trace.matched is True

    def test_default_outcome(self, full_table: Patterns):
        trace = full_table.explain(0)

        assert trace.outcome == "default"
        assert trace.matched_index == 4
        assert trace.steps[-1].terminal is True
        assert trace.value == "a"

    def test_no_match_outcome(self, partial_table: Patterns):
        trace = partial_table.explain(0)

        assert trace.outcome == "no_match"
        assert trace.matched_index is None
        assert len(trace.steps) == 3
        assert trace.matched is False

    def test_step_descriptions(self):
        table = patterns(
            when(equals_to(1), then("a"), description="is one"),
            when(equals_to(2), then("b")),
        )
        trace = table.explain(2)

        assert [s.description for s in trace.steps] == ["is one", "equals_to(2)"]

    def test_failure_terminal_still_raises(self):
        table = patterns(or_else_throw(lambda v: RuntimeError("nope")))

        with pytest.raises(RuntimeError, match="nope"):
            table.explain(1)
