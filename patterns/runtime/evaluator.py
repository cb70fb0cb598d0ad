"""
First-match evaluator for pattern tables.

Scans clauses in table order and applies the first one whose predicate
accepts the key. Two retrieval contracts sit on top of the same scan:

- required: raises on no match and on a ``None`` result
- optional: returns ``None`` for both instead

A failure-producing terminal clause raises under both contracts.
"""

from __future__ import annotations

import logging
from typing import Any, Sequence

from patterns.core.config import get_settings
from patterns.core.errors import NoSuchPatternError, PatternComputedNoneError
from patterns.matching.clause import Clause
from .trace import MatchTrace

logger = logging.getLogger(__name__)


class ScanResult:
    """Outcome of a single scan: which clause matched and what it produced."""

    __slots__ = ("index", "clause", "value")

    def __init__(self, index: int | None = None, clause: Clause | None = None, value: Any = None):
        self.index = index
        self.clause = clause
        self.value = value

    @property
    def matched(self) -> bool:
        return self.clause is not None


NO_MATCH = ScanResult()


class PatternEvaluator:
    """Evaluates keys against an ordered, immutable clause sequence.

    Holds no per-call state, so a single evaluator can serve concurrent
    callers as long as the clauses themselves are side-effect free.
    """

    def __init__(self, clauses: Sequence[Clause], optional_accessor: str | None = None):
        """Initialize the evaluator.

        Args:
            clauses: Clauses in evaluation order
            optional_accessor: Accessor name quoted in error hints
                (defaults to ``Settings.optional_accessor``)
        """
        settings = get_settings()
        self._clauses = tuple(clauses)
        self._accessor = optional_accessor or settings.optional_accessor

    def scan(self, key: Any, trace: MatchTrace | None = None) -> ScanResult:
        """Find the first matching clause and apply it.

        Predicates after the matching clause are never evaluated.

        Args:
            key: The input value
            trace: Optional trace to record steps

        Returns:
            ScanResult for the matching clause, or NO_MATCH
        """
        debug = get_settings().debug
        for index, clause in enumerate(self._clauses):
            result = clause.matches(key)

            if trace is not None:
                trace.add_step(index, clause.description or "", result, clause.terminal)

            if not result:
                continue

            if debug:
                logger.debug("Key %r matched clause %d (%s)", key, index, clause.description)

            value = clause.apply(key)

            if trace is not None:
                trace.complete("default" if clause.terminal else "matched", index, value)
            return ScanResult(index, clause, value)

        if debug:
            logger.debug("Key %r matched no clause", key)
        if trace is not None:
            trace.complete("no_match")
        return NO_MATCH

    def get(self, key: Any) -> Any:
        """Evaluate under the required contract.

        Raises:
            NoSuchPatternError: No clause matched and there is no terminal
            PatternComputedNoneError: The matching clause returned None
        """
        outcome = self.scan(key)
        if not outcome.matched:
            raise NoSuchPatternError(key, self._accessor)
        if outcome.value is None:
            raise PatternComputedNoneError(key, self._accessor)
        return outcome.value

    def get_optionally(self, key: Any) -> Any | None:
        """Evaluate under the optional contract.

        Returns None when nothing matched or the match produced None.
        Failures from an ``or_else_throw`` terminal still propagate.
        """
        return self.scan(key).value

    def explain(self, key: Any) -> MatchTrace:
        """Evaluate under the optional contract and return the full trace."""
        trace = MatchTrace(key=key)
        self.scan(key, trace)
        return trace
