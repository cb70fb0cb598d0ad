"""Pattern table: an ordered, sealed sequence of clauses usable as a function."""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Iterator

from patterns.core.errors import PatternConfigurationError
from patterns.runtime.evaluator import PatternEvaluator
from patterns.runtime.trace import MatchTrace
from .clause import Clause, TerminalClause

logger = logging.getLogger(__name__)


class Patterns:
    """Ordered decision table of clauses.

    Calling the table evaluates it under the required contract; use
    ``get_optionally`` (or ``optional()`` for a reusable function) when a
    missing match or a ``None`` result is acceptable.

    Clause precedence is purely positional: the first clause whose predicate
    accepts the key wins. At most one terminal clause is allowed and it must
    come last.
    """

    __slots__ = ("_clauses", "_evaluator")

    def __init__(self, clauses: Iterable[Clause], optional_accessor: str | None = None):
        """Seal the clauses into a table.

        Args:
            clauses: Clauses in evaluation order
            optional_accessor: Accessor name quoted in error hints

        Raises:
            PatternConfigurationError: If an entry is not a Clause, or a
                terminal clause is duplicated or not last
        """
        sealed = tuple(clauses)
        _validate(sealed)
        self._clauses = sealed
        self._evaluator = PatternEvaluator(sealed, optional_accessor)
        logger.debug(
            "Built pattern table with %d clauses (terminal=%s)",
            len(sealed),
            self.has_terminal,
        )

    # =========================================================================
    # Required contract
    # =========================================================================

    def __call__(self, key: Any) -> Any:
        return self._evaluator.get(key)

    def get(self, key: Any) -> Any:
        """Evaluate the key, raising if nothing matched or the result is None.

        Raises:
            NoSuchPatternError: No clause matched and there is no terminal
            PatternComputedNoneError: The matching clause returned None
        """
        return self._evaluator.get(key)

    # =========================================================================
    # Optional contract
    # =========================================================================

    def get_optionally(self, key: Any) -> Any | None:
        """Evaluate the key, returning None instead of raising on a miss."""
        return self._evaluator.get_optionally(key)

    def optional(self) -> Callable[[Any], Any | None]:
        """Reusable function for the optional contract (e.g. for ``map``)."""
        return self._evaluator.get_optionally

    def explain(self, key: Any) -> MatchTrace:
        """Evaluate the key and return a trace of the predicates tested."""
        return self._evaluator.explain(key)

    # =========================================================================
    # Introspection
    # =========================================================================

    @property
    def clauses(self) -> tuple[Clause, ...]:
        return self._clauses

    @property
    def terminal(self) -> TerminalClause | None:
        """The catch-all clause, if the table has one."""
        if self._clauses and self._clauses[-1].terminal:
            return self._clauses[-1]
        return None

    @property
    def has_terminal(self) -> bool:
        return self.terminal is not None

    def __len__(self) -> int:
        return len(self._clauses)

    def __iter__(self) -> Iterator[Clause]:
        return iter(self._clauses)

    def __repr__(self) -> str:
        labels = ", ".join(c.description or "?" for c in self._clauses)
        return f"Patterns([{labels}])"


def _validate(clauses: tuple[Clause, ...]) -> None:
    last = len(clauses) - 1
    for position, clause in enumerate(clauses):
        if not isinstance(clause, Clause):
            raise PatternConfigurationError(
                f"Pattern entry {position} is not a clause: {clause!r}"
            )
        if clause.terminal and position != last:
            raise PatternConfigurationError(
                f"Terminal clause at position {position} must be the last entry "
                f"(table has {len(clauses)} entries)"
            )


def patterns(*clauses: Clause) -> Patterns:
    """Build a pattern table from clauses in evaluation order.

    Example:
        table = patterns(
            when(equals_to(3), then("b")),
            when(lambda i: i > 0, then_apply(str)),
            or_else(then("a")),
        )
        table(3)  # "b"
    """
    return Patterns(clauses)
