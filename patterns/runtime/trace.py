"""
Execution tracing for pattern table evaluation.

Records which predicates were tested for a key and which clause produced
the result, for debugging and explaining table behavior.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Literal

from pydantic import BaseModel, Field


class TraceStep(BaseModel):
    """A single predicate evaluation in the trace."""

    index: int
    """Position of the clause in the table."""

    description: str
    """Human-readable label of the clause."""

    result: bool
    """Whether the predicate accepted the key."""

    terminal: bool = False
    """Whether the clause is the table's catch-all."""


class MatchTrace(BaseModel):
    """Complete trace of one table evaluation.

    Steps are recorded in evaluation order, so the last step is always the
    clause that matched (when one did).
    """

    key: Any = None
    """The evaluated input."""

    started_at: str = Field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )
    """ISO timestamp of when evaluation started."""

    completed_at: str | None = None
    """ISO timestamp of when evaluation completed."""

    steps: list[TraceStep] = Field(default_factory=list)
    """Predicates evaluated, in order."""

    outcome: Literal["matched", "default", "no_match"] | None = None
    """How the evaluation ended."""

    matched_index: int | None = None
    """Index of the clause that produced the value (if any)."""

    value: Any = None
    """Value produced by the matching clause."""

    def add_step(
        self,
        index: int,
        description: str,
        result: bool,
        terminal: bool = False,
    ) -> TraceStep:
        """Add a step to the trace.

        Returns:
            The created TraceStep
        """
        step = TraceStep(
            index=index,
            description=description,
            result=result,
            terminal=terminal,
        )
        self.steps.append(step)
        return step

    def complete(
        self,
        outcome: Literal["matched", "default", "no_match"],
        matched_index: int | None = None,
        value: Any = None,
    ) -> None:
        """Mark the trace as complete.

        Args:
            outcome: How the evaluation ended
            matched_index: Index of the matching clause
            value: The produced value
        """
        self.outcome = outcome
        self.matched_index = matched_index
        self.value = value
        self.completed_at = datetime.now(timezone.utc).isoformat()

    @property
    def matched(self) -> bool:
        """Whether any clause (ordinary or terminal) produced the value."""
        return self.outcome in ("matched", "default")
