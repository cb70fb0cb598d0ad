"""Matching package - clause model, factories and the pattern table."""

from .clause import (
    Clause,
    TerminalClause,
    Predicate,
    Transform,
    FailureFactory,
    when,
    when_match,
    or_else,
    or_else_throw,
    then,
    then_supply,
    then_apply,
)
from .table import Patterns, patterns

__all__ = [
    # Clauses
    "Clause",
    "TerminalClause",
    "Predicate",
    "Transform",
    "FailureFactory",
    "when",
    "when_match",
    "or_else",
    "or_else_throw",
    # Transforms
    "then",
    "then_supply",
    "then_apply",
    # Table
    "Patterns",
    "patterns",
]
