"""Ordered, predicate-driven pattern matching.

Build a decision table from (predicate, transform) clauses and apply it to
values as if it were a single function:

    table = patterns(
        when(equals_to(3), then("b")),
        when(lambda i: i > 0, then_apply(str)),
        or_else(then("a")),
    )
    list(map(table, [3, 5, 0]))  # ["b", "5", "a"]

Environment Variables:
    PATTERNS_DEBUG: Set to "true" to log every evaluation at DEBUG level.
    PATTERNS_LOG_LEVEL: Level used by configure_logging(). Default "WARNING".
"""

# Configuration and errors
from .core import (
    Settings,
    get_settings,
    configure_logging,
    PatternError,
    PatternConfigurationError,
    NoSuchPatternError,
    PatternComputedNoneError,
)

# Clauses and tables
from .matching import (
    Clause,
    TerminalClause,
    Patterns,
    patterns,
    when,
    when_match,
    or_else,
    or_else_throw,
    then,
    then_supply,
    then_apply,
)

# Tracing
from .runtime import MatchTrace, TraceStep

# Helpers
from .functions import equals_to, composition_of, sequence_of

__version__ = "0.1.0"

__all__ = [
    # Configuration
    "Settings",
    "get_settings",
    "configure_logging",
    # Errors
    "PatternError",
    "PatternConfigurationError",
    "NoSuchPatternError",
    "PatternComputedNoneError",
    # Clauses and tables
    "Clause",
    "TerminalClause",
    "Patterns",
    "patterns",
    "when",
    "when_match",
    "or_else",
    "or_else_throw",
    "then",
    "then_supply",
    "then_apply",
    # Tracing
    "MatchTrace",
    "TraceStep",
    # Helpers
    "equals_to",
    "composition_of",
    "sequence_of",
]
