"""
Runtime package for pattern tables.

Provides first-match evaluation with:
- Required contract (raise on miss or None result)
- Optional contract (None on miss or None result)
- Evaluation tracing for explanation and debugging
"""

from patterns.runtime.trace import MatchTrace, TraceStep
from patterns.runtime.evaluator import PatternEvaluator, ScanResult, NO_MATCH

__all__ = [
    # Trace
    "MatchTrace",
    "TraceStep",
    # Evaluator
    "PatternEvaluator",
    "ScanResult",
    "NO_MATCH",
]
