"""Small function helpers for building predicates and transforms."""

from __future__ import annotations

from functools import reduce
from typing import Any, Callable

from patterns.core.errors import PatternConfigurationError


def equals_to(expected: Any) -> Callable[[Any], bool]:
    """Predicate that accepts values equal to ``expected``."""

    def is_equal(value: Any) -> bool:
        return value == expected

    is_equal.__qualname__ = f"equals_to({expected!r})"
    return is_equal


def sequence_of(*functions: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Chain single-argument functions left to right.

    ``sequence_of(f, g, h)(x)`` is ``h(g(f(x)))``.
    """
    _check_functions("sequence_of", functions)

    def sequence(value: Any) -> Any:
        return reduce(lambda acc, fn: fn(acc), functions, value)

    return sequence


def composition_of(*functions: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Compose single-argument functions right to left.

    ``composition_of(f, g, h)(x)`` is ``f(g(h(x)))``.
    """
    _check_functions("composition_of", functions)
    return sequence_of(*reversed(functions))


def _check_functions(name: str, functions: tuple[Callable[[Any], Any], ...]) -> None:
    if not functions:
        raise PatternConfigurationError(f"{name} needs at least one function")
    for fn in functions:
        if not callable(fn):
            raise PatternConfigurationError(f"{name} expects callables, got {fn!r}")
