"""Clause types and the factories used to build them.

A clause pairs a predicate with a transform. Ordinary clauses are built with
``when``/``when_match``; the terminal (catch-all) clause is built with
``or_else``/``or_else_throw`` and always matches.
"""

from __future__ import annotations

from typing import Any, Callable, ClassVar, Literal

from pydantic import BaseModel, ConfigDict, model_validator

from patterns.core.errors import PatternConfigurationError


Predicate = Callable[[Any], bool]
Transform = Callable[[Any], Any]
FailureFactory = Callable[[Any], BaseException]


def _always(value: Any) -> bool:
    return True


def _describe(fn: Callable[..., Any]) -> str:
    """Readable name for a predicate, used in traces and reprs."""
    name = getattr(fn, "__qualname__", None) or getattr(fn, "__name__", None)
    return name or repr(fn)


class Clause(BaseModel):
    """An immutable (predicate, transform) pair.

    Clauses are frozen once built: the table that owns them never exposes
    a way to swap either callable.
    """

    predicate: Predicate
    """Test applied to the input; the first clause returning True wins."""

    transform: Transform
    """Computes the output for inputs accepted by the predicate."""

    description: str | None = None
    """Label used in traces (defaults to the predicate's name)."""

    terminal: ClassVar[bool] = False

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="before")
    @classmethod
    def default_description(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("description") is None:
            predicate = data.get("predicate")
            if callable(predicate):
                data = {**data, "description": _describe(predicate)}
        return data

    def matches(self, value: Any) -> bool:
        """Check whether this clause accepts the value."""
        return bool(self.predicate(value))

    def apply(self, value: Any) -> Any:
        """Compute the clause output for an accepted value."""
        return self.transform(value)


class TerminalClause(Clause):
    """Catch-all clause evaluated when no ordinary clause matched.

    ``kind="value"`` computes a value from the input. ``kind="failure"``
    treats the transform as a failure factory and raises whatever it
    returns, unwrapped.
    """

    predicate: Predicate = _always
    kind: Literal["value", "failure"] = "value"

    terminal: ClassVar[bool] = True

    @model_validator(mode="before")
    @classmethod
    def default_description(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("description") is None:
            label = "otherwise raise" if data.get("kind") == "failure" else "otherwise"
            data = {**data, "description": label}
        return data

    def apply(self, value: Any) -> Any:
        if self.kind == "failure":
            failure = self.transform(value)
            if not isinstance(failure, BaseException):
                raise PatternConfigurationError(
                    f"Failure factory must return an exception, got {type(failure).__name__}"
                )
            raise failure
        return self.transform(value)


# =============================================================================
# Clause factories
# =============================================================================


def when(predicate: Predicate, transform: Transform, description: str | None = None) -> Clause:
    """Build a clause from an arbitrary predicate and transform."""
    return Clause(predicate=predicate, transform=transform, description=description)


def when_match(
    cls: type | tuple[type, ...],
    transform: Transform,
    description: str | None = None,
) -> Clause:
    """Build a clause that matches instances of ``cls``.

    The transform is only invoked with values that passed the
    ``isinstance`` check, so it may rely on the narrowed type.

    Args:
        cls: Class (or tuple of classes) the input must be an instance of
        transform: Function applied to matching instances
        description: Optional trace label

    Returns:
        The type-testing Clause
    """
    classes = cls if isinstance(cls, tuple) else (cls,)
    if not classes or not all(isinstance(c, type) for c in classes):
        raise PatternConfigurationError(f"when_match expects a class, got {cls!r}")

    def is_instance(value: Any) -> bool:
        return isinstance(value, cls)

    if description is None:
        description = "isinstance " + " | ".join(c.__name__ for c in classes)
    return Clause(predicate=is_instance, transform=transform, description=description)


def or_else(transform: Transform, description: str | None = None) -> TerminalClause:
    """Build the value-producing terminal clause."""
    return TerminalClause(transform=transform, kind="value", description=description)


def or_else_throw(failure_factory: FailureFactory, description: str | None = None) -> TerminalClause:
    """Build the failure-producing terminal clause.

    ``failure_factory`` receives the unmatched input and returns the
    exception to raise. The exception reaches the caller as-is under both
    the required and the optional contract.
    """
    return TerminalClause(transform=failure_factory, kind="failure", description=description)


# =============================================================================
# Transform factories
# =============================================================================


def then(constant: Any) -> Transform:
    """Transform that ignores its input and returns ``constant``."""

    def constant_transform(value: Any) -> Any:
        return constant

    return constant_transform


def then_supply(supplier: Callable[[], Any]) -> Transform:
    """Transform that ignores its input and calls ``supplier()`` each time."""
    if not callable(supplier):
        raise PatternConfigurationError(f"then_supply expects a callable, got {supplier!r}")

    def supplied_transform(value: Any) -> Any:
        return supplier()

    return supplied_transform


def then_apply(function: Transform) -> Transform:
    """Transform that applies ``function`` to the input."""
    if not callable(function):
        raise PatternConfigurationError(f"then_apply expects a callable, got {function!r}")
    return function
