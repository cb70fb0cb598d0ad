"""Exception taxonomy for pattern tables.

Two lookup failures are kept apart on purpose: a table where no clause
matched raises ``NoSuchPatternError``, a table where a clause matched but
produced ``None`` raises ``PatternComputedNoneError``. Both only occur under
the required contract; the optional contract reports either case as ``None``.
"""

from __future__ import annotations

from typing import Any


class PatternError(Exception):
    """Base class for all errors raised by the pattern engine."""


class PatternConfigurationError(PatternError, ValueError):
    """A pattern table or helper was assembled from invalid parts."""


class NoSuchPatternError(PatternError, LookupError):
    """No clause matched the key and the table has no terminal clause."""

    def __init__(self, key: Any, accessor: str):
        self.key = key
        self.accessor = accessor
        super().__init__(
            f"for key: {key}. To allow this pattern to return nullable value, "
            f"consider using {accessor}."
        )

    def __reduce__(self):
        return (type(self), (self.key, self.accessor))


class PatternComputedNoneError(PatternError, ValueError):
    """A clause matched the key but its transform returned ``None``."""

    def __init__(self, key: Any, accessor: str):
        self.key = key
        self.accessor = accessor
        super().__init__(
            "Pattern computed null result. To allow this pattern to return "
            f"nullable value, consider using {accessor}."
        )

    def __reduce__(self):
        return (type(self), (self.key, self.accessor))
