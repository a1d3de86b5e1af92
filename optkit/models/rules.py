"""
Validation rules attached to individual options.

A rule is a frozen predicate over a candidate value. Two kinds exist:
an enumerated set of allowed values and an inclusive numeric range.
"""

from __future__ import annotations

from dataclasses import dataclass
import math
import numbers
from typing import Any


class ValidationRule:
    """
    Base class for option validation rules.

    Subclasses implement `accepts` and `describe`; `kind` names the rule
    family in error messages.
    """
    kind: str = "rule"

    def accepts(self, value: Any) -> bool:
        raise NotImplementedError

    def describe(self) -> str:
        raise NotImplementedError

    def __call__(self, value: Any) -> bool:
        return self.accepts(value)


@dataclass(frozen=True)
class EnumeratedRule(ValidationRule):
    """
    Accepts a value iff it equals one of the allowed values.

    Parameters
    ----------
    values : tuple
        The allowed values, in the order they were given.
    """
    values: tuple
    kind = "enumerated"

    def __post_init__(self):
        if len(self.values) == 0:
            raise ValueError("An enumerated rule needs at least one allowed value")

    def accepts(self, value):
        # equality rather than hashing so unhashable values can be listed
        return any(_same(value, allowed) for allowed in self.values)

    def describe(self):
        allowed = ", ".join(repr(v) for v in self.values)
        return f"one of [{allowed}] (enumerated)"


@dataclass(frozen=True)
class RangeRule(ValidationRule):
    """
    Accepts a real number within inclusive bounds.

    Parameters
    ----------
    lower, upper : numbers.Real
        Inclusive bounds; `lower` must not exceed `upper`.
    """
    lower: numbers.Real
    upper: numbers.Real
    kind = "range"

    def __post_init__(self):
        for bound in (self.lower, self.upper):
            if not _is_number(bound):
                raise ValueError(f"Range bounds must be real numbers, got {bound!r}")
            if math.isnan(bound):
                raise ValueError("Range bounds must not be NaN")
        if self.lower > self.upper:
            raise ValueError(
                f"Range lower bound {self.lower!r} exceeds upper bound {self.upper!r}"
            )

    def accepts(self, value):
        if not _is_number(value):
            return False
        return bool(self.lower <= value <= self.upper)

    def describe(self):
        return f"between {self.lower!r} and {self.upper!r} inclusive (range)"


def _is_number(value) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _same(a, b) -> bool:
    if type(a) is bool or type(b) is bool:
        # keep True from matching 1
        return type(a) is type(b) and a == b
    try:
        return bool(a == b)
    except (TypeError, ValueError):
        return False
