"""
optkit models package.

Data structures behind an option manager.

Classes
-------
ValidationRule
    Base predicate type; EnumeratedRule and RangeRule are the two kinds.
OptionStore
    Current values, frozen defaults and rules for one manager.
"""

from .rules import EnumeratedRule, RangeRule, ValidationRule
from .store import OptionStore, check_reserved

__all__ = [
    "ValidationRule",
    "EnumeratedRule",
    "RangeRule",
    "OptionStore",
    "check_reserved",
]
