"""
Stateless operations over option managers.

Reset, clone-and-merge, call-shape inspection, the reserved-name guard and
the two rule constructors. None of these keep state of their own; they act
on the manager or names passed in.
"""

import logging

from ..manager import OptionsManager, is_setting
from ..models import EnumeratedRule, RangeRule, check_reserved

logger = logging.getLogger(__name__)

__all__ = [
    "reset",
    "clone_and_merge",
    "is_setting",
    "stop_if_reserved",
    "allowed_enumerated",
    "allowed_range",
]


def reset(manager: OptionsManager) -> None:
    """Restore every option of `manager` to its default value, in place."""
    manager.reset()


def clone_and_merge(manager: OptionsManager, **overrides) -> OptionsManager:
    """
    Copy a manager and apply overrides to the copy only.

    Parameters
    ----------
    manager : OptionsManager
        Source manager; never modified.
    **overrides
        Option values set on the clone with the usual validation.

    Returns
    -------
    OptionsManager
        A new manager with its own store, defaults and rules.

    Raises
    ------
    UnknownOptionError, ValidationError, ReservedNameError
        As for a set call; no clone is returned in that case.
    """
    clone = manager.clone()
    clone.set(**overrides)
    logger.debug(f"Cloned options manager with overrides {sorted(overrides)}")
    return clone


def stop_if_reserved(*names) -> None:
    """
    Raise ReservedNameError if any name uses the reserved prefix.

    Typically called on the keys of a set-style call before it is
    forwarded to a manager.
    """
    check_reserved(*names)


def allowed_enumerated(*values) -> EnumeratedRule:
    """Rule accepting only the listed values."""
    return EnumeratedRule(tuple(values))


def allowed_range(min, max) -> RangeRule:
    """Rule accepting real numbers between `min` and `max` inclusive."""
    return RangeRule(min, max)
