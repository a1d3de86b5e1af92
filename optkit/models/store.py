"""
Backing storage for one option manager.

An OptionStore pairs the current option values with a frozen snapshot of
their defaults and the validation rules attached at creation time.
"""

from __future__ import annotations

import contextlib
import copy
import logging
import threading
from types import MappingProxyType

from .. import config
from ..errors import ReservedNameError, UnknownOptionError, ValidationError
from .rules import ValidationRule

logger = logging.getLogger(__name__)


class OptionStore:
    """
    Mutable option values with immutable defaults and rules.

    Parameters
    ----------
    initial : iterable of (str, object) or dict
        Option names and their default values, in order. A value of None
        means "no default value set".
    rules : dict[str, ValidationRule], optional
        Validation rule per option name. Names without a rule are
        unconstrained.

    Raises
    ------
    ReservedNameError
        If an option name starts with the reserved prefix.
    UnknownOptionError
        If a rule is given for a name that is not an option.
    ValidationError
        If a default value violates its rule.

    Notes
    -----
    `current` and `defaults` always share the same key set. Values are
    validated on write only.
    """

    def __init__(self, initial, rules=None):
        pairs = list(initial.items()) if isinstance(initial, dict) else list(initial)
        rules = dict(rules or {})

        names = [name for name, _ in pairs]
        check_reserved(*names)
        for name in rules:
            if name not in names:
                raise UnknownOptionError(name)
            if not isinstance(rules[name], ValidationRule):
                raise TypeError(
                    f"Rule for option {name!r} must be a ValidationRule, "
                    f"got {type(rules[name]).__name__}"
                )

        values = {}
        for name, value in pairs:
            rule = rules.get(name)
            if rule is not None and not rule.accepts(value):
                raise ValidationError(name, value, rule)
            values[name] = value

        self._defaults = MappingProxyType(copy.deepcopy(values))
        self._current = copy.deepcopy(values)
        self._rules = MappingProxyType(rules)
        self._lock = _new_lock()

    # ------------------------------------------------------------------
    # read access
    # ------------------------------------------------------------------
    @property
    def defaults(self):
        return self._defaults

    @property
    def rules(self):
        return self._rules

    def names(self) -> list[str]:
        return list(self._defaults)

    def __contains__(self, name) -> bool:
        return name in self._defaults

    def __len__(self) -> int:
        return len(self._defaults)

    def get(self, *names):
        """
        Return option values.

        With no names, return a dict of every current value in creation
        order. With one name return its value, with several return a list
        in the order asked for.
        """
        with self._lock:
            for name in names:
                if name not in self._current:
                    raise UnknownOptionError(name)
            if not names:
                return _out(dict(self._current))
            if len(names) == 1:
                return _out(self._current[names[0]])
            return [_out(self._current[name]) for name in names]

    # ------------------------------------------------------------------
    # write access
    # ------------------------------------------------------------------
    def set(self, pairs: dict) -> None:
        """
        Validate and write every pair, or write none of them.

        Raises
        ------
        ReservedNameError, UnknownOptionError, ValidationError
            On the first offending pair; the store is left untouched.
        """
        check_reserved(*pairs)
        with self._lock:
            for name, value in pairs.items():
                if name not in self._current:
                    raise UnknownOptionError(name)
                rule = self._rules.get(name)
                if rule is not None and not rule.accepts(value):
                    raise ValidationError(name, value, rule)
            self._current.update(copy.deepcopy(pairs))
        logger.debug(f"Set options {sorted(pairs)}")

    def reset(self) -> None:
        with self._lock:
            self._current.clear()
            self._current.update(copy.deepcopy(dict(self._defaults)))
        logger.debug(f"Reset {len(self._defaults)} options to defaults")

    def copy(self) -> "OptionStore":
        """
        Deep copy current values, defaults and rules into a new store.

        The copy gets its own lock and diverges freely from this store.
        """
        with self._lock:
            clone = OptionStore.__new__(OptionStore)
            clone._defaults = MappingProxyType(copy.deepcopy(dict(self._defaults)))
            clone._current = copy.deepcopy(self._current)
            clone._rules = MappingProxyType(dict(self._rules))
        clone._lock = _new_lock()
        return clone


def check_reserved(*names) -> None:
    """Raise ReservedNameError for the first name using the reserved prefix."""
    prefix = config.get_value("reserved_prefix")
    for name in names:
        if not isinstance(name, str):
            raise TypeError(f"Option names must be strings, got {name!r}")
        if prefix and name.startswith(prefix):
            raise ReservedNameError(name, prefix)


def _new_lock():
    if config.get_value("thread_safe"):
        return threading.RLock()
    return contextlib.nullcontext()


def _out(value):
    if config.get_value("copy_on_get"):
        return copy.deepcopy(value)
    return value
