"""
Callable option managers.

An OptionsManager owns one OptionStore and exposes it through two explicit
operations, `get` and `set`. Calling the manager directly resolves the call
shape once and forwards to one of them:

    opts = create_manager([("foo", 1), ("bar", 2), ("baz", "hello")])
    opts("foo")            # -> 1
    opts("foo", "bar")     # -> [1, 2]
    opts(foo=7, bar=0)     # set, atomically
    opts()                 # -> {"foo": 7, "bar": 0, "baz": "hello"}

A SharedOptionsManager is a second handle on an existing store; writes
through either handle are visible through both. Cloned managers (see
`optkit.interface.tools.clone_and_merge`) own an independent copy instead.
"""

from __future__ import annotations

import copy
import logging

from .errors import InvalidCallError
from .models import OptionStore

logger = logging.getLogger(__name__)


class OptionsManager:
    """
    Exclusive handle on one OptionStore.

    Parameters
    ----------
    store : OptionStore
        The store this manager owns.
    """

    def __init__(self, store: OptionStore):
        self._store = store

    def __call__(self, *names, **pairs):
        if is_setting(*names, **pairs):
            if names:
                raise InvalidCallError(
                    "Cannot mix option names and name=value pairs in one call; "
                    f"got names {list(names)} and pairs {sorted(pairs)}"
                )
            return self.set(**pairs)
        return self.get(*names)

    def get(self, *names):
        """
        Return all values as a dict, one value, or a list of values.

        Raises
        ------
        UnknownOptionError
            If a name is not an option of this manager.
        """
        return self._store.get(*names)

    def set(self, **pairs) -> "OptionsManager":
        """
        Update options atomically and return the manager.

        Every pair is validated before any is written; on failure the
        current values are left exactly as they were.
        """
        if pairs:
            self._store.set(pairs)
        return self

    def defaults(self) -> dict:
        return copy.deepcopy(dict(self._store.defaults))

    def rules(self) -> dict:
        return dict(self._store.rules)

    def names(self) -> list[str]:
        return self._store.names()

    def reset(self) -> "OptionsManager":
        self._store.reset()
        return self

    def clone(self) -> "OptionsManager":
        """Return a manager with an independent deep copy of this store."""
        return OptionsManager(self._store.copy())

    def shared(self) -> "SharedOptionsManager":
        """Return a second handle that aliases this manager's store."""
        return SharedOptionsManager(self._store)

    def shares_store_with(self, other: "OptionsManager") -> bool:
        return self._store is other._store

    def __contains__(self, name):
        return name in self._store

    def __len__(self):
        return len(self._store)

    def __iter__(self):
        return iter(self._store.names())

    def __repr__(self):
        body = ", ".join(f"{k}={v!r}" for k, v in self._store.get().items())
        return f"{type(self).__name__}({body})"


class SharedOptionsManager(OptionsManager):
    """
    Handle that deliberately shares its store with another manager.

    Used for global options referenced from many objects: mutating one
    alias mutates all of them.
    """


def create_manager(initial=(), allowed=None) -> OptionsManager:
    """
    Build a manager from ordered (name, value) pairs.

    Parameters
    ----------
    initial : iterable of (str, object) or dict
        Option names with default values.
    allowed : dict[str, ValidationRule], optional
        Rules checked against the defaults now and every later write.

    Returns
    -------
    OptionsManager
    """
    store = OptionStore(initial, allowed)
    logger.debug(f"Created options manager with {len(store)} options")
    return OptionsManager(store)


def is_setting(*args, **kwargs) -> bool:
    """True iff the call shape carries at least one name=value pair."""
    return len(kwargs) > 0
