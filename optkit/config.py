"""
Library-level configuration dictionary used across optkit.

Holds the reserved option-name prefix, copy behaviour for reads, and the
locking switch picked up by newly created option stores.
"""

import copy

con_dict = {
    # option names starting with this are kept for internal bookkeeping
    "reserved_prefix": "__",
    # hand out deep copies on get so callers can't mutate the store
    "copy_on_get": True,
    # new stores get a real RLock; existing stores keep what they were built with
    "thread_safe": True,
}

_initial = copy.deepcopy(con_dict)


def set_value(key, value):
    if key not in con_dict:
        raise KeyError(key)
    ty = type(con_dict[key])
    if ty is bool and isinstance(value, str):
        # bool("False") is True
        value = value.strip().lower() in ("1", "true", "yes", "on")
    con_dict[key] = ty(value)


def get_value(key):
    return con_dict[key]


def get_all():
    return con_dict


def restore_defaults():
    con_dict.clear()
    con_dict.update(copy.deepcopy(_initial))
