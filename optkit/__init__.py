"""
optkit: small in-process option managers.

Create a named set of options with optional validation, read and update
them through one callable handle, derive local copies with overrides, and
reset everything back to its defaults.

Subpackages
-----------
- models
    ValidationRule kinds and the OptionStore holding values, defaults
    and rules.

- interface
    Free functions over managers (reset, clone_and_merge, is_setting,
    stop_if_reserved, rule constructors), the OptionsHolder mixin, and
    resets for matplotlib/numpy global settings.

Other modules
-------------
- manager
    OptionsManager, SharedOptionsManager and create_manager.
- errors
    UnknownOptionError, ValidationError, ReservedNameError, InvalidCallError.
- config
    Library settings dictionary (con_dict): reserved prefix, copy and
    locking behaviour.

Typical usage
-------------

    from optkit import create_manager, allowed_enumerated, reset

    opts = create_manager(
        [("direction", "up"), ("speed", 1)],
        {"direction": allowed_enumerated("up", "down")},
    )
    opts(direction="down")
    reset(opts)
"""

from . import config
from .errors import (
    InvalidCallError,
    OptionsError,
    ReservedNameError,
    UnknownOptionError,
    ValidationError,
)
from .manager import OptionsManager, SharedOptionsManager, create_manager
from .models import EnumeratedRule, OptionStore, RangeRule, ValidationRule
from .interface import (
    OptionsHolder,
    allowed_enumerated,
    allowed_range,
    clone_and_merge,
    is_setting,
    reset,
    reset_graphics_parameters,
    reset_runtime_options,
    stop_if_reserved,
)

__all__ = [
    "create_manager",
    "OptionsManager",
    "SharedOptionsManager",
    "OptionStore",
    "ValidationRule",
    "EnumeratedRule",
    "RangeRule",
    "OptionsHolder",
    "reset",
    "clone_and_merge",
    "is_setting",
    "stop_if_reserved",
    "allowed_enumerated",
    "allowed_range",
    "reset_graphics_parameters",
    "reset_runtime_options",
    "OptionsError",
    "UnknownOptionError",
    "ValidationError",
    "ReservedNameError",
    "InvalidCallError",
]
