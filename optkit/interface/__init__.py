"""
optkit interface package
========================

Operations that sit on top of the option-manager model.

- ``tools``
  Stateless functions over managers: ``reset``, ``clone_and_merge``,
  ``is_setting``, ``stop_if_reserved`` and the rule constructors
  ``allowed_enumerated`` / ``allowed_range``.

- ``host_globals``
  Resets for the process-wide matplotlib and numpy settings, restored
  from snapshots taken at first import.

- ``holders``
  ``OptionsHolder`` mixin pairing class-wide shared options with
  per-instance cloned overrides.
"""

from .holders import OptionsHolder
from .host_globals import reset_graphics_parameters, reset_runtime_options
from .tools import (
    allowed_enumerated,
    allowed_range,
    clone_and_merge,
    is_setting,
    reset,
    stop_if_reserved,
)
