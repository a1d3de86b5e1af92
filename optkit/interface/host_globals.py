"""
Reset process-wide settings owned by matplotlib and numpy.

Both stores are snapshot once, when this module is first imported, and the
snapshots are never modified afterwards:

- graphics parameters: ``matplotlib.rcParams``
- runtime options: numpy print options and floating-point error handling

``reset_graphics_parameters()`` and ``reset_runtime_options()`` overwrite
the live stores with those snapshots and may be called any number of times.
"""

import copy
import logging
import warnings

import matplotlib
import numpy as np

logger = logging.getLogger(__name__)

# switching backends is not a parameter reset; matplotlib.rcdefaults skips it too
_GRAPHICS_SKIP = {"backend", "backend_fallback"}

_graphics_snapshot = matplotlib.rcParams.copy()
_printoptions_snapshot = np.get_printoptions()
_errstate_snapshot = np.geterr()


def snapshot_graphics_parameters() -> dict:
    """Copy of the rcParams captured at first import."""
    return {k: copy.deepcopy(v) for k, v in dict.items(_graphics_snapshot)}


def snapshot_runtime_options() -> dict:
    """Copy of the numpy print options and error state captured at first import."""
    return {
        "printoptions": dict(_printoptions_snapshot),
        "errstate": dict(_errstate_snapshot),
    }


def reset_graphics_parameters() -> None:
    """Restore every rcParams entry to its value at first import."""
    restore = {
        k: copy.deepcopy(v) for k, v in dict.items(_graphics_snapshot)
        if k not in _GRAPHICS_SKIP
    }
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", matplotlib.MatplotlibDeprecationWarning)
        matplotlib.rcParams.update(restore)
    logger.debug(f"Restored {len(restore)} graphics parameters")


def reset_runtime_options() -> None:
    """Restore numpy print options and floating-point error handling."""
    np.set_printoptions(**_printoptions_snapshot)
    np.seterr(**_errstate_snapshot)
    logger.debug(
        f"Restored {len(_printoptions_snapshot)} print options and "
        f"{len(_errstate_snapshot)} error-handling modes"
    )
