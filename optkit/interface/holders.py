"""
Mixin for objects that read global options with per-object overrides.

A class declares one shared manager for every instance. An instance that
needs different values takes a private clone of those options, so its
changes never reach the shared manager or other instances.

    class Plotter(OptionsHolder):
        global_options = create_manager([("style", "line"), ("alpha", 1.0)])

    p = Plotter()
    p.set_local_options(alpha=0.5)
    p.options("alpha")                  # -> 0.5
    Plotter.global_options("alpha")     # -> 1.0
"""

import logging

from ..manager import OptionsManager
from .tools import clone_and_merge

logger = logging.getLogger(__name__)


class OptionsHolder:
    """
    Gives instances a view of class-wide options plus local overrides.

    Attributes
    ----------
    global_options : OptionsManager
        Class-level manager; set by subclasses.
    """
    global_options: OptionsManager = None

    @property
    def options(self) -> OptionsManager:
        """
        Local clone if one exists, otherwise a shared alias of the globals.
        """
        local = self.__dict__.get("_local_options")
        if local is not None:
            return local
        if self.global_options is None:
            raise AttributeError(
                f"{type(self).__name__} has no global_options manager"
            )
        return self.global_options.shared()

    @property
    def has_local_options(self) -> bool:
        return self.__dict__.get("_local_options") is not None

    def set_local_options(self, **overrides) -> OptionsManager:
        """
        Override options for this instance only.

        The first call clones the global options; later calls update that
        clone. Returns the local manager.
        """
        local = self.__dict__.get("_local_options")
        if local is None:
            if self.global_options is None:
                raise AttributeError(
                    f"{type(self).__name__} has no global_options manager"
                )
            self._local_options = clone_and_merge(self.global_options, **overrides)
            logger.debug(f"{type(self).__name__}: created local options")
        else:
            local.set(**overrides)
        return self._local_options

    def drop_local_options(self) -> None:
        """Forget local overrides and fall back to the global options."""
        self.__dict__.pop("_local_options", None)

