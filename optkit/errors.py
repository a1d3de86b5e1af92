"""
Exception types raised by option managers.

Every error is raised synchronously at the offending call and is never
retried or recovered inside the library.
"""


class OptionsError(Exception):
    """Base class for all optkit errors."""


class UnknownOptionError(OptionsError, KeyError):
    """A get or set referenced a name that is not in the store."""

    def __init__(self, name):
        self.name = name
        super().__init__(name)

    def __str__(self):
        return f"Unknown option {self.name!r}"


class ValidationError(OptionsError, ValueError):
    """A value failed the rule attached to its option."""

    def __init__(self, name, value, rule):
        self.name = name
        self.value = value
        self.rule = rule
        super().__init__(
            f"Option {name!r}: value {value!r} is not allowed, "
            f"expected {rule.describe()}"
        )


class ReservedNameError(OptionsError, ValueError):
    """An option name uses the prefix reserved for internal use."""

    def __init__(self, name, prefix):
        self.name = name
        self.prefix = prefix
        super().__init__(
            f"Option name {name!r} starts with the reserved prefix {prefix!r}"
        )


class InvalidCallError(OptionsError, TypeError):
    """A manager call mixed bare names with name=value pairs, or was malformed."""
