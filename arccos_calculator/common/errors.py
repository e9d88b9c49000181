"""Error kinds raised while reading and evaluating arccos inputs."""


class ArccosError(Exception):
    """Base class for every recoverable calculation error."""


class InvalidFormatError(ArccosError, ValueError):
    """The input text is not a parseable real number."""


class OutOfRangeError(ArccosError, ValueError):
    """The input is a number but lies outside [-1, 1]."""


class FactorialOverflowError(ArccosError, OverflowError):
    """A factorial product became infinite before completing."""
