"""
Exceptions raised by ansi_cut.
"""


class AnsiCutError(Exception):
    """Base class for ansi_cut errors."""

    pass


class InvalidArgumentError(AnsiCutError, ValueError):
    """Raised when an operation is called with an unusable argument."""

    pass
