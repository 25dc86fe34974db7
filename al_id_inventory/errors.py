"""Exceptions raised by the AL extension ID inventory."""


class InvalidArgumentError(ValueError):
    """Raised when the caller does not pass a collection of file objects."""
