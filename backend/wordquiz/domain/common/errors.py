"""Domain exceptions."""


class InvalidInput(ValueError):
    """A policy was called with arguments that break its preconditions.

    This is always a caller bug; it is never retried.
    """
