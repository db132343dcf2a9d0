# colgen/errors.py


class ColgenError(Exception):
    """Base class for all errors raised by the column generation code."""


class InvalidInstance(ColgenError, ValueError):
    """The demand data or the stock capacity of an instance is malformed."""


class InvalidState(ColgenError, RuntimeError):
    """
    An operation was called out of sequence, e.g. adding a pattern that is
    already a column, or reading a result before the matching solve call.
    """


class SolverError(ColgenError):
    """The LP/MIP solver failed, or reported a non-optimal status."""
