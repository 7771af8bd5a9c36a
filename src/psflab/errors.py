"""Errors raised by psflab.

All errors are logic errors: they are raised at the point of detection and are
never retried internally. `Starvation` is the only one a caller is expected to
recover from (with more data, a lower peak height threshold or another
fraction).
"""


class PsfError(Exception):
    """Base error of psflab."""


class LogicError(PsfError):
    """A violated contract or insufficient input data."""


class PreconditionViolation(LogicError):
    """A caller passed an out-of-contract argument."""


class PostconditionViolation(LogicError):
    """A computation produced a result violating its own output contract."""


class InvariantViolation(LogicError):
    """An internal assumption about the shape of input data was violated."""


class Starvation(LogicError):
    """Too few or too bad data to complete the calculation."""
