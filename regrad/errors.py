# regrad/errors.py
"""Exception types raised by regrad."""


class RegradError(Exception):
    """Base class for all regrad errors."""


class ShapeMismatchError(RegradError, ValueError):
    """
    Raised when two tensors of different shapes meet in an element-wise op,
    when a reshape would change the number of elements, or when a tensor is
    built from a number of elements that does not fill its shape.
    """

    def __init__(self, message: str, *, expected=None, got=None):
        super().__init__(message)
        self.expected = expected
        self.got = got
