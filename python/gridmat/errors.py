"""Exception types raised by gridmat.

Every error derives from :class:`MatrixError` and from the builtin exception
that best matches its meaning, so callers may catch either.
"""


class MatrixError(Exception):
    """Base class for all gridmat errors."""


class OutOfBounds(MatrixError, IndexError):
    """Element index outside the current matrix shape.

    Attributes
    ----------
    index : tuple[int, int]
        The requested ``(i, j)``.
    shape : tuple[int, int]
        Shape of the matrix at the time of access.
    """

    def __init__(self, index, shape):
        self.index = tuple(index)
        self.shape = tuple(shape)
        super().__init__(f"index {self.index} is out of bounds for shape {self.shape}")


class ShapeMismatch(MatrixError, ValueError):
    """Operand shapes differ, or a fixed shape was asked for a different one.

    Attributes
    ----------
    expected, actual : tuple[int, int]
    """

    def __init__(self, expected, actual, message=None):
        self.expected = tuple(expected)
        self.actual = tuple(actual)
        if message is None:
            message = f"shape mismatch: expected {self.expected}, got {self.actual}"
        super().__init__(message)


class IncompatibleVariant(MatrixError, TypeError):
    """Operand does not implement the matrix contract."""

    def __init__(self, operand_type, message=None):
        self.operand_type = operand_type
        if message is None:
            name = getattr(operand_type, "__name__", repr(operand_type))
            message = f"cannot combine a matrix with an operand of type {name}"
        super().__init__(message)


class InputExhausted(MatrixError, EOFError):
    """A value source ran out of values.

    Attributes
    ----------
    position : tuple[int, int] or None
        Cell that was being populated.
    """

    def __init__(self, position=None, message=None):
        self.position = None if position is None else tuple(position)
        if message is None:
            message = "value source is exhausted"
            if self.position is not None:
                message += f" at {self.position}"
        super().__init__(message)


class InvalidFormat(MatrixError, ValueError):
    """A value could not be interpreted as an element of the matrix dtype.

    Attributes
    ----------
    token : Any
        The offending raw value.
    position : tuple[int, int] or None
    """

    def __init__(self, token, position=None, dtype=None):
        self.token = token
        self.position = None if position is None else tuple(position)
        self.dtype = dtype
        message = f"invalid value {token!r}"
        if dtype is not None:
            message += f" for dtype {dtype}"
        if self.position is not None:
            message += f" at {self.position}"
        super().__init__(message)
