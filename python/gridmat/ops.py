from .dense.base import Matrix
from .errors import IncompatibleVariant


def add(x, y):
    """Element-wise ``x + y`` for two matrices of any variant.

    Raises
    ------
    IncompatibleVariant
        If either argument is not a matrix.
    ShapeMismatch
        If the shapes differ.
    """
    if not isinstance(x, Matrix):
        raise IncompatibleVariant(type(x))
    return x.add(y)
