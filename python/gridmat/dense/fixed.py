"""Dense matrix whose shape is part of its type.

``FixedMatrix[M, N]`` builds (once, then cached) a subclass carrying the shape
as class attributes. Instances of that class always have shape ``(M, N)``;
their buffer is allocated once and never replaced.
"""

import logging

import numpy as np

from ..dtypes import coerce
from ..errors import ShapeMismatch
from .base import Matrix, _check_dim, _rows_of, fill_from_rows

logger = logging.getLogger(__name__)

_classes = {}


class FixedMatrix(Matrix):
    """Fixed-shape dense matrix family.

    Use ``FixedMatrix[M, N]`` to obtain the concrete class for shape
    ``(M, N)``; the bare ``FixedMatrix`` cannot be instantiated.

    Parameters
    ----------
    dtype : numpy.dtype, optional
        Element type, defaults to ``np.float64``.

    Attributes
    ----------
    M, N : int
        Class-level shape.

    Examples
    --------
    >>> from gridmat import FixedMatrix
    >>> F = FixedMatrix[2, 2]
    >>> F is FixedMatrix[2, 2]
    True
    >>> F().shape
    (2, 2)
    """

    M = None
    N = None

    def __class_getitem__(cls, key):
        if not (isinstance(key, tuple) and len(key) == 2):
            raise TypeError("FixedMatrix must be parameterized as FixedMatrix[M, N]")
        m = _check_dim("M", key[0])
        n = _check_dim("N", key[1])
        try:
            return _classes[(m, n)]
        except KeyError:
            pass
        sub = type(
            f"FixedMatrix[{m}, {n}]",
            (FixedMatrix,),
            {"M": m, "N": n, "__module__": cls.__module__, "__qualname__": f"FixedMatrix[{m}, {n}]"},
        )
        _classes[(m, n)] = sub
        return sub

    def __init__(self, dtype=None):
        if self.M is None or self.N is None:
            raise TypeError("use FixedMatrix[M, N] to create a fixed-shape matrix")
        super().__init__(dtype=dtype)
        self._data = np.zeros(self.M * self.N, dtype=self.dtype)

    @classmethod
    def from_rows(cls, rows, dtype=None):
        """Build from nested rows; the row data must have shape ``(M, N)``.

        On the bare ``FixedMatrix`` the class is picked from the data's shape.
        """
        data, nrows, ncols = _rows_of(rows)
        if cls.M is None:
            cls = FixedMatrix[nrows, ncols]
        elif (nrows, ncols) != (cls.M, cls.N):
            raise ShapeMismatch((cls.M, cls.N), (nrows, ncols))
        return fill_from_rows(cls(dtype=dtype), data)

    @classmethod
    def zeros(cls, dtype=None):
        return cls(dtype=dtype)

    def rows(self):
        return self.M

    def cols(self):
        return self.N

    def _read(self, k):
        return self._data[k]

    def _write(self, k, value):
        self._data[k] = value

    def create_same_kind(self, rows, cols, dtype=None):
        """Return a zero-filled ``FixedMatrix[M, N]``.

        Raises
        ------
        ShapeMismatch
            If ``(rows, cols) != (M, N)``.
        """
        if (rows, cols) != (self.M, self.N):
            logger.debug("%s cannot create a %sx%s matrix", type(self).__name__, rows, cols)
            raise ShapeMismatch(
                (self.M, self.N),
                (rows, cols),
                f"{type(self).__name__} cannot hold a {rows}x{cols} matrix",
            )
        return type(self)(dtype=self.dtype if dtype is None else dtype)

    def copy(self):
        out = type(self)(dtype=self.dtype)
        out._data[:] = self._data
        return out

    def toarray(self):
        return self._data.reshape(self.M, self.N).copy()

    def assign(self, other):
        """Copy ``other``'s elements into this matrix in place.

        The storage keeps its dtype; values are converted to it.

        Raises
        ------
        ShapeMismatch
            If ``other`` does not have shape ``(M, N)``.
        """
        if other is self:
            return self
        if not isinstance(other, Matrix):
            raise TypeError(f"cannot assign from {type(other).__name__}")
        if other.shape != self.shape:
            raise ShapeMismatch(self.shape, other.shape)
        staged = [
            coerce(value, self.dtype, divmod(k, self.N))
            for k, value in enumerate(other.toarray().reshape(-1))
        ]
        for k, value in enumerate(staged):
            self._data[k] = value
        return self
