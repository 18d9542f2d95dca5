"""Dense matrix whose shape is chosen at construction time.

Storage is one contiguous NumPy buffer of ``rows * cols`` elements, indexed
``buffer[i * cols + j]``. The buffer is exclusively owned: copies duplicate
it, moves hand it over and leave the source empty.
"""

import logging

import numpy as np

from .base import Matrix, _check_dim, _rows_of, fill_from_rows

logger = logging.getLogger(__name__)


class DynamicMatrix(Matrix):
    """Variable-size dense matrix.

    Parameters
    ----------
    rows, cols : int
        Matrix shape, both ``>= 0``.
    dtype : numpy.dtype, optional
        Element type, defaults to ``np.float64``.

    Examples
    --------
    >>> from gridmat import DynamicMatrix
    >>> a = DynamicMatrix.from_rows([[1, 2], [3, 4]], dtype="int64")
    >>> (a + a).tolist()
    [[2, 4], [6, 8]]
    """

    def __init__(self, rows=0, cols=0, dtype=None):
        super().__init__(dtype=dtype)
        self._rows = _check_dim("rows", rows)
        self._cols = _check_dim("cols", cols)
        self._buffer = np.zeros(self._rows * self._cols, dtype=self.dtype)

    @classmethod
    def from_rows(cls, rows, dtype=None):
        """Build a matrix from a sequence of equal-length rows."""
        data, nrows, ncols = _rows_of(rows)
        return fill_from_rows(cls(nrows, ncols, dtype=dtype), data)

    @classmethod
    def zeros(cls, rows, cols, dtype=None):
        return cls(rows, cols, dtype=dtype)

    def rows(self):
        return self._rows

    def cols(self):
        return self._cols

    def _read(self, k):
        return self._buffer[k]

    def _write(self, k, value):
        self._buffer[k] = value

    def create_same_kind(self, rows, cols, dtype=None):
        return type(self)(rows, cols, dtype=self.dtype if dtype is None else dtype)

    def copy(self):
        out = type(self).__new__(type(self))
        out.dtype = self.dtype
        out._rows = self._rows
        out._cols = self._cols
        out._buffer = self._buffer.copy()
        return out

    def toarray(self):
        return self._buffer.reshape(self.shape).copy()

    # ---- ownership ---------------------------------------------------
    def _reset(self):
        self._rows = 0
        self._cols = 0
        self._buffer = np.zeros(0, dtype=self.dtype)

    def assign(self, other):
        """Copy-assign from ``other``, reallocating when the shape differs.

        ``other`` may be any :class:`Matrix`; its dtype is adopted. Assigning
        a matrix to itself is a no-op.

        Returns
        -------
        DynamicMatrix
            ``self``.
        """
        if other is self:
            return self
        if not isinstance(other, Matrix):
            raise TypeError(f"cannot assign from {type(other).__name__}")
        nrows, ncols = other.shape
        if (nrows, ncols) != self.shape or other.dtype != self.dtype:
            logger.debug("reallocating %r as %dx%d %s", self, nrows, ncols, other.dtype)
            buffer = np.zeros(nrows * ncols, dtype=other.dtype)
        else:
            buffer = self._buffer
        if isinstance(other, DynamicMatrix):
            buffer[:] = other._buffer
        else:
            for k in range(nrows * ncols):
                buffer[k] = other._read(k)
        self.dtype = other.dtype
        self._rows, self._cols = nrows, ncols
        self._buffer = buffer
        return self

    def move(self):
        """Transfer storage into a new matrix and leave ``self`` empty (0x0)."""
        out = type(self).__new__(type(self))
        out.dtype = self.dtype
        out._rows = self._rows
        out._cols = self._cols
        out._buffer = self._buffer
        self._reset()
        return out

    def move_from(self, other):
        """Move-assign: take over ``other``'s storage, leaving ``other`` empty.

        Returns
        -------
        DynamicMatrix
            ``self``.
        """
        if other is self:
            return self
        if not isinstance(other, DynamicMatrix):
            raise TypeError(f"can only move from a DynamicMatrix, got {type(other).__name__}")
        self.dtype = other.dtype
        self._rows = other._rows
        self._cols = other._cols
        self._buffer = other._buffer
        other._reset()
        return self

    def release(self):
        """Drop the storage; the matrix stays usable as an empty 0x0 matrix."""
        if self._buffer.size:
            logger.debug("releasing %d elements of %r", self._buffer.size, self)
        self._reset()
