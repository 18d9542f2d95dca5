"""Base class for dense matrices.

:class:`Matrix` defines the contract shared by every storage variant in
`gridmat.dense`: shape queries, bounds-checked element access, same-kind
construction, population from a value source, and element-wise addition.
Addition is written once here against that contract, so any two variants
combine as long as their shapes agree.
"""

import logging
import operator

import numpy as np

from ..dtypes import as_element_dtype, coerce, result_dtype
from ..errors import IncompatibleVariant, InputExhausted, InvalidFormat, OutOfBounds, ShapeMismatch
from ..render import format_matrix

logger = logging.getLogger(__name__)


def _check_dim(name, value):
    if isinstance(value, (bool, np.bool_)):
        raise TypeError(f"{name} must be an integer, got bool")
    try:
        value = operator.index(value)
    except TypeError:
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}") from None
    if value < 0:
        raise ValueError(f"{name} must be >= 0, got {value}")
    return value


def _rows_of(rows):
    """Validate nested row data and return it as a list of lists plus shape."""
    rows = [list(r) for r in rows]
    nrows = len(rows)
    ncols = len(rows[0]) if nrows else 0
    if any(len(r) != ncols for r in rows):
        raise ValueError("rows must all have the same length")
    return rows, nrows, ncols


class Matrix:
    """Abstract 2-D matrix of numeric elements.

    Concrete variants supply storage through three hooks: ``_read(k)``,
    ``_write(k, value)`` on the flat row-major offset ``k = i*cols + j``, and
    :meth:`create_same_kind`. Everything else is implemented here.

    Attributes
    ----------
    dtype : numpy.dtype
        Element type.
    """

    # NumPy binary operators defer to ours instead of broadcasting over us
    __array_ufunc__ = None

    def __init__(self, dtype=None):
        self.dtype = as_element_dtype(dtype)

    # ---- shape -------------------------------------------------------
    def rows(self):
        raise NotImplementedError

    def cols(self):
        raise NotImplementedError

    @property
    def shape(self):
        """``(rows, cols)`` tuple."""
        return (self.rows(), self.cols())

    @property
    def size(self):
        return self.rows() * self.cols()

    # ---- storage hooks -----------------------------------------------
    def _read(self, k):
        raise NotImplementedError

    def _write(self, k, value):
        raise NotImplementedError

    def _offset(self, i, j):
        for v in (i, j):
            if isinstance(v, (bool, np.bool_)):
                raise TypeError("matrix indices must be integers, not bool")
        try:
            i = operator.index(i)
            j = operator.index(j)
        except TypeError:
            raise TypeError("matrix indices must be integers") from None
        nrows, ncols = self.shape
        if not (0 <= i < nrows and 0 <= j < ncols):
            raise OutOfBounds((i, j), (nrows, ncols))
        return i * ncols + j

    # ---- element access ----------------------------------------------
    def get(self, i, j):
        """Return the element at row ``i``, column ``j``.

        Raises
        ------
        OutOfBounds
            If ``(i, j)`` lies outside the current shape. Negative indices
            are not wrapped.
        """
        return self._read(self._offset(i, j))

    def set(self, i, j, value):
        """Overwrite the element at ``(i, j)`` with ``value``.

        The value is converted to :attr:`dtype`; lossy conversions raise
        :class:`InvalidFormat`.
        """
        k = self._offset(i, j)
        self._write(k, coerce(value, self.dtype, (i, j)))

    def __getitem__(self, key):
        i, j = self._split_key(key)
        return self.get(i, j)

    def __setitem__(self, key, value):
        i, j = self._split_key(key)
        self.set(i, j, value)

    @staticmethod
    def _split_key(key):
        if isinstance(key, tuple) and len(key) == 2:
            return key
        raise TypeError("matrices are indexed with an (i, j) pair")

    # ---- construction ------------------------------------------------
    def create_same_kind(self, rows, cols, dtype=None):
        """Return a new zero-filled matrix of the same variant as ``self``.

        Parameters
        ----------
        rows, cols : int
            Requested shape.
        dtype : numpy.dtype, optional
            Element type of the new matrix, defaults to ``self.dtype``.
        """
        raise NotImplementedError

    def copy(self):
        """Return an independent deep copy of the same variant."""
        out = self.create_same_kind(self.rows(), self.cols())
        for k in range(self.size):
            out._write(k, self._read(k))
        return out

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        out = self.copy()
        memo[id(self)] = out
        return out

    # ---- population --------------------------------------------------
    def populate(self, source):
        """Fill every cell from ``source`` in row-major order.

        Parameters
        ----------
        source : callable or object with ``value_at(i, j)``
            Asked once per cell for the value at ``(i, j)``.

        Raises
        ------
        InputExhausted
            If the source runs out of values.
        InvalidFormat
            If a supplied value is not valid for :attr:`dtype`.

        Notes
        -----
        Values are staged first; the matrix is left untouched on failure.
        """
        fetch = getattr(source, "value_at", source)
        if not callable(fetch):
            raise TypeError("value source must be callable or provide value_at(i, j)")
        nrows, ncols = self.shape
        staged = []
        try:
            for i in range(nrows):
                for j in range(ncols):
                    staged.append(coerce(fetch(i, j), self.dtype, (i, j)))
        except (InputExhausted, InvalidFormat) as exc:
            logger.debug("populate of %r aborted after %d values: %s", self, len(staged), exc)
            raise
        for k, value in enumerate(staged):
            self._write(k, value)
        return self

    # ---- addition ----------------------------------------------------
    def add(self, other):
        """Element-wise sum ``self + other``.

        Any matrix variant may be added to any other as long as the shapes
        agree. The result is a new matrix of the receiver's variant whose
        dtype is the NumPy promotion of both operand dtypes.

        Raises
        ------
        IncompatibleVariant
            If ``other`` is not a :class:`Matrix`.
        ShapeMismatch
            If the shapes differ.
        """
        if not isinstance(other, Matrix):
            logger.debug("rejecting addition of %r and %s", self, type(other).__name__)
            raise IncompatibleVariant(type(other))
        if self.shape != other.shape:
            logger.debug("rejecting addition of %r and %r", self, other)
            raise ShapeMismatch(self.shape, other.shape)
        nrows, ncols = self.shape
        result = self.create_same_kind(nrows, ncols, dtype=result_dtype(self.dtype, other.dtype))
        for i in range(nrows):
            for j in range(ncols):
                result.set(i, j, self.get(i, j) + other.get(i, j))
        return result

    def __add__(self, other):
        if isinstance(other, Matrix):
            return self.add(other)
        return NotImplemented

    # ---- materialization ---------------------------------------------
    def toarray(self):
        """Return a dense numpy.ndarray copy of shape ``(rows, cols)``."""
        out = np.zeros(self.size, dtype=self.dtype)
        for k in range(self.size):
            out[k] = self._read(k)
        return out.reshape(self.shape)

    def tolist(self):
        return self.toarray().tolist()

    def __repr__(self):
        nrows, ncols = self.shape
        return f"<{type(self).__name__} {nrows}x{ncols} dtype={self.dtype}>"

    def __str__(self):
        return format_matrix(self)


def fill_from_rows(matrix, rows):
    """Write nested row data into ``matrix`` (shapes must already agree)."""
    for i, row in enumerate(rows):
        for j, value in enumerate(row):
            matrix.set(i, j, value)
    return matrix


__all__ = ["Matrix", "fill_from_rows"]
