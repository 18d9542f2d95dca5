"""Element type handling.

Matrices hold NumPy scalars of a numeric dtype. Booleans are excluded since
their addition is a logical or, not arithmetic.
"""

import numbers

import numpy as np

from .errors import InvalidFormat

DEFAULT_DTYPE = np.dtype(np.float64)

_NUMERIC_KINDS = ("i", "u", "f", "c")


def as_element_dtype(dtype):
    """Normalize ``dtype`` and check that it is an admissible element type.

    Parameters
    ----------
    dtype : numpy.dtype, type, str or None
        ``None`` selects ``float64``.

    Returns
    -------
    numpy.dtype

    Raises
    ------
    TypeError
        If the dtype is not integer, floating or complex.
    """
    if dtype is None:
        return DEFAULT_DTYPE
    dtype = np.dtype(dtype)
    if dtype.kind not in _NUMERIC_KINDS:
        raise TypeError(f"matrix elements must be numeric, got dtype {dtype}")
    return dtype


def zero(dtype):
    return as_element_dtype(dtype).type(0)


def result_dtype(a, b):
    """dtype of ``a + b`` for element dtypes ``a`` and ``b``."""
    return np.result_type(as_element_dtype(a), as_element_dtype(b))


def coerce(value, dtype, position=None):
    """Convert ``value`` to a scalar of ``dtype``.

    Strings are parsed, numbers are cast. Casting must not lose information:
    ``2.5`` into an integer dtype, or a complex with an imaginary part into a
    real dtype, is rejected.

    Raises
    ------
    InvalidFormat
        If ``value`` cannot be represented in ``dtype``.
    """
    dtype = as_element_dtype(dtype)
    if isinstance(value, (bool, np.bool_)):
        raise InvalidFormat(value, position, dtype)
    if isinstance(value, (str, bytes)):
        try:
            text = value.decode() if isinstance(value, bytes) else value
        except UnicodeDecodeError:
            raise InvalidFormat(value, position, dtype) from None
        return _parse(text.strip(), dtype, position)
    if not isinstance(value, (numbers.Number, np.generic)):
        raise InvalidFormat(value, position, dtype)
    if dtype.kind != "c" and isinstance(value, (complex, np.complexfloating)):
        if value.imag != 0:
            raise InvalidFormat(value, position, dtype)
        value = value.real
    try:
        with np.errstate(all="ignore"):
            out = dtype.type(value)
    except (TypeError, ValueError, OverflowError):
        raise InvalidFormat(value, position, dtype) from None
    if dtype.kind in "iu" and out != value:
        # lossy float -> int, or wrap-around
        raise InvalidFormat(value, position, dtype)
    if dtype.kind in "fc" and not np.isfinite(out) and _is_finite(value):
        # overflow to inf in a narrower float
        raise InvalidFormat(value, position, dtype)
    return out


def _is_finite(value):
    if isinstance(value, (float, complex, np.inexact)):
        return bool(np.isfinite(value))
    return True


def _parse(text, dtype, position):
    if not text:
        raise InvalidFormat(text, position, dtype)
    try:
        if dtype.kind in "iu":
            parsed = int(text)
        elif dtype.kind == "f":
            parsed = float(text)
        else:
            parsed = complex(text)
    except ValueError:
        raise InvalidFormat(text, position, dtype) from None
    return coerce(parsed, dtype, position)
