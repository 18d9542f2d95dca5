"""Text rendering of matrices.

One line per row, cells separated by the configured delimiter::

    | 1.50 | 2.00 |
    | 0.00 | 1.00 |
"""

import sys

from ._runtime import get_print_delimiter, get_print_precision


def _format_value(value, kind, precision):
    if kind in "iu":
        return str(int(value))
    if kind == "c":
        return f"{complex(value):.{precision}f}"
    return f"{float(value):.{precision}f}"


def format_matrix(matrix, precision=None, delimiter=None):
    """Return the text rendering of ``matrix``.

    Parameters
    ----------
    matrix : Matrix
    precision : int, optional
        Digits after the decimal point for floating and complex values.
        Defaults to :func:`gridmat.get_print_precision`.
    delimiter : str, optional
        Cell separator. Defaults to :func:`gridmat.get_print_delimiter`.

    Returns
    -------
    str
        Empty when the matrix has no elements.
    """
    if precision is None:
        precision = get_print_precision()
    if delimiter is None:
        delimiter = get_print_delimiter()
    nrows, ncols = matrix.shape
    if nrows == 0 or ncols == 0:
        return ""
    kind = matrix.dtype.kind
    lines = []
    for i in range(nrows):
        cells = [_format_value(matrix.get(i, j), kind, precision) for j in range(ncols)]
        sep = f" {delimiter} "
        lines.append(f"{delimiter} " + sep.join(cells) + f" {delimiter}")
    return "\n".join(lines)


class MatrixPrinter:
    """Presentation sink writing matrices to a text stream.

    Parameters
    ----------
    stream : file-like, optional
        Defaults to ``sys.stdout`` at the time of each call.
    precision, delimiter : optional
        Passed to :func:`format_matrix`.
    """

    def __init__(self, stream=None, precision=None, delimiter=None):
        self.stream = stream
        self.precision = precision
        self.delimiter = delimiter

    def show(self, matrix, title=None):
        out = self.stream if self.stream is not None else sys.stdout
        if title:
            out.write(f"{title}\n")
        text = format_matrix(matrix, precision=self.precision, delimiter=self.delimiter)
        if text:
            out.write(text + "\n")

    __call__ = show
