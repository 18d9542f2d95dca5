from importlib.metadata import PackageNotFoundError, version

from ._logging import setup_logging
from ._runtime import (
    get_print_delimiter,
    get_print_precision,
    set_print_delimiter,
    set_print_precision,
)
from .dense import DynamicMatrix, FixedMatrix, Matrix
from .errors import (
    IncompatibleVariant,
    InputExhausted,
    InvalidFormat,
    MatrixError,
    OutOfBounds,
    ShapeMismatch,
)
from .ops import add
from .render import MatrixPrinter, format_matrix
from .sources import PromptSource, SequenceSource, TextSource, ValueSource

try:
    __version__ = version("gridmat")
except PackageNotFoundError:
    __version__ = "0.1.0"

__all__ = [
    "__version__",
    "Matrix",
    "DynamicMatrix",
    "FixedMatrix",
    "add",
    "MatrixError",
    "OutOfBounds",
    "ShapeMismatch",
    "IncompatibleVariant",
    "InputExhausted",
    "InvalidFormat",
    "ValueSource",
    "SequenceSource",
    "TextSource",
    "PromptSource",
    "MatrixPrinter",
    "format_matrix",
    "set_print_precision",
    "get_print_precision",
    "set_print_delimiter",
    "get_print_delimiter",
    "setup_logging",
]
