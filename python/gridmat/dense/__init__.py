from .base import Matrix
from .dynamic import DynamicMatrix
from .fixed import FixedMatrix

__all__ = [
    "Matrix",
    "DynamicMatrix",
    "FixedMatrix",
]
