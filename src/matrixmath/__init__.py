"""
matrixmath
==========
Vectors and matrices with mathematical (1-based) indexing, dot products and
chained matrix multiplication.

Example:
    >>> from matrixmath import Matrix, multiply
    >>> a = Matrix([[2, 2, 2], [2, 2, 2]])
    >>> b = Matrix([[2, 2], [2, 2], [2, 2]])
    >>> print(multiply([a, b]))
    12, 12
    12, 12
"""
import logging
from importlib.metadata import version, PackageNotFoundError

from matrixmath.errors import (
    DimensionMismatch,
    InvalidArgument,
    MatrixMathError,
    OutOfRange,
    UnsupportedOperation,
)
from matrixmath.model import Matrix, Vector
from matrixmath.analysis import dot_product, multiply, pairwise_multiply

try:
    __version__ = version("matrixmath")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Vector",
    "Matrix",
    "dot_product",
    "pairwise_multiply",
    "multiply",
    "MatrixMathError",
    "DimensionMismatch",
    "OutOfRange",
    "InvalidArgument",
    "UnsupportedOperation",
]
