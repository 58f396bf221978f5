"""
Error Taxonomy
==============
Every failure raised by the library derives from MatrixMathError and from
the built-in exception a Python caller would expect for the same mistake,
so `except IndexError` still catches a bad matrix index.
"""


class MatrixMathError(Exception):
    """Base class for all matrixmath errors."""


class DimensionMismatch(MatrixMathError, ValueError):
    """Operand shapes are incompatible."""


class OutOfRange(MatrixMathError, IndexError):
    """A 1-based index lies outside the object's shape."""


class InvalidArgument(MatrixMathError, TypeError):
    """An index is not an integer, or a value/operand is not numeric."""


class UnsupportedOperation(MatrixMathError, TypeError):
    """The operation exists on the interface but is deliberately rejected."""
