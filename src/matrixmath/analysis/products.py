"""
Products of Vectors and Matrices
================================
Dot products and (chained) matrix multiplication.

A bare Vector takes part in a matrix product as a degenerate matrix: a
1 x n row when it is the left operand and an n x 1 column when it is the
right operand.
"""
from __future__ import annotations

import logging
from typing import Iterable, Union

from matrixmath.errors import DimensionMismatch, InvalidArgument
from matrixmath.model.matrix import Matrix
from matrixmath.model.vector import Numeric, Vector

logger = logging.getLogger(__name__)

Operand = Union[Matrix, Vector]


def dot_product(p: Vector, q: Vector) -> Numeric:
    """
    Return the dot product of Vectors `p` and `q`.

    Args:
        p: A Vector of equal length to `q`.
        q: A Vector of equal length to `p`.

    Raises:
        InvalidArgument: If an operand is not a Vector.
        DimensionMismatch: If `p` and `q` have different lengths.

    Returns:
        sum(p[i] * q[i]) for i in 1..n.
    """
    if not isinstance(p, Vector) or not isinstance(q, Vector):
        raise InvalidArgument("dot_product() expects two Vectors.")

    m = p.num_dimensions()
    n = q.num_dimensions()
    if m != n:
        raise DimensionMismatch(
            f"Vector multiplication failed because of mismatched dimensions ({m} and {n})."
        )
    # Python arithmetic keeps integer sums exact at any size.
    return sum((x * y for x, y in zip(p.get_point(), q.get_point())), 0)


def _shape(operand: Operand, left: bool) -> tuple[int, int]:
    if isinstance(operand, Vector):
        n = operand.num_dimensions()
        return (1, n) if left else (n, 1)
    if isinstance(operand, Matrix):
        return operand.shape
    raise InvalidArgument(f"Cannot multiply a {type(operand).__name__}; expected a Matrix or a Vector.")


def pairwise_multiply(a: Operand, b: Operand) -> Matrix:
    """
    Return the matrix product `a` x `b`.

    Args:
        a: Left operand, m x n (a Vector counts as 1 x n).
        b: Right operand, p x q (a Vector counts as p x 1).

    Raises:
        InvalidArgument: If an operand is neither a Matrix nor a Vector.
        DimensionMismatch: If n != p.

    Returns:
        An m x q Matrix whose cell (i, j) is dot_product(row_i(a), col_j(b)).
    """
    m, n = _shape(a, left=True)
    p, q = _shape(b, left=False)
    if n != p:
        raise DimensionMismatch(
            f"Matrix multiplication failed because of mismatched dimensions ({m}x{n} times {p}x{q})."
        )

    data = []
    for i in range(1, m + 1):
        row = a if isinstance(a, Vector) else a.get_row(i)
        data.append([
            dot_product(row, b if isinstance(b, Vector) else b.get_column(j))
            for j in range(1, q + 1)
        ])
    return Matrix(data)


def multiply(operands: Iterable[Operand]) -> Matrix:
    """
    Return the matrix product M1 x M2 x ... x Mn of the ordered `operands`.

    The product is folded left to right: ((M1 x M2) x M3) x ... Every
    intermediate result is a Matrix, even when an input was a Vector.

    Args:
        operands: At least two Matrices and/or Vectors, in multiplication order.

    Raises:
        InvalidArgument: If fewer than two operands are given.
        DimensionMismatch: If (M1 x ... x Mi) and Mi+1 have incompatible dimensions.
    """
    if isinstance(operands, (Matrix, Vector)):
        raise InvalidArgument("multiply() takes a sequence of operands, not a single Matrix or Vector.")
    operands = list(operands)
    if len(operands) < 2:
        raise InvalidArgument(f"multiply() needs at least two operands, got {len(operands)}.")

    logger.debug(f"Multiplying chain of {len(operands)} operands.")

    result = operands[0]
    for position, operand in enumerate(operands[1:], start=2):
        try:
            result = pairwise_multiply(result, operand)
        except DimensionMismatch as e:
            raise DimensionMismatch(f"Operand {position} of the chain: {e}") from e
        logger.debug(f"Partial product up to operand {position}: {result.num_rows()}x{result.num_columns()}")
    return result
