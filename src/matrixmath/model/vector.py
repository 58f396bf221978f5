"""
Vector
======
A fixed-length ordered sequence of numbers with mathematical (1-based)
indexing.

NOTE: Indices begin at 1, as is conventional in math. The values live in a
zero-based NumPy array; every accessor subtracts 1 internally. Integer
values are stored as exact Python ints, so products never wrap around.
"""
from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any, Iterable, Iterator, Union

import numpy as np

from matrixmath.errors import InvalidArgument, OutOfRange
from matrixmath.utils import as_numeric_array, check_index, check_scalar, promote, scalar_for, to_python

if TYPE_CHECKING:
    import numpy.typing as npt
    from matrixmath.model.matrix import Matrix

Numeric = Union[int, float, complex]


class Vector:
    """
    A vector math structure.

    A Vector owns its values: nothing returned by its accessors aliases the
    backing array.
    """
    def __init__(self, values: Iterable[Numeric] | npt.NDArray[Any]) -> None:
        """
        Construct a new Vector with `values` as its point.

        Args:
            values: The values for this Vector, a flat sequence of numbers.

        Raises:
            InvalidArgument: If `values` is not a flat sequence of numbers.
        """
        if not isinstance(values, (list, tuple, np.ndarray, Vector)):
            try:
                values = list(values)
            except TypeError:
                raise InvalidArgument(f"Vector values must be a sequence, got {type(values).__name__}.") from None
        self._values: npt.NDArray[Any] = as_numeric_array(values, ndim=1)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._values.tolist()})"

    def __str__(self) -> str:
        return ", ".join(str(value) for value in self._values.tolist())

    def __len__(self) -> int:
        return self.num_dimensions()

    def __iter__(self) -> Iterator[Numeric]:
        return iter(self._values.tolist())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._values.shape == other._values.shape and bool(np.all(self._values == other._values))

    def __getitem__(self, i: int) -> Numeric:
        return self.get(i)

    def __setitem__(self, i: int, value: Numeric) -> None:
        self.set(i, value)

    def __matmul__(self, other: Union[Vector, Matrix]) -> Matrix:
        from matrixmath.analysis.products import pairwise_multiply
        return pairwise_multiply(self, other)

    def __array__(self, dtype: Any = None, copy: Any = None) -> npt.NDArray[Any]:
        if copy is False:
            raise ValueError("A Vector cannot be exposed as an array without copying.")
        return self.to_array() if dtype is None else self.to_array().astype(dtype)

    def get(self, i: int) -> Numeric:
        """
        Return the value at index `i`.

        Raises:
            InvalidArgument: If `i` is not an integer.
            OutOfRange: If `i` is outside [1, num_dimensions()].
        """
        return to_python(self._values[check_index(i, len(self._values))])

    def set(self, i: int, value: Numeric) -> None:
        """
        Set the value at index `i`.

        Index num_dimensions() + 1 appends `value`, extending the Vector by
        one element. Any other index must already exist.

        Raises:
            InvalidArgument: If `i` is not an integer or `value` is not a number.
            OutOfRange: If `i < 1` or `i > num_dimensions() + 1`.
        """
        n = len(self._values)
        try:
            position = check_index(i, n + 1)
        except OutOfRange:
            if i > n + 1:
                raise OutOfRange(
                    "You can only append to, or alter existing values of, a Vector. "
                    f"Index {i} is beyond {n + 1}."
                ) from None
            raise
        check_scalar(value, "Vector value")

        values = promote(self._values, value)
        value = scalar_for(values, value)
        if position == n:
            values = np.append(values, np.array([value], dtype=values.dtype))
        else:
            values[position] = value
        self._values = values

    def num_dimensions(self) -> int:
        """Return the number of dimensions of this Vector."""
        return len(self._values)

    def get_point(self) -> list[Numeric]:
        """Return this Vector's point as a new list of values."""
        return self._values.tolist()

    def to_array(self) -> npt.NDArray[Any]:
        """Return a copy of the values as a NumPy array."""
        return self._values.copy()

    @property
    def magnitude(self) -> float:
        """
        This Vector's length, sqrt(|v_1|^2 + ... + |v_n|^2).

        For real values this is sqrt(v_1^2 + ... + v_n^2); complex entries
        contribute their squared modulus, so the result is always a real float.
        """
        return math.sqrt(sum(abs(value) ** 2 for value in self._values.tolist()))

    def scalar_multiply(self, a: Numeric) -> None:
        """
        Multiply this Vector by scalar `a`, in place.

        Raises:
            InvalidArgument: If `a` is not a number.
        """
        check_scalar(a)
        values = promote(self._values, a)
        self._values = values * scalar_for(values, a)
