"""
Matrix
======
A fixed-shape 2-D grid of numbers.

NOTE: Index numbering follows math convention (all indices begin at 1).
Please use the dedicated setters for changing cells, rows and columns;
`matrix[i]` is read-only and returns a copy of row i.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterator, Sequence, Union

import numpy as np

from matrixmath.errors import DimensionMismatch, InvalidArgument, UnsupportedOperation
from matrixmath.model.vector import Numeric, Vector
from matrixmath.utils import as_numeric_array, check_index, check_scalar, promote, scalar_for, to_python

if TYPE_CHECKING:
    import numpy.typing as npt


class Matrix:
    """
    A matrix math structure.

    The shape is fixed at construction. Vectors handed out for rows and
    columns are copies, so mutating them never changes the Matrix.
    """
    def __init__(self, data: Sequence[Sequence[Numeric]] | npt.NDArray[Any]) -> None:
        """
        Construct a new Matrix with `data` as its rows.

        Args:
            data: A sequence of rows; each row is a sequence of numbers (a
                list, a NumPy array or a Vector).

        Raises:
            DimensionMismatch: If `data` has no rows or its rows differ in length.
            InvalidArgument: If a cell is not a number.
        """
        if isinstance(data, np.ndarray):
            data = list(data)
        if not isinstance(data, (list, tuple)):
            try:
                data = list(data)
            except TypeError:
                raise InvalidArgument(f"Matrix data must be a sequence of rows, got {type(data).__name__}.") from None
        if len(data) == 0:
            raise DimensionMismatch("Cannot construct a Matrix without rows.")

        try:
            lengths = [len(row) for row in data]
        except TypeError:
            raise InvalidArgument("Every Matrix row must be a sequence of numbers.") from None
        if any(length != lengths[0] for length in lengths):
            raise DimensionMismatch(
                f"Cannot construct a Matrix with inconsistent dimensions: row lengths {lengths}."
            )

        self._data: npt.NDArray[Any] = as_numeric_array([list(row) for row in data], ndim=2)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._data.tolist()})"

    def __str__(self) -> str:
        if self.shape == (1, 1):
            return str(self._data.tolist()[0][0])
        return "\n".join(", ".join(str(value) for value in row) for row in self._data.tolist())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.all(self._data == other._data))

    def __iter__(self) -> Iterator[Vector]:
        for i in range(1, self.num_rows() + 1):
            yield self.get_row(i)

    def __getitem__(self, i: int) -> Vector:
        return self.get_row(i)

    def __setitem__(self, i: Any, value: Any) -> None:
        raise UnsupportedOperation("Please use set_cell(), set_row() or set_column() for changing Matrix values.")

    def __matmul__(self, other: Union[Vector, Matrix]) -> Matrix:
        from matrixmath.analysis.products import pairwise_multiply
        return pairwise_multiply(self, other)

    def __array__(self, dtype: Any = None, copy: Any = None) -> npt.NDArray[Any]:
        if copy is False:
            raise ValueError("A Matrix cannot be exposed as an array without copying.")
        return self.to_array() if dtype is None else self.to_array().astype(dtype)

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, columns) of this Matrix."""
        rows, cols = self._data.shape
        return rows, cols

    def num_rows(self) -> int:
        """Return the number of rows in this Matrix."""
        return self._data.shape[0]

    def num_columns(self) -> int:
        """Return the number of columns in this Matrix."""
        return self._data.shape[1]

    def to_array(self) -> npt.NDArray[Any]:
        """Return a copy of the cells as a 2-D NumPy array."""
        return self._data.copy()

    def to_list(self) -> list[list[Numeric]]:
        """Return the cells as a new list of row lists."""
        return self._data.tolist()

    def get_row(self, i: int) -> Vector:
        """
        Return row `i` of this Matrix as a Vector.

        Raises:
            InvalidArgument: If `i` is not an integer.
            OutOfRange: If `i` is outside [1, num_rows()].
        """
        return Vector(self._data[check_index(i, self.num_rows(), "Row")])

    def get_column(self, j: int) -> Vector:
        """
        Return column `j` of this Matrix as a Vector.

        Raises:
            InvalidArgument: If `j` is not an integer.
            OutOfRange: If `j` is outside [1, num_columns()].
        """
        return Vector(self._data[:, check_index(j, self.num_columns(), "Column")])

    def get_cell(self, i: int, j: int) -> Numeric:
        """Return the element at row `i`, column `j`."""
        row = check_index(i, self.num_rows(), "Row")
        col = check_index(j, self.num_columns(), "Column")
        return to_python(self._data[row, col])

    def set_cell(self, i: int, j: int, val: Numeric) -> None:
        """
        Set the element at row `i`, column `j` to `val`.

        Raises:
            InvalidArgument: If an index is not an integer or `val` is not a number.
            OutOfRange: If the cell lies outside the Matrix.
        """
        row = check_index(i, self.num_rows(), "Row")
        col = check_index(j, self.num_columns(), "Column")
        check_scalar(val, "Matrix value")

        data = promote(self._data, val)
        data[row, col] = scalar_for(data, val)
        self._data = data

    def set_row(self, i: int, data: Sequence[Numeric]) -> None:
        """
        Replace row `i` with `data`.

        Raises:
            DimensionMismatch: If `data` does not have num_columns() values.
        """
        row = check_index(i, self.num_rows(), "Row")
        values = self._replacement(data, self.num_columns(), "row")

        self._data = promote(self._data, values)
        self._data[row, :] = values

    def set_column(self, j: int, data: Sequence[Numeric]) -> None:
        """
        Replace column `j` with `data`.

        Raises:
            DimensionMismatch: If `data` does not have num_rows() values.
        """
        col = check_index(j, self.num_columns(), "Column")
        values = self._replacement(data, self.num_rows(), "column")

        self._data = promote(self._data, values)
        self._data[:, col] = values

    def scalar_multiply(self, a: Numeric) -> None:
        """
        Multiply every cell of this Matrix by scalar `a`, in place.

        Raises:
            InvalidArgument: If `a` is not a number.
        """
        check_scalar(a, "Scalar")
        data = promote(self._data, a)
        self._data = data * scalar_for(data, a)

    @staticmethod
    def _replacement(data: Sequence[Numeric], expected: int, what: str) -> npt.NDArray[Any]:
        values = Vector(data).to_array()
        if len(values) != expected:
            raise DimensionMismatch(
                f"A replacement {what} must have {expected} values, got {len(values)}."
            )
        return values
