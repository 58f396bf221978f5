"""
Validation and number-storage helpers shared by Vector and Matrix.

Storage policy: integers are kept exact as Python ints in an object array,
real numbers as float64 and complex numbers as complex128. A value of a
wider kind promotes the whole array (int -> float -> complex).
"""
from __future__ import annotations

import numbers
from typing import TYPE_CHECKING, Any

import numpy as np

from matrixmath.errors import InvalidArgument, OutOfRange

if TYPE_CHECKING:
    import numpy.typing as npt

# Promotion order of the storage kinds: exact int, float64, complex128.
_KINDS = "ifc"


def is_scalar(value: Any) -> bool:
    """True for int/float/complex values, including NumPy scalars, but not bool."""
    return isinstance(value, numbers.Number) and not isinstance(value, (bool, np.bool_))


def check_scalar(value: Any, what: str = "Scalar") -> None:
    """Raise InvalidArgument unless `value` is a number."""
    if not is_scalar(value):
        raise InvalidArgument(f"{what} must be a number, got {type(value).__name__}.")


def check_index(index: Any, upper: int, what: str = "Index") -> int:
    """
    Validate a 1-based index against the inclusive range [1, upper].

    Args:
        index: The index supplied by the caller.
        upper: Largest valid index.
        what: Name used in error messages ("Row", "Column", ...).

    Raises:
        InvalidArgument: If `index` is not an integer.
        OutOfRange: If `index` lies outside [1, upper].

    Returns:
        The zero-based position of `index` in the backing array.
    """
    if not isinstance(index, numbers.Integral) or isinstance(index, (bool, np.bool_)):
        raise InvalidArgument(f"{what} indices must be integers, got {type(index).__name__}.")
    if index < 1:
        raise OutOfRange(f"{what} indices must be greater than 0, got {index}.")
    if index > upper:
        raise OutOfRange(f"{what} index {index} is out of range [1, {upper}].")
    return int(index) - 1


def normalize(array: npt.NDArray[Any]) -> npt.NDArray[Any]:
    """
    Return `array` in its storage dtype (object of ints, float64 or complex128).

    Empty arrays become float64.

    Raises:
        InvalidArgument: If an element is not a number.
    """
    if array.dtype == object:
        values = array.ravel().tolist()
        if not all(is_scalar(value) for value in values):
            raise InvalidArgument("All values must be numbers.")
        if not values:
            return array.astype(np.float64)
        if all(isinstance(value, numbers.Integral) for value in values):
            return np.array([int(value) for value in values], dtype=object).reshape(array.shape)
        if any(not isinstance(value, numbers.Real) and isinstance(value, numbers.Complex) for value in values):
            return array.astype(np.complex128)
        return array.astype(np.float64)

    if array.dtype.kind in "iu":
        return array.astype(object)
    if array.dtype.kind == "f":
        return array.astype(np.float64, copy=False)
    if array.dtype.kind == "c":
        return array.astype(np.complex128, copy=False)
    if array.size == 0:
        return array.astype(np.float64)
    raise InvalidArgument(f"All values must be numbers, got dtype '{array.dtype}'.")


def as_numeric_array(values: Any, ndim: int) -> npt.NDArray[Any]:
    """
    Copy `values` into a fresh numeric NumPy array with `ndim` dimensions.

    Raises:
        InvalidArgument: If the data is not numeric or has the wrong number of dimensions.
    """
    try:
        try:
            array = np.array(values)
        except OverflowError:
            # Integers beyond 64 bits mixed with negative values.
            array = np.array(values, dtype=object)
    except (TypeError, ValueError) as e:
        raise InvalidArgument(f"Values could not be read as numbers: {e}") from e

    if array.ndim != ndim:
        raise InvalidArgument(f"Expected {ndim}-dimensional data, got {array.ndim} dimension(s).")
    return normalize(array)


def kind_of(array: npt.NDArray[Any]) -> str:
    """Storage kind of a normalized array: "i", "f" or "c"."""
    return "i" if array.dtype == object else array.dtype.kind


def promote(array: npt.NDArray[Any], value: Any) -> npt.NDArray[Any]:
    """
    Return `array` cast to a storage kind able to hold `value` exactly.

    The original array is returned unchanged when no promotion is needed.
    """
    current = kind_of(array)
    kind = max(current, kind_of(normalize(np.asarray(value))), key=_KINDS.index)
    if kind == current:
        return array
    return array.astype(np.float64 if kind == "f" else np.complex128)


def scalar_for(array: npt.NDArray[Any], value: Any) -> Any:
    """Convert `value` to the Python type stored by the (already promoted) `array`."""
    kind = kind_of(array)
    if kind == "i":
        return int(value)
    if kind == "f":
        return float(value)
    return complex(value)


def to_python(value: Any) -> Any:
    """Unwrap a NumPy scalar; Python numbers pass through."""
    return value.item() if isinstance(value, np.generic) else value
