"""Vector — verifies 1-based access, append-one-past-end, magnitude and scaling.

Tests:
    - get/set round trip for every valid index
    - append only at num_dimensions() + 1; other out-of-range writes rejected
    - reads outside [1, n] raise OutOfRange (no absent-value reads)
    - non-integer indices and non-numeric values raise InvalidArgument
    - magnitude, scalar_multiply, string form, value semantics
"""

import pytest

from matrixmath import InvalidArgument, OutOfRange, Vector


def test_set_then_get_returns_value_for_every_index():
    v = Vector([0, 0, 0])
    for i in range(1, 4):
        v.set(i, i * 10)
        assert v.get(i) == i * 10
    assert v.get_point() == [10, 20, 30]


def test_item_access_is_one_based():
    v = Vector([7, 8, 9])
    assert v[1] == 7
    assert v[3] == 9
    v[2] = 80
    assert v.get_point() == [7, 80, 9]


def test_set_one_past_end_appends():
    v = Vector([1, 2])
    v.set(3, 3)
    assert v.num_dimensions() == 3
    assert v[3] == 3


def test_append_to_empty_vector():
    v = Vector([])
    v[1] = 4
    assert len(v) == 1
    assert v[1] == 4


def test_set_beyond_append_position_raises_out_of_range():
    v = Vector([1, 2])
    with pytest.raises(OutOfRange):
        v.set(4, 1)
    assert v.get_point() == [1, 2]


@pytest.mark.parametrize("index", [0, -1])
def test_set_below_one_raises_out_of_range(index):
    v = Vector([1, 2])
    with pytest.raises(OutOfRange):
        v.set(index, 5)


@pytest.mark.parametrize("index", [0, -1, 4])
def test_get_outside_range_raises_out_of_range(index):
    with pytest.raises(OutOfRange):
        Vector([1, 2, 3]).get(index)


@pytest.mark.parametrize("index", [1.0, "1", True, slice(1, 2)])
def test_non_integer_index_raises_invalid_argument(index):
    v = Vector([1, 2, 3])
    with pytest.raises(InvalidArgument):
        v.get(index)
    with pytest.raises(InvalidArgument):
        v.set(index, 1)


def test_out_of_range_is_an_index_error():
    with pytest.raises(IndexError):
        Vector([1])[2]


def test_non_numeric_value_is_rejected():
    v = Vector([1, 2])
    with pytest.raises(InvalidArgument):
        v.set(1, "x")
    assert v.get_point() == [1, 2]


@pytest.mark.parametrize("values", [["a", "b"], [[1, 2], [3, 4]], 5, [None]])
def test_construct_rejects_non_numeric_or_nested_values(values):
    with pytest.raises(InvalidArgument):
        Vector(values)


def test_construct_from_generator():
    assert Vector(x * x for x in range(1, 4)).get_point() == [1, 4, 9]


def test_float_written_into_int_vector_is_not_truncated():
    v = Vector([1, 2])
    v[1] = 2.5
    assert v[1] == 2.5
    assert v[2] == 2


def test_magnitude():
    assert Vector([3, 4]).magnitude == 5.0
    assert Vector([]).magnitude == 0.0


def test_scalar_multiply_mutates_in_place():
    v = Vector([1, 2, 3])
    assert v.scalar_multiply(2) is None
    assert v.get_point() == [2, 4, 6]
    v.scalar_multiply(0.5)
    assert v.get_point() == [1.0, 2.0, 3.0]


def test_scalar_multiply_rejects_non_numbers():
    v = Vector([1, 2])
    with pytest.raises(InvalidArgument):
        v.scalar_multiply("3")
    assert v.get_point() == [1, 2]


def test_string_form_joins_entries_without_brackets():
    assert str(Vector([1, 2, 3])) == "1, 2, 3"
    assert str(Vector([1.5])) == "1.5"
    assert str(Vector([])) == ""


def test_get_point_is_a_copy():
    v = Vector([1, 2])
    point = v.get_point()
    point[0] = 99
    assert v[1] == 1


def test_construct_copies_its_input():
    values = [1, 2]
    v = Vector(values)
    values[0] = 99
    assert v[1] == 1


def test_equality_and_iteration():
    assert Vector([1, 2]) == Vector([1, 2])
    assert Vector([1, 2]) != Vector([1, 2, 3])
    assert list(Vector([4, 5])) == [4, 5]


def test_integers_beyond_64_bits_are_exact():
    v = Vector([2**70, -(2**65)])
    assert v.get_point() == [2**70, -(2**65)]
    v.set(3, 2**64)
    assert v[3] == 2**64


def test_scalar_multiply_keeps_integers_exact():
    v = Vector([2**40, 3])
    v.scalar_multiply(2**40)
    assert v.get_point() == [2**80, 3 * 2**40]


def test_numpy_integer_values_are_stored_as_python_ints():
    import numpy as np

    v = Vector(np.array([2**62, 2], dtype=np.int64))
    v.scalar_multiply(np.int64(4))
    assert v.get_point() == [2**64, 8]
    assert type(v[1]) is int


def test_complex_magnitude_uses_modulus():
    assert Vector([3j, 4]).magnitude == 5.0


def test_array_conversion_always_copies():
    import numpy as np

    v = Vector([1.5, 2.5])
    array = np.asarray(v)
    array[0] = 99.0
    assert v[1] == 1.5
    with pytest.raises(ValueError):
        v.__array__(copy=False)
