import operator

import pytest

from noisegen.matrix import Matrix


A = Matrix([[1, 2, 3], [4, 5, 6]])
B = Matrix([[7, 8], [9, 10], [11, 12]])
I2 = Matrix([[1, 0], [0, 1]])
I3 = Matrix([[1, 0, 0], [0, 1, 0], [0, 0, 1]])


def test_add_sub_round_trip():
    other = Matrix([[5, -1, 2], [0, 3, 8]])
    assert (A + other) - other == A


def test_identity_is_neutral():
    assert I2 @ A == A
    assert A @ I3 == A


def test_matmul_shape():
    assert (A @ B).shape == (2, 2)
    assert (B @ A).shape == (3, 3)


def test_matmul_associative():
    C = Matrix([[2, -1], [0, 3]])
    assert (B @ C) @ I2 == (B @ C)
    assert (A @ B) @ C == A @ (B @ C)


@pytest.mark.parametrize(
    "op, left, right",
    [
        (operator.add, A, B),
        (operator.sub, A, B),
        (operator.matmul, A, A),
    ],
)
def test_shape_mismatch_raises(op, left, right):
    left_rows = [list(row) for row in left]
    right_rows = [list(row) for row in right]
    with pytest.raises(ValueError):
        op(left, right)
    assert [list(row) for row in left] == left_rows
    assert [list(row) for row in right] == right_rows


def test_ragged_rows_raise():
    with pytest.raises(ValueError):
        Matrix([[1, 2], [3]])


def test_zeros_is_additive_identity():
    z = Matrix.zeros(2, 3)
    assert z.shape == (2, 3)
    assert A + z == A
    assert all(v == 0 for row in z for v in row)


def test_display_format():
    assert str(I2) == "1 0 \n0 1 \n"


def test_vector_components():
    v = Matrix([[1], [2], [3], [4]])
    assert [v.component(n) for n in "xyzw"] == [1, 2, 3, 4]


def test_vector_component_out_of_range():
    v = Matrix([[1], [2]])
    with pytest.raises(KeyError):
        v.component("z")


def test_square_matrix_components():
    m = Matrix([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
    assert m.component("m12") == 2
    assert m.component("m31") == 7
    assert m.component("m33") == 9


def test_non_square_has_no_element_names():
    with pytest.raises(KeyError):
        A.component("m11")


def test_indexing():
    assert A[1, 2] == 6
    assert len(B) == 3