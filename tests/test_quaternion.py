import pytest

from noisegen.quaternion import Quaternion


def test_mul():
    a = Quaternion(1.0, 2.0, 3.0, 4.0)
    b = Quaternion(4.0, 3.0, 2.0, 1.0)
    r = Quaternion(-12.0, 6.0, 24.0, 12.0)
    assert a * b == r
    a *= b
    assert a == r


def test_add_sub_round_trip():
    a = Quaternion(1.0, 2.0, 3.0, 4.0)
    b = Quaternion(0.5, -1.0, 2.5, 7.0)
    assert (a + b) - b == a


def test_inv_gives_identity():
    a = Quaternion(1.0, 2.0, 3.0, 4.0)
    p = a * a.inv()
    assert p.t == pytest.approx((1.0, 0.0, 0.0, 0.0))


def test_div_inverts_mul():
    a = Quaternion(1.0, 2.0, 3.0, 4.0)
    b = Quaternion(4.0, 3.0, 2.0, 1.0)
    assert ((a * b) / b).t == pytest.approx(a.t)


def test_to_mat4_diagonal_is_real_part():
    m = Quaternion(5.0, 1.0, 2.0, 3.0).to_mat4()
    assert [m[n][n] for n in range(4)] == [5.0] * 4


def test_to_mat4_row_sums_of_squares():
    q = Quaternion(1.0, 2.0, 3.0, 4.0)
    for row in q.to_mat4():
        assert sum(v * v for v in row) == sum(v * v for v in q.t)


def test_inv_of_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Quaternion(0.0, 0.0, 0.0, 0.0).inv()