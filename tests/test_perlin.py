import math

import pytest

from noisegen.perlin import PerlinWrapping


@pytest.fixture
def perlin():
    return PerlinWrapping(8, 8, 3).init()


def test_init_returns_self():
    p = PerlinWrapping(2, 2, 0)
    assert p.init() is p


def test_gradients_are_unit_vectors(perlin):
    assert len(perlin.grid.data) == 64
    for gx, gy in perlin.grid.data:
        assert gx * gx + gy * gy == pytest.approx(1.0)


def test_zero_at_lattice_points(perlin):
    for x in range(-3, 10):
        for y in range(-2, 9):
            assert perlin.generate(float(x), float(y)) == pytest.approx(0.0, abs=1e-12)


def test_tiles_over_grid(perlin):
    for x, y in [(0.25, 0.5), (3.75, 1.125), (6.5, 7.25)]:
        assert perlin.generate(x + 8, y) == pytest.approx(perlin.generate(x, y))
        assert perlin.generate(x, y - 8) == pytest.approx(perlin.generate(x, y))


def test_bounded(perlin):
    for k in range(200):
        x = k * 0.173
        y = k * 0.291
        assert abs(perlin.generate(x, y)) <= math.sqrt(2)


def test_deterministic_for_seed(perlin):
    other = PerlinWrapping(8, 8, 3).init()
    assert other.grid.data == perlin.grid.data
    assert other.generate(1.3, 2.7) == perlin.generate(1.3, 2.7)


def test_generate_before_init_raises():
    with pytest.raises(IndexError):
        PerlinWrapping(4, 4, 1).generate(0.5, 0.5)