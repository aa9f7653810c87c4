import pytest

from noisegen.baked import BakedMap
from noisegen.grid import Engine2d


class _Echo(Engine2d):
    def generate(self, x, y):
        return (x, y)


@pytest.fixture
def baked():
    return BakedMap(4, 3, 2).bake(_Echo())


def test_bake_returns_self():
    m = BakedMap(2, 2, 1)
    assert m.bake(_Echo()) is m


def test_bake_samples_at_zoomed_coordinates(baked):
    for j in range(3):
        for i in range(4):
            assert baked.get(i, j) == (i / 2, j / 2)


def test_get_wraps(baked):
    assert baked.get(5, 5) == baked.get(1, 2)


def test_get_rejects_negative(baked):
    with pytest.raises(ValueError):
        baked.get(0, -1)


def test_iget_negative(baked):
    assert baked.iget(-1, -1) == baked.get(3, 2)


def test_get_unchecked(baked):
    assert baked.get_unchecked(3, 2) == baked.get(3, 2)
    with pytest.raises(IndexError):
        baked.get_unchecked(0, 3)


def test_fget_matches_cell(baked):
    assert baked.fget(1.5, 1.0) == baked.get(3, 2)
    assert baked.fget(1.7, 1.2) == baked.get(3, 2)


def test_get_before_bake_raises():
    with pytest.raises(IndexError):
        BakedMap(2, 2, 1).get(0, 0)


def test_zero_zoom_rejected():
    with pytest.raises(ValueError):
        BakedMap(2, 2, 0)