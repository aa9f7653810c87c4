import pytest

from noisegen.transform2d import rotate_grid, xmirror_grid, ymirror_grid

GRID3 = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
GRID4 = [[r * 4 + c for c in range(4)] for r in range(4)]


@pytest.mark.parametrize("grid", [GRID3, GRID4])
def test_zero_rotation_is_identity(grid):
    assert rotate_grid(grid, 0) == grid


@pytest.mark.parametrize("grid", [GRID3, GRID4])
def test_four_quarter_turns_is_identity(grid):
    g = grid
    for _ in range(4):
        g = rotate_grid(g, 1)
    assert g == grid


@pytest.mark.parametrize("grid", [GRID3, GRID4])
def test_two_quarter_turns_equal_half_turn(grid):
    assert rotate_grid(rotate_grid(grid, 1), 1) == rotate_grid(grid, 2)


@pytest.mark.parametrize("grid", [GRID3, GRID4])
def test_three_turns_undo_one(grid):
    assert rotate_grid(rotate_grid(grid, 1), 3) == grid


def test_degree_is_taken_mod_four():
    assert rotate_grid(GRID3, 5) == rotate_grid(GRID3, 1)


def test_half_turn_reverses_both_axes():
    assert rotate_grid(GRID3, 2) == [row[::-1] for row in GRID3[::-1]]


@pytest.mark.parametrize("degree", [1, 2, 3])
def test_rotation_keeps_elements_and_centre(degree):
    rotated = rotate_grid(GRID3, degree)
    assert sorted(v for row in rotated for v in row) == list(range(1, 10))
    assert rotated[1][1] == GRID3[1][1]


def test_quarter_turn_two_by_two():
    assert rotate_grid([[1, 2], [3, 4]], 1) == [[3, 1], [4, 2]]


def test_mirrors_fill_with_default():
    assert xmirror_grid(GRID3, 0) == [[0] * 3 for _ in range(3)]
    assert ymirror_grid(GRID4, "a") == [["a"] * 4 for _ in range(4)]


def test_non_square_raises():
    with pytest.raises(ValueError):
        rotate_grid([[1, 2, 3], [4, 5, 6]], 1)
    with pytest.raises(ValueError):
        xmirror_grid([[1, 2]])