"""Walk the perimeter of a diamond (an L1 circle) on the integer lattice."""


def diamond(value: int, radius: int) -> int:
    """Return a triangle wave of period ``4 * radius`` ranging over ``[-radius, radius]``."""
    if value < 0 or radius < 0:
        raise ValueError("value and radius must be non-negative")
    if radius == 0:
        raise ZeroDivisionError("radius must be positive")
    return abs(value % (4 * radius) - 2 * radius) - radius


def x_diamond(x: int, radius: int) -> int:
    """X offset of step ``x`` along a diamond of the given radius."""
    return diamond(x, radius)


def y_diamond(x: int, radius: int) -> int:
    """Y offset of step ``x`` along a diamond of the given radius."""
    return diamond(x + 3 * radius, radius)