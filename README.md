# noisegen

Building blocks for procedural generation in pure Python. The package has no
third-party dependencies.

## Modules

- `noisegen.random` provides deterministic randomness.
  - `rands_noise(seed)` hashes an unsigned 64-bit seed into a pseudo-random
    64-bit value.
  - `rand_noise()` hashes a process-wide counter and then advances it. Use
    `set_global_seed(seed)` to reset that counter.
  - `convert(kind, value)` and `convert_range(kind, minimum, maximum, value)`
    turn a raw value into a `NumberKind`. The kinds are `U64`, `USIZE`, `U32`,
    `U16`, `U8`, `F32` and `F64`.
    - Floats land in `[0, 1]`.
    - Integers are reduced modulo the kind's maximum.
    - Range conversion for integers gives `minimum + value % (maximum - minimum)`.
  - `rands(kind, seed)`, `random(kind)`, `rands_range(kind, minimum, maximum, seed)`
    and `rand_range(kind, minimum, maximum)` combine hashing and conversion.
- `noisegen.grid` provides grids and the engine interface.
  - `Grid2d(x, y, seed)` is a row-major grid. `init(gen)` fills it from
    `gen(xi, yi, seed)`.
  - `get` wraps non-negative coordinates, and `iget` wraps any integer
    coordinates. `get_unchecked` does not wrap.
  - `Engine2d` is the abstract interface with `generate(x, y)`.
  - `iter_gen(engine, iters, x, y)` sums `iters + 1` octaves of an engine.
  - `Parameters` holds a seed and a min/max pair.
- `noisegen.perlin` provides `PerlinWrapping(x, y, seed)`, which is gradient
  noise over a grid of seeded unit gradients. Call `init()` before
  `generate(x, y)`.
- `noisegen.worley` provides `WorleyWrapping(x, y, seed)`, which is cellular
  noise. It gives the distance to the nearest of one seeded feature point per
  cell. Call `init()` before `generate(x, y)`.
- `noisegen.baked` provides `BakedMap(width, height, zoom)`, which samples an
  engine once with `bake(engine)` at `zoom` cells per unit.
  - `get`, `iget` and `get_unchecked` read the samples with the same wrapping
    rules as `Grid2d`.
  - `fget(x, y)` reads at plane coordinates.
- `noisegen.wave` provides wave-function-collapse tiling.
  - `Unit(north, south, east, west)` is a tile. It has `rotate(degree)`,
    `xmirror()` and `ymirror()`. Border values must provide `opposite()` for
    the mirror methods and for matching.
  - `Cell` is either collapsed, as `Cell(value=index)`, or holds the indices
    still possible, as `Cell(options=(...))`.
  - `FiniteMap(width, height, possible, seed)` holds a grid of cells indexed
    `map[i][j]`.
    - `collapse_cell`, `circular_collapse` and `force_collapse` narrow the cells.
    - `least()` returns a `LeastContainer` with the cells of lowest entropy
      above one.
    - `determine()` collapses the whole grid.
    - `render()` returns a text picture of the grid.
- Small algebra:
  - `noisegen.complex.Complex` provides `+ - * /` and `inv()`.
  - `noisegen.quaternion.Quaternion` provides the Hamilton product, `/`,
    `inv()` and `to_mat4()`.
  - `noisegen.matrix.Matrix` is an immutable matrix.
    - It supports `+`, `-` and `@`.
    - `Matrix.zeros(rows, cols)` builds a matrix of zeros.
    - `component(name)` gives named access: `x`–`w` on column vectors and
      `m11`… on square matrices up to 4×4.
  - `noisegen.transform2d.rotate_grid(grid, degree)` turns a square grid by
    quarter turns. `xmirror_grid` and `ymirror_grid` return a grid of the same
    size filled with `default`.
  - `noisegen.diamond` offers `diamond`, `x_diamond` and `y_diamond`. They give
    step offsets around a diamond of a given radius.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from noisegen.grid import iter_gen
from noisegen.perlin import PerlinWrapping
from noisegen.worley import WorleyWrapping

perlin = PerlinWrapping(8, 8, seed=42).init()
print(perlin.generate(1.5, 2.25))
print(iter_gen(perlin, 3, 0.3, 0.7))

worley = WorleyWrapping(8, 8, seed=7).init()
print(worley.generate(3.2, 4.8))
```

Both engines look up their grid with wrapping. The noise therefore repeats
with the grid's width and height.

```python
from noisegen.complex import Complex
from noisegen.matrix import Matrix
from noisegen.quaternion import Quaternion

assert Complex(1.0, 2.0) * Complex(2.0, 1.0) == Complex(0.0, 5.0)
assert Quaternion(1.0, 2.0, 3.0, 4.0) * Quaternion(4.0, 3.0, 2.0, 1.0) == Quaternion(-12.0, 6.0, 24.0, 12.0)
assert (Matrix([[1, 2], [3, 4]]) @ Matrix([[1], [0]])).component("x") == 1
```

## What it does not do

The package is a library only. It has no command-line program, and it does
not draw, display or save images. Noise values and tiling results are returned
as plain Python numbers and objects, and showing them is left to the caller.