# advent

Solutions to the first six days of an advent puzzle calendar, together with
the small helper modules they are built on.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Solving a day

Each day has its own command. Each reads the puzzle input from the file named
on the command line, or from a file named `input` in the current directory
when no name is given:

```
advent-day01
advent-day02 my-input.txt
advent-day03
advent-day04
advent-day05
advent-day06
```

Each prints two lines, one for each half of the puzzle:

```
Answer to 1st question: ...
Answer to 2nd question: ...
```

## Using the modules

Every day module (`advent.day01` to `advent.day06`) exposes `puzzle_a` and
`puzzle_b`, which take the input lines and return the answer:

```python
from advent import day01

lines = ["L68", "L30", "R48", "L5", "R60", "L55", "L1", "L99", "R14", "L82"]
day01.puzzle_a(lines)  # 3
day01.puzzle_b(lines)  # 6
```

Day 5 takes its input as blank-line separated groups, as produced by
`advent.filelib.split_lines_by_blanks`: the first group holds the fresh id
ranges, the second the available ids.

The helpers can be used on their own:

- `advent.filelib` – reading input files: `load`, `remove_blanks`,
  `load_no_blanks`, `strings_to_ints`, `load_as_ints`,
  `split_lines_by_blanks`, `parse_csv_int_lines`, `parse_line_to_linecoords`,
  `parse_path_to_coords`.
- `advent.mathlib` – `modulus`, `gcd`, `lcm`, `lerp`, `remap`,
  `manhattan_distance`, `euclidean_distance`, `euclidean_distance_squared`,
  `determinant`, `line_intersect`, `shoelace_area`, `picks_theorem_i`,
  `shoepick` and `shoepick_intlengths`. With integer arguments, division and
  remainder truncate toward zero; `modulus` always gives a result with the
  sign of the divisor.
- `advent.direction` – the eight compass `Direction`s, with
  `Direction.cardinal()`, `Direction.diagonal()` and `Direction.all()`.
- `advent.gridcoord` – `GridCoordinate` for bounded grids (non-negative,
  ordered by row then column) and `GridCoordinateInf` for an unbounded plane,
  with `move_dir` and `move_dir_dist`.
- `advent.grid` – a fixed-size `Grid` with value access, neighbour lookup,
  clockwise rotation and text rendering, optionally with an overlay of
  `SimpleGridOverlay` markers.

```python
from advent.grid import Grid
from advent.gridcoord import GridCoordinate

grid = Grid(3, 2, [1, 2, 3, 4, 5, 6])
grid.get_value(GridCoordinate(2, 1))                  # 6
grid.get_adjacent_coordinates(GridCoordinate(0, 0))   # east and south neighbours
```

## What it does not do

The commands only read a local input file; they do not fetch puzzle input or
submit answers. Only the first six days are solved.