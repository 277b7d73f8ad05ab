# cartogram

Components for generating contiguous cartograms, in which each region of a
map is resized in proportion to a data value while neighbouring regions stay
connected. The package holds the numerical and bookkeeping pieces that such
a generator is built from:

- `cartogram.geometry`: `Point`, `Bbox`, `Polygon` (signed `area`, `bbox`,
  `reversed`) and `PolygonWithHoles`, with `pwh_area` and `pwh_is_larger`
  for comparing polygons by area.
- `cartogram.round_point`: tolerant comparisons (`almost_equal`,
  `points_almost_equal`, `less_than`) and rounding of coordinates to binary
  fractions (`rounded_to_bicimal`, `rounded_point`) or to decimal places
  (`rounded_point_decimals`).
- `cartogram.matrix`: `Matrix`, a 3×3 matrix for affine maps between
  triangles; `Matrix.inverse` raises `SingularMatrixError` on (nearly)
  singular input.
- `cartogram.colors`: `Color.from_string` accepts HTML colour names, hex
  codes (`#ff0000`), `rgb(r, g, b)` and bare `r,g,b` triples; anything else
  gives white and logs a warning.
- `cartogram.string_to_decimal`: validation and normalisation of numbers
  written with either a point or a comma as decimal separator, with `NA`
  for missing values.
- `cartogram.time_tracker`: `TimeTracker`, named accumulating timers in
  whole milliseconds, with `summary_report` and `print_summary_report`. The
  clock can be passed in, which makes it easy to test.
- `cartogram.interpolate`: `interpolate_bilinearly` and
  `interpolate_point_bilinearly` on a cell-centred grid with zero-flux
  boundaries. The grid may be an array indexed as `grid[i][j]` or a callable
  `grid(i, j, zero)`.
- `cartogram.intersection`: `Intersection`, `ray_intersection` and
  `intersections_with_ray` for crossings of axis-parallel scan rays with
  polygon rings.
- `cartogram.smyth`: the Smyth equal-surface (Craster rectangular)
  projection and its inverse for coordinates scaled to a grid.
- `cartogram.triangulation`: projection of points through a deformed grid
  split into triangles (`fill_grid_diagonals`,
  `projected_point_with_triangulation` and the helpers they use); invalid
  cells raise `GridTopologyError`, coordinates off the grid raise
  `ValueError`.
- `cartogram.progress_tracker`: `ProgressTracker`, which estimates and
  writes progress while insets are integrated.
- `cartogram.arguments`: `parse_arguments` turns a command line into an
  `Arguments` record, exiting with a status code on invalid combinations.

## Installation

The package needs Python 3.10 or later and NumPy. Install it with the
package installer of your choice from a checkout of this project; the `test`
extra adds pytest.

## Examples

Parsing numbers whose decimal separator varies between data sources:

```python
from cartogram.string_to_decimal import (
    is_comma_as_separator,
    is_str_correct_format,
    is_str_valid_characters,
    parse_str,
)

values = ["1.234,5", "12,75", "NA"]
assert all(is_str_valid_characters(v) for v in values)

point_is_separator = not is_comma_as_separator(values)
numbers = [float(parse_str(v, point_is_separator)) for v in values]
# [1234.5, 12.75, -1.0]; "NA" becomes -1.0, the marker for a missing value

assert not is_str_correct_format("123456789,")
```

Colours as they appear in a visual-variables file:

```python
from cartogram.colors import Color

red = Color.from_string("Red")
teal = Color.from_string("#008080")
grey = Color.from_string("rgb(128, 128, 128)")
```

An affine map taking one triangle onto another:

```python
from cartogram.geometry import Point
from cartogram.matrix import Matrix

source = Matrix.from_points(Point(0, 0), Point(1, 0), Point(0, 1))
target = Matrix.from_points(Point(0, 0), Point(2, 0), Point(0, 2))
transform = target.multiplied_with(source.inverse())
transform.transformed_point(Point(0.25, 0.25))  # Point(0.5, 0.5)
```

Bilinear interpolation of a displacement grid of size `lx` × `ly`, whose
values sit at the cell centres `(i + 0.5, j + 0.5)`:

```python
import numpy as np
from cartogram.interpolate import interpolate_bilinearly

grid = np.ones((4, 4))
interpolate_bilinearly(2.0, 2.0, grid, "x", 4, 4)  # 1.0
interpolate_bilinearly(0.0, 2.0, grid, "x", 4, 4)  # 0.0 at the x boundary
```

Coordinates on the Smyth equal-surface projection:

```python
from cartogram.geometry import Point
from cartogram.smyth import point_after_smyth_craster_projection

point_after_smyth_craster_projection(Point(180.0, 90.0))
# roughly Point(2.50663, 1.25331)
```

Reading options the way a command line would give them:

```python
from cartogram.arguments import parse_arguments

args = parse_arguments(["world.geojson", "population.csv", "--world"])
args.world                # True
args.n_grid_rows_or_cols  # 512 for world maps unless -n is given
```

## What the package does not do

The package provides building blocks only. It has no command that produces
a cartogram: it does not read or write GeoJSON or CSV files, does not
compute or flatten densities with Fourier transforms, does not build
quadtrees or Delaunay triangulations, does not simplify polygons and does
not plot maps. `parse_arguments` records the options such a program would
take, but nothing in the package acts on them.

## Running the tests

The tests live in `tests/` and run under pytest.