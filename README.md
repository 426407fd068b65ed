# frechetkit

Fréchet distances between polygonal curves in any number of dimensions,
together with curve simplification. Pure Python, no dependencies.

## Installation

```
pip install frechetkit
```

## Points and curves

`frechetkit.point.Point` is an immutable vector of floats. It supports `+`,
`-`, scalar `*` and `/`, and `dot`, `dist`, `dist_sqr`, `length`,
`line_segment_dist` and `ball_intersection_interval`. That last method
returns a `frechetkit.interval.Interval`. `Points` is a list of points that
all have one dimension and offers a `centroid()`.

`frechetkit.curve.Curve` is a named, ordered sequence of points that all have
the same dimension. Plain coordinate sequences are turned into points for you.
If you add a point of the wrong dimension, you get a `ValueError`.

```python
from frechetkit.point import Point
from frechetkit.curve import Curve

a = Curve([Point([0.0, 0.0]), Point([1.0, 0.0]), Point([2.0, 0.0])], "a")
b = Curve([[0.0, 1.0], [2.0, 1.0]], "b")

a.complexity        # 3
a.dimensions        # 2
a.subcurve(0, 1)    # vertices 0 and 1 as a new Curve
```

## Distances

```python
from frechetkit.frechet import continuous_distance, discrete_distance

continuous_distance(a, b).value   # 1.0
discrete_distance(a, b).value     # 1.414... (sqrt 2)
```

`continuous_distance` first computes a lower bound (`projective_lower_bound`)
and an upper bound (`greedy_upper_bound`). It then runs a binary search with
the free-space decision procedure `less_than_or_equal(distance, curve1,
curve2)`. The search stops once the bounds are within
`frechetkit.frechet.ERROR_PERCENT` percent of the lower bound, which is 1 by
default. The result is a `ContinuousDistance` holding `value`,
`time_searches`, `time_bounds` and `number_searches`.
`distance_within_bounds(curve1, curve2, ub, lb)` runs only the search, with
bounds you supply.

Both curves need at least two vertices and the same dimension. Otherwise the
continuous routines raise `ValueError`. `discrete_distance` needs non-empty
curves and returns a `DiscreteDistance` with `value` and `time`.

## Simplification

```python
from frechetkit.simplification import (
    SubcurveShortcutGraph,
    approximate_minimum_error_simplification,
    approximate_minimum_link_simplification,
)

exact = SubcurveShortcutGraph(a).minimum_error_simplification(2)
approx = approximate_minimum_error_simplification(a, 2)
links = approximate_minimum_link_simplification(a, 0.5)
```

- `SubcurveShortcutGraph` computes the continuous distance of every
  vertex-to-vertex shortcut. Its `minimum_error_simplification(ll)` then
  returns the simplification with `ll` vertices that has the smallest maximal
  error.
- `approximate_minimum_link_simplification(curve, epsilon)` shortcuts
  greedily while the error stays within `epsilon`.
- `approximate_minimum_error_simplification(curve, ell)` searches over the
  error and returns exactly `ell` vertices. If fewer are needed, the last
  vertex is repeated.

## Collections

`frechetkit.collection.Curves` holds curves of one dimension. The first curve
you add sets the dimension, unless you gave one. `m` is the largest
complexity in the collection. `simplify(l, approx=False)` returns a new
`Curves` with every curve simplified, named "Simplification of <name>".

## Other helpers

- `frechetkit.grid.Grid.build_cube_grid(p, width, edge_length)` builds a
  regular grid of points around `p`. The points are available as
  `Grid.points`.
- `frechetkit.random_gen` provides `UniformRandomGenerator`,
  `GaussRandomGenerator` and `CustomProbabilityGenerator`. Each takes an
  optional `seed`. `get()` returns one value and `get(n)` returns a list.
- `frechetkit.config.config` holds the settings. Set `verbosity` above 1 to
  print simplification progress, and above 2 to also print distance
  progress. `reset()` restores the defaults.

## What it does not do

frechetkit is a library only. It has no command-line program, and it does
not read or write curve files. Load your data yourself and build `Curve`
objects from it. The computations run single-threaded. The `mp_dynamic` and
`number_threads` settings are stored but have no effect.