# astroforge

Astrodynamics helpers for Python, built on NumPy. All quantities are in SI
units (metres, seconds, kilograms) and angles are in radians.

## Modules

- `astroforge.constants`: `G`, `EARTH_MASS`, `EARTH_RADIUS` and `EARTH_GM`.
- `astroforge.mechanics`: two-body relations.
  - `a_point_mass(gm, r1, r2)`: acceleration on a body at `r2` from a point
    mass at `r1`.
  - `v_escape(m, r)` and `v_circular(m, r)`: escape and circular velocities at
    distance `r` from a body of mass `m`.
  - `t_orbit(a, gm)`: orbital period for semi-major axis `a`.
  - `r_orbit(a, e, theta)`: orbital distance at true anomaly `theta`.
  - `km(value)` and `deg(value)`: kilometres to metres, degrees to radians.
- `astroforge.conversion`: orbital states.
  - `rv2ke(mu, r_vec, v_vec)` returns a `KeplerianElements` named tuple
    `(a, e, i, laan, argp, nu)`. Angles that are undefined for circular or
    equatorial orbits come out as NaN.
  - `CartesianState` is a frozen dataclass of position and velocity
    components, with `from_vectors(r, v)`, the `r` and `v` properties and
    `to_keplerian(mu)`.
- `astroforge.frames`: relative kinematics.
  - `r_b(r_a, r_ba)`: position of `b`.
  - `v_b(v_a, v_ba=None, omega=None, r_ba=None)`: velocity of `b`, from a
    relative velocity or from a rotation rate and offset.
  - `a_b(a_a, a_ba=None, alpha=None, r_ba=None, omega=None)`: acceleration of
    `b`, from a relative acceleration or from angular acceleration, offset and
    rotation rate.
  - Both raise `ValueError` when too few terms are given.
  - `FrameDefinition` holds three basis vectors (a 3×3 array, checked on
    construction), an orientation and an origin with their ids.
- `astroforge.interp`: searching and interpolation.
  - `search_sorted(a, v, side=Side.LEFT)` gives the indices at which each
    value of `v` would be inserted into the sorted sequence `a`. `Side.LEFT`
    places a value before equal elements; `Side.RIGHT` places it after them.
  - `LinearInterpolator(x, y)` interpolates each row of `y` over a strictly
    increasing axis `x`. `interp_value(value)` returns one value per row.
    `interp_array(values)` returns one row per value. A point outside
    `[x[0], x[-1]]` raises `ValueError`.
- `astroforge.ode`: fixed-step integration.
  - `RK4(f, y0, h, tspan=None, t0=None, solution=None)` is the classical
    fourth-order Runge–Kutta method for `dy/dt = f(y, t)`.
  - `step(n=1)` takes `n` steps of size `h`.
  - `solve()` integrates to the end of `tspan`, shortening the last step to
    land on it. It raises `ValueError` if no `tspan` was given.
  - An optional `Solution` records what it is set to keep:
    - states and times (`save_state`), available as `solution.state`;
    - the count of function evaluations (`save_evals`);
    - an error estimate (`save_error`).
- `astroforge.harmonics`: spherical-harmonic gravity coefficients.
  - `read_harmonics(stream)` parses CSV with the header `i,j,ci,cj,di,dj` into
    `Harmonic` records.
  - `EGM.from_file(path)` loads a whole table, such as EGM96.
  - `EGM.coefficients(i, j)` and `EGM.errors(i, j)` return the value and error
    pairs for degree `i` and order `j`. They raise `KeyError` if that pair is
    absent.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Escape velocity 1000 km above Earth's surface:

```python
from astroforge.constants import EARTH_MASS, EARTH_RADIUS
from astroforge.mechanics import km, v_escape

v = v_escape(EARTH_MASS, EARTH_RADIUS + km(1000.0))
```

Keplerian elements from a state vector:

```python
from astroforge.conversion import rv2ke

elements = rv2ke(3.9860044188e14, [8000e3, 2000e3, 1000e3], [1e3, 2e3, 3e3])
print(elements.a, elements.e)
```

Insertion indices into a sorted sequence:

```python
from astroforge.interp import Side, search_sorted

search_sorted([1, 2, 3, 4, 5], [-10, 10, 2, 3], Side.LEFT)   # [0, 5, 1, 2]
search_sorted([1, 2, 3, 4, 5], [3], Side.RIGHT)             # [3]
```

Integrating a point that accelerates at 2 m/s² and keeping its trajectory:

```python
import numpy as np
from astroforge.ode import RK4, Solution

solution = Solution(save_state=True, save_evals=True)
integrator = RK4(
    f=lambda y, t: np.array([y[1], 2.0]),
    y0=[0.0, 0.0],
    h=1.0,
    tspan=(0.0, 20.0),
    solution=solution,
)
integrator.solve()
print(integrator.y, solution.state.shape, solution.evals)
```

## What it does not do

This is a library with no command-line tool. It does not model celestial
bodies or spacecraft. That means no ephemerides, atmosphere, rotation or
magnetic-field models. It has no conversion from Keplerian elements back to
Cartesian states, and no adaptive-step integrators. The harmonics module
reads coefficient tables but does not evaluate a gravity field from them.