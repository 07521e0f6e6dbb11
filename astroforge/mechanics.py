"""General two-body celestial mechanics relations."""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import ArrayLike

from astroforge.constants import G


def km(value: float) -> float:
    """Convert kilometres to metres."""
    return 1e3 * value


def deg(value: float) -> float:
    """Convert degrees to radians."""
    return value / 180.0 * math.pi


def a_point_mass(gm: float, r1: ArrayLike, r2: ArrayLike) -> np.ndarray:
    """Acceleration exerted on a body at ``r2`` by a point mass at ``r1``.

    ``gm`` is the gravitational parameter of the attracting body.
    """
    r = np.asarray(r2, dtype=float) - np.asarray(r1, dtype=float)
    return -gm * r / np.linalg.norm(r) ** 3


def v_escape(m: float, r: float) -> float:
    """Escape velocity at distance ``r`` from a body of mass ``m``."""
    return math.sqrt(2.0 * G * m / r)


def v_circular(m: float, r: float) -> float:
    """Circular orbit velocity at distance ``r`` from a body of mass ``m``."""
    return math.sqrt(G * m / r)


def t_orbit(a: float, gm: float) -> float:
    """Orbital period for semi-major axis ``a`` about a body with parameter ``gm``."""
    return 2.0 * math.pi * math.sqrt(a**3 / gm)


def r_orbit(a: float, e: float, theta: float) -> float:
    """Orbital distance on a conic at true anomaly ``theta``."""
    return a * (1.0 - e**2) / (1.0 + e * math.cos(theta))