"""Orbital state representations and conversion between them."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import NamedTuple

import numpy as np
from numpy.typing import ArrayLike


class KeplerianElements(NamedTuple):
    """Classical orbital elements; angles in radians."""

    a: float
    e: float
    i: float
    laan: float
    argp: float
    nu: float


@dataclass(frozen=True)
class CartesianState:
    """Position [m] and velocity [m/s] in a Cartesian frame."""

    x: float
    y: float
    z: float
    vx: float
    vy: float
    vz: float

    @classmethod
    def from_vectors(cls, r: ArrayLike, v: ArrayLike) -> CartesianState:
        rx, ry, rz = (float(c) for c in np.asarray(r, dtype=float))
        vx, vy, vz = (float(c) for c in np.asarray(v, dtype=float))
        return cls(rx, ry, rz, vx, vy, vz)

    @property
    def r(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z])

    @property
    def v(self) -> np.ndarray:
        return np.array([self.vx, self.vy, self.vz])

    def to_keplerian(self, mu: float) -> KeplerianElements:
        """Keplerian elements about a primary with gravitational parameter ``mu``."""
        return rv2ke(mu, self.r, self.v)


def rv2ke(mu: float, r_vec: ArrayLike, v_vec: ArrayLike) -> KeplerianElements:
    """Convert a position and velocity vector to Keplerian elements.

    Degenerate orbits (circular or equatorial) yield NaN for the angles
    that are undefined.
    """
    r_vec = np.asarray(r_vec, dtype=float)
    v_vec = np.asarray(v_vec, dtype=float)

    with np.errstate(divide="ignore", invalid="ignore"):
        r = np.linalg.norm(r_vec)
        v = np.linalg.norm(v_vec)
        k_vec = np.array([0.0, 0.0, 1.0])

        h_vec = np.cross(r_vec, v_vec)
        h = np.linalg.norm(h_vec)

        e_vec = np.cross(v_vec, h_vec) / mu - r_vec / r
        e = np.linalg.norm(e_vec)

        n_vec = np.cross(k_vec, h_vec)
        n = np.linalg.norm(n_vec)

        nu = np.arccos(np.dot(e_vec, r_vec) / (e * r))
        if not np.dot(r_vec, v_vec) >= 0.0:
            nu = 2.0 * math.pi - nu

        i = np.arccos(h_vec[2] / h)

        laan = np.arccos(n_vec[0] / n)
        if not n_vec[1] >= 0.0:
            laan = 2.0 * math.pi - laan

        argp = np.arccos(np.dot(n_vec, e_vec) / (n * e))
        if not e_vec[2] >= 0.0:
            argp = 2.0 * math.pi - argp

        a = 1.0 / (2.0 / r - v**2 / mu)

    return KeplerianElements(
        float(a), float(e), float(i), float(laan), float(argp), float(nu)
    )