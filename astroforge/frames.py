"""Reference frame definitions and relative kinematics."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

import numpy as np
from numpy.typing import ArrayLike


@dataclass
class FrameDefinition:
    """A reference frame: three basis vectors, an orientation and an origin."""

    vectors: np.ndarray
    orient: str
    orient_id: int
    origin: str
    origin_id: int
    _checked: bool = field(default=False, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        vectors = np.asarray(self.vectors, dtype=float)
        if vectors.shape != (3, 3):
            raise ValueError(
                f"a frame needs three 3-vectors, got shape {vectors.shape}"
            )
        self.vectors = vectors
        self._checked = True


def _vec(value: ArrayLike) -> np.ndarray:
    return np.asarray(value, dtype=float)


def r_b(r_a: ArrayLike, r_ba: ArrayLike) -> np.ndarray:
    """Position of ``b`` given the position of ``a`` and of ``b`` relative to ``a``."""
    return _vec(r_a) + _vec(r_ba)


def v_b(
    v_a: ArrayLike,
    v_ba: Optional[ArrayLike] = None,
    omega: Optional[ArrayLike] = None,
    r_ba: Optional[ArrayLike] = None,
) -> np.ndarray:
    """Velocity of ``b``, from a relative velocity or a rotation and offset."""
    if v_ba is not None:
        return _vec(v_a) + _vec(v_ba)
    if omega is not None and r_ba is not None:
        return _vec(v_a) + np.cross(_vec(omega), _vec(r_ba))
    raise ValueError("either v_ba, or both omega and r_ba, must be given")


def a_b(
    a_a: ArrayLike,
    a_ba: Optional[ArrayLike] = None,
    alpha: Optional[ArrayLike] = None,
    r_ba: Optional[ArrayLike] = None,
    omega: Optional[ArrayLike] = None,
) -> np.ndarray:
    """Acceleration of ``b``, from a relative acceleration or rigid rotation terms."""
    if a_ba is not None:
        return _vec(a_a) + _vec(a_ba)
    if alpha is not None and r_ba is not None and omega is not None:
        w = _vec(omega)
        r = _vec(r_ba)
        return _vec(a_a) + np.cross(_vec(alpha), r) + np.cross(w, np.cross(w, r))
    raise ValueError("either a_ba, or all of alpha, r_ba and omega, must be given")