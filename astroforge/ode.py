"""Fixed-step ODE integration."""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Optional

import numpy as np
from numpy.typing import ArrayLike

Integrand = Callable[[np.ndarray, float], ArrayLike]


@dataclass
class Solution:
    """What an integrator keeps as it runs; more saving costs more memory."""

    save_state: bool = False
    save_evals: bool = False
    save_error: bool = False
    times: list[float] = field(default_factory=list)
    states: list[np.ndarray] = field(default_factory=list)
    evals: int = 0
    error: Optional[np.ndarray] = None

    def record(
        self, t: float, y: ArrayLike, error: Optional[ArrayLike] = None
    ) -> None:
        """Store the state at ``t`` and the latest error estimate, as enabled."""
        if self.save_state:
            self.times.append(float(t))
            self.states.append(np.array(y, dtype=float))
        if self.save_error and error is not None:
            self.error = np.array(error, dtype=float)

    @property
    def state(self) -> np.ndarray:
        """Saved states stacked row by row."""
        if not self.states:
            return np.empty((0, 0))
        return np.vstack(self.states)


class RK4:
    """Classical fourth-order Runge-Kutta integrator with a fixed step."""

    def __init__(
        self,
        f: Integrand,
        y0: ArrayLike,
        h: float,
        tspan: Optional[Sequence[float]] = None,
        t0: Optional[float] = None,
        solution: Optional[Solution] = None,
    ) -> None:
        self.f = f
        self.y0 = np.array(y0, dtype=float)
        self.h = float(h)
        self.tspan = None if tspan is None else (float(tspan[0]), float(tspan[1]))
        if t0 is not None:
            self.t = float(t0)
        elif self.tspan is not None:
            self.t = self.tspan[0]
        else:
            self.t = 0.0
        self.y = self.y0.copy()
        zeros = np.zeros_like(self.y0)
        self.k = (zeros, zeros, zeros, zeros)
        self.solution = solution
        if solution is not None:
            solution.record(self.t, self.y)

    def _derivative(self, y: np.ndarray, t: float) -> np.ndarray:
        return np.asarray(self.f(y, t), dtype=float)

    def _advance(self, h: float) -> None:
        y, t = self.y, self.t
        k1 = self._derivative(y, t)
        k2 = self._derivative(y + h * k1 / 2.0, t + h / 2.0)
        k3 = self._derivative(y + h * k2 / 2.0, t + h / 2.0)
        k4 = self._derivative(y + h * k3, t + h)
        self.k = (k1, k2, k3, k4)
        self.y = y + h / 6.0 * (k1 + 2.0 * k2 + 2.0 * k3 + k4)
        self.t = t + h
        if self.solution is not None:
            if self.solution.save_evals:
                self.solution.evals += 4
            self.solution.record(self.t, self.y)

    def step(self, n: int = 1) -> np.ndarray:
        """Take ``n`` steps of size ``h``; a non-positive ``n`` takes none."""
        for _ in range(n):
            self._advance(self.h)
        return self.y

    def solve(self) -> np.ndarray:
        """Integrate to the end of ``tspan``, shortening the last step to land on it."""
        if self.tspan is None:
            raise ValueError("solve needs integration bounds (tspan)")
        if self.h == 0.0:
            raise ValueError("step size must be non-zero")
        t_end = self.tspan[1]
        direction = math.copysign(1.0, self.h)
        tolerance = 1e-12 * max(1.0, abs(t_end))
        while (t_end - self.t) * direction > tolerance:
            remaining = t_end - self.t
            h = remaining if abs(remaining) < abs(self.h) else self.h
            self._advance(h)
        self.t = t_end
        return self.y