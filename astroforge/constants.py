"""Physical constants used by the celestial mechanics routines (SI units)."""

G: float = 6.674e-11
"""Approximate gravitational constant [m^3 kg^-1 s^-2]."""

EARTH_MASS: float = 5.972e24
"""Approximate mass of Earth [kg]."""

EARTH_RADIUS: float = 6_378e3
"""Average radius of Earth [m]."""

EARTH_GM: float = 3.986_004_418e14
"""Earth's gravitational parameter [m^3 s^-2]."""