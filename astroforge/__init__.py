"""Celestial mechanics, orbital state conversion, frames, interpolation, RK4 integration and gravity harmonics."""

__version__ = "0.1.0"