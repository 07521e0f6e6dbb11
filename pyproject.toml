[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "astroforge"
version = "0.1.0"
description = "Celestial mechanics, orbital state conversion, interpolation and fixed-step ODE integration for astrodynamics."
requires-python = ">=3.10"
keywords = [
    "astrodynamics",
    "celestial mechanics",
    "orbits",
    "keplerian elements",
    "ode",
    "runge-kutta",
    "interpolation",
    "gravity harmonics",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Astronomy",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["astroforge"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
