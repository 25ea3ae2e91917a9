[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kuruk"
version = "1.0.0"
description = "Core utilities for small-size robot soccer simulation: vectors, RNG, field transforms, geometry, referee packets and message logs"
requires-python = ">=3.10"
dependencies = []
keywords = ["robotics", "robocup", "ssl", "simulation", "geometry", "referee"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["kuruk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
