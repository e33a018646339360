[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sinexkit"
version = "1.1.0"
description = "Read SINEX geodetic solution files and DPOD harmonic correction data"
requires-python = ">=3.10"
dependencies = []
keywords = ["sinex", "geodesy", "doris", "dpod", "coordinates", "eccentricity"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sinexkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
