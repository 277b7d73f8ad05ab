[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cartogram"
version = "0.1.0"
description = "Building blocks for diffusion-based contiguous cartograms: geometry, grid interpolation, triangulation and input parsing"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "cartogram",
    "gis",
    "map",
    "projection",
    "triangulation",
    "interpolation",
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
    "Topic :: Scientific/Engineering :: GIS",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["cartogram"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
