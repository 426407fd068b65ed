[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "frechetkit"
version = "0.1.0"
description = "Continuous and discrete Fréchet distances between polygonal curves, with curve simplification."
requires-python = ">=3.10"
dependencies = []
keywords = ["frechet", "distance", "curves", "polygonal", "simplification", "geometry"]
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
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["frechetkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
