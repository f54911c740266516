[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fsrand"
version = "0.1.0"
description = "A small seedable pseudo-random generator with uniform, linear, triangular, normal, exponential, Bernoulli, binomial and Poisson draws"
requires-python = ">=3.10"
dependencies = []
keywords = ["random", "prng", "distributions", "simulation", "histogram"]
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
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fsrand = "fsrand.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["fsrand"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
