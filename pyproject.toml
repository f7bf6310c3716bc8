[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "surfwalk"
version = "0.1.0"
description = "Monte Carlo simulations of a random walker coupled to a fluctuating one-dimensional surface"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "monte carlo",
    "surface growth",
    "random walk",
    "statistical physics",
    "roughness",
    "simulation",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
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

[project.scripts]
surfwalk-profile = "surfwalk.profile:main"
surfwalk-returnstat = "surfwalk.returnstat:main"
surfwalk-roughness = "surfwalk.roughness:main"

[tool.setuptools.packages.find]
include = ["surfwalk*"]

[tool.pytest.ini_options]
addopts = "-ra"
